"""Tests for CLI functionality."""

import pytest
from pytest_mock import MockerFixture

from compath.ui.cli import main, process_command


def test_normalize_prints_canonical_form(capsys: pytest.CaptureFixture[str]) -> None:
    process_command(["normalize", "a///b/./c/../d/"])

    assert "a/b/d" in capsys.readouterr().out


def test_relative_prints_path(capsys: pytest.CaptureFixture[str]) -> None:
    process_command(["relative", "/a/x/y", "--from", "/a/b/c"])

    assert "../../x/y" in capsys.readouterr().out


def test_absolute_uses_default_base(capsys: pytest.CaptureFixture[str]) -> None:
    process_command(["absolute", "bodies/pelvis"])

    assert "/bodies/pelvis" in capsys.readouterr().out


def test_path_error_exits_with_failure() -> None:
    with pytest.raises(SystemExit) as excinfo:
        process_command(["normalize", "ok", "/../a"])
    assert excinfo.value.code == 1


def test_quiet_suppresses_output(capsys: pytest.CaptureFixture[str]) -> None:
    process_command(["inspect", "/a/b", "--quiet"])

    assert capsys.readouterr().out == ""


def test_unexpected_error_exits_with_failure(mocker: MockerFixture) -> None:
    _ = mocker.patch(
        "compath.ui.cli.cli.ArgumentParser.process_args",
        side_effect=RuntimeError("boom"),
    )

    with pytest.raises(SystemExit) as excinfo:
        process_command(["split", "a"])
    assert excinfo.value.code == 1


def test_keyboard_interrupt_exits_130(mocker: MockerFixture) -> None:
    _ = mocker.patch(
        "compath.ui.cli.cli.ArgumentParser.process_args",
        side_effect=KeyboardInterrupt,
    )

    with pytest.raises(SystemExit) as excinfo:
        process_command(["split", "a"])
    assert excinfo.value.code == 130


def test_main_returns_zero_on_success(mocker: MockerFixture) -> None:
    mock_process = mocker.patch("compath.ui.cli.cli.CommandProcessor.process_command")

    assert main() == 0
    mock_process.assert_called_once_with()
