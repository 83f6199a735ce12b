"""Allow ``python -m compath`` to run the command line interface."""

import sys

from compath.ui.cli import main

if __name__ == "__main__":
    sys.exit(main())
