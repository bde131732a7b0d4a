"""Entry point for ``python -m fixprint``."""

import sys

from fixprint.ui.cli import main

if __name__ == "__main__":
    sys.exit(main())
