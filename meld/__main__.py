"""Entry point for ``python -m meld``."""

import sys

from meld.cli import main

if __name__ == "__main__":
    sys.exit(main())
