"""Entry point for `python -m gdiffs`."""

import sys

from gdiffs.cli import main

if __name__ == "__main__":
    sys.exit(main())
