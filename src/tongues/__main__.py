"""Entry point for ``python -m tongues``."""

import sys

from tongues.cli import main

if __name__ == "__main__":
    sys.exit(main())
