"""Module entry point for running with python -m tree2md."""

import sys

from tree2md.cli import main

if __name__ == "__main__":
    sys.exit(main())
