#!/usr/bin/env python3
"""Print how cmdarg splits the current command line, e.g. `python -m cmdarg -iv file.txt -- pos1`."""

import sys

from cmdarg.commands import get
from cmdarg.logging_utils import configure_logging
from cmdarg.rendering import display


def main() -> int:
    configure_logging("WARNING")
    display(get())
    return 0


if __name__ == "__main__":
    sys.exit(main())
