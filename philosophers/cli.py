"""Command-line entry point for the dining philosophers simulation."""

from __future__ import annotations

import sys
from typing import Sequence

from philosophers.args import ArgumentError, parse_settings
from philosophers.simulation import Table


def main(argv: Sequence[str] | None = None) -> int:
    """Run the simulation with the given arguments; return the exit status."""
    if argv is None:
        argv = sys.argv[1:]
    try:
        settings = parse_settings(list(argv))
    except ArgumentError as error:
        print(error)
        return 1
    Table(settings, sys.stdout).run()
    return 0


if __name__ == "__main__":
    sys.exit(main())