"""Command-line entry point that prints a greeting."""

from __future__ import annotations

import argparse
from collections.abc import Sequence


def greeting() -> str:
    """Return the welcome text."""
    return "Hello, World!\nWelcome to programming!"


def main(argv: Sequence[str] | None = None) -> int:
    """Print the greeting and return the exit status."""
    parser = argparse.ArgumentParser(prog="dsbasics", description="Print a greeting.")
    parser.parse_args(argv)
    print(greeting())
    return 0


if __name__ == "__main__":
    raise SystemExit(main())