"""Demonstration command for the option parser."""

from __future__ import annotations

import os
import sys
from collections.abc import Sequence

from smlkit.arguments import ArgParser, ArgSpec, MissingValueError

__all__ = ["main"]


def _specs() -> list[ArgSpec]:
    return [
        ArgSpec("a", "alpha", True, "Alpha parameter"),
        ArgSpec("b", "beta", False, "Beta parameter"),
        ArgSpec("c", "config", True, "Config file path"),
    ]


def main(argv: Sequence[str] | None = None) -> int:
    """Parse the demo options, print each one's value, and show help when asked."""
    args = list(sys.argv[1:] if argv is None else argv)
    program = os.path.basename(sys.argv[0]) if sys.argv and sys.argv[0] else "smlkit"

    parser = ArgParser([program, *args], _specs())
    try:
        parser.parse()
    except MissingValueError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    for spec in parser.specs:
        value = "(null)" if spec.value is None else spec.value
        print(f"Argument: {spec.long_name}, Value: {value}")

    if not args or (len(args) == 1 and args[0] in ("--help", "-h")):
        parser.print_help(program)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())