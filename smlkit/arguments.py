"""A minimal command-line option parser."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass

__all__ = ["ArgSpec", "MissingValueError", "ArgParser"]


@dataclass
class ArgSpec:
    """One option: its short and long names, whether it takes a value, and help text.

    After parsing, ``value`` holds the option's value, ``"true"`` for a
    flag that was given, or ``None`` if the option was absent.
    """

    short_name: str | None
    long_name: str
    has_value: bool
    help: str
    value: str | None = None


class MissingValueError(ValueError):
    """An option that takes a value was given last, with nothing after it."""


class ArgParser:
    """Matches command-line words against a list of :class:`ArgSpec`."""

    def __init__(self, argv: Sequence[str], specs: Iterable[ArgSpec]) -> None:
        self.argv = list(argv)
        self.specs = list(specs)
        for spec in self.specs:
            spec.value = None

    def _by_long(self, name: str) -> ArgSpec | None:
        return next((s for s in self.specs if s.long_name == name), None)

    def _by_short(self, name: str) -> ArgSpec | None:
        return next((s for s in self.specs if s.short_name == name), None)

    def parse(self) -> dict[str, str | None]:
        """Fill in each spec's value from ``argv[1:]``.

        Unknown options and words that are not options are ignored.
        Returns the values keyed by long name.
        """
        words = iter(self.argv[1:])
        for word in words:
            if not word.startswith("-"):
                continue
            if word.startswith("--"):
                name = word[2:]
                spec = self._by_long(name)
                attached = None
            else:
                name = word[1:2]
                if not name:
                    continue
                spec = self._by_short(name)
                attached = word[2:] or None
            if spec is None:
                continue
            if not spec.has_value:
                spec.value = "true"
            elif attached is not None:
                spec.value = attached
            else:
                value = next(words, None)
                if value is None:
                    raise MissingValueError(f"Value missing for option {name}")
                spec.value = value
        return {spec.long_name: spec.value for spec in self.specs}

    def format_help(self, program_name: str) -> str:
        """Return the usage text listing every option."""
        lines = [f"Usage: {program_name} [options]\n\n", "Options:\n"]
        for spec in self.specs:
            if spec.short_name:
                line = f"  -{spec.short_name}, --{spec.long_name}"
            else:
                line = f"      --{spec.long_name}"
            if spec.has_value:
                line += " <value>"
            lines.append(f"{line}\t{spec.help}\n")
        return "".join(lines)

    def print_help(self, program_name: str) -> None:
        """Print the usage text to standard output."""
        print(self.format_help(program_name), end="")