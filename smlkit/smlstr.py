"""A growable string container that tracks its capacity explicitly."""

from __future__ import annotations

__all__ = ["SmlStr", "sub_str", "str_help"]

_DEFINES = (
    ("SML_STR_MAKE_GENERIC", "typedefs `sml_str` as `str`."),
)


class SmlStr:
    """A string with an explicit capacity that doubles as text is appended.

    ``last_index`` is the position of the terminator, i.e. the length of the
    text; ``capacity`` is always greater than ``last_index`` once the string
    holds text. An empty container has no contents and a capacity of zero.
    """

    def __init__(self, contents: str | None = None) -> None:
        self.contents: str | None = contents
        if contents is None:
            self.capacity = 0
            self.last_index = 0
        else:
            self.last_index = len(contents)
            self.capacity = self.last_index + 1

    def double_capacity(self) -> None:
        """Double the capacity; an empty container grows to a capacity of one."""
        self.capacity = self.capacity * 2 if self.capacity else 1

    def double_capacity_force(self) -> None:
        """Double the capacity by building a fresh copy of the contents."""
        if self.contents is not None:
            self.contents = "".join(self.contents)
        self.double_capacity()

    def append(self, text: str) -> None:
        """Append *text*, growing the capacity until it fits."""
        if text is None:
            raise TypeError("cannot append None to an SmlStr")
        while self.capacity <= self.last_index + len(text):
            try:
                self.double_capacity()
            except MemoryError:
                self.double_capacity_force()
        self.contents = (self.contents or "") + text
        self.last_index += len(text)

    def __len__(self) -> int:
        return self.last_index

    def __str__(self) -> str:
        return self.contents or ""

    def __repr__(self) -> str:
        return (
            f"SmlStr({self.contents!r}, capacity={self.capacity}, "
            f"last_index={self.last_index})"
        )


def sub_str(text: str | None, start: int, end: int) -> str | None:
    """Return ``text[start:end]``, or ``None`` if *text* is missing or the range is empty."""
    if text is None or end <= start:
        return None
    if start < 0 or end > len(text):
        raise IndexError(
            f"substring range {start}:{end} is outside a text of length {len(text)}"
        )
    return text[start:end]


def str_help() -> str:
    """Print the configuration switches this module knows about and return the text."""
    lines = ["[SML_STR] Defines available:"]
    lines.extend(f"\t- {name}: {description}" for name, description in _DEFINES)
    text = "\n".join(lines)
    print(text)
    return text