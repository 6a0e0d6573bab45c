"""A small mutable string type."""

from __future__ import annotations

from typing import Union

__all__ = ["Text"]

_TextLike = Union[str, "Text"]


def _as_str(value: object) -> str:
    if isinstance(value, (str, Text)):
        return str(value)
    raise TypeError(f"expected str or Text, got {type(value).__name__}")


class Text:
    """A mutable sequence of characters supporting concatenation and item assignment."""

    __hash__ = None  # mutable

    def __init__(self, value: _TextLike = "") -> None:
        self._chars: list[str] = list(_as_str(value))

    @classmethod
    def blank(cls, size: int) -> "Text":
        """Return a text of ``size`` spaces."""
        if size < 0:
            raise ValueError("size must not be negative")
        return cls(" " * size)

    def assign(self, value: _TextLike) -> None:
        """Replace the whole content with ``value``."""
        self._chars = list(_as_str(value))

    def append(self, value: _TextLike) -> None:
        """Add ``value`` at the end."""
        self._chars.extend(_as_str(value))

    def __len__(self) -> int:
        return len(self._chars)

    def __str__(self) -> str:
        return "".join(self._chars)

    def __repr__(self) -> str:
        return f"Text({str(self)!r})"

    def __eq__(self, other: object) -> bool:
        if isinstance(other, (str, Text)):
            return str(self) == str(other)
        return NotImplemented

    def __add__(self, other: _TextLike) -> "Text":
        if not isinstance(other, (str, Text)):
            return NotImplemented
        return Text(str(self) + str(other))

    def __radd__(self, other: str) -> "Text":
        if not isinstance(other, str):
            return NotImplemented
        return Text(other + str(self))

    def __iadd__(self, other: _TextLike) -> "Text":
        if not isinstance(other, (str, Text)):
            return NotImplemented
        self.append(other)
        return self

    def __getitem__(self, index: int | slice) -> str | "Text":
        if isinstance(index, slice):
            return Text("".join(self._chars[index]))
        return self._chars[index]

    def __setitem__(self, index: int, char: str) -> None:
        if not isinstance(char, str) or len(char) != 1:
            raise ValueError("a single character is required")
        self._chars[index] = char