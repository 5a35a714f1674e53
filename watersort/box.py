"""A box: the set of bottles that make up one puzzle state."""

from __future__ import annotations

import sys
from collections.abc import Iterable, Iterator
from typing import TextIO

from .bottle import Bottle
from .colors import MAX_UNIT, color_name

_EMPTY_CELL = "   "


class Box:
    """An ordered collection of bottles."""

    def __init__(self, bottles: Iterable[Iterable[int]] = ()) -> None:
        self.bottles: list[Bottle] = [
            b if isinstance(b, Bottle) else Bottle(b) for b in bottles
        ]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Box):
            return NotImplemented
        return self.bottles == other.bottles

    def __iter__(self) -> Iterator[Bottle]:
        return iter(self.bottles)

    def __len__(self) -> int:
        return len(self.bottles)

    def __repr__(self) -> str:
        return f"Box({self.bottles!r})"

    def copy(self) -> Box:
        """Return a deep copy, keeping each bottle's ``complete`` flag."""
        return Box(b.copy() for b in self.bottles)

    def check(self) -> bool:
        """True if every bottle is empty or full of one colour."""
        return all(b.check() for b in self.bottles)

    def render(self) -> str:
        """Return the box drawn as text, top level first."""
        rows = ["-" * len(self.bottles)]
        for level in reversed(range(MAX_UNIT)):
            cells = (
                color_name(b[level]) if len(b) > level else _EMPTY_CELL
                for b in self.bottles
            )
            rows.append("".join("|" + cell for cell in cells) + "|")
        return "\n".join(rows)

    def display(self, file: TextIO | None = None) -> None:
        """Write the rendered box to ``file`` (standard output by default)."""
        print(self.render(), file=file if file is not None else sys.stdout)