"""A bottle: a stack of liquid units, bottom first."""

from __future__ import annotations

from collections.abc import Iterable

from .colors import MAX_UNIT


class Bottle(list):
    """A list of colours from bottom to top, holding at most ``MAX_UNIT`` units.

    ``complete`` records that the bottle has been found full of one colour.
    Equality compares the contents only.
    """

    def __init__(self, colors: Iterable[int] = ()) -> None:
        super().__init__(colors)
        self.complete = False

    def pour(self, other: Bottle) -> int:
        """Pour the top run of one colour into ``other`` as far as it fits.

        Returns the number of units moved.
        """
        if not self or len(other) >= MAX_UNIT:
            return 0
        top = self[-1]
        moved = 0
        while self and len(other) < MAX_UNIT and self[-1] == top:
            other.append(self.pop())
            moved += 1
        return moved

    def is_mono(self) -> bool:
        """True if the bottle is empty or holds a single colour."""
        return all(color == self[0] for color in self) if self else True

    def check(self) -> bool:
        """True if the bottle is empty or full of one colour.

        A full single-coloured bottle is marked ``complete``.
        """
        if not self:
            return True
        head = self[:MAX_UNIT]
        if len(head) < MAX_UNIT or any(color != head[0] for color in head):
            return False
        self.complete = True
        return True

    def copy(self) -> Bottle:
        """Return an independent copy, keeping the ``complete`` flag."""
        duplicate = Bottle(self)
        duplicate.complete = self.complete
        return duplicate

    def __repr__(self) -> str:
        return f"Bottle({list(self)!r})"