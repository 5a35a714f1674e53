"""Search tree of puzzle states and state hashing."""

from __future__ import annotations

from collections.abc import Iterable

from .box import Box


def make_hash(bottles: Iterable[Iterable[int]]) -> str:
    """Return a key for a set of bottles that ignores the order of the bottles.

    Each bottle is written as its colour numbers run together. The bottles
    are sorted by that text, and each one is followed by ``|``.
    """
    texts = sorted("".join(str(color) for color in bottle) for bottle in bottles)
    return "".join(text + "|" for text in texts)


class Node:
    """A puzzle state and the states reached from it."""

    def __init__(self, box: Box) -> None:
        self.value = box
        self.children: list[Node] = []

    def __repr__(self) -> str:
        return f"Node({self.value!r}, children={len(self.children)})"

    def add(self, node: Node, target: Box) -> bool:
        """Attach ``node`` under the first node whose state equals ``target``.

        Returns True if such a node was found.
        """
        if self.value == target:
            self.children.append(node)
            return True
        return any(child.add(node, target) for child in self.children)

    def replace(self, node: Node, target: Box) -> bool:
        """Make ``node`` the only child of the first node whose state equals ``target``.

        Returns True if such a node was found.
        """
        if self.value == target:
            self.children = [node]
            return True
        return any(child.replace(node, target) for child in self.children)

    def search(self, target: Box) -> list[Box]:
        """Return the states from a child of this node down to ``target``.

        The list is empty if ``target`` is not below this node.
        """
        for child in self.children:
            if child.value == target:
                return [child.value]
            below = child.search(target)
            if below:
                return [child.value, *below]
        return []