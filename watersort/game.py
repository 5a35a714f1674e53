"""Breadth- and depth-first solvers for the water sort puzzle."""

from __future__ import annotations

import argparse
import time
from collections import deque
from collections.abc import Iterator, Sequence

from .bottle import Bottle
from .box import Box
from .colors import MAX_UNIT, Color
from .node import Node, make_hash

DEFAULT_PUZZLE: tuple[tuple[int, ...], ...] = (
    (Color.ORANGE, Color.RED, Color.ORANGE, Color.RED),
    (Color.BLUE, Color.BLUE, Color.ORANGE, Color.RED),
    (Color.RED, Color.ORANGE, Color.BLUE, Color.BLUE),
    (),
    (),
)


def _moves(box: Box) -> Iterator[tuple[int, int]]:
    """Yield the (source, target) pairs worth trying from ``box``."""
    bottles: list[Bottle] = box.bottles
    for i, source in enumerate(bottles):
        if not source or source.check():
            continue
        seen_empty = False
        for j, target in enumerate(bottles):
            if j == i or len(target) >= MAX_UNIT:
                continue
            if seen_empty:
                break
            if not target:
                seen_empty = True
                if source.is_mono():
                    continue
            elif source[-1] != target[-1]:
                continue
            yield i, j


class Solver:
    """Searches for a sequence of pours that sorts every bottle."""

    def __init__(self, box: Box) -> None:
        self.root = Node(box)
        self.seen: set[str] = set()
        self.attempts = 0

    def _next_state(self, box: Box, i: int, j: int) -> Box | None:
        """Return the state after pouring i into j, or None if already seen."""
        self.attempts += 1
        state = box.copy()
        state.bottles[i].pour(state.bottles[j])
        key = make_hash(state.bottles)
        if key in self.seen:
            return None
        self.seen.add(key)
        return state

    def bfs(self) -> Box | None:
        """Search breadth first; return the first sorted state found, or None."""
        queue: deque[Box] = deque([self.root.value])
        while queue:
            box = queue.popleft()
            for i, j in _moves(box):
                state = self._next_state(box, i, j)
                if state is None:
                    continue
                if not self.root.add(Node(state), box):
                    raise RuntimeError(f"state {box!r} is missing from the search tree")
                if state.check():
                    return state
                queue.append(state)
        return None

    def dfs(self, box: Box, depth: int) -> Box | None:
        """Search depth first from ``box`` at most ``depth`` pours deep."""
        if depth < 0:
            return None
        if box.check():
            return box
        for i, j in _moves(box):
            state = self._next_state(box, i, j)
            if state is None:
                continue
            if not self.root.replace(Node(state), box):
                raise RuntimeError(f"state {box!r} is missing from the search tree")
            result = self.dfs(state, depth - 1)
            if result is not None:
                return result
        return None

    def solution_path(self, answer: Box) -> list[Box]:
        """Return the states after each pour, from the first pour to ``answer``."""
        return self.root.search(answer)


def main(argv: Sequence[str] | None = None) -> int:
    """Solve the built-in puzzle and print the solution."""
    parser = argparse.ArgumentParser(description="Solve a water sort puzzle.")
    parser.add_argument(
        "--dfs",
        type=int,
        metavar="DEPTH",
        help="search depth first, at most DEPTH pours deep",
    )
    args = parser.parse_args(argv)

    box = Box(DEFAULT_PUZZLE)
    box.display()

    solver = Solver(box)
    start = time.perf_counter()
    if args.dfs is None:
        answer = solver.bfs()
        if answer is not None:
            print(f"cnt = {solver.attempts}")
            print("Complete!!")
    else:
        answer = solver.dfs(box, args.dfs)
        if answer is not None:
            print("Complete!!")

    if answer is None or not answer.bottles:
        print("解無し？")
        return 0

    path = solver.solution_path(answer)
    for state in reversed(path):
        state.display()
    elapsed = time.perf_counter() - start
    print("-" * len(answer))
    print(f"手数: {len(path)}手")
    print(f"経過時間: {elapsed}秒")
    return 0