"""The two stacks and the eleven operations that act on them."""

from __future__ import annotations

import sys
from collections.abc import Iterable
from typing import TextIO


class Stacks:
    """Stacks ``a`` and ``b``; index 0 of each list is the top.

    Every operation that changes something is appended to ``moves`` and,
    when ``display`` is set, written to ``out`` (standard output by default)
    followed by a newline. Operations that cannot act leave everything
    untouched and record nothing.
    """

    def __init__(
        self,
        values: Iterable[int] = (),
        display: bool = False,
        out: TextIO | None = None,
    ) -> None:
        self.a: list[int] = list(values)
        self.b: list[int] = []
        self.display = display
        self.out = out
        self.moves: list[str] = []

    def __repr__(self) -> str:
        return f"Stacks(a={self.a!r}, b={self.b!r})"

    def _emit(self, name: str) -> None:
        self.moves.append(name)
        if self.display:
            (self.out if self.out is not None else sys.stdout).write(name + "\n")

    @staticmethod
    def _push(target: list[int], source: list[int]) -> bool:
        if not source:
            return False
        target.insert(0, source.pop(0))
        return True

    @staticmethod
    def _swap(stack: list[int]) -> bool:
        if len(stack) < 2:
            return False
        stack[0], stack[1] = stack[1], stack[0]
        return True

    @staticmethod
    def _rotate(stack: list[int]) -> bool:
        if len(stack) < 2:
            return False
        stack.append(stack.pop(0))
        return True

    @staticmethod
    def _rotate_rev(stack: list[int]) -> bool:
        if len(stack) < 2:
            return False
        stack.insert(0, stack.pop())
        return True

    def pa(self) -> None:
        """Move the top of ``b`` onto ``a``."""
        if self._push(self.a, self.b):
            self._emit("pa")

    def pb(self) -> None:
        """Move the top of ``a`` onto ``b``."""
        if self._push(self.b, self.a):
            self._emit("pb")

    def sa(self) -> None:
        """Swap the two top elements of ``a``."""
        if self._swap(self.a):
            self._emit("sa")

    def sb(self) -> None:
        """Swap the two top elements of ``b``."""
        if self._swap(self.b):
            self._emit("sb")

    def ss(self) -> None:
        """Swap the tops of both stacks; only when each holds two or more."""
        if len(self.a) < 2 or len(self.b) < 2:
            return
        self._swap(self.a)
        self._swap(self.b)
        self._emit("ss")

    def ra(self) -> None:
        """Rotate ``a`` up: the top goes to the bottom."""
        if self._rotate(self.a):
            self._emit("ra")

    def rb(self) -> None:
        """Rotate ``b`` up: the top goes to the bottom."""
        if self._rotate(self.b):
            self._emit("rb")

    def rr(self) -> None:
        """Rotate both stacks up; only when each holds two or more."""
        if len(self.a) < 2 or len(self.b) < 2:
            return
        self._rotate(self.a)
        self._rotate(self.b)
        self._emit("rr")

    def rra(self) -> None:
        """Rotate ``a`` down: the bottom goes to the top."""
        if self._rotate_rev(self.a):
            self._emit("rra")

    def rrb(self) -> None:
        """Rotate ``b`` down: the bottom goes to the top."""
        if self._rotate_rev(self.b):
            self._emit("rrb")

    def rrr(self) -> None:
        """Rotate both stacks down; only when each holds two or more."""
        if len(self.a) < 2 or len(self.b) < 2:
            return
        self._rotate_rev(self.a)
        self._rotate_rev(self.b)
        self._emit("rrr")