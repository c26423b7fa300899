"""The two stacks of the puzzle and the moves that act on them."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from typing import Deque, Iterable, List


@dataclass
class Element:
    """A number on a stack together with its rank among all numbers."""

    nb: int
    index: int = 0


class Stacks:
    """Stack ``a``, initially holding the elements, and an empty stack ``b``.

    The top of each stack is at the left. Every move that takes effect is
    appended to ``moves`` under its name.
    """

    def __init__(self, elements: Iterable[Element]) -> None:
        self.a: Deque[Element] = deque(elements)
        self.b: Deque[Element] = deque()
        self.moves: List[str] = []

    def is_sorted(self) -> bool:
        """True when the numbers on stack ``a`` never decrease from the top."""
        items = list(self.a)
        return all(first.nb <= second.nb for first, second in zip(items, items[1:]))

    def describe(self) -> str:
        """Listing of stack ``a`` with each number and its rank."""
        lines = "".join(f"NB : {e.nb}  INDEX : {e.index}\n" for e in self.a)
        return lines + "-------------------------------\n"

    @staticmethod
    def _swap(stack: Deque[Element]) -> None:
        stack[0], stack[1] = stack[1], stack[0]

    @staticmethod
    def _rotate(stack: Deque[Element]) -> None:
        stack.rotate(-1)

    @staticmethod
    def _reverse_rotate(stack: Deque[Element]) -> None:
        stack.rotate(1)

    def _single(self, stack: Deque[Element], action, name: str) -> bool:
        if len(stack) < 2:
            return False
        action(stack)
        self.moves.append(name)
        return True

    def _both(self, action, name: str) -> bool:
        if len(self.a) < 2 or len(self.b) < 2:
            return False
        action(self.a)
        action(self.b)
        self.moves.append(name)
        return True

    def sa(self) -> bool:
        """Swap the top two elements of ``a``; False if it has fewer than two."""
        return self._single(self.a, self._swap, "sa")

    def sb(self) -> bool:
        """Swap the top two elements of ``b``; False if it has fewer than two."""
        return self._single(self.b, self._swap, "sb")

    def ss(self) -> bool:
        """Swap on both stacks; False unless both hold at least two."""
        return self._both(self._swap, "ss")

    def pa(self) -> None:
        """Move the top of ``b`` onto ``a``. Raises IndexError if ``b`` is empty."""
        if not self.b:
            raise IndexError("stack b is empty")
        self.a.appendleft(self.b.popleft())
        self.moves.append("pa")

    def pb(self) -> None:
        """Move the top of ``a`` onto ``b``. Raises IndexError if ``a`` is empty."""
        if not self.a:
            raise IndexError("stack a is empty")
        self.b.appendleft(self.a.popleft())
        self.moves.append("pb")

    def ra(self) -> bool:
        """Move the top of ``a`` to its bottom; False if it has fewer than two."""
        return self._single(self.a, self._rotate, "ra")

    def rb(self) -> bool:
        """Move the top of ``b`` to its bottom; False if it has fewer than two."""
        return self._single(self.b, self._rotate, "rb")

    def rr(self) -> bool:
        """Rotate both stacks; False unless both hold at least two."""
        return self._both(self._rotate, "rr")

    def rra(self) -> bool:
        """Move the bottom of ``a`` to its top; False if it has fewer than two."""
        return self._single(self.a, self._reverse_rotate, "rra")

    def rrb(self) -> bool:
        """Move the bottom of ``b`` to its top; False if it has fewer than two."""
        return self._single(self.b, self._reverse_rotate, "rrb")

    def rrr(self) -> bool:
        """Reverse-rotate both stacks; False unless both hold at least two."""
        return self._both(self._reverse_rotate, "rrr")