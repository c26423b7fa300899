"""Strategies that sort stack ``a`` using the puzzle's moves."""

from __future__ import annotations

from typing import Iterable, List

from pushswap.parsing import assign_ranks
from pushswap.stacks import Element, Stacks


def compare(stacks: Stacks) -> int:
    """Classify the order of the top three ranks of ``a`` as a case 0 to 4."""
    i, j, k = (element.index for element in list(stacks.a)[:3])
    if i < j and j > k and k > i:
        return 1
    if i < j and j > k and k < i:
        return 2
    if i > j and j > k and k < i:
        return 3
    if i > j and j < k and k < i:
        return 4
    return 0


def sort3(stacks: Stacks) -> None:
    """Sort the top three elements of ``a`` in at most three moves."""
    if stacks.is_sorted():
        return
    case = compare(stacks)
    if case == 1:
        stacks.ra()
        stacks.sa()
        stacks.rra()
    elif case == 2:
        stacks.rra()
    elif case == 3:
        stacks.sa()
        stacks.rra()
    elif case == 4:
        stacks.ra()
    else:
        stacks.sa()


def _min_position(stacks: Stacks) -> int:
    ranks = [element.index for element in stacks.a]
    return ranks.index(min(ranks))


def sort4(stacks: Stacks) -> None:
    """Bring the smallest element to the top, park it on ``b`` and sort three."""
    position = _min_position(stacks)
    if stacks.is_sorted():
        return
    if position == 1:
        stacks.ra()
    elif position == 2:
        stacks.ra()
        stacks.ra()
    elif position == 3:
        stacks.rra()
    if stacks.is_sorted():
        return
    stacks.pb()
    sort3(stacks)
    stacks.pa()


def sort5(stacks: Stacks) -> None:
    """Bring the smallest element to the top, park it on ``b`` and sort four."""
    position = _min_position(stacks)
    if stacks.is_sorted():
        return
    if position == 1:
        stacks.ra()
    elif position == 2:
        stacks.ra()
        stacks.ra()
    elif position == 3:
        stacks.rra()
        stacks.rra()
    elif position == 4:
        stacks.rra()
    stacks.pb()
    sort4(stacks)
    stacks.pa()


def simple_sort(stacks: Stacks) -> None:
    """Sort a stack ``a`` of at most five elements."""
    size = len(stacks.a)
    if size < 2 or stacks.is_sorted():
        return
    if size == 2:
        stacks.sa()
    elif size == 3:
        sort3(stacks)
    elif size == 4:
        sort4(stacks)
    else:
        sort5(stacks)


def radix(stacks: Stacks) -> None:
    """Binary radix sort on the ranks, one bit per pass through ``a``."""
    size = len(stacks.a)
    bit = 0
    while not stacks.is_sorted():
        for _ in range(size):
            if (stacks.a[0].index >> bit) & 1 == 0:
                stacks.pb()
            else:
                stacks.ra()
        while stacks.b:
            stacks.pa()
        bit += 1


def sort_stack(stacks: Stacks) -> None:
    """Pick the strategy that suits the size of ``a`` and sort it."""
    if len(stacks.a) <= 5:
        simple_sort(stacks)
    else:
        radix(stacks)


def solve(values: Iterable[int]) -> List[str]:
    """Moves that sort ``values``; raises InputError on duplicates."""
    numbers = list(values)
    ranks = assign_ranks(numbers)
    stacks = Stacks(Element(nb, rank) for nb, rank in zip(numbers, ranks))
    if stacks.a and not stacks.is_sorted():
        sort_stack(stacks)
    return list(stacks.moves)