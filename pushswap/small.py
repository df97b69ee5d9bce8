"""Hand-written sorts for stacks of at most five values."""

from __future__ import annotations

from .search import Direction, find_median, find_most, is_sorted
from .stacks import Stacks


def sort_3(stacks: Stacks) -> None:
    """Sort the top three values of ``a`` with at most two moves."""
    top, middle, bottom = stacks.a[:3]
    if top > middle and middle < bottom and bottom > top:
        stacks.sa()
    elif top > middle and middle > bottom and bottom < top:
        stacks.sa()
        stacks.rra()
    elif top > middle and middle < bottom and bottom < top:
        stacks.ra()
    elif top < middle and middle > bottom and bottom > top:
        stacks.sa()
        stacks.ra()
    elif top < middle and middle > bottom and bottom < top:
        stacks.rra()


def sort_4(stacks: Stacks) -> None:
    """Park the smallest value on ``b``, sort the rest, bring it back."""
    pos = find_most(stacks.a, Direction.SMALLER)
    smallest = stacks.a[pos] if pos is not None else 0
    while stacks.a[0] != smallest:
        stacks.ra()
    stacks.pb()
    sort_3(stacks)
    stacks.pa()


def sort_5(stacks: Stacks) -> None:
    """Park the two smallest values on ``b``, sort the rest, bring them back."""
    median = find_median(stacks.a, 3)
    count = 0
    for _ in range(5):
        if count >= 2:
            break
        if stacks.a[0] < median:
            stacks.pb()
            count += 1
        else:
            stacks.ra()
    sort_3(stacks)
    if len(stacks.b) >= 2 and stacks.b[0] < stacks.b[1]:
        stacks.sb()
    stacks.pa()
    stacks.pa()


def sort_small(stacks: Stacks) -> None:
    """Sort ``a`` when it holds between one and five values."""
    if not 1 <= len(stacks.a) <= 5:
        raise ValueError("stack a must hold between one and five values")
    while not is_sorted(stacks.a):
        if len(stacks.a) == 2 and stacks.a[0] > stacks.a[1]:
            stacks.sa()
        if len(stacks.a) == 3:
            sort_3(stacks)
        if len(stacks.a) == 4:
            sort_4(stacks)
        if len(stacks.a) == 5:
            sort_5(stacks)