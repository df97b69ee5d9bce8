"""Queries on a stack given as a sequence of values, top first."""

from __future__ import annotations

from collections.abc import Sequence
from enum import IntEnum


class Direction(IntEnum):
    """Which way a comparison looks."""

    SMALLER = 0
    BIGGER = 1


def is_sorted(values: Sequence[int]) -> bool:
    """True when the stack is non-empty and ascending from the top."""
    if not values:
        return False
    return all(x <= y for x, y in zip(values, values[1:]))


def find_most(values: Sequence[int], direction: Direction) -> int | None:
    """Position of the largest (BIGGER) or smallest (SMALLER) value, or None."""
    best: int | None = None
    for pos, value in enumerate(values):
        if best is None:
            best = pos
        elif direction == Direction.BIGGER and value > values[best]:
            best = pos
        elif direction == Direction.SMALLER and value < values[best]:
            best = pos
    return best


def find_neighbour(
    values: Sequence[int], value: int, direction: Direction
) -> int | None:
    """Position of the closest value above (BIGGER) or below (SMALLER) ``value``."""
    best: int | None = None
    for pos, candidate in enumerate(values):
        if direction == Direction.BIGGER:
            if candidate > value and (best is None or candidate < values[best]):
                best = pos
        elif candidate < value and (best is None or candidate > values[best]):
            best = pos
    return best


def is_neighbour(
    target: int | None, source: Sequence[int], direction: Direction
) -> bool:
    """True when ``target`` is the neighbour of the top of ``source`` within it."""
    if target is None or not source:
        return False
    pos = find_neighbour(source, source[0], direction)
    return pos is not None and source[pos] == target


def is_most(values: Sequence[int], direction: Direction) -> bool:
    """True when the top of the stack is its largest or smallest value."""
    pos = find_most(values, direction)
    return pos is not None and values[pos] == values[0]


def find_median(values: Sequence[int], block_size: int) -> int:
    """The ``block_size``-th smallest value, capped at the largest; 0 if empty."""
    pos = find_most(values, Direction.SMALLER)
    if pos is None:
        return 0
    current = values[pos]
    for _ in range(block_size - 1):
        nxt = find_neighbour(values, current, Direction.BIGGER)
        if nxt is None:
            break
        current = values[nxt]
    return current


def compute_rotation(values: Sequence[int], pos: int) -> int:
    """Signed rotation count bringing ``pos`` to the top; negative is downward."""
    length = len(values)
    if length == 1:
        return 0
    return pos if pos < length // 2 else pos - length


def find_closest_pos_under_median(
    values: Sequence[int], median: int
) -> int | None:
    """Position of the value not above ``median`` that is cheapest to rotate to the top."""
    pos = find_most(values, Direction.SMALLER)
    if pos is None or values[pos] > median:
        return None
    closest = pos
    while True:
        if abs(compute_rotation(values, pos)) < abs(compute_rotation(values, closest)):
            closest = pos
        nxt = find_neighbour(values, values[pos], Direction.BIGGER)
        if nxt is None or values[nxt] > median:
            return closest
        pos = nxt