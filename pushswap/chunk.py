"""Moving chunks of ``a`` onto ``b`` and lining the stacks up with each other."""

from __future__ import annotations

from dataclasses import dataclass

from .search import (
    Direction,
    compute_rotation,
    find_closest_pos_under_median,
    find_median,
    find_most,
    find_neighbour,
)
from .stacks import Stacks


@dataclass
class Rotations:
    """Signed rotation counts still to apply to ``a`` and ``b``.

    A positive count means rotating up, a negative one rotating down.
    """

    a: int = 0
    b: int = 0


def _opposite(direction: Direction) -> Direction:
    if direction == Direction.BIGGER:
        return Direction.SMALLER
    return Direction.BIGGER


def compute_rotations(stacks: Stacks, a_pos: int, b_pos: int) -> Rotations:
    """Rotations that bring ``a[a_pos]`` and ``b[b_pos]`` to the tops."""
    return Rotations(
        a=compute_rotation(stacks.a, a_pos),
        b=compute_rotation(stacks.b, b_pos),
    )


def find_chunk_element(stacks: Stacks, median: int, distance: int) -> int | None:
    """Position in ``a`` of the next element to push onto ``b``.

    The cheapest element not above ``median`` is chosen; while it lies
    further than ``distance`` rotations away, the median is raised by three
    and the allowed distance lowered by one.
    """
    values = stacks.a
    pos = find_closest_pos_under_median(values, median)
    if pos is None:
        return None
    rotation = compute_rotation(values, pos)
    while rotation != 0 and abs(rotation) > distance:
        median += 3
        distance -= 1
        pos = find_closest_pos_under_median(values, median)
        if pos is None:
            return None
        rotation = compute_rotation(values, pos)
    return pos


def find_ab_rotations(
    stacks: Stacks, direction: Direction, median: int, distance: int
) -> Rotations:
    """Rotations that ready the next chunk element and its place in ``b``."""
    a_pos = find_chunk_element(stacks, median, distance)
    if a_pos is None:
        return Rotations(0, 0)
    value = stacks.a[a_pos]
    b_pos = 0
    if len(stacks.b) > 1:
        neighbour = find_neighbour(stacks.b, value, direction)
        if neighbour is not None:
            b_pos = neighbour
        else:
            other = find_neighbour(stacks.b, value, _opposite(direction))
            if other is not None:
                b_pos = 0 if other == len(stacks.b) - 1 else other + 1
    return compute_rotations(stacks, a_pos, b_pos)


def neighbour_rotations(stacks: Stacks, rots: Rotations) -> None:
    """Apply one step of ``rots``, combining moves where both agree."""
    if rots.a < 0 and rots.b < 0:
        stacks.rrr()
    elif rots.a > 0 and rots.b > 0:
        stacks.rr()
    else:
        if rots.a < 0:
            stacks.rra()
        elif rots.a > 0:
            stacks.ra()
        if rots.b < 0:
            stacks.rrb()
        elif rots.b > 0:
            stacks.rb()
    if rots.a:
        rots.a += 1 if rots.a < 0 else -1
    if rots.b:
        rots.b += 1 if rots.b < 0 else -1


def sync_rotate_lists(
    stacks: Stacks, direction: Direction, median: int, distance: int
) -> None:
    """Rotate both stacks until the next chunk element can be pushed."""
    a_len = len(stacks.a)
    rots = find_ab_rotations(stacks, direction, median, distance)
    while (rots.a != 0 or rots.b != 0) and a_len > 5:
        neighbour_rotations(stacks, rots)


def handle_chunk(stacks: Stacks, chunk_size: int, distance: int) -> None:
    """Push up to ``chunk_size`` elements of the lowest chunk onto ``b``."""
    median = find_median(stacks.a, chunk_size)
    for _ in range(chunk_size):
        if len(stacks.a) <= 5:
            break
        sync_rotate_lists(stacks, Direction.SMALLER, median, distance)
        stacks.pb()


def rr_ab(stacks: Stacks, a_pos: int, b_pos: int) -> None:
    """Rotate both stacks up to bring ``a_pos`` and ``b_pos`` to the tops."""
    a_count = max(a_pos, 0)
    b_count = max(b_pos, 0)
    both = min(a_count, b_count)
    for _ in range(both):
        stacks.rr()
    for _ in range(b_count - both):
        stacks.rb()
    for _ in range(a_count - both):
        stacks.ra()


def ra_rrb(stacks: Stacks, a_pos: int, b_pos: int, b_size: int) -> None:
    """Rotate ``a`` up and ``b`` down."""
    for _ in range(max(a_pos, 0)):
        stacks.ra()
    for _ in range(max(b_size - b_pos, 0)):
        stacks.rrb()


def rb_rra(stacks: Stacks, a_pos: int, b_pos: int, a_size: int) -> None:
    """Rotate ``b`` up and ``a`` down."""
    for _ in range(max(b_pos, 0)):
        stacks.rb()
    for _ in range(max(a_size - a_pos, 0)):
        stacks.rra()


def rrr_ab(
    stacks: Stacks, a_pos: int, b_pos: int, a_size: int, b_size: int
) -> None:
    """Rotate both stacks down to bring ``a_pos`` and ``b_pos`` to the tops."""
    a_count = max(a_size - a_pos, 0)
    b_count = max(b_size - b_pos, 0)
    both = min(a_count, b_count)
    for _ in range(both):
        stacks.rrr()
    for _ in range(b_count - both):
        stacks.rrb()
    for _ in range(a_count - both):
        stacks.rra()


def move_to_neighbour(stacks: Stacks, b_size: int, direction: Direction) -> None:
    """Bring the extreme of ``b`` and its neighbour in ``a`` to the tops."""
    b_pos = find_most(stacks.b, direction)
    if b_pos is None:
        return
    found = find_neighbour(stacks.a, stacks.b[b_pos], direction)
    a_pos = -1 if found is None else found
    a_size = len(stacks.a)
    a_up = a_pos < a_size - a_pos
    b_up = b_pos < b_size - b_pos
    if a_up and b_up:
        rr_ab(stacks, a_pos, b_pos)
    elif a_up:
        ra_rrb(stacks, a_pos, b_pos, b_size)
    elif b_up:
        rb_rra(stacks, a_pos, b_pos, a_size)
    else:
        rrr_ab(stacks, a_pos, b_pos, a_size, b_size)


def move_b_list_neighbour(stacks: Stacks, value: int, direction: Direction) -> None:
    """Rotate ``b`` so that the neighbour of ``value`` is on top."""
    b_size = len(stacks.b)
    found = find_neighbour(stacks.b, value, direction)
    pos = -1 if found is None else found
    if pos < b_size - pos:
        for _ in range(max(pos, 0)):
            stacks.rb()
    else:
        for _ in range(max(b_size - pos, 0)):
            stacks.rrb()