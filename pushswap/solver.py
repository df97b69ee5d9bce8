"""The complete sort and the command that prints its moves."""

from __future__ import annotations

import sys
from collections.abc import Iterable, Sequence
from typing import TextIO

from .chunk import handle_chunk, move_to_neighbour
from .parse import InputError, chunk_distance, chunk_layout, parse_arguments
from .search import Direction, is_sorted
from .small import sort_small
from .stacks import Stacks


def fill_b(stacks: Stacks, chunk_size: int, distance: int) -> None:
    """Push chunks onto ``b`` until ``a`` is sorted or small, then sort ``a``."""
    while len(stacks.a) > 5 and not is_sorted(stacks.a):
        handle_chunk(stacks, chunk_size, distance)
    if is_sorted(stacks.a):
        return
    sort_small(stacks)


def general(stacks: Stacks, chunk_size: int, distance: int) -> None:
    """Sort ``a`` of any size by chunking onto ``b`` and merging back."""
    fill_b(stacks, chunk_size, distance)
    while stacks.b:
        move_to_neighbour(stacks, len(stacks.b), Direction.BIGGER)
        stacks.pa()
    while not is_sorted(stacks.a):
        stacks.ra()


def push_swap(
    values: Iterable[int], display: bool = False, out: TextIO | None = None
) -> Stacks:
    """Sort ``values`` on stack ``a`` and return the stacks with their moves."""
    stacks = Stacks(values, display, out)
    length = len(stacks.a)
    if not length:
        raise ValueError("nothing to sort")
    if length <= 5:
        sort_small(stacks)
        return stacks
    _, chunk_size = chunk_layout(length)
    general(stacks, chunk_size, chunk_distance(length, chunk_size))
    return stacks


def main(argv: Sequence[str] | None = None) -> int:
    """Print the moves that sort the numbers given as arguments."""
    args = sys.argv[1:] if argv is None else list(argv)
    if not args:
        return 1
    try:
        values = parse_arguments(args)
    except InputError:
        sys.stderr.write("Error\n")
        return 1
    push_swap(values, display=True)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())