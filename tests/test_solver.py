import io
import itertools
import random

import pytest

from pushswap.parse import chunk_distance, chunk_layout
from pushswap.search import is_sorted
from pushswap.solver import fill_b, general, main, push_swap
from pushswap.stacks import Stacks

MOVE_NAMES = {"pa", "pb", "sa", "sb", "ss", "ra", "rb", "rr", "rra", "rrb", "rrr"}


def replay(values, moves):
    stacks = Stacks(values)
    for move in moves:
        assert move in MOVE_NAMES
        getattr(stacks, move)()
    return stacks


def check_sorted_result(values, stacks):
    assert stacks.a == sorted(values)
    assert stacks.b == []
    replayed = replay(values, stacks.moves)
    assert replayed.a == sorted(values)
    assert replayed.b == []
    assert replayed.moves == stacks.moves


@pytest.mark.parametrize("size", [1, 2, 3, 4, 5])
def test_push_swap_all_small_permutations(size):
    for perm in itertools.permutations(range(size)):
        check_sorted_result(list(perm), push_swap(list(perm)))


def test_push_swap_all_permutations_of_six():
    for perm in itertools.permutations([4, -2, 9, 0, 7, 3]):
        check_sorted_result(list(perm), push_swap(list(perm)))


@pytest.mark.parametrize("size,seed", [(7, 1), (10, 2), (25, 3), (50, 4), (100, 5), (150, 6)])
def test_push_swap_random(size, seed):
    values = random.Random(seed).sample(range(-1000, 1000), size)
    check_sorted_result(values, push_swap(values))


def test_push_swap_sorted_input_needs_no_moves():
    values = list(range(20))
    stacks = push_swap(values)
    assert stacks.moves == []
    assert stacks.a == values


def test_push_swap_empty_raises():
    with pytest.raises(ValueError):
        push_swap([])


def test_push_swap_display_writes_moves():
    out = io.StringIO()
    values = random.Random(11).sample(range(40), 40)
    stacks = push_swap(values, display=True, out=out)
    assert out.getvalue() == "".join(move + "\n" for move in stacks.moves)
    assert stacks.a == sorted(values)


def test_fill_b_leaves_a_sorted():
    values = random.Random(9).sample(range(40), 40)
    stacks = Stacks(values)
    _, chunk_size = chunk_layout(40)
    fill_b(stacks, chunk_size, chunk_distance(40, chunk_size))
    assert is_sorted(stacks.a)
    assert sorted(stacks.a + stacks.b) == list(range(40))


def test_general_sorts():
    values = random.Random(13).sample(range(60), 60)
    stacks = Stacks(values)
    _, chunk_size = chunk_layout(60)
    general(stacks, chunk_size, chunk_distance(60, chunk_size))
    check_sorted_result(values, stacks)


def test_main_single_argument_with_spaces(capsys):
    assert main(["3 2 1"]) == 0
    moves = capsys.readouterr().out.split()
    assert replay([3, 2, 1], moves).a == [1, 2, 3]


def test_main_many_arguments(capsys):
    args = ["5", "-3", "12", "0", "7", "1", "9"]
    assert main(args) == 0
    moves = capsys.readouterr().out.split()
    values = [int(arg) for arg in args]
    assert replay(values, moves).a == sorted(values)


def test_main_sorted_prints_nothing(capsys):
    assert main(["1", "2", "3"]) == 0
    captured = capsys.readouterr()
    assert captured.out == ""
    assert captured.err == ""


@pytest.mark.parametrize(
    "args", [["1", "1"], ["abc"], ["2147483648"], ["1", "+"], ["1 x 2"]]
)
def test_main_bad_input_reports_error(args, capsys):
    assert main(args) == 1
    captured = capsys.readouterr()
    assert captured.err == "Error\n"
    assert captured.out == ""


def test_main_no_arguments(capsys):
    assert main([]) == 1
    captured = capsys.readouterr()
    assert captured.out == ""
    assert captured.err == ""