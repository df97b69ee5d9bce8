import pytest

from pushswap.parse import (
    INT_MAX,
    INT_MIN,
    InputError,
    check_number,
    chunk_distance,
    chunk_layout,
    format_stack,
    parse_arguments,
    parse_long,
    split_words,
)


@pytest.mark.parametrize(
    "text, expected",
    [
        ("42", True),
        ("-42", True),
        ("+42", True),
        ("0", True),
        ("+", False),
        ("-", False),
        ("", False),
        ("4a", False),
        ("--1", False),
        (" 1", False),
        ("1.5", False),
    ],
)
def test_check_number(text, expected):
    assert check_number(text) is expected


@pytest.mark.parametrize(
    "text, expected",
    [
        ("  -123", -123),
        ("+7abc", 7),
        ("\t\n42", 42),
        ("abc", 0),
        ("-2147483648", -2147483648),
    ],
)
def test_parse_long(text, expected):
    assert parse_long(text) == expected


def test_parse_long_round_trips_integers():
    for number in (0, 1, -1, INT_MAX, INT_MIN, 12345, -987):
        assert parse_long(str(number)) == number


def test_split_words_drops_empty_pieces():
    assert split_words("1  2 3", " ") == ["1", "2", "3"]
    assert split_words("   ", " ") == []
    assert split_words("a,b,,c", ",") == ["a", "b", "c"]


def test_parse_arguments_separate():
    assert parse_arguments(["3", "2", "1"]) == [3, 2, 1]


def test_parse_arguments_single_spaced_string():
    assert parse_arguments(["3 2  1"]) == [3, 2, 1]


def test_parse_arguments_single_value():
    assert parse_arguments(["5"]) == [5]


def test_parse_arguments_limits_accepted():
    assert parse_arguments(["2147483647", "-2147483648"]) == [INT_MAX, INT_MIN]


@pytest.mark.parametrize(
    "args",
    [
        ["1", "1"],
        ["1 2 1"],
        ["2147483648"],
        ["-2147483649"],
        ["a"],
        ["1", "2 3"],
        ["   "],
        [""],
        ["1\t2"],
    ],
)
def test_parse_arguments_errors(args):
    with pytest.raises(InputError):
        parse_arguments(args)


def test_input_error_is_value_error():
    with pytest.raises(ValueError):
        parse_arguments(["x"])


@pytest.mark.parametrize("length", [1, 5, 9, 10, 99, 100, 499, 500, 899, 900, 1000])
def test_chunk_layout_invariants(length):
    chunks, size = chunk_layout(length)
    assert chunks in (1, 10, 13, 16)
    assert size == length // chunks
    assert size >= 1


def test_chunk_layout_thresholds():
    assert chunk_layout(499)[0] == 10
    assert chunk_layout(500)[0] == 13
    assert chunk_layout(900)[0] == 16
    assert chunk_layout(5) == (1, 5)


def test_chunk_distance_small_stacks_use_chunk_size():
    assert chunk_distance(50, 5) == 5
    assert chunk_distance(100, 10) == 10


def test_chunk_distance_pinned():
    assert chunk_distance(500, 10) == 18


def test_chunk_distance_grows_with_length():
    distances = [chunk_distance(n, 40) for n in range(100, 1000, 50)]
    assert distances == sorted(distances)
    assert all(d >= 40 for d in distances)


def test_format_stack():
    assert format_stack([3, 1], "a") == "a[0] value: 3\na[1] value: 1\n"
    assert format_stack([], "b") == ""