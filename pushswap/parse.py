"""Reading the command-line numbers and working out the chunk layout."""

from __future__ import annotations

from collections.abc import Sequence

INT_MIN = -(2**31)
INT_MAX = 2**31 - 1

_WHITESPACE = " \t\n\v\f\r"
_DIGITS = "0123456789"


class InputError(ValueError):
    """Raised when the arguments do not describe a valid set of integers."""

    def __init__(self, reason: str = "Error") -> None:
        super().__init__(reason)


def check_number(text: str) -> bool:
    """True when ``text`` is an optional sign followed by one or more digits."""
    body = text[1:] if text[:1] in ("+", "-") else text
    return bool(body) and all(ch in _DIGITS for ch in body)


def parse_long(text: str) -> int:
    """Parse leading whitespace, an optional sign and the digits that follow."""
    stripped = text.lstrip(_WHITESPACE)
    sign = 1
    if stripped[:1] in ("+", "-"):
        if stripped[0] == "-":
            sign = -1
        stripped = stripped[1:]
    result = 0
    for ch in stripped:
        if ch not in _DIGITS:
            break
        result = result * 10 + int(ch)
    return sign * result


def split_words(text: str, sep: str) -> list[str]:
    """Split ``text`` on the character ``sep``, dropping empty pieces."""
    return [word for word in text.split(sep) if word]


def parse_arguments(args: Sequence[str]) -> list[int]:
    """Turn the program's arguments into the initial contents of stack ``a``.

    A single argument holding a space is split into words. Every word must
    be a signed decimal integer within the 32-bit range, and no value may
    appear twice; otherwise :class:`InputError` is raised.
    """
    words = list(args)
    if len(words) == 1 and " " in words[0]:
        words = split_words(words[0], " ")
        if not words:
            raise InputError("no numbers given")
    values: list[int] = []
    seen: set[int] = set()
    for word in words:
        if not check_number(word):
            raise InputError(f"not a number: {word!r}")
        number = parse_long(word)
        if number > INT_MAX or number < INT_MIN:
            raise InputError(f"out of range: {word!r}")
        if number in seen:
            raise InputError(f"duplicate: {number}")
        seen.add(number)
        values.append(number)
    return values


def chunk_layout(length: int) -> tuple[int, int]:
    """Return ``(chunks, chunk_size)`` for a stack of ``length`` values."""
    chunks = 10
    if length >= 500:
        chunks = 13
    if length >= 900:
        chunks = 16
    if length < chunks:
        chunks = 1
    return chunks, length // chunks


def chunk_distance(length: int, chunk_size: int) -> int:
    """How far from the top an element of the current chunk may be sought."""
    if length >= 900:
        return int(chunk_size * 2.5)
    if length >= 500:
        return int(chunk_size * 1.8)
    if length >= 100:
        return int(chunk_size * (1 + 0.0017 * (length - 100)))
    return chunk_size


def format_stack(values: Sequence[int], name: str) -> str:
    """One line per element: ``name[index] value: v``, top first."""
    return "".join(
        f"{name}[{index}] value: {value}\n" for index, value in enumerate(values)
    )