"""Small string helpers with C-string semantics, used by the map reader."""

from __future__ import annotations

from itertools import chain, islice, repeat

_WHITESPACE = " \t\n\v\f\r"
_NUL = "\0"


def atoi(text: str) -> int:
    """Parse a leading decimal integer.

    Leading whitespace and one optional sign are skipped. Parsing stops at
    the first non-digit. Text with no digits gives 0.
    """
    rest = text.lstrip(_WHITESPACE)
    sign = 1
    if rest[:1] in ("+", "-"):
        if rest[0] == "-":
            sign = -1
        rest = rest[1:]
    digits = []
    for char in rest:
        if not ("0" <= char <= "9"):
            break
        digits.append(char)
    if not digits:
        return 0
    return sign * int("".join(digits))


def itoa(number: int) -> str:
    """Return the decimal representation of ``number``."""
    return str(int(number))


def split(text: str, sep: str) -> list[str]:
    """Split ``text`` at every ``sep`` and drop the empty pieces."""
    if len(sep) != 1:
        raise ValueError("separator must be a single character")
    return [piece for piece in text.split(sep) if piece]


def strtrim(text: str, charset: str | None) -> str:
    """Remove characters found in ``charset`` from both ends of ``text``.

    A ``None`` or empty charset leaves the text unchanged.
    """
    if not charset:
        return text
    return text.strip(charset)


def substr(text: str, start: int, length: int) -> str:
    """Return at most ``length`` characters of ``text`` from ``start``.

    A start past the end gives an empty string.
    """
    if start < 0 or length < 0:
        raise ValueError("start and length must not be negative")
    start = min(start, len(text))
    return text[start:start + length]


def strnstr(haystack: str, needle: str, length: int) -> str | None:
    """Find ``needle`` within the first ``length`` characters of ``haystack``.

    Returns the rest of ``haystack`` from the match, or ``None`` when the
    needle does not lie wholly inside that window. An empty needle matches
    at the start.
    """
    if length < 0:
        raise ValueError("length must not be negative")
    if not needle:
        return haystack
    found = haystack.find(needle, 0, length)
    if found < 0:
        return None
    return haystack[found:]


def strncmp(first: str, second: str, count: int) -> int:
    """Compare at most ``count`` characters of two strings.

    Returns the difference of the code points at the first position where
    they differ, or where the shorter string ends; 0 when they agree.
    """
    if count < 0:
        raise ValueError("count must not be negative")
    pairs = zip(chain(first, repeat(_NUL)), chain(second, repeat(_NUL)))
    for left, right in islice(pairs, count):
        if left != right or left == _NUL:
            return ord(left) - ord(right)
    return 0