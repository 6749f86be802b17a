"""A small printf-style formatter with the flags ``-``, ``+``, space, ``#`` and ``0``.

Supported conversions are ``c``, ``s``, ``p``, ``d``, ``i``, ``u``, ``x``,
``X`` and ``%``. Integers follow C semantics: ``d``/``i`` wrap to a signed
32-bit value, ``u``/``x``/``X`` to an unsigned 32-bit value and ``p`` to an
unsigned 64-bit value. An unknown conversion character produces nothing.
"""

from __future__ import annotations

import re
import sys
from dataclasses import dataclass
from typing import Any, Callable, Iterator, Optional, TextIO

_SPEC_RE = re.compile(r"([-+ #0]*)([0-9]*)(?:(\.)([0-9]*))?")
_UINT32 = 1 << 32
_UINT64 = 1 << 64
_NULL_TEXT = "(null)"


@dataclass(frozen=True)
class FormatSpec:
    """One parsed conversion: its flags, width, precision and type."""

    left_align: bool = False
    plus: bool = False
    space: bool = False
    alternate: bool = False
    zero_pad: bool = False
    width: int = 0
    precision: Optional[int] = None
    conversion: str = ""
    length: int = 0


def parse_spec(text: str) -> FormatSpec:
    """Parse the conversion that starts ``text`` (the part after ``%``).

    ``length`` tells how many characters were used, the conversion character
    included. An empty ``conversion`` means the text ended before one.
    """
    match = _SPEC_RE.match(text)
    flags, width, dot, precision = match.groups()
    end = match.end()
    conversion = text[end:end + 1]
    return FormatSpec(
        left_align="-" in flags,
        plus="+" in flags,
        space=" " in flags,
        alternate="#" in flags,
        zero_pad="0" in flags,
        width=int(width) if width else 0,
        precision=(int(precision) if precision else 0) if dot else None,
        conversion=conversion,
        length=end + len(conversion),
    )


def _pad(body: str, spec: FormatSpec) -> str:
    if spec.left_align:
        return body.ljust(spec.width)
    return body.rjust(spec.width)


def _format_char(value: Any, spec: FormatSpec) -> str:
    if isinstance(value, str):
        if len(value) != 1:
            raise TypeError("%c needs a single character")
        char = value
    else:
        char = chr(int(value) & 0xFF)
    return _pad(char, spec)


def _format_str(value: Any, spec: FormatSpec) -> str:
    text = _NULL_TEXT if value is None else str(value)
    if spec.precision is not None:
        text = text[:spec.precision]
    return _pad(text, spec)


def _format_pointer(value: Any, spec: FormatSpec) -> str:
    return _pad("0x" + format(int(value) % _UINT64, "x"), spec)


def _format_unsigned(value: Any, spec: FormatSpec, base: int, upper: bool) -> str:
    number = int(value) % _UINT32
    alternate = spec.alternate and base == 16
    if number == 0:
        if spec.precision == 0:
            return " " * spec.width
        alternate = False
    precision = spec.precision or 0
    if spec.zero_pad and spec.precision is None and not spec.left_align:
        precision = spec.width - (2 if alternate else 0)
    digits = format(number, "x" if base == 16 else "d").rjust(precision, "0")
    prefix = "0x" if alternate else ""
    body = prefix + digits
    if upper:
        body = body.upper()
    return _pad(body, spec)


def _format_int(value: Any, spec: FormatSpec) -> str:
    number = (int(value) + (1 << 31)) % _UINT32 - (1 << 31)
    if number < 0:
        sign = "-"
    elif spec.plus:
        sign = "+"
    elif spec.space:
        sign = " "
    else:
        sign = ""
    precision = spec.precision or 0
    if spec.zero_pad and spec.precision is None and not spec.left_align:
        precision = spec.width - len(sign)
    if number == 0 and spec.precision == 0:
        digits = ""
    else:
        digits = str(abs(number)).rjust(precision, "0")
    return _pad(sign + digits, spec)


_HANDLERS: dict[str, Callable[[Any, FormatSpec], str]] = {
    "c": _format_char,
    "s": _format_str,
    "p": _format_pointer,
    "d": _format_int,
    "i": _format_int,
    "u": lambda value, spec: _format_unsigned(value, spec, 10, False),
    "x": lambda value, spec: _format_unsigned(value, spec, 16, False),
    "X": lambda value, spec: _format_unsigned(value, spec, 16, True),
}


def _render(spec: FormatSpec, args: Iterator[Any]) -> str:
    if spec.conversion == "%":
        return "%"
    handler = _HANDLERS.get(spec.conversion)
    if handler is None:
        return ""
    try:
        value = next(args)
    except StopIteration:
        raise TypeError("not enough arguments for format string") from None
    return handler(value, spec)


def format_printf(fmt: str, *args: Any) -> str:
    """Return ``fmt`` with each conversion replaced by the next argument."""
    pieces = []
    remaining = iter(args)
    pos = 0
    while True:
        cut = fmt.find("%", pos)
        if cut < 0:
            pieces.append(fmt[pos:])
            break
        pieces.append(fmt[pos:cut])
        spec = parse_spec(fmt[cut + 1:])
        pos = cut + 1 + spec.length
        if not spec.conversion:
            break
        pieces.append(_render(spec, remaining))
    return "".join(pieces)


def printf(fmt: str, *args: Any, file: Optional[TextIO] = None) -> int:
    """Write the formatted text to ``file`` (stdout by default); return its length."""
    text = format_printf(fmt, *args)
    (sys.stdout if file is None else file).write(text)
    return len(text)