"""Lenient parsing of decimal numbers given on the command line."""

from __future__ import annotations

import re

_WHITESPACE = " \t\n\r\x0b\x0c"
_NUMBER_PREFIX = re.compile(
    "[" + re.escape(_WHITESPACE) + "]*([+-]?)([0-9]*)(?:\\.([0-9]*))?"
)


def is_double(text: str | None) -> bool:
    """Report whether ``text`` is accepted as a numeric argument.

    An argument is accepted when a numeric prefix can be read from it.
    Every part of that prefix is optional, so a missing or empty argument,
    or one with trailing text, is accepted too; :func:`atod` then reads
    whatever prefix is there and ignores the rest.
    """
    return _NUMBER_PREFIX.match(text or "") is not None


def atod(text: str) -> float:
    """Convert the leading decimal number in ``text`` to a float.

    Leading whitespace and one optional sign are skipped, then ASCII digits,
    an optional point and fractional digits are read. Parsing stops at the
    first character that does not fit; no digits at all yields zero.
    """
    match = _NUMBER_PREFIX.match(text)
    sign_text, whole_digits, fraction_digits = match.groups()
    sign = -1 if sign_text == "-" else 1

    result = 0.0
    for digit in whole_digits:
        result = result * 10.0 + int(digit)

    fraction = 0.0
    divisor = 10.0
    for digit in fraction_digits or "":
        fraction += int(digit) / divisor
        divisor *= 10.0

    return sign * (result + fraction)