# -*- coding: utf-8 -*-
# ----------------------------------------------------------------------------
# Copyright:   (c) 2024 ff. bigfraction contributors
# License:     This program is part of a larger application. For license
#              details please read the file LICENSE.TXT provided together
#              with the application.
# ----------------------------------------------------------------------------
# $Source$
# $Revision$

"""Conversion of numeric literals and numbers into integer ratios."""

from __future__ import annotations

import logging
import math
import re
from decimal import Decimal
from numbers import Rational
from typing import Tuple, Union

from .digits import str_to_int
from .exceptions import ParseError


__all__ = ['NumberIsh', 'parse']

logger = logging.getLogger(__name__)

NumberIsh = Union[str, int, float, Decimal, Rational]

_NUMBER = re.compile(r"""
    \A\s*
    (?P<sign>[+-])?
    (?=\.?\d)                       # at least one digit
    (?P<int>\d*)
    (?:\.(?P<frac>\d*))?
    (?:[eE](?P<exp>[+-]?\d+))?
    \s*\Z
""", re.VERBOSE)


def _parse_str(value: str) -> Tuple[int, int]:
    if not value or value.isspace():
        return 0, 1
    match = _NUMBER.match(value)
    if match is None:
        raise ParseError(f"Cannot convert {value!r} to a Fraction.")
    sign, int_part, frac_part, exp = match.group('sign', 'int', 'frac', 'exp')
    frac_part = frac_part or ''
    den = 10 ** len(frac_part)
    num = str_to_int(int_part or '0') * den + str_to_int(frac_part or '0')
    if sign == '-':
        num = -num
    if exp:
        e = int(exp)
        if e >= 0:
            num *= 10 ** e
        else:
            den *= 10 ** -e
    return num, den


def _parse_float(value: float) -> Tuple[int, int]:
    if not math.isfinite(value):
        raise ParseError(f"Cannot convert {value!r} to a Fraction.")
    if value.is_integer():
        return int(value), 1
    # the shortest repr is what the user typed, not the binary value
    logger.debug("Converting float %r via its repr.", value)
    return _parse_str(repr(value))


def parse(value: NumberIsh) -> Tuple[int, int]:
    """Convert `value` into a (numerator, denominator) pair.

    The denominator of the result is positive, the pair is not necessarily
    reduced.

    Args:
        value: int, decimal string (optionally signed, with fraction part
            and / or exponent), float, Decimal or Rational

    Returns:
        tuple (numerator, denominator)

    Raises:
        ParseError: `value` is not a valid numeric literal or not finite
        TypeError: type of `value` is not supported

    Empty or blank strings are zero. Strings are converted exactly, floats
    with a fractional part are converted via their repr, i.e. 0.1 becomes
    1/10, not the ratio of the binary float.
    """
    if isinstance(value, int):
        return int(value), 1
    if isinstance(value, str):
        return _parse_str(value)
    if isinstance(value, Rational):
        return int(value.numerator), int(value.denominator)
    if isinstance(value, float):
        return _parse_float(value)
    if isinstance(value, Decimal):
        if not value.is_finite():
            raise ParseError(f"Cannot convert {value!r} to a Fraction.")
        return value.as_integer_ratio()
    raise TypeError(f"Can't convert {value!r} to a Fraction.")
