# -*- coding: utf-8 -*-
# ----------------------------------------------------------------------------
# Copyright:   (c) 2024 ff. bigfraction contributors
# License:     This program is part of a larger application. For license
#              details please read the file LICENSE.TXT provided together
#              with the application.
# ----------------------------------------------------------------------------
# $Source$
# $Revision$

"""Conversions between ints and decimal digit strings of any length.

The builtin `int` <-> `str` conversions are limited to a configurable
number of digits (see `sys.get_int_max_str_digits`). `decimal.Decimal`
converts from and to `int` without going through a string, so it is used
for everything beyond that limit.
"""

from decimal import Decimal


__all__ = ['int_to_str', 'str_to_int', 'num_digits', 'zero_padded']


# ints up to this bit length have less than 3100 decimal digits
_MAX_STR_BITS = 10000
_MAX_STR_DIGITS = 3000


def int_to_str(n: int) -> str:
    """Return the decimal digits of `n` (prefixed by '-' if negative).

    >>> int_to_str(-10 ** 5000)[:4]
    '-100'
    """
    if n.bit_length() <= _MAX_STR_BITS:
        return str(n)
    return format(Decimal(n), 'f')


def str_to_int(digits: str) -> int:
    """Return the int given by the decimal `digits`."""
    if len(digits) <= _MAX_STR_DIGITS:
        return int(digits)
    return int(Decimal(digits))


def num_digits(n: int) -> int:
    """Return the number of decimal digits of `abs(n)` (1 for 0)."""
    if n == 0:
        return 1
    return Decimal(n).adjusted() + 1


def zero_padded(n: int, width: int) -> str:
    """Return the digits of the non-negative `n` left-padded with zeros to
    `width` digits ('' if `width` is 0)."""
    if width == 0:
        return ''
    return int_to_str(n).zfill(width)
