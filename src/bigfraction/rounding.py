# -*- coding: utf-8 -*-
# ----------------------------------------------------------------------------
# Copyright:   (c) 2024 ff. bigfraction contributors
# License:     This program is part of a larger application. For license
#              details please read the file LICENSE.TXT provided together
#              with the application.
# ----------------------------------------------------------------------------
# $Source$
# $Revision$

"""Rounding modes for exact decimal rendering."""

from __future__ import annotations

from contextvars import ContextVar, Token
from enum import Enum, unique
from typing import Tuple

from .digits import zero_padded


__all__ = ['RoundingMode', 'get_dflt_rounding_mode',
           'set_dflt_rounding_mode', 'resolve']


@unique
class RoundingMode(Enum):
    """Enumeration of rounding modes."""

    def __new__(cls, value: int, doc: str) -> RoundingMode:
        """Return new member of the Enum."""
        member = object.__new__(cls)
        member._value_ = value
        member.__doc__ = doc
        return member

    ROUND_UP = (0, 'Round away from zero.')
    ROUND_DOWN = (1, 'Round towards zero.')
    ROUND_CEIL = (2, 'Round towards Infinity.')
    ROUND_FLOOR = (3, 'Round towards -Infinity.')
    ROUND_HALF_UP = (4, 'Round to nearest with ties going away from zero.')
    ROUND_HALF_DOWN = (5, 'Round to nearest with ties going towards zero.')
    ROUND_HALF_EVEN = (6, 'Round to nearest with ties going to nearest even '
                          'neighbour.')
    ROUND_HALF_CEIL = (7, 'Round to nearest with ties going towards '
                          'Infinity.')
    ROUND_HALF_FLOOR = (8, 'Round to nearest with ties going towards '
                           '-Infinity.')


_dflt_rounding: ContextVar[RoundingMode] = \
    ContextVar("dflt_rounding", default=RoundingMode.ROUND_HALF_UP)


def get_dflt_rounding_mode() -> RoundingMode:
    """Return default rounding mode."""
    return _dflt_rounding.get()


def set_dflt_rounding_mode(rounding: RoundingMode) -> Token:
    """Set default rounding mode.

    Args:
        rounding (RoundingMode): rounding mode to be set as default

    Returns:
        Token which can be used to restore the previous default

    Raises:
        TypeError: given 'rounding' is not a valid rounding mode
    """
    if not isinstance(rounding, RoundingMode):
        raise TypeError(f"Illegal rounding mode: {rounding!r}")
    return _dflt_rounding.set(rounding)


# modes not depending on the discarded digits
_DIRECTED = {
    RoundingMode.ROUND_UP: lambda is_pos, odd: True,
    RoundingMode.ROUND_DOWN: lambda is_pos, odd: False,
    RoundingMode.ROUND_CEIL: lambda is_pos, odd: is_pos,
    RoundingMode.ROUND_FLOOR: lambda is_pos, odd: not is_pos,
}

# tie breaking of the round-to-nearest modes
_TIES = {
    RoundingMode.ROUND_HALF_UP: lambda is_pos, odd: True,
    RoundingMode.ROUND_HALF_DOWN: lambda is_pos, odd: False,
    RoundingMode.ROUND_HALF_EVEN: lambda is_pos, odd: odd,
    RoundingMode.ROUND_HALF_CEIL: lambda is_pos, odd: is_pos,
    RoundingMode.ROUND_HALF_FLOOR: lambda is_pos, odd: not is_pos,
}


def resolve(rounding: RoundingMode, next_digit: int, decimal_part: int,
            integer_part: int, is_positive: bool, decimal_places: int,
            has_more: bool = False) -> Tuple[int, str]:
    """Round a truncated decimal and return the carry and new decimal digits.

    The value to be rounded is `integer_part`.`decimal_part` (the latter
    having `decimal_places` digits), followed by the discarded digit
    `next_digit` and, if `has_more` is true, further non-zero digits. The
    caller has to make sure the discarded digits are not all zero.

    Args:
        rounding (RoundingMode): rounding mode to be applied
        next_digit (int): first discarded digit (0 <= next_digit <= 9)
        decimal_part (int): kept decimal digits as integer
        integer_part (int): absolute integer part of the value
        is_positive (bool): sign of the value
        decimal_places (int): number of kept decimal digits
        has_more (bool): whether any digit after `next_digit` is non-zero

    Returns:
        tuple (carry, decimal_digits): `carry` has to be added to the
        integer part, `decimal_digits` is the rounded decimal part padded
        to `decimal_places` digits ('' if `decimal_places` is 0)
    """
    if not isinstance(rounding, RoundingMode):
        raise TypeError(f"Illegal rounding mode: {rounding!r}")
    last_is_odd = (integer_part if decimal_places == 0 else decimal_part) % 2
    if rounding in _DIRECTED:
        inc = _DIRECTED[rounding](is_positive, last_is_odd)
    elif next_digit > 5 or (next_digit == 5 and has_more):
        inc = True
    elif next_digit < 5:
        inc = False
    else:
        inc = _TIES[rounding](is_positive, last_is_odd == 1)
    x = decimal_part + 1 if inc else decimal_part
    factor = 10 ** decimal_places
    carry, rest = divmod(x, factor)
    return carry, zero_padded(rest, decimal_places)
