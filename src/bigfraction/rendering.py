# -*- coding: utf-8 -*-
# ----------------------------------------------------------------------------
# Copyright:   (c) 2024 ff. bigfraction contributors
# License:     This program is part of a larger application. For license
#              details please read the file LICENSE.TXT provided together
#              with the application.
# ----------------------------------------------------------------------------
# $Source$
# $Revision$

"""Decimal string representations of integer ratios.

All conversions are based on long division of the absolute numerator by the
absolute denominator, so the sign may be carried by either of them. Nothing
is converted to float on the way.
"""

from __future__ import annotations

from typing import Dict, List, Optional

from .config import DEFAULT_FORMAT, FormatOptions, check_count
from .digits import int_to_str, num_digits, zero_padded
from .rounding import RoundingMode, resolve


__all__ = [
    'to_fixed',
    'to_precision',
    'to_exponential',
    'recurring_decimal',
    'add_separators',
]


def _signed(digits: str, is_positive: bool) -> str:
    # a result made of zeros only has no sign
    if is_positive or not digits.strip('0.'):
        return digits
    return '-' + digits


def to_fixed(numerator: int, denominator: int, decimal_places: int,
             rounding: RoundingMode, trailing_zeros: bool = True) -> str:
    """Return fixed-point representation of `numerator` / `denominator`.

    Args:
        numerator (int): numerator of the value
        denominator (int): denominator of the value (non-zero)
        decimal_places (int): number of decimal digits (>= 0)
        rounding (RoundingMode): rounding mode applied if the value has more
            decimal digits than requested
        trailing_zeros (bool): whether to keep trailing zeros of the
            decimal part

    Raises:
        InvalidArgument: `decimal_places` is not a >= 0 integer

    >>> to_fixed(999999, 1000, 2, RoundingMode.ROUND_HALF_UP)
    '1000.00'
    """
    check_count('decimal_places', decimal_places, 0)
    is_positive = (numerator >= 0) == (denominator > 0) or numerator == 0
    n, d = abs(numerator), abs(denominator)
    quot, rem = divmod(n, d)
    decimal_part, rem = divmod(rem * 10 ** decimal_places, d)

    carry = 0
    if rem == 0:
        decimal_str = zero_padded(decimal_part, decimal_places)
    else:
        next_digit, rest = divmod(rem * 10, d)
        carry, decimal_str = resolve(rounding,
                                     next_digit=next_digit,
                                     decimal_part=decimal_part,
                                     integer_part=quot,
                                     is_positive=is_positive,
                                     decimal_places=decimal_places,
                                     has_more=rest != 0)
    if not trailing_zeros:
        decimal_str = decimal_str.rstrip('0')

    int_str = int_to_str(quot + carry)
    result = f"{int_str}.{decimal_str}" if decimal_str else int_str
    return _signed(result, is_positive)


def to_precision(numerator: int, denominator: int, significant_digits: int,
                 rounding: RoundingMode) -> str:
    """Return representation of `numerator` / `denominator` with
    `significant_digits` digits.

    Values with less integer digits than `significant_digits` are rendered
    with the missing digits as decimal places, all others are rounded to
    `significant_digits` digits and filled up with zeros.

    Raises:
        InvalidArgument: `significant_digits` is not a >= 1 integer

    >>> to_precision(12345, 1, 2, RoundingMode.ROUND_FLOOR)
    '12000'
    >>> to_precision(123456, 1000000, 3, RoundingMode.ROUND_HALF_UP)
    '0.123'
    """
    check_count('significant_digits', significant_digits, 1)
    is_positive = (numerator >= 0) == (denominator > 0) or numerator == 0
    n, d = abs(numerator), abs(denominator)
    quot, rem = divmod(n, d)

    # number of digits of the integer part, zero counts as one digit
    if n == 0:
        sdc = 1
    else:
        sdc = num_digits(quot) if quot else 0

    if 10 ** significant_digits > quot:
        return to_fixed(numerator, denominator,
                        decimal_places=significant_digits - sdc,
                        rounding=rounding)

    factor = 10 ** (sdc - significant_digits)
    integer_part, discarded = divmod(quot, factor)
    carry = 0
    if discarded or rem:
        next_digit, rest = divmod(discarded, factor // 10)
        carry, _ = resolve(rounding,
                           next_digit=next_digit,
                           decimal_part=0,
                           integer_part=integer_part,
                           is_positive=is_positive,
                           decimal_places=0,
                           has_more=rest != 0 or rem != 0)
    return _signed(int_to_str((integer_part + carry) * factor), is_positive)


def to_exponential(numerator: int, denominator: int, decimal_places: int,
                   rounding: RoundingMode,
                   trailing_zeros: bool = True) -> str:
    """Return exponential representation of `numerator` / `denominator`.

    The mantissa has one integer digit and `decimal_places` decimal digits,
    the exponent is always signed.

    Raises:
        InvalidArgument: `decimal_places` is not a >= 0 integer

    >>> to_exponential(12345678, 10000, 3, RoundingMode.ROUND_HALF_UP)
    '1.235e+3'
    >>> to_exponential(0, 1, 0, RoundingMode.ROUND_HALF_UP)
    '0e+0'
    """
    check_count('decimal_places', decimal_places, 0)
    is_positive = (numerator >= 0) == (denominator > 0) or numerator == 0
    n, d = abs(numerator), abs(denominator)

    exp = 0
    if n:
        # scale n / d into [1, 10)
        exp = num_digits(n) - num_digits(d)
        if exp >= 0:
            d *= 10 ** exp
        else:
            n *= 10 ** -exp
        if n < d:
            n *= 10
            exp -= 1

    mantissa = to_fixed(n if is_positive else -n, d, decimal_places,
                        rounding, trailing_zeros)
    if mantissa.lstrip('-').startswith('10'):
        # rounding carried into a second integer digit
        exp += 1
        mantissa = to_fixed(1 if is_positive else -1, 1, decimal_places,
                            rounding, trailing_zeros)
    sign = '+' if exp >= 0 else ''
    return f"{mantissa}e{sign}{exp}"


def recurring_decimal(numerator: int, denominator: int) -> Optional[str]:
    """Return the repeating cycle of the decimal expansion.

    Returns None if the decimal expansion of `numerator` / `denominator`
    terminates.

    >>> recurring_decimal(1, 7)
    '142857'
    >>> recurring_decimal(1, 6)
    '6'
    >>> recurring_decimal(1, 8) is None
    True
    """
    d = abs(denominator)
    rem = abs(numerator) % d
    seen: Dict[int, int] = {}
    digits: List[str] = []
    while rem and rem not in seen:
        seen[rem] = len(digits)
        digit, rem = divmod(rem * 10, d)
        digits.append(str(digit))
    if rem == 0:
        return None
    return ''.join(digits[seen[rem]:])


def _group_int(digits: str, size: int, secondary: int) -> List[str]:
    if size <= 0 or len(digits) <= size:
        return [digits]
    groups = [digits[-size:]]
    head = digits[:-size]
    step = secondary or size
    while len(head) > step:
        groups.append(head[-step:])
        head = head[:-step]
    groups.append(head)
    return groups[::-1]


def add_separators(text: str, options: FormatOptions = DEFAULT_FORMAT) -> str:
    """Apply separators and affixes of `options` to the plain decimal `text`.

    `text` is a string as returned by `to_fixed`.

    >>> add_separators('-1234567.891')
    '-1,234,567.891'
    """
    sign = '-' if text.startswith('-') else ''
    int_part, _, frac_part = text.lstrip('-').partition('.')
    result = options.group_separator.join(
        _group_int(int_part, options.group_size,
                   options.secondary_group_size))
    if frac_part:
        size = options.fraction_group_size
        if size > 0:
            frac_part = options.fraction_group_separator.join(
                frac_part[i:i + size] for i in range(0, len(frac_part), size))
        result = f"{result}{options.decimal_separator}{frac_part}"
    return f"{options.prefix}{sign}{result}{options.suffix}"
