# -*- coding: utf-8 -*-
# ----------------------------------------------------------------------------
# Copyright:   (c) 2024 ff. bigfraction contributors
# License:     This program is part of a larger application. For license
#              details please read the file LICENSE.TXT provided together
#              with the application.
# ----------------------------------------------------------------------------
# $Source$
# $Revision$

"""Rendering configuration."""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass
from typing import Optional

from .exceptions import InvalidArgument
from .rounding import RoundingMode, get_dflt_rounding_mode


__all__ = ['FormatOptions', 'Config', 'DEFAULT_FORMAT', 'DEFAULT_CONFIG',
           'check_count']


def check_count(name: str, value: int, minimum: int) -> None:
    """Raise InvalidArgument unless `value` is an int >= `minimum`."""
    if not isinstance(value, int) or isinstance(value, bool) \
            or value < minimum:
        raise InvalidArgument(f"'{name}' must be a >= {minimum} integer.")


@dataclass(frozen=True)
class FormatOptions:
    """Separators and affixes used by `Fraction.to_format`.

    Attributes:
        decimal_separator: placed between integer and fraction part
        group_separator: separates digit groups of the integer part
        group_size: size of the rightmost integer digit group (0: no
            grouping)
        secondary_group_size: size of the other integer digit groups (0:
            same as `group_size`)
        fraction_group_separator: separates digit groups of the fraction
            part
        fraction_group_size: size of the fraction digit groups (0: no
            grouping)
        prefix: string prepended to the result
        suffix: string appended to the result
    """

    decimal_separator: str = '.'
    group_separator: str = ','
    group_size: int = 3
    secondary_group_size: int = 0
    fraction_group_separator: str = '\xa0'
    fraction_group_size: int = 0
    prefix: str = ''
    suffix: str = ''

    def __post_init__(self) -> None:
        check_count('group_size', self.group_size, 0)
        check_count('secondary_group_size', self.secondary_group_size, 0)
        check_count('fraction_group_size', self.fraction_group_size, 0)


DEFAULT_FORMAT = FormatOptions()


@dataclass(frozen=True)
class Config:
    """Defaults for the string conversions of `Fraction`.

    A `rounding` of None means the context's default rounding mode (see
    `get_dflt_rounding_mode`).
    """

    rounding: Optional[RoundingMode] = None
    decimal_places: int = 0
    significant_digits: int = 1
    trailing_zeros: bool = True
    format: FormatOptions = DEFAULT_FORMAT

    def __post_init__(self) -> None:
        if self.rounding is not None and \
                not isinstance(self.rounding, RoundingMode):
            raise InvalidArgument(f"Illegal rounding mode: {self.rounding!r}")
        check_count('decimal_places', self.decimal_places, 0)
        check_count('significant_digits', self.significant_digits, 1)
        if not isinstance(self.format, FormatOptions):
            raise InvalidArgument(
                "'format' must be a FormatOptions instance.")

    def replace(self, **changes) -> Config:
        """Return copy of `self` with the given fields replaced."""
        return dataclasses.replace(self, **changes)

    def rounding_mode(self, rounding: Optional[RoundingMode] = None) \
            -> RoundingMode:
        """Return `rounding`, falling back to configured and context default.
        """
        if rounding is not None:
            return rounding
        if self.rounding is not None:
            return self.rounding
        return get_dflt_rounding_mode()


DEFAULT_CONFIG = Config()
