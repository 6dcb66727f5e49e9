# -*- coding: utf-8 -*-
# ----------------------------------------------------------------------------
# Copyright:   (c) 2024 ff. bigfraction contributors
# License:     This program is part of a larger application. For license
#              details please read the file LICENSE.TXT provided together
#              with the application.
# ----------------------------------------------------------------------------
# $Source$
# $Revision$

"""Percentage values."""

from __future__ import annotations

from typing import Any, Optional, Union

from .config import Config, FormatOptions
from .fraction import Fraction, FractionIsh
from .rounding import RoundingMode


__all__ = ['Percent']

PercentIsh = Union['Percent', FractionIsh]


def _unwrap(value: PercentIsh) -> FractionIsh:
    return value.fraction if isinstance(value, Percent) else value


class Percent:
    """Percentage wrapping an exact Fraction.

    The wrapped value is the ratio, i.e. Percent(1, 4) is 25 %. Arithmetic
    delegates to the Fraction and returns Percent instances, the string
    conversions render the value multiplied by 100.

    >>> Percent(1, 4).to_fixed()
    '25.00'
    """

    __slots__ = ('_fraction',)

    def __init__(self, numerator: Optional[PercentIsh] = None,
                 denominator: Optional[FractionIsh] = None) -> None:
        self._fraction = Fraction(_unwrap(numerator), denominator)

    @classmethod
    def from_fraction(cls, fraction: Fraction) -> Percent:
        """Return Percent with ratio `fraction`."""
        return cls(fraction)

    @property
    def fraction(self) -> Fraction:
        """Ratio represented by `self`."""
        return self._fraction

    def add(self, other: PercentIsh) -> Percent:
        """Return `self` + `other`."""
        return Percent(self._fraction.add(_unwrap(other)))

    def sub(self, other: PercentIsh) -> Percent:
        """Return `self` - `other`."""
        return Percent(self._fraction.sub(_unwrap(other)))

    def mul(self, other: PercentIsh) -> Percent:
        """Return `self` * `other`."""
        return Percent(self._fraction.mul(_unwrap(other)))

    def div(self, other: PercentIsh) -> Percent:
        """Return `self` / `other`."""
        return Percent(self._fraction.div(_unwrap(other)))

    def eq(self, other: PercentIsh) -> bool:
        """Return True if `self` == `other`."""
        return self._fraction.eq(_unwrap(other))

    def neq(self, other: PercentIsh) -> bool:
        """Return True if `self` != `other`."""
        return self._fraction.neq(_unwrap(other))

    def lt(self, other: PercentIsh) -> bool:
        """Return True if `self` < `other`."""
        return self._fraction.lt(_unwrap(other))

    def lte(self, other: PercentIsh) -> bool:
        """Return True if `self` <= `other`."""
        return self._fraction.lte(_unwrap(other))

    def gt(self, other: PercentIsh) -> bool:
        """Return True if `self` > `other`."""
        return self._fraction.gt(_unwrap(other))

    def gte(self, other: PercentIsh) -> bool:
        """Return True if `self` >= `other`."""
        return self._fraction.gte(_unwrap(other))

    def to_fixed(self, decimal_places: int = 2,
                 rounding: Optional[RoundingMode] = None,
                 trailing_zeros: Optional[bool] = None,
                 config: Optional[Config] = None) -> str:
        """Return the percentage as fixed-point string (without '%')."""
        return self._fraction.expand_decimals(2).to_fixed(
            decimal_places, rounding, trailing_zeros, config)

    def to_format(self, decimal_places: int = 2,
                  rounding: Optional[RoundingMode] = None,
                  trailing_zeros: Optional[bool] = None,
                  fmt: Optional[FormatOptions] = None,
                  config: Optional[Config] = None) -> str:
        """Return the percentage as formatted string."""
        return self._fraction.expand_decimals(2).to_format(
            decimal_places, rounding, trailing_zeros, fmt, config)

    def __eq__(self, other: Any) -> Any:
        """self == other"""
        if isinstance(other, Percent):
            return self._fraction == other._fraction
        return NotImplemented

    def __hash__(self) -> int:
        """hash(self)"""
        return hash((Percent, self._fraction))

    def __repr__(self) -> str:
        """repr(self)"""
        return f"Percent({self._fraction!r})"

    def __str__(self) -> str:
        """str(self)"""
        return f"{self.to_fixed(trailing_zeros=False)}%"
