# -*- coding: utf-8 -*-
# ----------------------------------------------------------------------------
# Copyright:   (c) 2024 ff. bigfraction contributors
# License:     This program is part of a larger application. For license
#              details please read the file LICENSE.TXT provided together
#              with the application.
# ----------------------------------------------------------------------------
# $Source$
# $Revision$

"""Exact rational numbers with decimal string conversions."""

from __future__ import annotations

import fractions
import logging
import math
import operator
import sys
from decimal import Decimal
from numbers import Rational
from typing import Any, Callable, Dict, Optional, Tuple, Union

from .config import DEFAULT_CONFIG, Config, FormatOptions
from .digits import int_to_str, num_digits
from .exceptions import DivisionByZero, InvalidArgument, ParseError
from .gcd import gcd
from .parsing import NumberIsh, parse
from .rendering import (
    add_separators, recurring_decimal, to_exponential, to_fixed,
    to_precision)
from .rounding import RoundingMode, resolve


__all__ = ['Fraction', 'FractionIsh']

logger = logging.getLogger(__name__)

FractionIsh = Union['Fraction', NumberIsh]

_HASH_MODULUS = sys.hash_info.modulus
_HASH_INF = sys.hash_info.inf

# types taking part in arithmetic and comparison operators
_NUMBER_TYPES = (int, float, Decimal, Rational)


def _check_shift(n: int) -> None:
    if not isinstance(n, int) or isinstance(n, bool) or n < 0:
        raise InvalidArgument("Shift count must be a >= 0 integer.")


class Fraction:
    """Exact rational number.

    Args:
        numerator: value of the numerator (default: 0)
        denominator: value of the denominator (default: 1)

    Both arguments may be given as int, decimal string, float, Decimal or
    Rational (including Fraction). The result is reduced, its denominator is
    positive.

    Raises:
        ParseError: an argument is not a valid numeric literal
        DivisionByZero: the denominator is zero
        TypeError: an argument has an unsupported type

    >>> Fraction('0.1').add('0.2') == Fraction(3, 10)
    True
    >>> Fraction(3, -9)
    Fraction(-1, 3)
    """

    __slots__ = ('_numerator', '_denominator')

    _numerator: int
    _denominator: int

    def __new__(cls, numerator: Optional[FractionIsh] = None,
                denominator: Optional[FractionIsh] = None) -> Fraction:
        if denominator is None:
            if type(numerator) is cls:
                return numerator
            if numerator is None:
                return cls._from_reduced(0, 1)
            if isinstance(numerator, int):
                return cls._from_reduced(int(numerator), 1)
            num, den = parse(numerator)
        else:
            n1, d1 = parse(0 if numerator is None else numerator)
            n2, d2 = parse(denominator)
            num, den = n1 * d2, d1 * n2
        return cls._normalized(num, den)

    @classmethod
    def _from_reduced(cls, numerator: int, denominator: int) -> Fraction:
        obj = object.__new__(cls)
        obj._numerator = numerator
        obj._denominator = denominator
        return obj

    @classmethod
    def _normalized(cls, numerator: int, denominator: int) -> Fraction:
        if denominator == 0:
            raise DivisionByZero("Division by zero.")
        if numerator == 0:
            return cls._from_reduced(0, 1)
        if denominator < 0:
            numerator, denominator = -numerator, -denominator
        if denominator != 1:
            divisor = gcd(numerator, denominator)
            if divisor != 1:
                numerator //= divisor
                denominator //= divisor
        return cls._from_reduced(numerator, denominator)

    @classmethod
    def try_parse(cls, value: FractionIsh) -> Optional[Fraction]:
        """Return `value` converted to a Fraction or None if not possible.

        >>> Fraction.try_parse('1.23') == Fraction(123, 100)
        True
        >>> Fraction.try_parse('abc') is None
        True
        """
        try:
            return cls(value)
        except (ParseError, TypeError) as exc:
            logger.debug("try_parse(%r) failed: %s", value, exc)
            return None

    @classmethod
    def from_json(cls, record: Dict[str, str]) -> Fraction:
        """Create Fraction from a record as returned by `to_json`."""
        try:
            numerator = record['numerator']
            denominator = record['denominator']
        except (KeyError, TypeError) as exc:
            raise ParseError(f"Not a Fraction record: {record!r}") from exc
        return cls(numerator, denominator)

    def to_json(self) -> Dict[str, str]:
        """Return numerator and denominator as strings, for JSON transport.
        """
        return {
            'numerator': int_to_str(self._numerator),
            'denominator': int_to_str(self._denominator),
        }

    # properties

    @property
    def numerator(self) -> int:
        """Numerator of `self` (carrying the sign)."""
        return self._numerator

    @property
    def denominator(self) -> int:
        """Denominator of `self` (always > 0)."""
        return self._denominator

    @property
    def real(self) -> Fraction:
        """Real part of `self`."""
        return self

    @property
    def imag(self) -> int:
        """Imaginary part of `self`."""
        return 0

    @property
    def quotient(self) -> int:
        """Integer part of `self`, i.e. `self` truncated towards zero."""
        quot = abs(self._numerator) // self._denominator
        return quot if self._numerator >= 0 else -quot

    @property
    def remainder(self) -> Fraction:
        """`self` minus its integer part (having the sign of `self`)."""
        rem = self._numerator - self.quotient * self._denominator
        return Fraction._normalized(rem, self._denominator)

    @property
    def magnitude(self) -> int:
        """Return magnitude of `self` in terms of power to 10.

        I.e. the largest integer exp so that 10 ** exp <= abs(self).

        Raises:
            OverflowError: `self` is zero
        """
        num, den = abs(self._numerator), self._denominator
        if num == 0:
            raise OverflowError("Result would be '-Infinity'.")
        exp = num_digits(num) - num_digits(den)
        if exp >= 0:
            too_big = num < den * 10 ** exp
        else:
            too_big = num * 10 ** -exp < den
        return exp - 1 if too_big else exp

    # predicates

    def is_zero(self) -> bool:
        """Return True if `self` is zero."""
        return self._numerator == 0

    def is_integer(self) -> bool:
        """Return True if `self` has no fractional part."""
        return self._denominator == 1

    # conversions

    def as_integer_ratio(self) -> Tuple[int, int]:
        """Return the pair of numerator and denominator of `self`."""
        return self._numerator, self._denominator

    def as_fraction(self) -> fractions.Fraction:
        """Return `self` as `fractions.Fraction`."""
        return fractions.Fraction(self._numerator, self._denominator)

    def recurring_decimal(self) -> Optional[str]:
        """Return repeating digits of the decimal expansion of `self`.

        None if the expansion terminates.

        >>> Fraction(1, 7).recurring_decimal()
        '142857'
        """
        return recurring_decimal(self._numerator, self._denominator)

    # unary operations

    def invert(self) -> Fraction:
        """Return 1 / `self`.

        Raises:
            DivisionByZero: `self` is zero
        """
        if self._numerator == 0:
            raise DivisionByZero("Can't invert zero.")
        return Fraction._normalized(self._denominator, self._numerator)

    def negate(self) -> Fraction:
        """Return -`self`."""
        return Fraction._from_reduced(-self._numerator, self._denominator)

    def abs(self) -> Fraction:
        """Return the absolute value of `self`."""
        if self._numerator >= 0:
            return self
        return Fraction._from_reduced(-self._numerator, self._denominator)

    # comparison

    def _cmp(self, other: FractionIsh, op: Callable[[int, int], bool]) \
            -> bool:
        other = Fraction(other)
        return op(self._numerator * other._denominator,
                  other._numerator * self._denominator)

    def eq(self, other: FractionIsh) -> bool:
        """Return True if `self` == `other`."""
        return self._cmp(other, operator.eq)

    def neq(self, other: FractionIsh) -> bool:
        """Return True if `self` != `other`."""
        return not self._cmp(other, operator.eq)

    def lt(self, other: FractionIsh) -> bool:
        """Return True if `self` < `other`."""
        return self._cmp(other, operator.lt)

    def lte(self, other: FractionIsh) -> bool:
        """Return True if `self` <= `other`."""
        return self._cmp(other, operator.le)

    def gt(self, other: FractionIsh) -> bool:
        """Return True if `self` > `other`."""
        return self._cmp(other, operator.gt)

    def gte(self, other: FractionIsh) -> bool:
        """Return True if `self` >= `other`."""
        return self._cmp(other, operator.ge)

    # arithmetic

    def add(self, other: FractionIsh) -> Fraction:
        """Return `self` + `other`."""
        other = Fraction(other)
        if self._denominator == other._denominator:
            return Fraction._normalized(self._numerator + other._numerator,
                                        self._denominator)
        return Fraction._normalized(
            self._numerator * other._denominator +
            other._numerator * self._denominator,
            self._denominator * other._denominator)

    def sub(self, other: FractionIsh) -> Fraction:
        """Return `self` - `other`."""
        other = Fraction(other)
        if self._denominator == other._denominator:
            return Fraction._normalized(self._numerator - other._numerator,
                                        self._denominator)
        return Fraction._normalized(
            self._numerator * other._denominator -
            other._numerator * self._denominator,
            self._denominator * other._denominator)

    def mul(self, other: FractionIsh) -> Fraction:
        """Return `self` * `other`."""
        other = Fraction(other)
        return Fraction._normalized(self._numerator * other._numerator,
                                    self._denominator * other._denominator)

    def div(self, other: FractionIsh) -> Fraction:
        """Return `self` / `other`.

        Raises:
            DivisionByZero: `other` is zero
        """
        other = Fraction(other)
        return Fraction._normalized(self._numerator * other._denominator,
                                    other._numerator * self._denominator)

    def expand_decimals(self, decimals: int) -> Fraction:
        """Return `self` * 10 ** `decimals`.

        Raises:
            InvalidArgument: `decimals` is not a >= 0 integer

        >>> Fraction('123').expand_decimals(18) == 123 * 10 ** 18
        True
        """
        _check_shift(decimals)
        return self.mul(10 ** decimals)

    def normalize_decimals(self, decimals: int) -> Fraction:
        """Return `self` / 10 ** `decimals`.

        Raises:
            InvalidArgument: `decimals` is not a >= 0 integer
        """
        _check_shift(decimals)
        return self.div(10 ** decimals)

    shl = expand_decimals
    shr = normalize_decimals

    # rounding

    def _round_to_int(self, rounding: RoundingMode) -> int:
        num = abs(self._numerator)
        quot, rem = divmod(num, self._denominator)
        if rem:
            next_digit, rest = divmod(rem * 10, self._denominator)
            carry, _ = resolve(rounding,
                               next_digit=next_digit,
                               decimal_part=0,
                               integer_part=quot,
                               is_positive=self._numerator > 0,
                               decimal_places=0,
                               has_more=rest != 0)
            quot += carry
        return quot if self._numerator >= 0 else -quot

    def adjusted(self, precision: int = 0,
                 rounding: Optional[RoundingMode] = None) -> Fraction:
        """Return copy of `self` rounded to `precision` decimal places.

        A negative `precision` rounds to tens, hundreds, ... `rounding`
        defaults to the context's default rounding mode.

        Raises:
            TypeError: `precision` is not an int
        """
        if not isinstance(precision, int) or isinstance(precision, bool):
            raise TypeError("Precision must be of type 'int'.")
        rounding = DEFAULT_CONFIG.rounding_mode(rounding)
        if precision >= 0:
            factor = 10 ** precision
            scaled = Fraction._normalized(self._numerator * factor,
                                          self._denominator)
            return Fraction._normalized(scaled._round_to_int(rounding),
                                        factor)
        factor = 10 ** -precision
        scaled = Fraction._normalized(self._numerator,
                                      self._denominator * factor)
        return Fraction._from_reduced(scaled._round_to_int(rounding) * factor,
                                      1)

    # string conversions

    def to_fixed(self, decimal_places: Optional[int] = None,
                 rounding: Optional[RoundingMode] = None,
                 trailing_zeros: Optional[bool] = None,
                 config: Optional[Config] = None) -> str:
        """Return fixed-point string representation of `self`.

        Args:
            decimal_places (int): number of decimal digits (default taken
                from `config`)
            rounding (RoundingMode): rounding mode (default taken from
                `config`, then from the context)
            trailing_zeros (bool): whether to keep trailing zeros
            config (Config): defaults for omitted arguments (default:
                DEFAULT_CONFIG)

        Raises:
            InvalidArgument: `decimal_places` is not a >= 0 integer

        >>> Fraction('123.567').to_fixed(2)
        '123.57'
        >>> Fraction('123.567').to_fixed(5, trailing_zeros=False)
        '123.567'
        """
        config = config or DEFAULT_CONFIG
        if decimal_places is None:
            decimal_places = config.decimal_places
        if trailing_zeros is None:
            trailing_zeros = config.trailing_zeros
        return to_fixed(self._numerator, self._denominator, decimal_places,
                        config.rounding_mode(rounding), trailing_zeros)

    def to_precision(self, significant_digits: Optional[int] = None,
                     rounding: Optional[RoundingMode] = None,
                     config: Optional[Config] = None) -> str:
        """Return string representation of `self` with `significant_digits`
        significant digits.

        Raises:
            InvalidArgument: `significant_digits` is not a >= 1 integer

        >>> Fraction('1234.567').to_precision(2)
        '1200'
        >>> Fraction('1234.567').to_precision(6)
        '1234.57'
        """
        config = config or DEFAULT_CONFIG
        if significant_digits is None:
            significant_digits = config.significant_digits
        return to_precision(self._numerator, self._denominator,
                            significant_digits,
                            config.rounding_mode(rounding))

    to_significant = to_precision

    def to_exponential(self, decimal_places: Optional[int] = None,
                       rounding: Optional[RoundingMode] = None,
                       trailing_zeros: Optional[bool] = None,
                       config: Optional[Config] = None) -> str:
        """Return exponential string representation of `self`.

        Raises:
            InvalidArgument: `decimal_places` is not a >= 0 integer

        >>> Fraction('0.0000001234').to_exponential(4)
        '1.2340e-7'
        >>> Fraction(10 ** 100).to_exponential(2)
        '1.00e+100'
        """
        config = config or DEFAULT_CONFIG
        if decimal_places is None:
            decimal_places = config.decimal_places
        if trailing_zeros is None:
            trailing_zeros = config.trailing_zeros
        return to_exponential(self._numerator, self._denominator,
                              decimal_places, config.rounding_mode(rounding),
                              trailing_zeros)

    def to_format(self, decimal_places: Optional[int] = None,
                  rounding: Optional[RoundingMode] = None,
                  trailing_zeros: Optional[bool] = None,
                  fmt: Optional[FormatOptions] = None,
                  config: Optional[Config] = None) -> str:
        """Return fixed-point representation of `self` with separators.

        >>> Fraction('123456789.12345').to_format(1)
        '123,456,789.1'
        """
        config = config or DEFAULT_CONFIG
        text = self.to_fixed(decimal_places, rounding, trailing_zeros,
                             config)
        return add_separators(text, fmt or config.format)

    def __str__(self) -> str:
        """str(self)"""
        num, den = self._numerator, self._denominator
        if den == 1:
            return int_to_str(num)
        twos = fives = 0
        while den % 2 == 0:
            den //= 2
            twos += 1
        while den % 5 == 0:
            den //= 5
            fives += 1
        if den != 1:
            return f"{int_to_str(num)}/{int_to_str(self._denominator)}"
        return to_fixed(num, self._denominator, max(twos, fives),
                        RoundingMode.ROUND_DOWN)

    def __repr__(self) -> str:
        """repr(self)"""
        cls_name = self.__class__.__name__
        num = int_to_str(self._numerator)
        if self._denominator == 1:
            return f"{cls_name}({num})"
        text = str(self)
        if '/' in text:
            return f"{cls_name}({num}, {int_to_str(self._denominator)})"
        return f"{cls_name}('{text}')"

    # Python number protocol

    def __copy__(self) -> Fraction:
        return self

    def __deepcopy__(self, memo: Any) -> Fraction:
        return self

    def __reduce__(self) -> Tuple[Any, ...]:
        return self.__class__, (self._numerator, self._denominator)

    def __hash__(self) -> int:
        """hash(self)"""
        try:
            dinv = pow(self._denominator, -1, _HASH_MODULUS)
        except ValueError:
            hash_ = _HASH_INF
        else:
            hash_ = hash(hash(abs(self._numerator)) * dinv)
        result = hash_ if self._numerator >= 0 else -hash_
        return -2 if result == -1 else result

    def __bool__(self) -> bool:
        """bool(self)"""
        return self._numerator != 0

    def __int__(self) -> int:
        """int(self)"""
        return self.quotient

    __trunc__ = __int__

    def __floor__(self) -> int:
        """math.floor(self)"""
        return self._numerator // self._denominator

    def __ceil__(self) -> int:
        """math.ceil(self)"""
        return -(-self._numerator // self._denominator)

    def __float__(self) -> float:
        """float(self)"""
        return self._numerator / self._denominator

    def __round__(self, ndigits: Optional[int] = None) \
            -> Union[int, Fraction]:
        """round(self [, ndigits])

        Rounds half to even, like the builtin `round`.
        """
        if ndigits is None:
            return self._round_to_int(RoundingMode.ROUND_HALF_EVEN)
        return self.adjusted(ndigits, RoundingMode.ROUND_HALF_EVEN)

    def __pos__(self) -> Fraction:
        """+self"""
        return self

    def __neg__(self) -> Fraction:
        """-self"""
        return self.negate()

    def __abs__(self) -> Fraction:
        """abs(self)"""
        return self.abs()

    def conjugate(self) -> Fraction:
        """Complex conjugate of `self`, i.e. `self`."""
        return self

    def _compare(self, other: Any, op: Callable[[Any, Any], bool]) -> Any:
        # floats compare by their exact binary value
        if isinstance(other, float):
            if math.isnan(other):
                return op is operator.ne
            if math.isinf(other):
                return op(0, other)
            num, den = other.as_integer_ratio()
            return op(self._numerator * den, num * self._denominator)
        if isinstance(other, Decimal):
            if other.is_nan():
                return op is operator.ne
            if other.is_infinite():
                return op(0, float(other))
            return self._cmp(other, op)
        if isinstance(other, (int, Rational)):
            return self._cmp(other, op)
        return NotImplemented

    def __eq__(self, other: Any) -> Any:
        """self == other"""
        return self._compare(other, operator.eq)

    def __ne__(self, other: Any) -> Any:
        """self != other"""
        return self._compare(other, operator.ne)

    def __lt__(self, other: Any) -> Any:
        """self < other"""
        return self._compare(other, operator.lt)

    def __le__(self, other: Any) -> Any:
        """self <= other"""
        return self._compare(other, operator.le)

    def __gt__(self, other: Any) -> Any:
        """self > other"""
        return self._compare(other, operator.gt)

    def __ge__(self, other: Any) -> Any:
        """self >= other"""
        return self._compare(other, operator.ge)

    def __add__(self, other: Any) -> Any:
        """self + other"""
        if isinstance(other, _NUMBER_TYPES):
            return self.add(other)
        return NotImplemented

    def __radd__(self, other: Any) -> Any:
        """other + self"""
        if isinstance(other, _NUMBER_TYPES):
            return Fraction(other).add(self)
        return NotImplemented

    def __sub__(self, other: Any) -> Any:
        """self - other"""
        if isinstance(other, _NUMBER_TYPES):
            return self.sub(other)
        return NotImplemented

    def __rsub__(self, other: Any) -> Any:
        """other - self"""
        if isinstance(other, _NUMBER_TYPES):
            return Fraction(other).sub(self)
        return NotImplemented

    def __mul__(self, other: Any) -> Any:
        """self * other"""
        if isinstance(other, _NUMBER_TYPES):
            return self.mul(other)
        return NotImplemented

    def __rmul__(self, other: Any) -> Any:
        """other * self"""
        if isinstance(other, _NUMBER_TYPES):
            return Fraction(other).mul(self)
        return NotImplemented

    def __truediv__(self, other: Any) -> Any:
        """self / other"""
        if isinstance(other, _NUMBER_TYPES):
            return self.div(other)
        return NotImplemented

    def __rtruediv__(self, other: Any) -> Any:
        """other / self"""
        if isinstance(other, _NUMBER_TYPES):
            return Fraction(other).div(self)
        return NotImplemented

    def _divmod(self, other: Fraction) -> Tuple[int, Fraction]:
        quot = math.floor(self.div(other))
        return quot, self.sub(other.mul(quot))

    def __floordiv__(self, other: Any) -> Any:
        """self // other"""
        if isinstance(other, _NUMBER_TYPES):
            return self._divmod(Fraction(other))[0]
        return NotImplemented

    def __rfloordiv__(self, other: Any) -> Any:
        """other // self"""
        if isinstance(other, _NUMBER_TYPES):
            return Fraction(other)._divmod(self)[0]
        return NotImplemented

    def __mod__(self, other: Any) -> Any:
        """self % other"""
        if isinstance(other, _NUMBER_TYPES):
            return self._divmod(Fraction(other))[1]
        return NotImplemented

    def __rmod__(self, other: Any) -> Any:
        """other % self"""
        if isinstance(other, _NUMBER_TYPES):
            return Fraction(other)._divmod(self)[1]
        return NotImplemented

    def __divmod__(self, other: Any) -> Any:
        """divmod(self, other)"""
        if isinstance(other, _NUMBER_TYPES):
            return self._divmod(Fraction(other))
        return NotImplemented

    def __rdivmod__(self, other: Any) -> Any:
        """divmod(other, self)"""
        if isinstance(other, _NUMBER_TYPES):
            return Fraction(other)._divmod(self)
        return NotImplemented

    def __pow__(self, other: Any) -> Any:
        """self ** other

        An integral exponent gives an exact result, any other exponent
        gives a float.

        Raises:
            DivisionByZero: `self` is zero and `other` is negative
        """
        if isinstance(other, (int, Rational)) and other.denominator == 1:
            exp = int(other.numerator)
            num, den = self._numerator, self._denominator
            if exp >= 0:
                return Fraction._from_reduced(num ** exp, den ** exp)
            return Fraction._normalized(den ** -exp, num ** -exp)
        if isinstance(other, _NUMBER_TYPES):
            return float(self) ** float(other)
        return NotImplemented

    def __rpow__(self, other: Any) -> Any:
        """other ** self"""
        if isinstance(other, _NUMBER_TYPES):
            if self._denominator == 1:
                return Fraction(other) ** self._numerator
            return float(other) ** float(self)
        return NotImplemented


Fraction.ZERO = Fraction(0)
Fraction.ONE = Fraction(1)

# noinspection PyUnresolvedReferences
Rational.register(Fraction)
