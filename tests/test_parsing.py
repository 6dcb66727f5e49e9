# -*- coding: utf-8 -*-
# ----------------------------------------------------------------------------
# Copyright:   (c) 2024 ff. bigfraction contributors
# License:     This program is part of a larger application. For license
#              details please read the file LICENSE.TXT provided together
#              with the application.
# ----------------------------------------------------------------------------
# $Source$
# $Revision$

"""Test driver for package 'bigfraction' (parser)."""

import logging
from decimal import Decimal
from fractions import Fraction as StdFraction

import pytest
from hypothesis import given, strategies

from bigfraction import Fraction, ParseError, parse


@pytest.mark.parametrize(("value", "pair"),
                         (("", (0, 1)),
                          (" \t\n", (0, 1)),
                          ("0", (0, 1)),
                          ("000.000", (0, 1000)),
                          ("5", (5, 1)),
                          (" 5 ", (5, 1)),
                          ("-5", (-5, 1)),
                          ("+5", (5, 1)),
                          ("1.50", (150, 100)),
                          ("-.5", (-5, 10)),
                          ("5.", (5, 1)),
                          ("1e3", (1000, 1)),
                          ("1.01e-7", (101, 10 ** 9)),
                          ("-2.5E+2", (-2500, 10)),
                          ("3.0000000000000005e+21",
                           (30000000000000005 * 10 ** 21, 10 ** 16)),
                          ("0." + "0" * 300 + "1", (1, 10 ** 301))),
                         ids=lambda p: repr(p)[:30])
def test_parse_str(value, pair):
    assert parse(value) == pair


@pytest.mark.parametrize(("value", "pair"),
                         ((17, (17, 1)),
                          (-17, (-17, 1)),
                          (True, (1, 1)),
                          (10 ** 100, (10 ** 100, 1)),
                          (2.0, (2, 1)),
                          (-0.0, (0, 1)),
                          (1e22, (10 ** 22, 1)),
                          (0.1, (1, 10)),
                          (-2.5, (-25, 10)),
                          (Decimal("1.50"), (3, 2)),
                          (Decimal("-4e3"), (-4000, 1)),
                          (StdFraction(-6, 4), (-3, 2)),
                          (Fraction(6, 4), (3, 2))),
                         ids=lambda p: repr(p)[:30])
def test_parse_number(value, pair):
    assert parse(value) == pair


@pytest.mark.parametrize("value",
                         ("1.2.3", "1,5", "1_000", "--1", "+-1", "+", "-",
                          ".", "e5", "1e", "1e+", "abc", "0x1F", "1 2",
                          "½", "∞", "inf", "NaN", "3/4",
                          float('inf'), float('nan'), Decimal('-inf'),
                          Decimal('sNaN')),
                         ids=lambda p: repr(p))
def test_parse_invalid(value):
    with pytest.raises(ParseError):
        parse(value)


@pytest.mark.parametrize("value", (None, 1j, b"1", [1], object()),
                         ids=lambda p: type(p).__name__)
def test_parse_wrong_type(value):
    with pytest.raises(TypeError):
        parse(value)


@given(value=strategies.decimals(allow_nan=False, allow_infinity=False,
                                 min_value=-10 ** 30, max_value=10 ** 30))
def test_parse_decimal_str_hypo(value):
    num, den = parse(str(value))
    assert den > 0
    assert StdFraction(num, den) == StdFraction(value)


@given(value=strategies.floats(allow_nan=False, allow_infinity=False))
def test_parse_float_hypo(value):
    num, den = parse(value)
    assert den > 0
    assert float(StdFraction(num, den)) == value


def test_float_via_repr_logged(caplog):
    with caplog.at_level(logging.DEBUG, logger="bigfraction.parsing"):
        parse(0.1)
    assert "0.1" in caplog.text


def test_float_inexactness():
    # floats are taken at their shortest repr
    assert Fraction(0.1).add(0.2).eq(0.3)
    assert Fraction(0.1 + 0.2).neq(0.3)


def test_parse_beyond_str_digits_limit():
    # more digits than int <-> str conversion allows by default
    assert parse("1" * 5000) == ((10 ** 5000 - 1) // 9, 1)
    assert parse("-" + "9" * 6000) == (1 - 10 ** 6000, 1)
    assert parse("0." + "0" * 5000 + "1") == (1, 10 ** 5001)
    num, den = parse("7" * 4500 + "." + "3" * 4500)
    assert den == 10 ** 4500
    assert num == 7 * (10 ** 4500 - 1) // 9 * 10 ** 4500 + \
        (10 ** 4500 - 1) // 3
    assert parse("1" + "0" * 5000 + "e-5000") == (10 ** 5000, 10 ** 5000)
