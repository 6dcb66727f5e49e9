# -*- coding: utf-8 -*-
# ----------------------------------------------------------------------------
# Copyright:   (c) 2024 ff. bigfraction contributors
# License:     This program is part of a larger application. For license
#              details please read the file LICENSE.TXT provided together
#              with the application.
# ----------------------------------------------------------------------------
# $Source$
# $Revision$

"""Test driver for package 'bigfraction' (rounding modes)."""

import asyncio
import threading

import pytest

from bigfraction import (
    RoundingMode, get_dflt_rounding_mode, set_dflt_rounding_mode)
from bigfraction.rounding import resolve


R = RoundingMode


def test_members():
    assert [rnd.value for rnd in RoundingMode] == list(range(9))
    assert RoundingMode(6) is R.ROUND_HALF_EVEN
    assert R.ROUND_CEIL.__doc__ == 'Round towards Infinity.'


def test_initial_dflt():
    assert get_dflt_rounding_mode() is R.ROUND_HALF_UP


def test_set_dflt(rnd, restore_dflt_rounding):
    set_dflt_rounding_mode(rnd)
    assert get_dflt_rounding_mode() is rnd


def test_reset_dflt_by_token(restore_dflt_rounding):
    prev = get_dflt_rounding_mode()
    token = set_dflt_rounding_mode(R.ROUND_FLOOR)
    assert get_dflt_rounding_mode() is R.ROUND_FLOOR
    token.var.reset(token)
    assert get_dflt_rounding_mode() is prev


@pytest.mark.parametrize("rnd", ["ROUND_UP", 4, None],
                         ids=("str", "int", "None"))
def test_set_dflt_wrong_type(rnd):
    with pytest.raises(TypeError):
        # noinspection PyTypeChecker
        set_dflt_rounding_mode(rnd)


def test_dflt_is_thread_local(with_round_down):
    seen = []

    def set_and_get():
        set_dflt_rounding_mode(R.ROUND_UP)
        seen.append(get_dflt_rounding_mode())

    thread = threading.Thread(target=set_and_get)
    thread.start()
    thread.join()
    assert seen == [R.ROUND_UP]
    assert get_dflt_rounding_mode() is R.ROUND_DOWN


def test_dflt_is_task_local():

    async def set_and_get(rnd):
        set_dflt_rounding_mode(rnd)
        await asyncio.sleep(0)
        return get_dflt_rounding_mode()

    async def main():
        return await asyncio.gather(set_and_get(R.ROUND_UP),
                                    set_and_get(R.ROUND_FLOOR))

    prev = get_dflt_rounding_mode()
    assert asyncio.run(main()) == [R.ROUND_UP, R.ROUND_FLOOR]
    assert get_dflt_rounding_mode() is prev


# columns: next_digit, has_more, is_positive, last digit odd, increments
#     UP, DOWN, CEIL, FLOOR, HALF_UP, HALF_DOWN, HALF_EVEN, HALF_CEIL,
#     HALF_FLOOR
RESOLVE_TABLE = (
    (1, False, True, False, (1, 0, 1, 0, 0, 0, 0, 0, 0)),
    (1, False, False, False, (1, 0, 0, 1, 0, 0, 0, 0, 0)),
    (4, True, True, True, (1, 0, 1, 0, 0, 0, 0, 0, 0)),
    (5, False, True, False, (1, 0, 1, 0, 1, 0, 0, 1, 0)),
    (5, False, True, True, (1, 0, 1, 0, 1, 0, 1, 1, 0)),
    (5, False, False, False, (1, 0, 0, 1, 1, 0, 0, 0, 1)),
    (5, False, False, True, (1, 0, 0, 1, 1, 0, 1, 0, 1)),
    (5, True, True, False, (1, 0, 1, 0, 1, 1, 1, 1, 1)),
    (5, True, False, False, (1, 0, 0, 1, 1, 1, 1, 1, 1)),
    (6, False, True, False, (1, 0, 1, 0, 1, 1, 1, 1, 1)),
    (9, True, False, True, (1, 0, 0, 1, 1, 1, 1, 1, 1)),
)


@pytest.mark.parametrize(("next_digit", "has_more", "is_positive", "odd",
                          "incs"),
                         RESOLVE_TABLE,
                         ids=lambda p: str(p))
def test_resolve_table(next_digit, has_more, is_positive, odd, incs):
    decimal_part = 13 if odd else 12
    for rnd, inc in zip(RoundingMode, incs):
        carry, digits = resolve(rnd, next_digit=next_digit,
                                decimal_part=decimal_part, integer_part=7,
                                is_positive=is_positive, decimal_places=2,
                                has_more=has_more)
        assert carry == 0
        assert digits == str(decimal_part + inc), rnd


@pytest.mark.parametrize(("integer_part", "incs"),
                         ((2, 0), (3, 1)),
                         ids=("even", "odd"))
def test_resolve_half_even_integer_part(integer_part, incs):
    carry, digits = resolve(R.ROUND_HALF_EVEN, next_digit=5,
                            decimal_part=0, integer_part=integer_part,
                            is_positive=True, decimal_places=0)
    assert (carry, digits) == (incs, '')


@pytest.mark.parametrize(("decimal_part", "places", "result"),
                         ((99, 2, (1, "00")),
                          (999999, 6, (1, "000000")),
                          (9, 2, (0, "10")),
                          (0, 3, (0, "001")),
                          (41, 4, (0, "0042")),
                          (0, 0, (1, ""))),
                         ids=lambda p: str(p))
def test_resolve_carry(decimal_part, places, result):
    assert resolve(R.ROUND_UP, next_digit=1, decimal_part=decimal_part,
                   integer_part=0, is_positive=True,
                   decimal_places=places) == result


def test_resolve_no_increment_pads():
    assert resolve(R.ROUND_DOWN, next_digit=9, decimal_part=7,
                   integer_part=0, is_positive=True,
                   decimal_places=3) == (0, "007")


@pytest.mark.parametrize("rnd", ["ROUND_UP", 0, None],
                         ids=("str", "int", "None"))
def test_resolve_invalid_mode(rnd):
    with pytest.raises(TypeError):
        # noinspection PyTypeChecker
        resolve(rnd, next_digit=5, decimal_part=0, integer_part=0,
                is_positive=True, decimal_places=0)
