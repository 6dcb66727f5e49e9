# -*- coding: utf-8 -*-
# ----------------------------------------------------------------------------
# Copyright:   (c) 2024 ff. bigfraction contributors
# License:     This program is part of a larger application. For license
#              details please read the file LICENSE.TXT provided together
#              with the application.
# ----------------------------------------------------------------------------
# $Source$
# $Revision$


"""Shared pytest fixtures."""

import decimal

import pytest

from bigfraction import (
    RoundingMode, get_dflt_rounding_mode, set_dflt_rounding_mode)


@pytest.fixture(scope="session",
                params=[rnd.name for rnd in RoundingMode],
                ids=[rnd.name for rnd in RoundingMode])
def rnd(request) -> RoundingMode:
    return RoundingMode[request.param]


# rounding modes known to module decimal
DECIMAL_ROUNDING = {
    RoundingMode.ROUND_UP: decimal.ROUND_UP,
    RoundingMode.ROUND_DOWN: decimal.ROUND_DOWN,
    RoundingMode.ROUND_CEIL: decimal.ROUND_CEILING,
    RoundingMode.ROUND_FLOOR: decimal.ROUND_FLOOR,
    RoundingMode.ROUND_HALF_UP: decimal.ROUND_HALF_UP,
    RoundingMode.ROUND_HALF_DOWN: decimal.ROUND_HALF_DOWN,
    RoundingMode.ROUND_HALF_EVEN: decimal.ROUND_HALF_EVEN,
}


@pytest.fixture(scope="session",
                params=[rnd.name for rnd in DECIMAL_ROUNDING],
                ids=[rnd.name for rnd in DECIMAL_ROUNDING])
def dec_rnd(request):
    """Pair of equivalent rounding modes (bigfraction, decimal)."""
    rnd = RoundingMode[request.param]
    return rnd, DECIMAL_ROUNDING[rnd]


def _dflt_round(rnd):
    prev_rnd = get_dflt_rounding_mode()
    set_dflt_rounding_mode(rnd)
    yield
    set_dflt_rounding_mode(prev_rnd)


@pytest.fixture()
def with_round_half_up():
    yield from _dflt_round(RoundingMode.ROUND_HALF_UP)


@pytest.fixture()
def with_round_half_even():
    yield from _dflt_round(RoundingMode.ROUND_HALF_EVEN)


@pytest.fixture()
def with_round_down():
    yield from _dflt_round(RoundingMode.ROUND_DOWN)


@pytest.fixture()
def restore_dflt_rounding():
    prev_rnd = get_dflt_rounding_mode()
    yield
    set_dflt_rounding_mode(prev_rnd)
