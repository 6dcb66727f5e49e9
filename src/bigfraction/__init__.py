# -*- coding: utf-8 -*-
# ----------------------------------------------------------------------------
# Copyright:   (c) 2024 ff. bigfraction contributors
# License:     This program is part of a larger application. For license
#              details please read the file LICENSE.TXT provided together
#              with the application.
# ----------------------------------------------------------------------------
# $Source$
# $Revision$


"""Exact rational number arithmetic with decimal string conversions."""

from .config import DEFAULT_CONFIG, DEFAULT_FORMAT, Config, FormatOptions
from .exceptions import DivisionByZero, InvalidArgument, ParseError
from .fraction import Fraction
from .gcd import gcd
from .parsing import parse
from .percent import Percent
from .rounding import (
    RoundingMode, get_dflt_rounding_mode, set_dflt_rounding_mode)
from .version import version_tuple as __version__  # noqa: F401

# define public namespace
__all__ = [
    'Config',
    'DEFAULT_CONFIG',
    'DEFAULT_FORMAT',
    'DivisionByZero',
    'FormatOptions',
    'Fraction',
    'InvalidArgument',
    'ParseError',
    'Percent',
    'RoundingMode',
    'gcd',
    'get_dflt_rounding_mode',
    'parse',
    'set_dflt_rounding_mode',
]
