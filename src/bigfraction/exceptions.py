# -*- coding: utf-8 -*-
# ----------------------------------------------------------------------------
# Copyright:   (c) 2024 ff. bigfraction contributors
# License:     This program is part of a larger application. For license
#              details please read the file LICENSE.TXT provided together
#              with the application.
# ----------------------------------------------------------------------------
# $Source$
# $Revision$

"""Exceptions raised by package 'bigfraction'."""

__all__ = ['ParseError', 'DivisionByZero', 'InvalidArgument']


class ParseError(ValueError):
    """Value is not a valid numeric literal."""


class DivisionByZero(ZeroDivisionError):
    """Zero denominator, inversion of zero or division by zero."""


class InvalidArgument(ValueError):
    """Argument out of its valid range (decimal places, digits, ...)."""
