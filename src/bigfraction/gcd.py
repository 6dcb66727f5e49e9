# -*- coding: utf-8 -*-
# ----------------------------------------------------------------------------
# Copyright:   (c) 2024 ff. bigfraction contributors
# License:     This program is part of a larger application. For license
#              details please read the file LICENSE.TXT provided together
#              with the application.
# ----------------------------------------------------------------------------
# $Source$
# $Revision$

"""Greatest common divisor."""

__all__ = ['gcd']


def gcd(a: int, b: int) -> int:
    """Return the greatest common divisor of `a` and `b`.

    The signs of `a` and `b` are ignored, the result is always >= 0.
    gcd(0, 0) is 0.
    """
    a, b = abs(a), abs(b)
    while b:
        a, b = b, a % b
    return a
