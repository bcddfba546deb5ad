#!/usr/bin/env python3

# Copyright (C) 2017-2022 The ecfp developers
#
# This file is part of ecfp. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of ecfp including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Modular arithmetic functions."""

from ecfp.exceptions import ECFpValueError


def mod_pow(base: int, exp: int, m: int) -> int:
    """Return base^exp (mod m) as least non-negative residue.

    This implementation uses
    'square & multiply' algorithm,
    'right-to-left' binary decomposition of the exponent:
    the exponent is consumed from its least significant bit.
    """

    if exp < 0:
        raise ECFpValueError(f"negative exponent: {exp}")
    if m < 1:
        raise ECFpValueError(f"non positive modulus: {m}")

    if m == 1:
        return 0

    result = 1
    base %= m
    while exp > 0:
        # if least significant bit of exp is 1, then multiply result by base
        if exp & 1:
            result = result * base % m
        # remove the bit just accounted for
        exp >>= 1
        # the squaring part of 'square & multiply'
        base = base * base % m
    return result

