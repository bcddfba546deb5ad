#!/usr/bin/env python3

# Copyright (C) 2017-2022 The ecfp developers
#
# This file is part of ecfp. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of ecfp including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Elliptic curve parameters.

A Curve bundles the field prime p, the a and b coefficients,
a generator G and its order n: it is a convenience layer
over FieldElement and Point, which do not need it.

* SEC 2 v.2 secp256k1
  http://www.secg.org/sec2-v2.pdf
* 'ec223', the didactic curve y^2 = x^3 + 7 over F223
"""

from math import isqrt
from typing import Dict, Optional, Tuple

from ecfp.alias import Integer
from ecfp.exceptions import (
    ECFpValueError,
    IncompatibleCurveError,
    PointNotOnCurveError,
)
from ecfp.field_element import FieldElement
from ecfp.point import Point, mult
from ecfp.utils import int_from_integer, int_string


class Curve:
    """Cyclic subgroup of the points of an elliptic curve over Fp.

    The elliptic curve is y^2 = x^3 + a*x + b, with x, y, a, and b in Fp,
    the subgroup is generated by G, a point of order n.
    The cofactor h is the number of points of the curve divided by n.
    """

    def __init__(
        self,
        p: Integer,
        a: Integer,
        b: Integer,
        G: Tuple[Integer, Integer],
        n: Integer,
        h: int = 1,
    ) -> None:
        # Parameters are checked according to SEC 1 v.2 3.1.1.2.1

        p = int_from_integer(p)
        a = int_from_integer(a)
        b = int_from_integer(b)
        n = int_from_integer(n)

        # 1) check that p is a prime
        # Fermat test will do as _probabilistic_ primality test...
        if p < 3 or p % 2 == 0 or pow(2, p - 1, p) != 1:
            raise ECFpValueError(f"p is not prime: {int_string(p)}")
        self.p = p

        # 2. check that a and b are integers in the interval [0, p−1]
        if not 0 <= a < p:
            raise ECFpValueError(f"a not in 0..p-1: {int_string(a)}")
        if not 0 <= b < p:
            raise ECFpValueError(f"b not in 0..p-1: {int_string(b)}")

        # 3. Check that 4*a^3 + 27*b^2 ≠ 0 (mod p)
        if (4 * a * a * a + 27 * b * b) % p == 0:
            raise ECFpValueError("zero discriminant")
        self.a = FieldElement(a, p)
        self.b = FieldElement(b, p)

        # 4. Check that G is on the curve, but not INF
        if len(G) != 2:
            raise ECFpValueError("generator must be a tuple[int, int]")
        try:
            self.G = self.point(*G)
        except PointNotOnCurveError as e:
            raise ECFpValueError("generator is not on the curve") from e

        # 5. Check that n > 1 and nG = INF
        if n < 2:
            raise ECFpValueError(f"invalid order: {n}")
        if not mult(n, self.G).is_infinity():
            raise ECFpValueError(f"n is not the generator order: {int_string(n)}")
        self.n = n

        # 6. Check the cofactor: h*n must satisfy Hasse theorem
        if isinstance(h, bool) or not isinstance(h, int) or h < 1:
            raise ECFpValueError(f"invalid cofactor: {h!r}")
        delta = isqrt(4 * p)
        if not p + 1 - delta <= h * n <= p + 1 + delta:
            err_msg = "h*n not in p+1-delta..p+1+delta: "
            err_msg += f"{int_string(h * n)}"
            raise ECFpValueError(err_msg)
        self.h = h

    def __repr__(self) -> str:
        result = f"Curve({int_string(self.p)}, {int_string(self.a.value)}, "
        result += f"{int_string(self.b.value)}, "
        result += f"({int_string(self.G.x.value)}, {int_string(self.G.y.value)}), "
        result += f"{int_string(self.n)}, {self.h})"
        return result

    def field(self, value: Integer) -> FieldElement:
        "Return the element of the curve field."
        return FieldElement(value, self.p)

    def point(self, x: Integer, y: Integer) -> Point:
        "Return the curve point (x, y)."
        return Point(self.field(x), self.field(y), self.a, self.b)

    @property
    def infinity(self) -> Point:
        return Point.infinity(self.a, self.b)

    def is_on_curve(self, x: Integer, y: Integer) -> bool:
        """Return True if (x, y) is on the curve.

        x and y must be in 0..p-1.
        """
        try:
            self.point(x, y)
        except PointNotOnCurveError:
            return False
        return True

    def mult(self, m: int, Q: Optional[Point] = None) -> Point:
        """Point multiplication, with m reduced mod n.

        The generator is used if Q is not provided.
        """

        Q = self.G if Q is None else Q
        if not self.G.same_curve(Q):
            raise IncompatibleCurveError("point not on this curve")
        return mult(m % self.n, Q)


_CURVES_PARAMS = {
    "secp256k1": (
        "0xfffffffffffffffffffffffffffffffffffffffffffffffffffffffefffffc2f",
        0,
        7,
        (
            "0x79be667ef9dcbbac55a06295ce870b07029bfcdb2dce28d959f2815b16f81798",
            "0x483ada7726a3c4655da4fbfc0e1108a8fd17b448a68554199c47d08ffb10d4b8",
        ),
        "0xfffffffffffffffffffffffffffffffebaaedce6af48a03bbfd25e8cd0364141",
        1,
    ),
    "ec223": (223, 0, 7, (47, 71), 21, 12),
}

CURVES: Dict[str, Curve] = {
    ec_name: Curve(*params) for ec_name, params in _CURVES_PARAMS.items()
}

secp256k1 = CURVES["secp256k1"]
