#!/usr/bin/env python3

# Copyright (C) 2017-2022 The ecfp developers
#
# This file is part of ecfp. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of ecfp including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Elliptic curve Point class and functions.

The elliptic curve is the set of points (x, y)
that are solutions to a Weierstrass equation y^2 = x^3 + a*x + b,
with x, y, a, and b in Fp (p being a prime),
together with a point at infinity, the identity of the group
defined by the point addition group law.

All the arithmetic is performed with FieldElement operations.
"""

from typing import Union

from ecfp.alias import INF, Coordinate, Integer
from ecfp.exceptions import (
    ECFpTypeError,
    IncompatibleCurveError,
    IncompatibleFieldError,
    InvalidCoordinateError,
    PointNotOnCurveError,
)
from ecfp.field_element import FieldElement
from ecfp.utils import int_from_integer, int_string


def _coordinate(c: Union[Coordinate, Integer], a: FieldElement) -> Coordinate:
    "Return the coordinate as element of the curve field (or INF)."

    if c is INF:
        return INF
    if isinstance(c, FieldElement):
        if c.modulus != a.modulus:
            err_msg = "coordinate not in the curve field: "
            err_msg += f"{int_string(c.modulus)} vs {int_string(a.modulus)}"
            raise IncompatibleFieldError(err_msg)
        return c
    return FieldElement(int_from_integer(c), a.modulus)


class Point:
    """Point of an elliptic curve over Fp, possibly the point at infinity.

    The curve is identified by its a and b coefficients,
    field elements with the same modulus.
    The point at infinity has both coordinates equal to INF (None).
    Coordinates can be provided as FieldElement or Integer,
    the latter being converted to elements of the curve field.
    """

    __slots__ = ("_x", "_y", "_a", "_b")

    def __init__(
        self,
        x: Union[Coordinate, Integer],
        y: Union[Coordinate, Integer],
        a: FieldElement,
        b: FieldElement,
    ) -> None:

        if not isinstance(a, FieldElement) or not isinstance(b, FieldElement):
            raise ECFpTypeError("curve coefficients must be FieldElement")
        if a.modulus != b.modulus:
            err_msg = "curve coefficients in different fields: "
            err_msg += f"{int_string(a.modulus)} vs {int_string(b.modulus)}"
            raise IncompatibleFieldError(err_msg)

        if (x is INF) != (y is INF):
            raise InvalidCoordinateError("only one infinite coordinate")

        self._a = a
        self._b = b
        self._x = _coordinate(x, a)
        self._y = _coordinate(y, a)

        if self._x is not INF and not self._is_on_curve(self._x, self._y):
            err_msg = f"point not on curve: ({int_string(self._x.value)}, "
            err_msg += f"{int_string(self._y.value)})"
            raise PointNotOnCurveError(err_msg)

    @classmethod
    def infinity(cls, a: FieldElement, b: FieldElement) -> "Point":
        "Return the point at infinity of the a, b curve."
        return cls(INF, INF, a, b)

    def _is_on_curve(self, x: FieldElement, y: FieldElement) -> bool:
        return y * y == (x * x + self._a) * x + self._b

    @property
    def x(self) -> Coordinate:
        return self._x

    @property
    def y(self) -> Coordinate:
        return self._y

    @property
    def a(self) -> FieldElement:
        return self._a

    @property
    def b(self) -> FieldElement:
        return self._b

    def is_infinity(self) -> bool:
        return self._x is INF

    def __repr__(self) -> str:
        if self._x is INF:
            return f"Point(INF, INF, {self._a!r}, {self._b!r})"
        return f"Point({self._x!r}, {self._y!r}, {self._a!r}, {self._b!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Point):
            return NotImplemented
        return (
            self._x == other._x
            and self._y == other._y
            and self._a == other._a
            and self._b == other._b
        )

    def __hash__(self) -> int:
        return hash((self._x, self._y, self._a, self._b))

    def same_curve(self, other: "Point") -> bool:
        return self._a == other._a and self._b == other._b

    def _require_same_curve(self, other: "Point") -> None:
        if not self.same_curve(other):
            raise IncompatibleCurveError("points on different curves")

    def negate(self) -> "Point":
        "Return the opposite point."
        if self._x is INF:
            return self
        return Point(self._x, -self._y, self._a, self._b)

    def double(self) -> "Point":
        "Return the point added to itself."

        # vertical tangent
        if self._x is INF or self._y.is_zero():
            return Point.infinity(self._a, self._b)

        x, y = self._x, self._y
        lam = (3 * x * x + self._a) / (2 * y)
        x3 = lam * lam - 2 * x
        y3 = lam * (x - x3) - y
        return Point(x3, y3, self._a, self._b)

    def add(self, other: "Point") -> "Point":
        "Return the sum of two points on the same curve."

        self._require_same_curve(other)

        if self._x is INF:
            return other
        if other._x is INF:
            return self

        x1, y1 = self._x, self._y
        x2, y2 = other._x, other._y
        if x1 == x2:
            if y1 == y2:  # point doubling
                return self.double()
            # opposite points
            return Point.infinity(self._a, self._b)

        lam = (y2 - y1) / (x2 - x1)
        x3 = lam * lam - x1 - x2
        y3 = lam * (x1 - x3) - y1
        return Point(x3, y3, self._a, self._b)

    def __add__(self, other: "Point") -> "Point":
        if not isinstance(other, Point):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other: "Point") -> "Point":
        if not isinstance(other, Point):
            return NotImplemented
        return self.add(other.negate())

    def __neg__(self) -> "Point":
        return self.negate()

    def __mul__(self, m: int) -> "Point":
        if not isinstance(m, int):
            return NotImplemented
        return mult(m, self)

    __rmul__ = __mul__


def mult(m: int, Q: Point) -> Point:
    """Scalar multiplication of a curve point.

    This implementation uses
    'double & add' algorithm,
    'right-to-left' binary decomposition of the m coefficient.

    The m coefficient is not reduced mod the point order:
    that is left to the caller, if appropriate
    (e.g. cyclic groups of order n). Negative m is allowed,
    as m * Q = (-m) * (-Q).
    """

    if isinstance(m, bool) or not isinstance(m, int):
        raise ECFpTypeError(f"not an int scalar: {m!r}")
    if not isinstance(Q, Point):
        raise ECFpTypeError(f"not a point: {Q!r}")

    if m < 0:
        m, Q = -m, Q.negate()

    # R is the running result
    R = Point.infinity(Q.a, Q.b)
    while m > 0:
        # if least significant bit of m is 1, then add Q to R
        if m & 1:
            R = R.add(Q)
        # remove the bit just accounted for
        m >>= 1
        # the doubling part of 'double & add'
        if m:
            Q = Q.double()
    return R
