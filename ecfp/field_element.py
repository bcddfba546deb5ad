#!/usr/bin/env python3

# Copyright (C) 2017-2022 The ecfp developers
#
# This file is part of ecfp. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of ecfp including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Elements of a finite field of prime order.

A FieldElement is an immutable residue modulo a prime:
the modulus is assumed to be prime by caller contract and it is not
verified, so inverses (and divisions) are meaningful only for primes.

Binary operations require compatible operands, i.e. elements
with the same modulus; an int operand k is taken as k mod modulus.
"""

from typing import Union

from ecfp.alias import Integer
from ecfp.exceptions import (
    DivisionByZeroError,
    ECFpValueError,
    IncompatibleFieldError,
    OutOfRangeError,
)
from ecfp.number_theory import mod_pow
from ecfp.utils import int_from_integer, int_string

Operand = Union["FieldElement", int]


class FieldElement:
    """Element of the finite field Fp, p being the modulus.

    The value is always the least non-negative residue,
    i.e. 0 <= value < modulus.
    """

    __slots__ = ("_value", "_modulus")

    def __init__(self, value: Integer, modulus: Integer) -> None:

        value = int_from_integer(value)
        modulus = int_from_integer(modulus)

        if modulus < 2:
            raise ECFpValueError(f"invalid modulus: {modulus}")
        if not 0 <= value < modulus:
            err_msg = f"value not in 0..{int_string(modulus - 1)}: "
            err_msg += int_string(value)
            raise OutOfRangeError(err_msg)

        self._value = value
        self._modulus = modulus

    @property
    def value(self) -> int:
        return self._value

    @property
    def modulus(self) -> int:
        return self._modulus

    def __repr__(self) -> str:
        return f"FieldElement({int_string(self._value)}, {int_string(self._modulus)})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, FieldElement):
            return NotImplemented
        return self._value == other._value and self._modulus == other._modulus

    def __hash__(self) -> int:
        return hash((self._value, self._modulus))

    def __bool__(self) -> bool:
        return self._value != 0

    def __int__(self) -> int:
        return self._value

    def _same_field(self, other: Operand) -> "FieldElement":
        """Return the other operand as an element of this field.

        An IncompatibleFieldError is raised
        if the other operand belongs to a different field.
        """
        if isinstance(other, FieldElement):
            if other._modulus != self._modulus:
                err_msg = "incompatible fields: "
                err_msg += f"{int_string(self._modulus)} vs "
                err_msg += f"{int_string(other._modulus)}"
                raise IncompatibleFieldError(err_msg)
            return other
        return FieldElement(other % self._modulus, self._modulus)

    def _new(self, value: int) -> "FieldElement":
        return FieldElement(value % self._modulus, self._modulus)

    def is_zero(self) -> bool:
        return self._value == 0

    def add(self, other: Operand) -> "FieldElement":
        other = self._same_field(other)
        return self._new(self._value + other._value)

    def sub(self, other: Operand) -> "FieldElement":
        other = self._same_field(other)
        return self._new(self._value - other._value)

    def mul(self, other: Operand) -> "FieldElement":
        other = self._same_field(other)
        return self._new(self._value * other._value)

    def pow(self, exponent: int) -> "FieldElement":
        """Return self^exponent, exponent being any (even negative) int.

        As x^(p-1) = 1 for x != 0 (Fermat's little theorem),
        the exponent is reduced mod (p-1) before
        the 'square & multiply' exponentiation.
        """

        if self._value == 0:
            if exponent < 0:
                raise DivisionByZeroError(f"zero to negative power: {exponent}")
            return self._new(1 if exponent == 0 else 0)

        exponent %= self._modulus - 1
        return self._new(mod_pow(self._value, exponent, self._modulus))

    def inverse(self) -> "FieldElement":
        "Return the multiplicative inverse as self^(p-2)."

        if self._value == 0:
            raise DivisionByZeroError("zero has no inverse")
        return self.pow(self._modulus - 2)

    def div(self, other: Operand) -> "FieldElement":
        other = self._same_field(other)
        if other._value == 0:
            err_msg = f"division by zero mod {int_string(self._modulus)}"
            raise DivisionByZeroError(err_msg)
        return self.mul(other.inverse())

    def neg(self) -> "FieldElement":
        return self._new(-self._value)

    def __add__(self, other: Operand) -> "FieldElement":
        if not isinstance(other, (FieldElement, int)):
            return NotImplemented
        return self.add(other)

    def __radd__(self, other: int) -> "FieldElement":
        if not isinstance(other, int):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other: Operand) -> "FieldElement":
        if not isinstance(other, (FieldElement, int)):
            return NotImplemented
        return self.sub(other)

    def __rsub__(self, other: int) -> "FieldElement":
        if not isinstance(other, int):
            return NotImplemented
        return self._same_field(other).sub(self)

    def __mul__(self, other: Operand) -> "FieldElement":
        if not isinstance(other, (FieldElement, int)):
            return NotImplemented
        return self.mul(other)

    def __rmul__(self, other: int) -> "FieldElement":
        if not isinstance(other, int):
            return NotImplemented
        return self.mul(other)

    def __truediv__(self, other: Operand) -> "FieldElement":
        if not isinstance(other, (FieldElement, int)):
            return NotImplemented
        return self.div(other)

    def __rtruediv__(self, other: int) -> "FieldElement":
        if not isinstance(other, int):
            return NotImplemented
        return self._same_field(other).div(self)

    def __pow__(self, exponent: int) -> "FieldElement":
        if not isinstance(exponent, int):
            return NotImplemented
        return self.pow(exponent)

    def __neg__(self) -> "FieldElement":
        return self.neg()
