#!/usr/bin/env python3

# Copyright (C) 2017-2022 The ecfp developers
#
# This file is part of ecfp. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of ecfp including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Exception classes.

These are meant to discriminate between Exceptions being raised
by ecfp from those raised by other codebase,
and between the different ways a caller input can be invalid.

Users are usually better off just dealing with the regular
ValueError, TypeError, and ZeroDivisionError
from which the ecfp versions are derived.
"""


class ECFpValueError(ValueError):
    pass


class ECFpTypeError(TypeError):
    pass


class OutOfRangeError(ECFpValueError):
    "A field element value is not in 0..modulus-1."


class IncompatibleFieldError(ECFpValueError):
    "Field elements with different moduli have been combined."


class IncompatibleCurveError(ECFpValueError):
    "Points on different curves have been combined."


class InvalidCoordinateError(ECFpValueError):
    "A point has exactly one infinite coordinate."


class PointNotOnCurveError(ECFpValueError):
    "The curve equation does not hold for the given coordinates."


class DivisionByZeroError(ECFpValueError, ZeroDivisionError):
    "The zero field element has no multiplicative inverse."
