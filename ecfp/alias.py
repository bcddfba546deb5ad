#!/usr/bin/env python3

# Copyright (C) 2017-2022 The ecfp developers
#
# This file is part of ecfp. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of ecfp including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Aliases

mypy aliases, documenting also coding input conventions.
"""

from typing import TYPE_CHECKING, Optional, Union

if TYPE_CHECKING:
    from ecfp.field_element import FieldElement  # pragma: no cover

# hex-string or bytes representation of an int
# e.g.:
# 3735928559
# "0xdeadbeef"
# "deadbeef"
# b'\xde\xad\xbe\xef'
#
# use ecfp.utils.int_from_integer to convert Integer to int
Integer = Union[bytes, str, int]

# A point coordinate is either a field element or None,
# the latter standing for the coordinate of the point at infinity.
Coordinate = Optional["FieldElement"]

# coordinate of the point at infinity
INF = None
