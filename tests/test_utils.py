#!/usr/bin/env python3

# Copyright (C) 2017-2022 The ecfp developers
#
# This file is part of ecfp. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of ecfp including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"Tests for the `ecfp.utils` module."

# Standard library imports
import secrets

# Third party imports
import pytest

# Library imports
from ecfp.exceptions import ECFpTypeError, ECFpValueError
from ecfp.utils import hex_string, int_from_integer, int_string


def test_int_from_integer() -> None:
    for i in (
        secrets.randbits(256 - 8),
        0x0B6CA75B7D3076C561958CCED813797F6D2275C7F42F3856D007D587769A90,
    ):
        assert i == int_from_integer(i)
        assert i == int_from_integer(" " + hex(i).upper())
        assert -i == int_from_integer(hex(-i).upper() + " ")
        assert i == int_from_integer(hex_string(i))
        assert i == int_from_integer(i.to_bytes(32, byteorder="big", signed=False))

    for invalid in (True, 1.5, None):
        with pytest.raises(ECFpTypeError, match="not an integer: "):
            int_from_integer(invalid)  # type: ignore


def test_hex_string() -> None:
    int_ = 34492435054806958080
    assert hex_string(int_) == "01 DEADBEEF 00000000"
    assert hex_string(hex(int_).lower()) == "01 DEADBEEF 00000000"

    a_str = "01de adbeef00000000"
    assert hex_string(a_str) == "01 DEADBEEF 00000000"
    a_bytes = bytes.fromhex(a_str)
    assert hex_string(a_bytes) == "01 DEADBEEF 00000000"

    # invalid hex-string: odd number of hex digits
    a_str = "1deadbeef00000000"
    with pytest.raises(ValueError):
        hex_string(a_str)

    int_ = -1
    with pytest.raises(ECFpValueError, match="negative integer: "):
        hex_string(int_)


def test_int_string() -> None:
    assert int_string(0) == "0"
    assert int_string(223) == "223"
    assert int_string(0xFFFFFFFF) == "4294967295"
    assert int_string(0xDEADBEEF00000000) == "'DEADBEEF 00000000'"
