#!/usr/bin/env python3
# Copyright (C) 2026 Alex Stoyanov
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation; either version 3 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License along with this program.
# If not, see <https://www.gnu.org/licenses/>.

"""F4Jumble: the four-round unkeyed Feistel permutation from ZIP 316.

Every output byte depends on every input byte, so a corrupted transport
string decodes to an unrelated container instead of a near miss.
"""

from __future__ import annotations

import hashlib

from ..core.bounds import F4JUMBLE_HASH_LEN, F4JUMBLE_MAX_LEN, F4JUMBLE_MIN_LEN
from ..core.errors import BufferTooLong, BufferTooShort, ContainerInvariantError

_G_PERSONAL = b"UA_F4Jumble_G"
_H_PERSONAL = b"UA_F4Jumble_H"


def _split_len(length: int) -> int:
    return min(F4JUMBLE_HASH_LEN, length // 2)


def _xor(left: bytes, right: bytes) -> bytes:
    if len(left) != len(right):
        raise ContainerInvariantError("f4jumble xor length mismatch")
    if not left:
        return b""
    value = int.from_bytes(left, "big") ^ int.from_bytes(right, "big")
    return value.to_bytes(len(left), "big")


def _h(round_index: int, data: bytes, length: int) -> bytes:
    person = _H_PERSONAL + bytes([round_index, 0, 0])
    return hashlib.blake2b(data, digest_size=length, person=person).digest()


def _g(round_index: int, data: bytes, length: int) -> bytes:
    blocks = (length + F4JUMBLE_HASH_LEN - 1) // F4JUMBLE_HASH_LEN
    out = bytearray()
    for counter in range(blocks):
        person = _G_PERSONAL + bytes([round_index]) + counter.to_bytes(2, "little")
        out += hashlib.blake2b(data, digest_size=F4JUMBLE_HASH_LEN, person=person).digest()
    return bytes(out[:length])


def _check_length(message: bytes) -> int:
    length = len(message)
    if length < F4JUMBLE_MIN_LEN:
        raise BufferTooShort(f"f4jumble input must be at least {F4JUMBLE_MIN_LEN} bytes: {length}")
    if length > F4JUMBLE_MAX_LEN:
        raise BufferTooLong(f"f4jumble input must be at most {F4JUMBLE_MAX_LEN} bytes: {length}")
    return length


def f4jumble(message: bytes) -> bytes:
    length = _check_length(message)
    left_len = _split_len(length)
    right_len = length - left_len
    a = bytes(message[:left_len])
    b = bytes(message[left_len:])

    x = _xor(b, _g(0, a, right_len))
    y = _xor(a, _h(0, x, left_len))
    d = _xor(x, _g(1, y, right_len))
    c = _xor(y, _h(1, d, left_len))

    result = c + d
    if len(result) != length:
        raise ContainerInvariantError("f4jumble changed the message length")
    return result


def f4jumble_inv(message: bytes) -> bytes:
    length = _check_length(message)
    left_len = _split_len(length)
    right_len = length - left_len
    c = bytes(message[:left_len])
    d = bytes(message[left_len:])

    y = _xor(c, _h(1, d, left_len))
    x = _xor(d, _g(1, y, right_len))
    a = _xor(y, _h(0, x, left_len))
    b = _xor(x, _g(0, a, right_len))

    result = a + b
    if len(result) != length:
        raise ContainerInvariantError("f4jumble_inv changed the message length")
    return result
