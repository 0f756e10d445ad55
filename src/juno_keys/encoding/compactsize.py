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

from __future__ import annotations

from ..core.bounds import MAX_COMPACT_SIZE

_TAG_U16 = 0xFD
_TAG_U32 = 0xFE
_TAG_U64 = 0xFF

# (tag, payload width, smallest value that needs this width)
_WIDE_FORMS = {
    _TAG_U16: (2, _TAG_U16),
    _TAG_U32: (4, 0x1_0000),
    _TAG_U64: (8, 0x1_0000_0000),
}


def compact_size_len(value: int) -> int:
    if value < _TAG_U16:
        return 1
    if value <= 0xFFFF:
        return 3
    if value <= 0xFFFF_FFFF:
        return 5
    return 9


def encode_compact_size(value: int) -> bytes:
    if value < 0:
        raise ValueError("value must be non-negative")
    if value > MAX_COMPACT_SIZE:
        raise ValueError(f"value must be <= {MAX_COMPACT_SIZE:#x}")
    if value < _TAG_U16:
        return bytes([value])
    if value <= 0xFFFF:
        return bytes([_TAG_U16]) + value.to_bytes(2, "little")
    if value <= 0xFFFF_FFFF:
        return bytes([_TAG_U32]) + value.to_bytes(4, "little")
    return bytes([_TAG_U64]) + value.to_bytes(8, "little")


def decode_compact_size(data: bytes, start: int) -> tuple[int, int]:
    if start < 0:
        raise ValueError("start must be non-negative")
    if start >= len(data):
        raise ValueError("truncated compact size")
    tag = data[start]
    idx = start + 1
    if tag < _TAG_U16:
        return tag, idx
    width, minimum = _WIDE_FORMS[tag]
    if idx + width > len(data):
        raise ValueError("truncated compact size")
    value = int.from_bytes(data[idx : idx + width], "little")
    if value < minimum:
        raise ValueError("non-canonical compact size")
    if value > MAX_COMPACT_SIZE:
        raise ValueError("compact size too large")
    return value, idx + width
