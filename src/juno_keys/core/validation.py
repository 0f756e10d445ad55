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

_PRINTABLE_MIN = 33
_PRINTABLE_MAX = 126


def require_int_range(
    value: object,
    *,
    min_val: int,
    max_val: int,
    label: str,
    error: type[ValueError] = ValueError,
) -> int:
    """Validate that value is an int within [min_val, max_val]."""
    if not isinstance(value, int) or isinstance(value, bool):
        raise error(f"{label} must be an integer")
    if value < min_val or value > max_val:
        raise error(f"{label} must be between {min_val} and {max_val}")
    return value


def require_bytes_like(value: object, *, label: str) -> bytes:
    """Validate that value is bytes-like and return an immutable copy."""
    if not isinstance(value, (bytes, bytearray, memoryview)):
        raise TypeError(f"{label} must be bytes")
    return bytes(value)


def is_printable_ascii(text: str) -> bool:
    """True when every character is visible US-ASCII (33..126)."""
    return all(_PRINTABLE_MIN <= ord(ch) <= _PRINTABLE_MAX for ch in text)


def is_mixed_case(text: str) -> bool:
    return text.lower() != text and text.upper() != text
