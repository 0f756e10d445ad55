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

import base64
import binascii

from Crypto.Random import get_random_bytes

from ..core.bounds import DEFAULT_SEED_BYTES, MAX_SEED_BYTES, MIN_SEED_BYTES
from ..core.errors import SeedInvalid
from ..core.validation import require_int_range


def wipe(buffer: bytearray) -> None:
    for idx in range(len(buffer)):
        buffer[idx] = 0


def generate_seed_base64(size: int = DEFAULT_SEED_BYTES) -> str:
    require_int_range(
        size,
        min_val=MIN_SEED_BYTES,
        max_val=MAX_SEED_BYTES,
        label="seed size",
        error=SeedInvalid,
    )
    seed = bytearray(get_random_bytes(size))
    try:
        return base64.b64encode(seed).decode("ascii")
    finally:
        wipe(seed)


def decode_seed_base64(seed_base64: str) -> bytearray:
    """Decode a base64 seed into a wipeable buffer; the caller owns and wipes it."""
    try:
        raw = base64.b64decode(seed_base64.strip(), validate=True)
    except (binascii.Error, ValueError) as exc:
        raise SeedInvalid("seed is not valid base64") from exc
    seed = bytearray(raw)
    if not MIN_SEED_BYTES <= len(seed) <= MAX_SEED_BYTES:
        length = len(seed)
        wipe(seed)
        raise SeedInvalid(
            f"seed must be between {MIN_SEED_BYTES} and {MAX_SEED_BYTES} bytes: {length}"
        )
    return seed
