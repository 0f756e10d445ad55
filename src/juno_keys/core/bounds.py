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

# Largest value a CompactSize may carry (zcash_encoding MAX_COMPACT_SIZE).
MAX_COMPACT_SIZE = 0x02000000

# Width of the HRP padding block appended after the container items.
PADDING_LEN = 16

# F4Jumble output half width (BLAKE2b-512 digest size).
F4JUMBLE_HASH_LEN = 64

# Valid F4Jumble message lengths.
F4JUMBLE_MIN_LEN = 48
F4JUMBLE_MAX_LEN = 4_194_368

# Bech32m checksum length in symbols.
BECH32_CHECKSUM_LEN = 6

# Longest transport string: 16-char HRP, separator, data symbols, checksum.
MAX_ENCODED_CHARS = PADDING_LEN + 1 + (F4JUMBLE_MAX_LEN * 8 + 4) // 5 + BECH32_CHECKSUM_LEN

# Seed sizes accepted by ZIP 32.
MIN_SEED_BYTES = 32
MAX_SEED_BYTES = 252
DEFAULT_SEED_BYTES = 64

# Orchard full viewing key encoding: ak || nk || rivk.
ORCHARD_FVK_LEN = 96

# Hardened child indices start here; coin types and accounts must stay below.
HARDENED_OFFSET = 1 << 31


__all__ = [
    "BECH32_CHECKSUM_LEN",
    "DEFAULT_SEED_BYTES",
    "F4JUMBLE_HASH_LEN",
    "F4JUMBLE_MAX_LEN",
    "F4JUMBLE_MIN_LEN",
    "HARDENED_OFFSET",
    "MAX_COMPACT_SIZE",
    "MAX_ENCODED_CHARS",
    "MAX_SEED_BYTES",
    "MIN_SEED_BYTES",
    "ORCHARD_FVK_LEN",
    "PADDING_LEN",
]
