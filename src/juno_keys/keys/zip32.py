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

"""ZIP 32 hierarchical derivation of Orchard spending keys.

Only hardened derivation exists for Orchard. The account key lives at
``m/32'/coin_type'/account'``.
"""

from __future__ import annotations

import hashlib
from dataclasses import dataclass

from ..core.bounds import HARDENED_OFFSET
from ..core.errors import AccountInvalid, CoinTypeInvalid, SeedInvalid
from ..core.validation import require_int_range

ZIP32_PURPOSE = 32
SPENDING_KEY_LEN = 32
CHAIN_CODE_LEN = 32

_MASTER_PERSONAL = b"ZcashIP32Orchard"
_EXPAND_PERSONAL = b"Zcash_ExpandSeed"
_CHILD_DOMAIN = b"\x81"
_ASK_DOMAIN = b"\x06"
_NK_DOMAIN = b"\x07"
_RIVK_DOMAIN = b"\x08"

# Pallas base field (p) and scalar field (q) moduli.
PALLAS_P = 0x40000000000000000000000000000000224698FC094CF91B992D30ED00000001
PALLAS_Q = 0x40000000000000000000000000000000224698FC0994A8DD8C46EB2100000001


@dataclass(frozen=True)
class ExtendedSpendingKey:
    depth: int
    child_index: int
    spending_key: bytes
    chain_code: bytes


def prf_expand(key: bytes, domain: bytes) -> bytes:
    return hashlib.blake2b(key + domain, digest_size=64, person=_EXPAND_PERSONAL).digest()


def to_scalar(data: bytes) -> int:
    return int.from_bytes(data, "little") % PALLAS_Q


def to_base(data: bytes) -> int:
    return int.from_bytes(data, "little") % PALLAS_P


def spend_authorizing_scalar(spending_key: bytes) -> int:
    return to_scalar(prf_expand(spending_key, _ASK_DOMAIN))


def nullifier_deriving_key(spending_key: bytes) -> int:
    return to_base(prf_expand(spending_key, _NK_DOMAIN))


def commit_ivk_randomness(spending_key: bytes) -> int:
    return to_scalar(prf_expand(spending_key, _RIVK_DOMAIN))


def _checked(depth: int, child_index: int, digest: bytes) -> ExtendedSpendingKey:
    spending_key = digest[:SPENDING_KEY_LEN]
    if spend_authorizing_scalar(spending_key) == 0:
        raise SeedInvalid(f"seed yields an invalid Orchard spending key at depth {depth}")
    return ExtendedSpendingKey(
        depth=depth,
        child_index=child_index,
        spending_key=spending_key,
        chain_code=digest[SPENDING_KEY_LEN:],
    )


def master_key(seed: bytes | bytearray) -> ExtendedSpendingKey:
    digest = hashlib.blake2b(bytes(seed), digest_size=64, person=_MASTER_PERSONAL).digest()
    return _checked(0, 0, digest)


def derive_child(parent: ExtendedSpendingKey, index: int) -> ExtendedSpendingKey:
    if index < HARDENED_OFFSET or index >= 1 << 32:
        raise ValueError("Orchard derivation requires a hardened child index")
    data = _CHILD_DOMAIN + parent.spending_key + index.to_bytes(4, "little")
    digest = prf_expand(parent.chain_code, data)
    return _checked(parent.depth + 1, index, digest)


def derive_account_key(
    seed: bytes | bytearray,
    coin_type: int,
    account: int,
) -> ExtendedSpendingKey:
    require_int_range(
        coin_type,
        min_val=0,
        max_val=HARDENED_OFFSET - 1,
        label="coin_type",
        error=CoinTypeInvalid,
    )
    require_int_range(
        account,
        min_val=0,
        max_val=HARDENED_OFFSET - 1,
        label="account",
        error=AccountInvalid,
    )
    key = master_key(seed)
    for index in (ZIP32_PURPOSE, coin_type, account):
        key = derive_child(key, index + HARDENED_OFFSET)
    return key
