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

from ..core.bounds import HARDENED_OFFSET, ORCHARD_FVK_LEN
from ..core.errors import (
    AccountInvalid,
    CoinTypeInvalid,
    ContainerError,
    InternalError,
    SeedInvalid,
)
from ..core.validation import require_int_range
from ..encoding.unified import Typecode, encode_container
from .backend import OrchardBackend
from .networks import ufvk_hrp_from_ua_hrp
from .seed import decode_seed_base64, wipe
from .zip32 import (
    commit_ivk_randomness,
    derive_account_key,
    nullifier_deriving_key,
    spend_authorizing_scalar,
)

_FIELD_LEN = 32
_SIGN_BIT = 0x80


def derive_viewing_key_bytes(
    seed: bytes | bytearray,
    coin_type: int,
    account: int,
    *,
    backend: OrchardBackend,
) -> bytes:
    """Derive the 96-byte Orchard full viewing key ``ak || nk || rivk`` for an account."""
    account_key = derive_account_key(seed, coin_type, account)
    spending_key = account_key.spending_key
    ask = spend_authorizing_scalar(spending_key)

    ak = bytearray(backend.spend_validating_key(ask.to_bytes(_FIELD_LEN, "little")))
    if len(ak) != _FIELD_LEN:
        raise InternalError(f"backend returned {len(ak)}-byte spend validating key")
    # ask is negated when the point's y sign is odd; x is unchanged.
    ak[-1] &= 0xFF ^ _SIGN_BIT

    nk = nullifier_deriving_key(spending_key).to_bytes(_FIELD_LEN, "little")
    rivk = commit_ivk_randomness(spending_key).to_bytes(_FIELD_LEN, "little")
    return bytes(ak) + nk + rivk


def ufvk_from_seed_base64(
    seed_base64: str,
    ua_hrp: str,
    coin_type: int,
    account: int,
    *,
    backend: OrchardBackend,
) -> str:
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
    ufvk_hrp = ufvk_hrp_from_ua_hrp(ua_hrp)

    seed = decode_seed_base64(seed_base64)
    try:
        fvk_bytes = derive_viewing_key_bytes(seed, coin_type, account, backend=backend)
    except ValueError as exc:
        if isinstance(exc, SeedInvalid):
            raise
        raise SeedInvalid(f"backend rejected derived key: {exc}") from exc
    finally:
        wipe(seed)

    if len(fvk_bytes) != ORCHARD_FVK_LEN:
        raise InternalError(f"full viewing key must be {ORCHARD_FVK_LEN} bytes")
    try:
        return encode_container(ufvk_hrp, Typecode.ORCHARD, fvk_bytes)
    except ContainerError as exc:
        raise InternalError(f"ufvk encoding failed: {exc}") from exc
