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

from ...config import load_app_config
from ...core.errors import HrpMismatch
from ...encoding.bech32m import decode_text
from ...encoding.unified import decode_container_items, typecode_name
from ...keys.backend import load_backend
from ...keys.networks import Network
from ...keys.ufvk import ufvk_from_seed_base64
from ..core.common import InvalidRequest
from ..core.log import _warn
from ..core.types import InspectResult, ItemSummary, UfvkFromSeedArgs, UfvkResult
from ..io.secrets import read_seed_file


def _resolve_seed(args: UfvkFromSeedArgs, *, quiet: bool) -> str:
    if args.seed_file and args.seed_base64:
        raise InvalidRequest("use either --seed-file or --seed-base64 (not both)")
    if args.seed_file:
        return read_seed_file(args.seed_file)
    if args.seed_base64:
        _warn("--seed-base64 exposes the seed to shell history; prefer --seed-file", quiet=quiet)
        return args.seed_base64.strip()
    raise InvalidRequest("missing seed (set --seed-file or --seed-base64)")


def run_ufvk_from_seed(args: UfvkFromSeedArgs, *, quiet: bool) -> UfvkResult:
    seed_b64 = _resolve_seed(args, quiet=quiet)
    config = load_app_config(args.config)

    network = args.network or config.defaults.network
    if network is None:
        raise InvalidRequest("missing network (set --network or defaults.network in the config)")
    account = config.defaults.account if args.account is None else args.account

    backend = load_backend(config.orchard.backend)
    ufvk = ufvk_from_seed_base64(
        seed_b64,
        network.ua_hrp,
        network.coin_type,
        account,
        backend=backend,
    )
    return UfvkResult(
        ufvk=ufvk,
        network=network,
        ua_hrp=network.ua_hrp,
        coin_type=network.coin_type,
        account=account,
    )


def _detect_network(text: str) -> Network:
    # Malformed or corrupted text fails here with its own error code.
    hrp, _ = decode_text(text)
    for network in Network:
        if network.ufvk_hrp == hrp:
            return network
    raise HrpMismatch(f"unrecognised ufvk prefix {hrp!r}; pass --network")


def run_ufvk_inspect(text: str, *, network: Network | None) -> InspectResult:
    text = text.strip()
    if network is None:
        network = _detect_network(text)
    items = decode_container_items(text, network.ufvk_hrp)
    summaries = tuple(
        ItemSummary(
            typecode=item.typecode,
            name=typecode_name(item.typecode),
            data_hex=item.payload.hex(),
        )
        for item in items
    )
    return InspectResult(ufvk_hrp=network.ufvk_hrp, network=network, items=summaries)
