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

from enum import Enum

from ..core.errors import UaHrpInvalid

UA_HRP_LEAD = "j"
UFVK_HRP_BASE = "jview"


class Network(str, Enum):
    MAINNET = "mainnet"
    TESTNET = "testnet"
    REGTEST = "regtest"

    @property
    def ua_hrp(self) -> str:
        return _UA_HRPS[self]

    @property
    def coin_type(self) -> int:
        return _COIN_TYPES[self]

    @property
    def ufvk_hrp(self) -> str:
        return ufvk_hrp_from_ua_hrp(self.ua_hrp)


_UA_HRPS = {
    Network.MAINNET: "j",
    Network.TESTNET: "jtest",
    Network.REGTEST: "jregtest",
}

_COIN_TYPES = {
    Network.MAINNET: 8133,
    Network.TESTNET: 8134,
    Network.REGTEST: 8135,
}


def parse_network(value: str) -> Network:
    normalized = value.strip().lower()
    for network in Network:
        if network.value == normalized:
            return network
    allowed = ", ".join(network.value for network in Network)
    raise ValueError(f"unknown network {value!r} (expected one of {allowed})")


def ufvk_hrp_from_ua_hrp(ua_hrp: str) -> str:
    """Map an address HRP (``j``, ``jtest``) to its viewing-key HRP (``jview``, ``jviewtest``)."""
    hrp = ua_hrp.strip()
    if not hrp:
        raise UaHrpInvalid("ua_hrp must not be empty")
    if not hrp.startswith(UA_HRP_LEAD):
        raise UaHrpInvalid(f"ua_hrp must start with {UA_HRP_LEAD!r}: {hrp!r}")
    return UFVK_HRP_BASE + hrp[len(UA_HRP_LEAD) :]
