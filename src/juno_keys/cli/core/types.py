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

from dataclasses import dataclass

from ...keys.networks import Network


@dataclass
class SeedNewArgs:
    """Typed container for ``seed new`` arguments."""

    size: int | None = None
    out: str | None = None
    force: bool = False
    print_seed: bool = False
    config: str | None = None


@dataclass
class UfvkFromSeedArgs:
    """Typed container for ``ufvk from-seed`` arguments."""

    seed_file: str | None = None
    seed_base64: str | None = None
    network: Network | None = None
    account: int | None = None
    config: str | None = None


@dataclass(frozen=True)
class SeedResult:
    size: int
    seed_base64: str | None
    out_path: str | None


@dataclass(frozen=True)
class UfvkResult:
    ufvk: str
    network: Network
    ua_hrp: str
    coin_type: int
    account: int


@dataclass(frozen=True)
class ItemSummary:
    typecode: int
    name: str
    data_hex: str

    @property
    def length(self) -> int:
        return len(self.data_hex) // 2


@dataclass(frozen=True)
class InspectResult:
    ufvk_hrp: str
    network: Network
    items: tuple[ItemSummary, ...]
