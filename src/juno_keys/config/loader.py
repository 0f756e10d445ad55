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

import tomllib
from dataclasses import dataclass, field
from pathlib import Path

from ..core.bounds import DEFAULT_SEED_BYTES, HARDENED_OFFSET, MAX_SEED_BYTES, MIN_SEED_BYTES
from ..keys.networks import Network, parse_network
from .installer import resolve_config_path


@dataclass(frozen=True)
class KeyDefaults:
    network: Network | None = None
    account: int = 0
    seed_bytes: int = DEFAULT_SEED_BYTES


@dataclass(frozen=True)
class OrchardConfig:
    backend: str | None = None


@dataclass(frozen=True)
class AppConfig:
    path: Path
    defaults: KeyDefaults = field(default_factory=KeyDefaults)
    orchard: OrchardConfig = field(default_factory=OrchardConfig)


def load_app_config(path: str | Path | None = None) -> AppConfig:
    config_path = resolve_config_path(path)
    if not config_path.is_file():
        raise FileNotFoundError(f"config file not found: {config_path}")
    try:
        data = _load_toml(config_path)
    except tomllib.TOMLDecodeError as exc:
        raise ValueError(f"invalid TOML in {config_path}: {exc}") from exc
    return AppConfig(
        path=config_path,
        defaults=_parse_key_defaults(_get_dict(data, "defaults")),
        orchard=_parse_orchard_config(_get_dict(data, "orchard")),
    )


def _parse_key_defaults(cfg: dict[str, object]) -> KeyDefaults:
    network_value = _parse_optional_unset_str(cfg.get("network"), field="defaults.network")
    network = None
    if network_value is not None:
        try:
            network = parse_network(network_value)
        except ValueError as exc:
            raise ValueError(f"defaults.network: {exc}") from exc
    account = _parse_int_in_range(
        cfg.get("account"),
        field="defaults.account",
        default=0,
        min_val=0,
        max_val=HARDENED_OFFSET - 1,
    )
    seed_bytes = _parse_int_in_range(
        cfg.get("seed_bytes"),
        field="defaults.seed_bytes",
        default=DEFAULT_SEED_BYTES,
        min_val=MIN_SEED_BYTES,
        max_val=MAX_SEED_BYTES,
    )
    return KeyDefaults(network=network, account=account, seed_bytes=seed_bytes)


def _parse_orchard_config(cfg: dict[str, object]) -> OrchardConfig:
    return OrchardConfig(
        backend=_parse_optional_unset_str(cfg.get("backend"), field="orchard.backend"),
    )


def _load_toml(path: Path) -> dict[str, object]:
    with path.open("rb") as handle:
        return tomllib.load(handle)


def _get_dict(data: dict[str, object], key: str) -> dict[str, object]:
    value = data.get(key)
    if isinstance(value, dict):
        return value
    return {}


def _parse_optional_unset_str(value: object, *, field: str) -> str | None:
    if value is None:
        return None
    if not isinstance(value, str):
        raise ValueError(f"{field} must be a string")
    normalized = value.strip()
    return normalized or None


def _parse_int_in_range(
    value: object,
    *,
    field: str,
    default: int,
    min_val: int,
    max_val: int,
) -> int:
    if value is None:
        return default
    parsed = _parse_int_strict(value, field=field)
    if parsed < min_val or parsed > max_val:
        raise ValueError(f"{field} must be between {min_val} and {max_val}")
    return parsed


def _parse_int_strict(value: object, *, field: str) -> int:
    if isinstance(value, bool):
        raise ValueError(f"{field} must be an integer")
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        if not value.is_integer():
            raise ValueError(f"{field} must be an integer")
        return int(value)
    if isinstance(value, str):
        text = value.strip()
        if not text:
            raise ValueError(f"{field} must be an integer")
        try:
            return int(text)
        except ValueError as exc:
            raise ValueError(f"{field} must be an integer") from exc
    raise ValueError(f"{field} must be an integer")
