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

"""Seed and Unified Full Viewing Key derivation for Juno Cash."""

from .core.errors import (
    ContainerError as ContainerError,
    InternalError as InternalError,
    KeysError as KeysError,
)
from .encoding.unified import (
    Item as Item,
    Typecode as Typecode,
    decode_container as decode_container,
    encode_container as encode_container,
)
from .keys import (
    Network as Network,
    generate_seed_base64 as generate_seed_base64,
    ufvk_from_seed_base64 as ufvk_from_seed_base64,
    ufvk_hrp_from_ua_hrp as ufvk_hrp_from_ua_hrp,
)

__all__ = [
    "ContainerError",
    "InternalError",
    "Item",
    "KeysError",
    "Network",
    "Typecode",
    "decode_container",
    "encode_container",
    "generate_seed_base64",
    "ufvk_from_seed_base64",
    "ufvk_hrp_from_ua_hrp",
]
