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

from .backend import OrchardBackend as OrchardBackend, load_backend as load_backend
from .networks import (
    Network as Network,
    parse_network as parse_network,
    ufvk_hrp_from_ua_hrp as ufvk_hrp_from_ua_hrp,
)
from .seed import (
    decode_seed_base64 as decode_seed_base64,
    generate_seed_base64 as generate_seed_base64,
)
from .ufvk import (
    derive_viewing_key_bytes as derive_viewing_key_bytes,
    ufvk_from_seed_base64 as ufvk_from_seed_base64,
)

__all__ = [
    "Network",
    "OrchardBackend",
    "decode_seed_base64",
    "derive_viewing_key_bytes",
    "generate_seed_base64",
    "load_backend",
    "parse_network",
    "ufvk_from_seed_base64",
    "ufvk_hrp_from_ua_hrp",
]
