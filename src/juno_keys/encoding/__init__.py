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

"""Unified container encoding: CompactSize framing, F4Jumble and Bech32m."""

from .bech32m import decode_text as decode_text, encode_text as encode_text
from .f4jumble import f4jumble as f4jumble, f4jumble_inv as f4jumble_inv
from .unified import (
    Item as Item,
    Typecode as Typecode,
    decode_container as decode_container,
    decode_container_items as decode_container_items,
    encode_container as encode_container,
    encode_container_items as encode_container_items,
    frame as frame,
    unframe as unframe,
)

__all__ = [
    "Item",
    "Typecode",
    "decode_container",
    "decode_container_items",
    "decode_text",
    "encode_container",
    "encode_container_items",
    "encode_text",
    "f4jumble",
    "f4jumble_inv",
    "frame",
    "unframe",
]
