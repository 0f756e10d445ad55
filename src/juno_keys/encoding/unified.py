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

from collections.abc import Iterable
from dataclasses import dataclass
from enum import IntEnum

from ..core.bounds import F4JUMBLE_MAX_LEN, MAX_COMPACT_SIZE, PADDING_LEN
from ..core.errors import (
    DuplicateTypeCode,
    EmptyContainer,
    HrpMismatch,
    HrpTooLong,
    InvalidHrp,
    InvalidTypeCode,
    MalformedContainer,
    PayloadTooLarge,
    UnexpectedItemCount,
)
from ..core.validation import require_bytes_like
from .bech32m import decode_text, encode_text, validate_hrp
from .compactsize import compact_size_len, decode_compact_size, encode_compact_size
from .f4jumble import f4jumble, f4jumble_inv


class Typecode(IntEnum):
    P2PKH = 0x00
    P2SH = 0x01
    SAPLING = 0x02
    ORCHARD = 0x03


@dataclass(frozen=True)
class Item:
    typecode: int
    payload: bytes


def typecode_name(typecode: int) -> str:
    try:
        return Typecode(typecode).name.lower()
    except ValueError:
        return f"unknown({typecode:#x})"


def padding_block(hrp: str) -> bytes:
    try:
        raw = hrp.encode("ascii")
    except UnicodeEncodeError as exc:
        raise InvalidHrp("hrp must be US-ASCII") from exc
    if len(raw) > PADDING_LEN:
        raise HrpTooLong(f"hrp must be at most {PADDING_LEN} bytes: {len(raw)}")
    return raw + bytes(PADDING_LEN - len(raw))


def frame(hrp: str, items: Iterable[Item]) -> bytes:
    padding = padding_block(validate_hrp(hrp))
    candidates = list(items)
    if not candidates:
        raise EmptyContainer("container must hold at least one item")
    for item in candidates:
        _validate_item(item)
    ordered = sorted(candidates, key=lambda item: item.typecode)

    total = PADDING_LEN
    previous: int | None = None
    for item in ordered:
        if item.typecode == previous:
            raise DuplicateTypeCode(f"duplicate typecode: {item.typecode}")
        previous = item.typecode
        total += (
            compact_size_len(item.typecode)
            + compact_size_len(len(item.payload))
            + len(item.payload)
        )
    if total > F4JUMBLE_MAX_LEN:
        raise PayloadTooLarge(
            f"framed container exceeds F4JUMBLE_MAX_LEN ({F4JUMBLE_MAX_LEN}): {total} bytes"
        )

    parts: list[bytes] = []
    for item in ordered:
        parts.append(encode_compact_size(item.typecode))
        parts.append(encode_compact_size(len(item.payload)))
        parts.append(bytes(item.payload))
    parts.append(padding)
    return b"".join(parts)


def unframe(buffer: bytes, expected_hrp: str) -> list[Item]:
    expected_hrp = validate_hrp(expected_hrp)
    if len(buffer) < PADDING_LEN:
        raise MalformedContainer("container shorter than padding block")
    body_len = len(buffer) - PADDING_LEN
    if buffer[body_len:] != padding_block(expected_hrp):
        raise HrpMismatch(f"container padding does not match hrp {expected_hrp!r}")

    body = bytes(buffer[:body_len])
    items: list[Item] = []
    idx = 0
    while idx < body_len:
        try:
            typecode, idx = decode_compact_size(body, idx)
            length, idx = decode_compact_size(body, idx)
        except ValueError as exc:
            raise MalformedContainer(f"bad item header: {exc}") from exc
        if idx + length > body_len:
            raise MalformedContainer("item length overruns container")
        if items and typecode == items[-1].typecode:
            raise DuplicateTypeCode(f"duplicate typecode: {typecode}")
        if items and typecode < items[-1].typecode:
            raise MalformedContainer("items are not in ascending typecode order")
        items.append(Item(typecode=typecode, payload=body[idx : idx + length]))
        idx += length

    if not items:
        raise MalformedContainer("container holds no items")
    return items


def encode_container_items(hrp: str, items: Iterable[Item]) -> str:
    hrp = validate_hrp(hrp)
    return encode_text(hrp, f4jumble(frame(hrp, items)))


def encode_container(hrp: str, typecode: int, payload: bytes) -> str:
    return encode_container_items(hrp, [Item(typecode=typecode, payload=bytes(payload))])


def decode_container_items(text: str, expected_hrp: str) -> list[Item]:
    expected = validate_hrp(expected_hrp)
    hrp, jumbled = decode_text(text)
    if hrp != expected:
        raise HrpMismatch(f"expected hrp {expected!r}, found {hrp!r}")
    return unframe(f4jumble_inv(jumbled), expected)


def decode_container(text: str, expected_hrp: str) -> tuple[int, bytes]:
    items = decode_container_items(text, expected_hrp)
    if len(items) != 1:
        raise UnexpectedItemCount(f"expected exactly one item, found {len(items)}")
    return items[0].typecode, items[0].payload


def _validate_item(item: Item) -> None:
    typecode = item.typecode
    if not isinstance(typecode, int) or isinstance(typecode, bool):
        raise InvalidTypeCode("typecode must be an integer")
    if typecode < 0 or typecode > MAX_COMPACT_SIZE:
        raise InvalidTypeCode(f"typecode must be between 0 and {MAX_COMPACT_SIZE:#x}: {typecode}")
    payload = require_bytes_like(item.payload, label="payload")
    if len(payload) > MAX_COMPACT_SIZE:
        raise PayloadTooLarge(
            f"payload exceeds MAX_COMPACT_SIZE ({MAX_COMPACT_SIZE}): {len(payload)} bytes"
        )
