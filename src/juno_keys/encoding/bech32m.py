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

"""Bech32m (BIP 350) without the 90 character limit, as used by ZIP 316."""

from __future__ import annotations

from typing import Iterable

from ..core.bounds import BECH32_CHECKSUM_LEN, MAX_ENCODED_CHARS
from ..core.errors import (
    ChecksumInvalid,
    EncodedTooLong,
    InvalidHrp,
    InvalidPadding,
    MalformedText,
    MixedCase,
)
from ..core.validation import is_mixed_case, is_printable_ascii

BECH32_ALPHABET = "qpzry9x8gf2tvdw0s3jn54khce6mua7l"
BECH32_LOOKUP = {ch: idx for idx, ch in enumerate(BECH32_ALPHABET)}
SEPARATOR = "1"
BECH32M_CONST = 0x2BC830A3
_GENERATOR = (0x3B6A57B2, 0x26508E6D, 0x1EA119FA, 0x3D4233DD, 0x2A1462B3)


def _polymod(values: Iterable[int]) -> int:
    chk = 1
    for value in values:
        top = chk >> 25
        chk = ((chk & 0x1FFFFFF) << 5) ^ value
        for i, gen in enumerate(_GENERATOR):
            if (top >> i) & 1:
                chk ^= gen
    return chk


def _hrp_expand(hrp: str) -> list[int]:
    return [ord(ch) >> 5 for ch in hrp] + [0] + [ord(ch) & 31 for ch in hrp]


def _create_checksum(hrp: str, data: list[int]) -> list[int]:
    polymod = _polymod(_hrp_expand(hrp) + data + [0] * BECH32_CHECKSUM_LEN) ^ BECH32M_CONST
    return [(polymod >> 5 * (BECH32_CHECKSUM_LEN - 1 - i)) & 31 for i in range(BECH32_CHECKSUM_LEN)]


def _bytes_to_symbols(data: bytes) -> list[int]:
    bits = 0
    bit_count = 0
    out: list[int] = []
    for byte in data:
        bits = (bits << 8) | byte
        bit_count += 8
        while bit_count >= 5:
            bit_count -= 5
            out.append((bits >> bit_count) & 0x1F)
        bits &= (1 << bit_count) - 1
    if bit_count:
        out.append((bits << (5 - bit_count)) & 0x1F)
    return out


def _symbols_to_bytes(symbols: list[int]) -> bytes:
    bits = 0
    bit_count = 0
    out = bytearray()
    for value in symbols:
        bits = (bits << 5) | value
        bit_count += 5
        if bit_count >= 8:
            bit_count -= 8
            out.append((bits >> bit_count) & 0xFF)
            bits &= (1 << bit_count) - 1
    if bit_count >= 5:
        raise InvalidPadding("excess padding symbol")
    if bits:
        raise InvalidPadding("non-zero padding bits")
    return bytes(out)


def validate_hrp(hrp: str) -> str:
    """Check an HRP for the text encoding and return its lower-case form."""
    if not isinstance(hrp, str) or not hrp:
        raise InvalidHrp("hrp must be a non-empty string")
    if not is_printable_ascii(hrp):
        raise InvalidHrp("hrp must contain only printable US-ASCII characters")
    if is_mixed_case(hrp):
        raise InvalidHrp("hrp must not mix upper and lower case")
    return hrp.lower()


def encode_text(hrp: str, data: bytes) -> str:
    hrp = validate_hrp(hrp)
    symbols = _bytes_to_symbols(data)
    total = len(hrp) + len(SEPARATOR) + len(symbols) + BECH32_CHECKSUM_LEN
    if total > MAX_ENCODED_CHARS:
        raise EncodedTooLong(f"encoded string exceeds {MAX_ENCODED_CHARS} characters: {total}")
    checksum = _create_checksum(hrp, symbols)
    return hrp + SEPARATOR + "".join(BECH32_ALPHABET[value] for value in symbols + checksum)


def decode_text(text: str) -> tuple[str, bytes]:
    if len(text) > MAX_ENCODED_CHARS:
        raise EncodedTooLong(f"encoded string exceeds {MAX_ENCODED_CHARS} characters")
    if not is_printable_ascii(text):
        raise MalformedText("encoded string contains non-printable characters")
    if is_mixed_case(text):
        raise MixedCase("encoded string mixes upper and lower case")
    text = text.lower()

    pos = text.rfind(SEPARATOR)
    if pos < 0:
        raise MalformedText("missing separator")
    if pos == 0:
        raise MalformedText("empty hrp")
    hrp = text[:pos]
    data_part = text[pos + 1 :]
    if len(data_part) < BECH32_CHECKSUM_LEN:
        raise MalformedText("data part shorter than checksum")

    symbols: list[int] = []
    for char in data_part:
        value = BECH32_LOOKUP.get(char)
        if value is None:
            raise MalformedText(f"invalid bech32 character: {char!r}")
        symbols.append(value)

    if _polymod(_hrp_expand(hrp) + symbols) != BECH32M_CONST:
        raise ChecksumInvalid("bech32m checksum mismatch")
    return hrp, _symbols_to_bytes(symbols[:-BECH32_CHECKSUM_LEN])
