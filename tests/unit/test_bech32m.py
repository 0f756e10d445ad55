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

import unittest

from juno_keys.core.bounds import MAX_ENCODED_CHARS
from juno_keys.core.errors import (
    ChecksumInvalid,
    EncodedTooLong,
    InvalidHrp,
    InvalidPadding,
    MalformedText,
    MixedCase,
)
from juno_keys.encoding.bech32m import (
    BECH32_ALPHABET,
    _create_checksum,
    decode_text,
    encode_text,
    validate_hrp,
)


def _assemble(hrp: str, symbols: list[int]) -> str:
    checksum = _create_checksum(hrp, symbols)
    return hrp + "1" + "".join(BECH32_ALPHABET[value] for value in symbols + checksum)


class TestBech32m(unittest.TestCase):
    def test_valid_vectors_decode(self) -> None:
        cases = (
            ("A1LQFN3A", "a", 0),
            ("a1lqfn3a", "a", 0),
            ("?1v759aa", "?", 0),
            ("abcdef1l7aum6echk45nj3s0wdvt2fg8x9yrzpqzd3ryx", "abcdef", 20),
            ("split1checkupstagehandshakeupstreamerranterredcaperredlc445v", "split", 30),
        )
        for text, hrp, length in cases:
            with self.subTest(text=text):
                decoded_hrp, data = decode_text(text)
                self.assertEqual(decoded_hrp, hrp)
                self.assertEqual(len(data), length)

    def test_encode_matches_vectors(self) -> None:
        self.assertEqual(encode_text("a", b""), "a1lqfn3a")
        for text in (
            "abcdef1l7aum6echk45nj3s0wdvt2fg8x9yrzpqzd3ryx",
            "split1checkupstagehandshakeupstreamerranterredcaperredlc445v",
        ):
            with self.subTest(text=text):
                hrp, data = decode_text(text)
                self.assertEqual(encode_text(hrp, data), text)

    def test_encode_lowercases_hrp(self) -> None:
        self.assertEqual(encode_text("A", b""), "a1lqfn3a")

    def test_invalid_vectors(self) -> None:
        cases = (
            ("\x201xj0phk", MalformedText),
            ("\x7f1g6xzxy", MalformedText),
            ("qyrz8wqd2c9m", MalformedText),
            ("1qyrz8wqd2c9m", MalformedText),
            ("y1b0jsk6g", MalformedText),
            ("lt1igcx5c0", MalformedText),
            ("in1muywd", MalformedText),
            ("mm1crxm3i", MalformedText),
            ("au1s5cgom", MalformedText),
            ("16plkw9", MalformedText),
            ("1p2gdwpf", MalformedText),
            ("M1VUXWEZ", ChecksumInvalid),
            ("A1G7SGD8", ChecksumInvalid),
        )
        for text, error in cases:
            with self.subTest(text=text):
                with self.assertRaises(error):
                    decode_text(text)

    def test_rejects_mixed_case(self) -> None:
        with self.assertRaises(MixedCase):
            decode_text("A1lqfn3a")

    def test_detects_every_single_character_substitution(self) -> None:
        text = encode_text("jview", bytes(range(40)))
        data_start = text.rfind("1") + 1
        for position in range(data_start, len(text)):
            original = text[position]
            with self.subTest(position=position):
                for replacement in BECH32_ALPHABET:
                    if replacement == original:
                        continue
                    corrupted = text[:position] + replacement + text[position + 1 :]
                    with self.assertRaises(ChecksumInvalid, msg=replacement):
                        decode_text(corrupted)

    def test_detects_hrp_substitution(self) -> None:
        text = encode_text("jview", bytes(range(40)))
        for position in range(len("jview")):
            with self.subTest(position=position):
                replacement = "x" if text[position] != "x" else "y"
                corrupted = text[:position] + replacement + text[position + 1 :]
                with self.assertRaises(ChecksumInvalid):
                    decode_text(corrupted)

    def test_rejects_non_zero_padding_bits(self) -> None:
        # One byte uses two symbols with two spare bits.
        with self.assertRaisesRegex(InvalidPadding, "non-zero"):
            decode_text(_assemble("a", [0, 1]))

    def test_rejects_excess_padding_symbol(self) -> None:
        with self.assertRaisesRegex(InvalidPadding, "excess"):
            decode_text(_assemble("a", [0, 0, 0]))

    def test_length_limit(self) -> None:
        with self.assertRaises(EncodedTooLong):
            decode_text("a1" + "q" * MAX_ENCODED_CHARS)

    def test_validate_hrp(self) -> None:
        self.assertEqual(validate_hrp("JVIEW"), "jview")
        for hrp in ("", "jView", "j view", "jé"):
            with self.subTest(hrp=hrp):
                with self.assertRaises(InvalidHrp):
                    validate_hrp(hrp)


if __name__ == "__main__":
    unittest.main()
