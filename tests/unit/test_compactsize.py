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

from juno_keys.core.bounds import MAX_COMPACT_SIZE
from juno_keys.encoding.compactsize import (
    compact_size_len,
    decode_compact_size,
    encode_compact_size,
)


class TestCompactSize(unittest.TestCase):
    def test_known_encodings(self) -> None:
        cases = (
            (0, b"\x00"),
            (1, b"\x01"),
            (0xFC, b"\xfc"),
            (0xFD, b"\xfd\xfd\x00"),
            (0xFFFF, b"\xfd\xff\xff"),
            (0x10000, b"\xfe\x00\x00\x01\x00"),
            (MAX_COMPACT_SIZE, b"\xfe\x00\x00\x00\x02"),
        )
        for value, encoded in cases:
            with self.subTest(value=value):
                self.assertEqual(encode_compact_size(value), encoded)
                self.assertEqual(compact_size_len(value), len(encoded))
                self.assertEqual(decode_compact_size(encoded, 0), (value, len(encoded)))

    def test_decode_from_offset(self) -> None:
        data = b"\xaa\xfd\x00\x01\x05"
        value, idx = decode_compact_size(data, 1)
        self.assertEqual(value, 0x100)
        self.assertEqual(idx, 4)
        self.assertEqual(decode_compact_size(data, idx), (5, 5))

    def test_encode_rejects_out_of_range(self) -> None:
        with self.assertRaisesRegex(ValueError, "non-negative"):
            encode_compact_size(-1)
        with self.assertRaisesRegex(ValueError, "<="):
            encode_compact_size(MAX_COMPACT_SIZE + 1)

    def test_decode_rejects_truncated(self) -> None:
        for data in (b"", b"\xfd", b"\xfd\x00", b"\xfe\x00\x00\x01", b"\xff" + b"\x00" * 7):
            with self.subTest(data=data):
                with self.assertRaisesRegex(ValueError, "truncated"):
                    decode_compact_size(data, 0)

    def test_decode_rejects_non_canonical(self) -> None:
        cases = (
            b"\xfd\xfc\x00",
            b"\xfd\x00\x00",
            b"\xfe\xff\xff\x00\x00",
            b"\xff\xff\xff\xff\xff\x00\x00\x00\x00",
        )
        for data in cases:
            with self.subTest(data=data):
                with self.assertRaisesRegex(ValueError, "non-canonical"):
                    decode_compact_size(data, 0)

    def test_decode_rejects_values_above_limit(self) -> None:
        cases = (
            b"\xfe\x01\x00\x00\x02",
            b"\xff\x00\x00\x00\x00\x01\x00\x00\x00",
        )
        for data in cases:
            with self.subTest(data=data):
                with self.assertRaisesRegex(ValueError, "too large"):
                    decode_compact_size(data, 0)


if __name__ == "__main__":
    unittest.main()
