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

import base64
import unittest
from unittest import mock

from juno_keys.core.bounds import MAX_SEED_BYTES, MIN_SEED_BYTES
from juno_keys.core.errors import SeedInvalid
from juno_keys.keys.seed import decode_seed_base64, generate_seed_base64, wipe


class TestSeed(unittest.TestCase):
    def test_generate_default_size(self) -> None:
        seed = base64.b64decode(generate_seed_base64())
        self.assertEqual(len(seed), 64)

    def test_generate_sizes_at_bounds(self) -> None:
        for size in (MIN_SEED_BYTES, MAX_SEED_BYTES):
            with self.subTest(size=size):
                self.assertEqual(len(base64.b64decode(generate_seed_base64(size))), size)

    def test_generate_uses_system_randomness(self) -> None:
        with mock.patch(
            "juno_keys.keys.seed.get_random_bytes", return_value=b"\x01" * 32
        ) as random_bytes:
            value = generate_seed_base64(32)
        random_bytes.assert_called_once_with(32)
        self.assertEqual(value, base64.b64encode(b"\x01" * 32).decode("ascii"))

    def test_generate_rejects_bad_sizes(self) -> None:
        for size in (0, MIN_SEED_BYTES - 1, MAX_SEED_BYTES + 1, True, "64"):
            with self.subTest(size=size):
                with self.assertRaises(SeedInvalid):
                    generate_seed_base64(size)  # type: ignore[arg-type]

    def test_generated_seeds_differ(self) -> None:
        self.assertNotEqual(generate_seed_base64(), generate_seed_base64())

    def test_decode_strips_whitespace(self) -> None:
        encoded = base64.b64encode(bytes(range(32))).decode("ascii")
        seed = decode_seed_base64(f"  {encoded}\n")
        self.assertIsInstance(seed, bytearray)
        self.assertEqual(bytes(seed), bytes(range(32)))

    def test_decode_rejects_invalid_input(self) -> None:
        cases = (
            "not base64!",
            "",
            base64.b64encode(bytes(MIN_SEED_BYTES - 1)).decode("ascii"),
            base64.b64encode(bytes(MAX_SEED_BYTES + 1)).decode("ascii"),
        )
        for value in cases:
            with self.subTest(value=value[:16]):
                with self.assertRaises(SeedInvalid):
                    decode_seed_base64(value)

    def test_wipe_zeroes_buffer(self) -> None:
        buffer = bytearray(b"\xff" * 8)
        wipe(buffer)
        self.assertEqual(buffer, bytearray(8))


if __name__ == "__main__":
    unittest.main()
