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

from juno_keys.core.errors import (
    AccountInvalid,
    CoinTypeInvalid,
    InternalError,
    SeedInvalid,
    UaHrpInvalid,
)
from juno_keys.encoding.unified import Typecode, decode_container
from juno_keys.keys.ufvk import derive_viewing_key_bytes, ufvk_from_seed_base64
from juno_keys.keys.zip32 import (
    commit_ivk_randomness,
    derive_account_key,
    nullifier_deriving_key,
    spend_authorizing_scalar,
)
from tests.test_support import (
    TEST_SEED,
    TEST_SEED_B64,
    FakeOrchardBackend,
    RejectingBackend,
    ShortKeyBackend,
    fake_ak,
)


class TestViewingKeyBytes(unittest.TestCase):
    def test_layout_is_ak_nk_rivk(self) -> None:
        backend = FakeOrchardBackend()
        fvk = derive_viewing_key_bytes(TEST_SEED, 8133, 0, backend=backend)

        spending_key = derive_account_key(TEST_SEED, 8133, 0).spending_key
        ask = spend_authorizing_scalar(spending_key).to_bytes(32, "little")
        self.assertEqual(backend.calls, [ask])
        self.assertEqual(len(fvk), 96)
        self.assertEqual(fvk[:32], fake_ak(ask))
        self.assertEqual(fvk[32:64], nullifier_deriving_key(spending_key).to_bytes(32, "little"))
        self.assertEqual(fvk[64:], commit_ivk_randomness(spending_key).to_bytes(32, "little"))

    def test_sign_bit_is_cleared(self) -> None:
        fvk = derive_viewing_key_bytes(TEST_SEED, 8133, 0, backend=FakeOrchardBackend())
        self.assertEqual(fvk[31] & 0x80, 0)

    def test_backend_with_wrong_length_is_internal_error(self) -> None:
        with self.assertRaises(InternalError):
            derive_viewing_key_bytes(TEST_SEED, 8133, 0, backend=ShortKeyBackend())


class TestUfvkFromSeed(unittest.TestCase):
    def test_mainnet_ufvk(self) -> None:
        ufvk = ufvk_from_seed_base64(TEST_SEED_B64, "j", 8133, 0, backend=FakeOrchardBackend())
        self.assertTrue(ufvk.startswith("jview1"))
        typecode, payload = decode_container(ufvk, "jview")
        self.assertEqual(typecode, Typecode.ORCHARD)
        expected = derive_viewing_key_bytes(TEST_SEED, 8133, 0, backend=FakeOrchardBackend())
        self.assertEqual(payload, expected)

    def test_testnet_ufvk(self) -> None:
        ufvk = ufvk_from_seed_base64(
            TEST_SEED_B64, "jtest", 8134, 0, backend=FakeOrchardBackend()
        )
        self.assertTrue(ufvk.startswith("jviewtest1"))
        self.assertEqual(decode_container(ufvk, "jviewtest")[0], Typecode.ORCHARD)

    def test_deterministic_and_account_separated(self) -> None:
        backend = FakeOrchardBackend()
        first = ufvk_from_seed_base64(TEST_SEED_B64, "j", 8133, 0, backend=backend)
        again = ufvk_from_seed_base64(TEST_SEED_B64, "j", 8133, 0, backend=backend)
        other = ufvk_from_seed_base64(TEST_SEED_B64, "j", 8133, 1, backend=backend)
        self.assertEqual(first, again)
        self.assertNotEqual(first, other)

    def test_invalid_arguments(self) -> None:
        backend = FakeOrchardBackend()
        short_seed = base64.b64encode(bytes(31)).decode("ascii")
        cases = (
            ((TEST_SEED_B64, "", 8133, 0), UaHrpInvalid),
            ((TEST_SEED_B64, "u", 8133, 0), UaHrpInvalid),
            ((TEST_SEED_B64, "j", -1, 0), CoinTypeInvalid),
            ((TEST_SEED_B64, "j", 1 << 31, 0), CoinTypeInvalid),
            ((TEST_SEED_B64, "j", 8133, -1), AccountInvalid),
            ((TEST_SEED_B64, "j", 8133, 1 << 31), AccountInvalid),
            ((TEST_SEED_B64, "j", 8133, True), AccountInvalid),
            (("%%%", "j", 8133, 0), SeedInvalid),
            ((short_seed, "j", 8133, 0), SeedInvalid),
        )
        for args, error in cases:
            with self.subTest(args=args[1:], error=error.__name__):
                with self.assertRaises(error):
                    ufvk_from_seed_base64(*args, backend=backend)
        self.assertEqual(backend.calls, [])

    def test_backend_rejection_is_seed_invalid(self) -> None:
        with self.assertRaises(SeedInvalid):
            ufvk_from_seed_base64(TEST_SEED_B64, "j", 8133, 0, backend=RejectingBackend())

    def test_seed_buffer_is_wiped(self) -> None:
        seed = bytearray(TEST_SEED)
        with mock.patch("juno_keys.keys.ufvk.decode_seed_base64", return_value=seed):
            ufvk_from_seed_base64(TEST_SEED_B64, "j", 8133, 0, backend=FakeOrchardBackend())
        self.assertEqual(seed, bytearray(len(TEST_SEED)))

    def test_seed_buffer_is_wiped_on_failure(self) -> None:
        seed = bytearray(TEST_SEED)
        with mock.patch("juno_keys.keys.ufvk.decode_seed_base64", return_value=seed):
            with self.assertRaises(InternalError):
                ufvk_from_seed_base64(TEST_SEED_B64, "j", 8133, 0, backend=ShortKeyBackend())
        self.assertEqual(seed, bytearray(len(TEST_SEED)))


if __name__ == "__main__":
    unittest.main()
