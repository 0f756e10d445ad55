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

import hashlib
import unittest
from unittest import mock

from juno_keys.core.bounds import HARDENED_OFFSET
from juno_keys.core.errors import AccountInvalid, CoinTypeInvalid, SeedInvalid
from juno_keys.keys import zip32
from juno_keys.keys.zip32 import (
    PALLAS_P,
    PALLAS_Q,
    commit_ivk_randomness,
    derive_account_key,
    derive_child,
    master_key,
    nullifier_deriving_key,
    prf_expand,
    spend_authorizing_scalar,
)

SEED = bytes(range(32))


class TestZip32(unittest.TestCase):
    def test_master_key_is_personalised_blake2b(self) -> None:
        digest = hashlib.blake2b(SEED, digest_size=64, person=b"ZcashIP32Orchard").digest()
        key = master_key(SEED)
        self.assertEqual(key.depth, 0)
        self.assertEqual(key.child_index, 0)
        self.assertEqual(key.spending_key, digest[:32])
        self.assertEqual(key.chain_code, digest[32:])

    def test_child_derivation_uses_prf_expand(self) -> None:
        parent = master_key(SEED)
        index = HARDENED_OFFSET + 32
        child = derive_child(parent, index)
        expected = prf_expand(
            parent.chain_code,
            b"\x81" + parent.spending_key + index.to_bytes(4, "little"),
        )
        self.assertEqual(child.depth, 1)
        self.assertEqual(child.child_index, index)
        self.assertEqual(child.spending_key + child.chain_code, expected)

    def test_non_hardened_child_is_rejected(self) -> None:
        parent = master_key(SEED)
        for index in (0, HARDENED_OFFSET - 1, 1 << 32):
            with self.subTest(index=index):
                with self.assertRaisesRegex(ValueError, "hardened"):
                    derive_child(parent, index)

    def test_account_path(self) -> None:
        key = derive_account_key(SEED, 8133, 0)
        self.assertEqual(key.depth, 3)
        self.assertEqual(key.child_index, HARDENED_OFFSET)

        expected = master_key(SEED)
        for index in (32, 8133, 0):
            expected = derive_child(expected, index + HARDENED_OFFSET)
        self.assertEqual(key, expected)

    def test_accounts_and_coin_types_are_separated(self) -> None:
        keys = {
            derive_account_key(SEED, 8133, 0).spending_key,
            derive_account_key(SEED, 8133, 1).spending_key,
            derive_account_key(SEED, 8134, 0).spending_key,
            derive_account_key(bytes(reversed(SEED)), 8133, 0).spending_key,
        }
        self.assertEqual(len(keys), 4)

    def test_account_path_rejects_out_of_range(self) -> None:
        with self.assertRaises(CoinTypeInvalid):
            derive_account_key(SEED, -1, 0)
        with self.assertRaises(CoinTypeInvalid):
            derive_account_key(SEED, HARDENED_OFFSET, 0)
        with self.assertRaises(AccountInvalid):
            derive_account_key(SEED, 8133, HARDENED_OFFSET)
        with self.assertRaises(AccountInvalid):
            derive_account_key(SEED, 8133, False)  # type: ignore[arg-type]

    def test_key_components_are_field_elements(self) -> None:
        spending_key = derive_account_key(SEED, 8133, 0).spending_key
        ask = spend_authorizing_scalar(spending_key)
        nk = nullifier_deriving_key(spending_key)
        rivk = commit_ivk_randomness(spending_key)
        self.assertTrue(0 < ask < PALLAS_Q)
        self.assertTrue(0 <= nk < PALLAS_P)
        self.assertTrue(0 <= rivk < PALLAS_Q)
        self.assertEqual(len({ask, nk, rivk}), 3)

    def test_prf_expand_output(self) -> None:
        out = prf_expand(b"\x00" * 32, b"\x06")
        self.assertEqual(len(out), 64)
        expected = hashlib.blake2b(
            b"\x00" * 32 + b"\x06", digest_size=64, person=b"Zcash_ExpandSeed"
        ).digest()
        self.assertEqual(out, expected)

    def test_zero_spend_authorizing_key_is_rejected(self) -> None:
        with mock.patch.object(zip32, "spend_authorizing_scalar", return_value=0):
            with self.assertRaises(SeedInvalid):
                master_key(SEED)


if __name__ == "__main__":
    unittest.main()
