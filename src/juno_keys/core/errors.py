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

"""Error taxonomy shared by the codec, key derivation and CLI.

Every error carries a stable ``code`` that the JSON envelope reports. Caller
and malformed-input errors derive from :class:`ValueError`; implementation
bugs derive from :class:`InternalError` so they are never mistaken for bad
input.
"""

from __future__ import annotations


class ContainerError(ValueError):
    code = "container_invalid"

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or self.code.replace("_", " "))


class EmptyContainer(ContainerError):
    code = "empty_container"


class DuplicateTypeCode(ContainerError):
    code = "duplicate_typecode"


class InvalidTypeCode(ContainerError):
    code = "invalid_typecode"


class HrpTooLong(ContainerError):
    code = "hrp_too_long"


class PayloadTooLarge(ContainerError):
    code = "payload_too_large"


class HrpMismatch(ContainerError):
    code = "hrp_mismatch"


class MalformedContainer(ContainerError):
    code = "malformed_container"


class UnexpectedItemCount(ContainerError):
    code = "unexpected_item_count"


class BufferTooShort(ContainerError):
    code = "buffer_too_short"


class BufferTooLong(ContainerError):
    code = "buffer_too_long"


class InvalidHrp(ContainerError):
    code = "invalid_hrp"


class EncodedTooLong(ContainerError):
    code = "encoded_too_long"


class MalformedText(ContainerError):
    code = "malformed_text"


class ChecksumInvalid(ContainerError):
    code = "checksum_invalid"


class MixedCase(ContainerError):
    code = "mixed_case"


class InvalidPadding(ContainerError):
    code = "invalid_padding"


class KeysError(ValueError):
    code = "keys_invalid"

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or self.code)


class SeedInvalid(KeysError):
    code = "seed_invalid"


class UaHrpInvalid(KeysError):
    code = "ua_hrp_invalid"


class CoinTypeInvalid(KeysError):
    code = "coin_type_invalid"


class AccountInvalid(KeysError):
    code = "account_invalid"


class BackendUnavailable(KeysError):
    code = "backend_unavailable"


class InternalError(RuntimeError):
    code = "internal"

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or self.code)


class ContainerInvariantError(InternalError):
    pass


def error_code(exc: BaseException) -> str:
    code = getattr(exc, "code", None)
    if isinstance(code, str) and code:
        return code
    if isinstance(exc, OSError):
        return "io_error"
    if isinstance(exc, ValueError):
        return "invalid_request"
    return "internal"


__all__ = [
    "AccountInvalid",
    "BackendUnavailable",
    "BufferTooLong",
    "BufferTooShort",
    "ChecksumInvalid",
    "CoinTypeInvalid",
    "ContainerError",
    "ContainerInvariantError",
    "DuplicateTypeCode",
    "EmptyContainer",
    "EncodedTooLong",
    "HrpMismatch",
    "HrpTooLong",
    "InternalError",
    "InvalidHrp",
    "InvalidPadding",
    "InvalidTypeCode",
    "KeysError",
    "MalformedContainer",
    "MalformedText",
    "MixedCase",
    "PayloadTooLarge",
    "SeedInvalid",
    "UaHrpInvalid",
    "UnexpectedItemCount",
    "error_code",
]
