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

"""Pluggable Orchard group arithmetic.

The Pallas curve operations behind ``ak = [ask] SpendAuthBase`` come from an
external backend. A backend is any object with a ``spend_validating_key``
method, located either by a ``module:attribute`` reference or through the
``juno_keys.orchard_backends`` entry point group.
"""

from __future__ import annotations

import importlib
import importlib.metadata
from typing import Protocol, runtime_checkable

from ..core.errors import BackendUnavailable

ENTRY_POINT_GROUP = "juno_keys.orchard_backends"


@runtime_checkable
class OrchardBackend(Protocol):
    def spend_validating_key(self, ask: bytes) -> bytes:
        """Return the 32-byte encoding of ``[ask] SpendAuthBase`` (``ask`` is 32 bytes LE)."""
        ...


def _instantiate(target: object, *, source: str) -> OrchardBackend:
    if isinstance(target, type) or not isinstance(target, OrchardBackend):
        if not callable(target):
            raise BackendUnavailable(f"{source} does not provide spend_validating_key()")
        target = target()
    if isinstance(target, OrchardBackend):
        return target
    raise BackendUnavailable(f"{source} does not provide spend_validating_key()")


def _load_reference(reference: str) -> OrchardBackend:
    module_name, sep, attr = reference.partition(":")
    if not sep or not module_name or not attr:
        raise BackendUnavailable(f"backend reference must be 'module:attribute': {reference!r}")
    try:
        module = importlib.import_module(module_name)
    except ImportError as exc:
        raise BackendUnavailable(f"cannot import Orchard backend {module_name!r}: {exc}") from exc
    target: object = module
    for part in attr.split("."):
        try:
            target = getattr(target, part)
        except AttributeError as exc:
            raise BackendUnavailable(f"{reference!r} not found") from exc
    return _instantiate(target, source=reference)


def _load_entry_point() -> OrchardBackend | None:
    entry_points = sorted(
        importlib.metadata.entry_points(group=ENTRY_POINT_GROUP),
        key=lambda entry: entry.name,
    )
    for entry in entry_points:
        try:
            target = entry.load()
        except ImportError as exc:
            raise BackendUnavailable(
                f"cannot load Orchard backend entry point {entry.name!r}: {exc}"
            ) from exc
        return _instantiate(target, source=f"entry point {entry.name!r}")
    return None


def load_backend(reference: str | None = None) -> OrchardBackend:
    if reference and reference.strip():
        return _load_reference(reference.strip())
    backend = _load_entry_point()
    if backend is None:
        raise BackendUnavailable(
            "no Orchard key backend installed; set orchard.backend in the config "
            f"or install a package exposing the {ENTRY_POINT_GROUP!r} entry point"
        )
    return backend
