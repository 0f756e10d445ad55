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

"""Stable one-line JSON output for ``--json``."""

from __future__ import annotations

import json
from collections.abc import Mapping
from typing import Any

import typer

JSON_VERSION = "v1"


def _dump(payload: Mapping[str, Any]) -> str:
    return json.dumps(payload, separators=(",", ":"), ensure_ascii=True)


def build_ok_envelope(data: Mapping[str, Any]) -> dict[str, Any]:
    return {
        "version": JSON_VERSION,
        "status": "ok",
        "data": {key: value for key, value in data.items() if value is not None},
    }


def build_error_envelope(code: str, message: str) -> dict[str, Any]:
    return {
        "version": JSON_VERSION,
        "status": "err",
        "error": {"code": code, "message": message},
    }


def write_json_ok(data: Mapping[str, Any]) -> None:
    typer.echo(_dump(build_ok_envelope(data)))


def write_json_error(code: str, message: str) -> None:
    typer.echo(_dump(build_error_envelope(code, message)))
