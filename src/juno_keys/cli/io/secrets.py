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

import os
from pathlib import Path

from ...core.errors import SeedInvalid

SECRET_FILE_MODE = 0o600


def _ensure_parent(path: Path) -> None:
    parent = path.parent
    if str(parent) and str(parent) != ".":
        parent.mkdir(parents=True, exist_ok=True)


def write_secret_file(path: str | Path, contents: str, *, force: bool) -> Path:
    target = Path(path)
    _ensure_parent(target)
    flags = os.O_WRONLY | os.O_CREAT
    flags |= os.O_TRUNC if force else os.O_EXCL
    try:
        fd = os.open(target, flags, SECRET_FILE_MODE)
    except FileExistsError as exc:
        raise FileExistsError(
            f"file already exists: {target}; use --force to overwrite"
        ) from exc
    with os.fdopen(fd, "w", encoding="ascii") as handle:
        handle.write(contents)
    if force and os.name != "nt":
        os.chmod(target, SECRET_FILE_MODE)
    return target


def read_seed_file(path: str | Path) -> str:
    raw = Path(path).read_text(encoding="utf-8")
    value = raw.strip()
    if not value:
        raise SeedInvalid(f"seed file is empty: {path}")
    return value
