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

from ...config import load_app_config
from ...keys.seed import generate_seed_base64
from ..core.log import _note, _warn
from ..core.types import SeedNewArgs, SeedResult
from ..io.secrets import write_secret_file


def run_seed_new(args: SeedNewArgs, *, quiet: bool) -> SeedResult:
    size = args.size
    if size is None:
        size = load_app_config(args.config).defaults.seed_bytes
    seed_b64 = generate_seed_base64(size)

    out_path = None
    if args.out:
        written = write_secret_file(args.out, seed_b64 + "\n", force=args.force)
        out_path = str(written)
        _note(f"- wrote {out_path} (mode 0600)", quiet=quiet)

    reveal = args.print_seed or out_path is None
    if reveal:
        _warn("seed printed to stdout; keep it out of logs and shell history", quiet=quiet)
    return SeedResult(
        size=size,
        seed_base64=seed_b64 if reveal else None,
        out_path=out_path,
    )
