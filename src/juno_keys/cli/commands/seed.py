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

import functools
from pathlib import Path

import typer

from ..core.common import _ctx_flags, _ctx_value, _run_cli
from ..core.envelope import write_json_ok
from ..core.types import SeedNewArgs, SeedResult
from ..flows.seed import run_seed_new

_SEED_HELP = "Generate and manage wallet seeds."

_SEED_NEW_HELP = (
    "Generate a random seed and encode it as base64.\n\n"
    "Without --out the seed is printed to stdout. With --out it is written to a\n"
    "file readable only by you (mode 0600) and only the path is printed.\n\n"
    "Examples:\n"
    "  juno-keys seed new --out ~/.juno/seed.b64\n"
    "  juno-keys seed new --bytes 32 --print\n"
    "  juno-keys --json seed new --out seed.b64"
)

seed_app = typer.Typer(help=_SEED_HELP, no_args_is_help=True)


def register(app: typer.Typer) -> None:
    app.add_typer(seed_app, name="seed")


def _emit_seed_result(result: SeedResult, *, json_output: bool) -> None:
    if json_output:
        write_json_ok(
            {
                "bytes": result.size,
                "out_path": result.out_path,
                "seed_base64": result.seed_base64,
            }
        )
        return
    if result.seed_base64 is not None:
        typer.echo(result.seed_base64)
        return
    if result.out_path is not None:
        typer.echo(result.out_path)


def _run_seed_new(args: SeedNewArgs, *, quiet: bool, json_output: bool) -> None:
    result = run_seed_new(args, quiet=quiet or json_output)
    _emit_seed_result(result, json_output=json_output)


@seed_app.command("new", help=_SEED_NEW_HELP)
def seed_new(
    ctx: typer.Context,
    size: int | None = typer.Option(
        None,
        "--bytes",
        help="Seed size in bytes, 32..252 (default: defaults.seed_bytes, normally 64).",
    ),
    out: Path | None = typer.Option(
        None,
        "--out",
        "-o",
        help="Write the base64 seed to this file (mode 0600).",
    ),
    force: bool = typer.Option(
        False,
        "--force",
        help="Overwrite --out if it already exists.",
        rich_help_panel="Behavior",
    ),
    print_seed: bool = typer.Option(
        False,
        "--print",
        help="Also print the seed to stdout when using --out (avoid logs).",
        rich_help_panel="Behavior",
    ),
) -> None:
    json_output, quiet, debug = _ctx_flags(ctx)
    args = SeedNewArgs(
        size=size,
        out=str(out) if out is not None else None,
        force=force,
        print_seed=print_seed,
        config=_ctx_value(ctx, "config"),
    )
    _run_cli(
        functools.partial(_run_seed_new, args, quiet=quiet, json_output=json_output),
        debug=debug,
        json_output=json_output,
    )
