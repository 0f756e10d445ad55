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

from ...keys.networks import Network
from ..core.common import _ctx_flags, _ctx_value, _run_cli
from ..core.envelope import write_json_ok
from ..core.types import InspectResult, UfvkFromSeedArgs, UfvkResult
from ..flows.ufvk import run_ufvk_from_seed, run_ufvk_inspect
from ..ui import build_kv_table, console

_UFVK_HELP = "Derive and inspect unified full viewing keys."

_FROM_SEED_HELP = (
    "Derive an Orchard-only unified full viewing key from a base64 seed.\n\n"
    "The seed is read from --seed-file (preferred) or --seed-base64. Only the\n"
    "viewing key is printed; spending material never leaves the process.\n\n"
    "Examples:\n"
    "  juno-keys ufvk from-seed --seed-file seed.b64 --network mainnet\n"
    "  juno-keys ufvk from-seed --seed-file seed.b64 --network testnet --account 1\n"
    "  juno-keys --json ufvk from-seed --seed-file seed.b64 --network regtest"
)

_INSPECT_HELP = (
    "Decode a unified full viewing key and list its items.\n\n"
    "The network is detected from the key prefix unless --network is given.\n\n"
    "Examples:\n"
    "  juno-keys ufvk inspect jview1...\n"
    "  juno-keys --json ufvk inspect jviewtest1... --network testnet"
)

ufvk_app = typer.Typer(help=_UFVK_HELP, no_args_is_help=True)


def register(app: typer.Typer) -> None:
    app.add_typer(ufvk_app, name="ufvk")


def _emit_ufvk_result(result: UfvkResult, *, json_output: bool) -> None:
    if json_output:
        write_json_ok(
            {
                "ufvk": result.ufvk,
                "ua_hrp": result.ua_hrp,
                "coin_type": result.coin_type,
                "account": result.account,
                "network": result.network.value,
            }
        )
        return
    typer.echo(result.ufvk)


def _emit_inspect_result(result: InspectResult, *, json_output: bool, quiet: bool) -> None:
    if json_output:
        write_json_ok(
            {
                "ufvk_hrp": result.ufvk_hrp,
                "network": result.network.value,
                "items": [
                    {
                        "typecode": item.typecode,
                        "type": item.name,
                        "length": item.length,
                        "data_hex": item.data_hex,
                    }
                    for item in result.items
                ],
            }
        )
        return
    rows = [
        ("Network", result.network.value),
        ("Prefix", result.ufvk_hrp),
        ("Items", str(len(result.items))),
    ]
    for item in result.items:
        label = f"{item.name} (0x{item.typecode:02x})"
        rows.append((label, f"{item.length} bytes"))
        if not quiet:
            rows.append(("", item.data_hex))
    console.print(build_kv_table(rows, title="Unified full viewing key"))


def _run_from_seed(args: UfvkFromSeedArgs, *, quiet: bool, json_output: bool) -> None:
    result = run_ufvk_from_seed(args, quiet=quiet or json_output)
    _emit_ufvk_result(result, json_output=json_output)


def _run_inspect(
    text: str,
    *,
    network: Network | None,
    quiet: bool,
    json_output: bool,
) -> None:
    result = run_ufvk_inspect(text, network=network)
    _emit_inspect_result(result, json_output=json_output, quiet=quiet)


@ufvk_app.command("from-seed", help=_FROM_SEED_HELP)
def from_seed(
    ctx: typer.Context,
    seed_file: Path | None = typer.Option(
        None,
        "--seed-file",
        help="File holding the base64 seed (whitespace is ignored).",
        rich_help_panel="Seed",
    ),
    seed_base64: str | None = typer.Option(
        None,
        "--seed-base64",
        help="Base64 seed on the command line (ends up in shell history).",
        rich_help_panel="Seed",
    ),
    network: Network | None = typer.Option(
        None,
        "--network",
        "-n",
        case_sensitive=False,
        help="Target network (default: defaults.network from the config).",
    ),
    account: int | None = typer.Option(
        None,
        "--account",
        "-a",
        help="ZIP 32 account index, 0..2^31-1 (default: defaults.account, normally 0).",
    ),
) -> None:
    json_output, quiet, debug = _ctx_flags(ctx)
    args = UfvkFromSeedArgs(
        seed_file=str(seed_file) if seed_file is not None else None,
        seed_base64=seed_base64,
        network=network,
        account=account,
        config=_ctx_value(ctx, "config"),
    )
    _run_cli(
        functools.partial(_run_from_seed, args, quiet=quiet, json_output=json_output),
        debug=debug,
        json_output=json_output,
    )


@ufvk_app.command("inspect", help=_INSPECT_HELP)
def inspect(
    ctx: typer.Context,
    ufvk: str = typer.Argument(..., help="Unified full viewing key to decode."),
    network: Network | None = typer.Option(
        None,
        "--network",
        "-n",
        case_sensitive=False,
        help="Expected network (default: detect from the prefix).",
    ),
) -> None:
    json_output, quiet, debug = _ctx_flags(ctx)
    _run_cli(
        functools.partial(
            _run_inspect,
            ufvk,
            network=network,
            quiet=quiet,
            json_output=json_output,
        ),
        debug=debug,
        json_output=json_output,
    )
