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

import importlib.metadata
from collections.abc import Callable
from typing import Any

import typer
from rich.markup import escape
from rich.traceback import install as install_rich_traceback

from ...core.errors import error_code
from ..ui import console_err
from .envelope import write_json_error

EXIT_FAILURE = 1


class InvalidRequest(ValueError):
    code = "invalid_request"


def _run_cli(func: Callable[[], Any], *, debug: bool, json_output: bool) -> None:
    if debug:
        install_rich_traceback(show_locals=False)
    try:
        result = func()
    except typer.Exit:
        raise
    except (OSError, RuntimeError, ValueError, TypeError, LookupError) as exc:
        if debug:
            raise
        _report_error(exc, json_output=json_output)
        raise typer.Exit(code=EXIT_FAILURE)
    if isinstance(result, int) and result != 0:
        raise typer.Exit(code=result)


def _report_error(exc: BaseException, *, json_output: bool) -> None:
    message = _error_message(exc)
    if json_output:
        write_json_error(error_code(exc), message)
        return
    console_err.print(f"[error]Error:[/error] {escape(message)}")


def _error_message(exc: BaseException) -> str:
    if isinstance(exc, OSError) and exc.filename is not None and exc.strerror:
        return f"{exc.strerror}: {exc.filename}"
    return str(exc) or exc.__class__.__name__


def _ctx_value(ctx: typer.Context, key: str) -> Any:
    if ctx.obj is None:
        return None
    return ctx.obj.get(key)


def _ctx_flags(ctx: typer.Context) -> tuple[bool, bool, bool]:
    """Return (json_output, quiet, debug) from the root callback."""
    return (
        bool(_ctx_value(ctx, "json")),
        bool(_ctx_value(ctx, "quiet")),
        bool(_ctx_value(ctx, "debug")),
    )


def _get_version() -> str:
    try:
        return importlib.metadata.version("juno-keys")
    except importlib.metadata.PackageNotFoundError:
        return "0.0.0"
