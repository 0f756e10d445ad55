#!/usr/bin/env python3
from __future__ import annotations

import typer

from .commands import (
    seed as seed_command,
    ufvk as ufvk_command,
)


def register(app: typer.Typer) -> None:
    seed_command.register(app)
    ufvk_command.register(app)
