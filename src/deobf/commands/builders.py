"""Standalone command: list registered builder plugins."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from deobf.commands._base import DeobfCommand
from deobf.services.result import ServiceResult

if TYPE_CHECKING:
    from deobf.commands._context import AppContext


@click.command(
    cls=DeobfCommand,
    examples=(
        "deobf builders",
        "deobf --json builders",
    ),
)
@click.pass_obj
def builders(app: AppContext) -> None:
    """List plugins that can provide registry builders."""
    plugins = app.plugins
    app.emit(
        ServiceResult(
            ok=True,
            op="builders",
            data={
                "plugins": plugins.list_plugin_names(),
                "table_schemas": plugins.table.schemas(),
            },
        )
    )
