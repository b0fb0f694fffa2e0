"""Standalone command: summarize a registry."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from deobf.commands._base import DeobfCommand

if TYPE_CHECKING:
    from deobf.commands._context import AppContext


@click.command(
    cls=DeobfCommand,
    examples=(
        "deobf --schema shop dump",
        "deobf --schema shop dump --full",
        "deobf --json --schema shop dump --merge shop-admin --merge shop-reports",
    ),
)
@click.option(
    "--merge",
    "merge_schemas",
    multiple=True,
    help="Merge another schema's registry into the result (repeatable).",
)
@click.option("--full", is_flag=True, help="Include every entry, not just counts.")
@click.pass_obj
def dump(app: AppContext, merge_schemas: tuple[str, ...], full: bool) -> None:
    """Summarize the selected schema's registry."""
    app.emit(app.lookup("dump", merge=merge_schemas).dump(full=full))
