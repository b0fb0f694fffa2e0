"""Rich/JSON output for ServiceResult.

Humans get a key/value table; ``--json`` emits the serialized result;
``--quiet`` reduces success to ``OK: op``.
"""

from __future__ import annotations

import json as _json
from typing import TYPE_CHECKING, Any

from rich.table import Table
from rich.text import Text

from deobf.output.console import create_console, get_output

if TYPE_CHECKING:
    from deobf.services.result import ServiceResult


def _cell(value: Any) -> Text:
    if isinstance(value, list):
        return Text("\n".join(str(v) for v in value) or "-", style="deobf.type")
    if isinstance(value, dict):
        return Text(_json.dumps(value, indent=2, sort_keys=True))
    return Text(str(value))


def format_result(result: ServiceResult, *, json_output: bool = False, quiet: bool = False) -> str:
    """Format a ServiceResult for display."""
    if json_output:
        return result.model_dump_json(indent=2)

    if not result.ok:
        msg = result.error.message if result.error else "Unknown error"
        return f"ERROR: {result.op} - {msg}"

    if quiet or not result.data:
        return f"OK: {result.op}"

    console = create_console()
    console.print(Text(f"OK: {result.op}", style="deobf.ok"))
    table = Table(show_header=False, box=None, pad_edge=False)
    table.add_column(style="deobf.key")
    table.add_column()
    for key, value in result.data.items():
        table.add_row(key, _cell(value))
    console.print(table)
    return get_output(console).rstrip("\n")
