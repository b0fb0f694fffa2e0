"""Command group: single-entry registry lookups."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from deobf.commands._base import DeobfGroup
from deobf.domain.operations import OperationKey

if TYPE_CHECKING:
    from deobf.commands._context import AppContext

_LOOKUP_EXAMPLES = (
    "deobf --schema shop lookup token aB3",
    "deobf --schema shop lookup proxies shop.model.Order",
    "deobf --schema shop lookup operation 2Xk0bWq0q7bRbqvGQyZ3uQ7fPZ8=",
    "deobf --schema shop lookup operation"
    " --signature shop.OrderRequest find '(I)Lshop.OrderProxy;'",
    "deobf --json --schema shop lookup referenced shop.client.OrderProxy",
)


@click.group(cls=DeobfGroup, examples=_LOOKUP_EXAMPLES)
def lookup() -> None:
    """Resolve tokens, proxy types, and operations."""


@lookup.command(
    examples=(
        "deobf --schema shop lookup token aB3",
        "deobf --json --schema shop lookup token aB3",
    )
)
@click.argument("token")
@click.pass_obj
def token(app: AppContext, token: str) -> None:
    """Resolve an obfuscated type token to its canonical type."""
    app.emit(app.lookup("lookup_token").token(token))


@lookup.command(
    examples=(
        "deobf --schema shop lookup proxies shop.model.Order",
    )
)
@click.argument("domain_type")
@click.pass_obj
def proxies(app: AppContext, domain_type: str) -> None:
    """List client proxy types for a domain type, most-derived first."""
    app.emit(app.lookup("lookup_proxies").proxies(domain_type))


@lookup.command(
    examples=(
        "deobf --schema shop lookup operation 2Xk0bWq0q7bRbqvGQyZ3uQ7fPZ8=",
        "deobf --schema shop lookup operation"
        " --signature shop.OrderRequest find '(I)Lshop.OrderProxy;'",
    )
)
@click.argument("operation", required=False)
@click.option(
    "--signature",
    nargs=3,
    type=str,
    default=None,
    metavar="CONTEXT METHOD DESCRIPTOR",
    help="Derive the operation key from a request method signature.",
)
@click.pass_obj
def operation(
    app: AppContext, operation: str | None, signature: tuple[str, str, str] | None
) -> None:
    """Show dispatch metadata for an operation key."""
    if signature:
        key = OperationKey.for_method(*signature)
    elif operation:
        key = OperationKey(operation)
    else:
        raise click.UsageError("Pass an OPERATION key or --signature")
    app.emit(app.lookup("lookup_operation").operation(key))


@lookup.command(
    examples=(
        "deobf --schema shop lookup referenced shop.client.OrderProxy",
    )
)
@click.argument("name")
@click.pass_obj
def referenced(app: AppContext, name: str) -> None:
    """Check whether any token resolves to a canonical type name."""
    app.emit(app.lookup("lookup_referenced").referenced(name))
