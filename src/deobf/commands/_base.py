"""Click classes shared by every deobf command.

Commands take ``examples``: the command lines that ``--examples`` prints
before exiting. A group also points at the subcommands that carry their
own examples.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

import click


def _show_examples(ctx: click.Context, _param: click.Parameter, value: bool) -> None:
    if not value or ctx.resilient_parsing:
        return
    command = ctx.command
    click.echo(f"Examples for '{ctx.command_path}':")
    for line in getattr(command, "examples", ()):
        click.echo(f"  $ {line}")
    if isinstance(command, click.Group):
        documented = sorted(
            name for name, sub in command.commands.items() if getattr(sub, "examples", ())
        )
        if documented:
            choices = ",".join(documented)
            click.echo(f"\nPer-command examples: {ctx.command_path} {{{choices}}} --examples")
    ctx.exit(0)


class _ExamplesMixin:
    examples: tuple[str, ...]

    def __init__(self, *args: Any, examples: Sequence[str] = (), **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self.examples = tuple(examples)
        if self.examples:
            self.params.append(  # type: ignore[attr-defined]
                click.Option(
                    ["--examples"],
                    is_flag=True,
                    expose_value=False,
                    is_eager=True,
                    callback=_show_examples,
                    help="Show example command lines and exit.",
                )
            )


class DeobfCommand(_ExamplesMixin, click.Command):
    pass


class DeobfGroup(_ExamplesMixin, click.Group):
    """Group whose subcommands are :class:`DeobfCommand` by default."""

    command_class = DeobfCommand
