"""Root CLI group for deobf with global flags and command registration."""

from __future__ import annotations

import click

from deobf import __version__
from deobf.commands import register_commands
from deobf.commands._context import AppContext
from deobf.config.settings import DeobfSettings


@click.group(invoke_without_command=True)
@click.version_option(version=__version__, prog_name="deobf")
@click.option("--json", "json_output", is_flag=True, help="Structured JSON output.")
@click.option("-q", "--quiet", is_flag=True, help="Minimal output.")
@click.option("-v", "--verbose", is_flag=True, help="Debug logging.")
@click.option("--log-json", is_flag=True, help="Structured JSON log output to stderr.")
@click.option("-c", "--config", "config_path", default=None, help="Override config file path.")
@click.option("-s", "--schema", "schema_name", default=None, help="Registry schema to load.")
@click.pass_context
def cli(
    ctx: click.Context,
    json_output: bool,
    quiet: bool,
    verbose: bool,
    log_json: bool,
    config_path: str | None,
    schema_name: str | None,
) -> None:
    """deobf — inspect deobfuscation registries."""
    ctx.ensure_object(dict)
    settings = DeobfSettings.from_cli(
        config_path=config_path,
        schema_name=schema_name,
        json_output=json_output,
        quiet=quiet,
        verbose=verbose,
        log_json=log_json,
    )
    ctx.obj = AppContext(settings)
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


register_commands(cli)
