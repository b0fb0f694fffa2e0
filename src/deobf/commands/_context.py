"""AppContext — shared Click context for all commands.

Created once by the root CLI group and passed to subcommands via
``@click.pass_obj``. Plugins are discovered lazily so ``--help`` and
``--version`` never import builder modules.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import TYPE_CHECKING, NoReturn

import click

from deobf.domain.types import OrderingMode
from deobf.errors import BootstrapError, TypeResolutionError
from deobf.output.formatters import format_result
from deobf.services.result import ServiceResult

if TYPE_CHECKING:
    from deobf.config.settings import DeobfSettings
    from deobf.domain.ordering import TypeOrder
    from deobf.domain.registry import Registry
    from deobf.plugins.manager import PluginManager
    from deobf.services.lookup import LookupService

logger = logging.getLogger(__name__)


class AppContext:
    """Shared context flowing through Click's command hierarchy."""

    def __init__(self, settings: DeobfSettings) -> None:
        self.settings = settings
        self._plugins: PluginManager | None = None

        from deobf.config.logging import configure_logging

        configure_logging(verbose=settings.verbose, log_json=settings.log_json)

    @property
    def plugins(self) -> PluginManager:
        """The plugin manager (discovered lazily on first access)."""
        if self._plugins is None:
            from deobf.plugins.manager import PluginManager

            self._plugins = PluginManager()
            if self.settings.plugins.enabled:
                self._plugins.discover_and_load(local_dir=self.settings.plugin_dir)
        return self._plugins

    def type_order(self) -> TypeOrder:
        """Build the merge ordering selected by ``[registry] ordering``."""
        mode = self.settings.registry.ordering
        if mode is OrderingMode.HIERARCHY:
            from deobf.infrastructure.hierarchy import TypeHierarchy

            return TypeHierarchy.from_mapping(self.settings.hierarchy.supertypes).type_order()
        if mode is OrderingMode.LEXICAL:
            from deobf.domain.ordering import lexical_order

            return lexical_order
        from deobf.infrastructure.resolver import TypeResolver

        return TypeResolver().type_order()

    def load_registry(self, merge: Iterable[str] = ()) -> Registry:
        """Build the configured schema's registry, merging in *merge* schemas."""
        from deobf.config.logging import schema_context
        from deobf.plugins.bootstrap import load_builder

        schema = self.settings.registry.schema_name
        if not schema:
            msg = "No schema selected; pass --schema or set [registry] schema_name"
            raise click.UsageError(msg)

        order = self.type_order()
        allow_lite = self.settings.registry.allow_lite
        with schema_context(schema):
            builder = load_builder(schema, order, plugins=self.plugins, allow_lite=allow_lite)
            for other in merge:
                with schema_context(other):
                    other_registry = load_builder(
                        other, order, plugins=self.plugins, allow_lite=allow_lite
                    ).build()
                builder.merge(other_registry)
            return builder.build()

    def lookup(self, op: str, merge: Iterable[str] = ()) -> LookupService:
        """Return a LookupService, or emit a failure for *op* and exit."""
        from deobf.services.lookup import LookupService

        try:
            return LookupService(self.load_registry(merge))
        except BootstrapError as exc:
            self.fail(op, "BOOTSTRAP_FAILED", str(exc), schema=exc.schema)
        except TypeResolutionError as exc:
            self.fail(op, "TYPE_RESOLUTION_FAILED", str(exc), type=exc.name)

    def fail(self, op: str, code: str, message: str, **detail: object) -> NoReturn:
        """Emit a failure result for *op* and exit with code 1."""
        logger.debug("%s failed: %s", op, message)
        self._exit_with(ServiceResult.failure(op, code, message, **detail))

    def emit(self, result: ServiceResult) -> None:
        """Format and output a ServiceResult with correct exit semantics.

        * Success: writes to stdout; warnings go to stderr outside JSON mode.
        * Failure: writes to stderr, exits with code 1.
        """
        if not result.ok:
            self._exit_with(result)
        click.echo(self._format(result))
        if not self.settings.json_output:
            for warning in result.warnings:
                click.echo(f"WARNING: {warning}", err=True)

    def _exit_with(self, result: ServiceResult) -> NoReturn:
        click.echo(self._format(result), err=True)
        raise SystemExit(1)

    def _format(self, result: ServiceResult) -> str:
        return format_result(
            result,
            json_output=self.settings.json_output,
            quiet=self.settings.quiet,
        )
