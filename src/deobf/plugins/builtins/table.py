"""BuilderTable — explicit schema -> builder registrations.

For applications that know their generated builders up front and do not
want entry-point discovery.
"""

from __future__ import annotations

import logging

from deobf.domain.builder import RegistryBuilder
from deobf.domain.types import BuilderVariant
from deobf.plugins.hookspecs import hookimpl

logger = logging.getLogger(__name__)


class BuilderTable:
    """Registration table answering the ``registry_builder`` hook."""

    def __init__(self) -> None:
        self._builders: dict[tuple[str, BuilderVariant], type[RegistryBuilder]] = {}

    def register(
        self,
        schema: str,
        builder_cls: type[RegistryBuilder],
        variant: BuilderVariant = BuilderVariant.FULL,
    ) -> None:
        """Register *builder_cls* for *schema*, replacing any earlier entry."""
        self._builders[(schema, BuilderVariant(variant))] = builder_cls
        logger.debug("Registered %s builder for %s: %s", variant, schema, builder_cls.__qualname__)

    def unregister(self, schema: str, variant: BuilderVariant = BuilderVariant.FULL) -> None:
        self._builders.pop((schema, BuilderVariant(variant)), None)

    def schemas(self) -> list[str]:
        """Registered schema names, sorted."""
        return sorted({schema for schema, _ in self._builders})

    @hookimpl
    def registry_builder(self, schema: str, variant: str) -> type[RegistryBuilder] | None:
        return self._builders.get((schema, BuilderVariant(variant)))
