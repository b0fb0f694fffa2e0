"""Bootstrap — locate and instantiate the generated builder for a schema.

The FULL variant is requested first, then LITE when allowed. A plugin
answer that is not a RegistryBuilder subclass is skipped. The builder is
constructed with the caller's type order, or the importable-class order
when none is given, which binds it to one type-resolution context.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from deobf.domain.builder import RegistryBuilder
from deobf.domain.types import BuilderVariant
from deobf.errors import BuilderConstructionError, BuilderNotFoundError
from deobf.infrastructure.resolver import TypeResolver

if TYPE_CHECKING:
    from deobf.domain.ordering import TypeOrder
    from deobf.plugins.manager import PluginManager

logger = logging.getLogger(__name__)


def find_builder_class(
    schema: str,
    plugins: PluginManager,
    *,
    allow_lite: bool = True,
) -> tuple[type[RegistryBuilder], BuilderVariant]:
    """Ask the plugins for the builder class of *schema*.

    Raises:
        BuilderNotFoundError: If no plugin provides a RegistryBuilder subclass.
    """
    variants = [BuilderVariant.FULL]
    if allow_lite:
        variants.append(BuilderVariant.LITE)

    for variant in variants:
        found = plugins.hook.registry_builder(schema=schema, variant=variant.value)
        if found is None:
            continue
        if not (isinstance(found, type) and issubclass(found, RegistryBuilder)):
            logger.warning(
                "Plugin answered %s/%s with %r, which is not a RegistryBuilder",
                schema,
                variant,
                found,
            )
            continue
        logger.debug("Using %s builder %s for %s", variant, found.__qualname__, schema)
        return found, variant
    raise BuilderNotFoundError(schema)


def load_builder(
    schema: str,
    type_order: TypeOrder | None = None,
    *,
    plugins: PluginManager | None = None,
    allow_lite: bool = True,
) -> RegistryBuilder:
    """Return a fresh builder for *schema*, already populated by its generator.

    Args:
        schema: Logical schema name the builder was generated for.
        type_order: Ordering bound to the builder. Defaults to the
            subclass order of importable classes, see
            :class:`~deobf.infrastructure.resolver.TypeResolver`.
        plugins: Plugin manager to query. When omitted, entry-point
            plugins are discovered on a new manager.
        allow_lite: Fall back to the LITE variant when no FULL builder exists.

    Raises:
        BuilderNotFoundError: No builder is registered for *schema*.
        BuilderConstructionError: The builder class raised while constructing.
    """
    if plugins is None:
        from deobf.plugins.manager import PluginManager

        plugins = PluginManager()
        plugins.discover_and_load()

    builder_cls, _variant = find_builder_class(schema, plugins, allow_lite=allow_lite)
    if type_order is None:
        type_order = TypeResolver().type_order()
    try:
        return builder_cls(type_order=type_order)
    except Exception as exc:
        raise BuilderConstructionError(schema, builder_cls) from exc
