"""Pluggy hook specifications for registry builder discovery.

A plugin provides generated builders by implementing
``registry_builder``. The bootstrap asks for the FULL variant first and
falls back to LITE.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import pluggy

if TYPE_CHECKING:
    from deobf.domain.builder import RegistryBuilder

PROJECT_NAME = "deobf"

hookspec = pluggy.HookspecMarker(PROJECT_NAME)
hookimpl = pluggy.HookimplMarker(PROJECT_NAME)


class DeobfHookSpec:
    """Hook specifications for the deobf plugin system."""

    @hookspec(firstresult=True)
    def registry_builder(self, schema: str, variant: str) -> type[RegistryBuilder] | None:
        """Return the builder class for *schema* in *variant*, or None.

        *variant* is a :class:`~deobf.domain.types.BuilderVariant` value.
        The first non-None answer wins.
        """
