"""Classification enums shared by the plugin and config layers."""

from __future__ import annotations

from enum import StrEnum


class BuilderVariant(StrEnum):
    """Builder flavours a plugin may provide for one schema.

    FULL is tried first; LITE serves hosts that cannot load everything
    the full builder references.
    """

    FULL = "full"
    LITE = "lite"


class OrderingMode(StrEnum):
    """How client proxy types are ordered when registries merge."""

    CLASSES = "classes"
    HIERARCHY = "hierarchy"
    LEXICAL = "lexical"
