"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults live here, deobf.toml only holds overrides.
"""

from __future__ import annotations

from pydantic import BaseModel, Field

from deobf.domain.types import OrderingMode


class RegistryConfig(BaseModel):
    """[registry] section."""

    model_config = {"frozen": True}

    schema_name: str | None = None
    allow_lite: bool = True
    ordering: OrderingMode = OrderingMode.CLASSES


class HierarchyConfig(BaseModel):
    """[hierarchy] section — declared subtype -> supertypes."""

    model_config = {"frozen": True}

    supertypes: dict[str, list[str]] = Field(default_factory=dict)


class PluginsConfig(BaseModel):
    """[plugins] section."""

    model_config = {"frozen": True}

    enabled: bool = True
    local_dir: str = ".deobf/plugins"
