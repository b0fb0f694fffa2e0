"""Fixtures for CLI command tests: a project with a local builder plugin."""

from __future__ import annotations

from pathlib import Path

import pytest

_SHOP_PLUGIN_SRC = """\
from deobf import OperationData, OperationKey, RegistryBuilder
from deobf.plugins import hookimpl

FIND = OperationKey.for_method("shop.client.OrderRequest", "find", "(I)Lshop.client.OrderProxy;")


class ShopBuilder(RegistryBuilder):
    def populate(self) -> None:
        self.with_raw_type_token("t1", "shop.client.OrderProxy")
        self.with_client_to_domain_mappings("shop.model.Order", ["shop.client.OrderProxy"])
        self.with_operation(
            FIND,
            OperationData(
                "(I)Lshop.model.Order;",
                "shop.client.OrderRequest",
                "(I)Lshop.client.OrderProxy;",
                "find",
            ),
        )


class ShopAdminBuilder(RegistryBuilder):
    def populate(self) -> None:
        self.with_raw_type_token("t2", "shop.client.AdminOrderProxy")
        self.with_client_to_domain_mappings("shop.model.Order", ["shop.client.AdminOrderProxy"])


class BrokenBuilder(RegistryBuilder):
    def populate(self) -> None:
        raise RuntimeError("generated code is stale")


_BUILDERS = {
    ("shop", "full"): ShopBuilder,
    ("shop-admin", "lite"): ShopAdminBuilder,
    ("broken", "full"): BrokenBuilder,
}


class ShopPlugin:
    @hookimpl
    def registry_builder(self, schema: str, variant: str):
        return _BUILDERS.get((schema, variant))
"""

_CONFIG = """\
[registry]
schema_name = "shop"
ordering = "hierarchy"

[hierarchy.supertypes]
"shop.client.AdminOrderProxy" = ["shop.client.OrderProxy"]
"""


@pytest.fixture
def project(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Project directory with deobf.toml and a local builder plugin.

    Returns the config file path for use with ``-c``.
    """
    monkeypatch.delenv("DEOBF_CONFIG", raising=False)
    plugin_dir = tmp_path / ".deobf" / "plugins"
    plugin_dir.mkdir(parents=True)
    (plugin_dir / "shop.py").write_text(_SHOP_PLUGIN_SRC, encoding="utf-8")
    config = tmp_path / "deobf.toml"
    config.write_text(_CONFIG, encoding="utf-8")
    return config
