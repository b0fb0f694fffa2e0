"""Tests for load_builder — two-tier builder discovery and its failures."""

from __future__ import annotations

import pytest

from deobf.domain.builder import RegistryBuilder
from deobf.domain.ordering import TypeOrder, lexical_order
from deobf.domain.types import BuilderVariant
from deobf.errors import (
    BootstrapError,
    BuilderConstructionError,
    BuilderNotFoundError,
)
from deobf.plugins.bootstrap import find_builder_class, load_builder
from deobf.plugins.hookspecs import hookimpl
from deobf.plugins.manager import PluginManager

_TYPES = "tests.sample_types"


class _FullBuilder(RegistryBuilder):
    def populate(self) -> None:
        self.with_raw_type_token("F", "shop.Full")


class _LiteBuilder(RegistryBuilder):
    def populate(self) -> None:
        self.with_raw_type_token("L", "shop.Lite")


class _BrokenBuilder(RegistryBuilder):
    def populate(self) -> None:
        raise RuntimeError("stale generated code")


class _NotABuilderPlugin:
    @hookimpl
    def registry_builder(self, schema: str, variant: str) -> object:
        return dict


class _NotABuilderForFullPlugin:
    @hookimpl
    def registry_builder(self, schema: str, variant: str) -> object:
        return dict if variant == BuilderVariant.FULL else None


class _ShippingBuilder(RegistryBuilder):
    def populate(self) -> None:
        self.with_client_to_domain_mappings("shop.Order", [f"{_TYPES}.OrderProxy"])


@pytest.fixture
def plugins() -> PluginManager:
    return PluginManager()


class TestLoadBuilder:
    def test_full_variant_preferred(self, plugins: PluginManager) -> None:
        plugins.table.register("shop", _FullBuilder)
        plugins.table.register("shop", _LiteBuilder, variant=BuilderVariant.LITE)
        registry = load_builder("shop", plugins=plugins).build()
        assert registry.canonical_type_for_token("F") == "shop.Full"

    def test_falls_back_to_lite(self, plugins: PluginManager) -> None:
        plugins.table.register("shop", _LiteBuilder, variant=BuilderVariant.LITE)
        registry = load_builder("shop", plugins=plugins).build()
        assert registry.canonical_type_for_token("L") == "shop.Lite"

    def test_lite_fallback_can_be_disabled(self, plugins: PluginManager) -> None:
        plugins.table.register("shop", _LiteBuilder, variant=BuilderVariant.LITE)
        with pytest.raises(BuilderNotFoundError):
            load_builder("shop", plugins=plugins, allow_lite=False)

    def test_binds_type_order(self, plugins: PluginManager) -> None:
        plugins.table.register("shop", _FullBuilder)

        def reverse(a: str, b: str) -> int:
            return lexical_order(b, a)

        order: TypeOrder = reverse
        builder = load_builder("shop", order, plugins=plugins)
        assert builder.type_order is reverse

    def test_default_order_follows_subclassing(self, plugins: PluginManager) -> None:
        plugins.table.register("shop", _ShippingBuilder)
        existing = (
            RegistryBuilder()
            .with_client_to_domain_mappings("shop.Order", [f"{_TYPES}.ShippedOrderProxy"])
            .build()
        )
        registry = load_builder("shop", plugins=plugins).merge(existing).build()
        assert registry.proxies_for_domain_type("shop.Order") == (
            f"{_TYPES}.ShippedOrderProxy",
            f"{_TYPES}.OrderProxy",
        )

    def test_returns_fresh_builders(self, plugins: PluginManager) -> None:
        plugins.table.register("shop", _FullBuilder)
        first = load_builder("shop", plugins=plugins)
        first.build()
        second = load_builder("shop", plugins=plugins)
        assert not second.is_spent

    def test_not_found(self, plugins: PluginManager) -> None:
        with pytest.raises(BuilderNotFoundError) as exc_info:
            load_builder("missing", plugins=plugins)
        assert exc_info.value.schema == "missing"
        assert "missing" in str(exc_info.value)

    def test_non_builder_answers_are_not_found(self, plugins: PluginManager) -> None:
        plugins.register_plugin(_NotABuilderPlugin(), name="bogus")
        with pytest.raises(BuilderNotFoundError):
            load_builder("shop", plugins=plugins)

    def test_non_builder_full_answer_falls_through_to_lite(
        self, plugins: PluginManager
    ) -> None:
        plugins.table.register("shop", _LiteBuilder, variant=BuilderVariant.LITE)
        plugins.register_plugin(_NotABuilderForFullPlugin(), name="bogus-full")
        builder_cls, variant = find_builder_class("shop", plugins)
        assert builder_cls is _LiteBuilder
        assert variant is BuilderVariant.LITE

    def test_construction_failure_wraps_cause(self, plugins: PluginManager) -> None:
        plugins.table.register("broken", _BrokenBuilder)
        with pytest.raises(BuilderConstructionError) as exc_info:
            load_builder("broken", plugins=plugins)
        assert isinstance(exc_info.value.__cause__, RuntimeError)
        assert exc_info.value.builder_cls is _BrokenBuilder

    def test_failures_share_bootstrap_base(self, plugins: PluginManager) -> None:
        with pytest.raises(BootstrapError):
            load_builder("missing", plugins=plugins)

    def test_default_manager_discovers(self) -> None:
        with pytest.raises(BuilderNotFoundError):
            load_builder("definitely-not-registered")


class TestFindBuilderClass:
    def test_reports_variant(self, plugins: PluginManager) -> None:
        plugins.table.register("shop", _LiteBuilder, variant=BuilderVariant.LITE)
        builder_cls, variant = find_builder_class("shop", plugins)
        assert builder_cls is _LiteBuilder
        assert variant is BuilderVariant.LITE
