"""Tests for the immutable Registry lookups."""

from dataclasses import FrozenInstanceError

import pytest

from deobf.domain.operations import OperationKey
from deobf.domain.registry import Registry
from tests.conftest import ORDER_FIND


class TestTokenLookups:
    def test_token_resolves(self, sample_registry: Registry) -> None:
        assert sample_registry.canonical_type_for_token("a1") == "shop.client.OrderProxy"

    def test_unknown_token_is_none(self, sample_registry: Registry) -> None:
        assert sample_registry.canonical_type_for_token("zzz") is None

    def test_referenced_types_are_token_targets(self, sample_registry: Registry) -> None:
        assert sample_registry.is_referenced_type("shop.client.OrderProxy")
        assert sample_registry.is_referenced_type("shop.client.CustomerProxy")
        assert sample_registry.referenced_types == {
            "shop.client.OrderProxy",
            "shop.client.CustomerProxy",
        }

    def test_proxy_only_types_are_not_referenced(self, sample_registry: Registry) -> None:
        assert not sample_registry.is_referenced_type("shop.client.DetailedOrderProxy")
        assert not sample_registry.is_referenced_type("a1")


class TestProxyLookups:
    def test_proxies_in_built_order(self, sample_registry: Registry) -> None:
        assert sample_registry.proxies_for_domain_type("shop.model.Order") == (
            "shop.client.DetailedOrderProxy",
            "shop.client.OrderProxy",
        )

    def test_unknown_domain_is_none(self, sample_registry: Registry) -> None:
        assert sample_registry.proxies_for_domain_type("shop.model.Missing") is None


class TestOperationLookups:
    def test_all_accessors(self, sample_registry: Registry) -> None:
        assert sample_registry.domain_method_descriptor_for("op-find") == "(I)Lshop.model.Order;"
        assert sample_registry.request_context_for("op-find") == "shop.client.OrderRequest"
        assert (
            sample_registry.request_context_method_descriptor_for("op-find")
            == "(I)Lshop.client.OrderProxy;"
        )
        assert sample_registry.request_context_method_name_for("op-find") == "find"

    def test_accepts_operation_key(self, sample_registry: Registry) -> None:
        assert sample_registry.request_context_for(OperationKey("op-find")) == (
            "shop.client.OrderRequest"
        )
        assert sample_registry.operation(OperationKey("op-find")) == ORDER_FIND

    def test_unknown_operation_is_none(self, sample_registry: Registry) -> None:
        assert sample_registry.operation("unknown-op") is None
        assert sample_registry.domain_method_descriptor_for("unknown-op") is None
        assert sample_registry.request_context_for("unknown-op") is None
        assert sample_registry.request_context_method_descriptor_for("unknown-op") is None
        assert sample_registry.request_context_method_name_for("unknown-op") is None


class TestImmutability:
    def test_mappings_are_read_only(self, sample_registry: Registry) -> None:
        with pytest.raises(TypeError):
            sample_registry.type_tokens["new"] = "x"  # type: ignore[index]
        with pytest.raises(TypeError):
            sample_registry.domain_to_client_types["new"] = ()  # type: ignore[index]
        with pytest.raises(TypeError):
            sample_registry.operation_data[OperationKey("new")] = ORDER_FIND  # type: ignore[index]

    def test_no_new_attributes(self, sample_registry: Registry) -> None:
        with pytest.raises(AttributeError):
            sample_registry.extra = 1  # type: ignore[attr-defined]

    def test_fields_cannot_be_rebound(self, sample_registry: Registry) -> None:
        for name in (
            "type_tokens",
            "domain_to_client_types",
            "operation_data",
            "referenced_types",
        ):
            with pytest.raises(FrozenInstanceError):
                setattr(sample_registry, name, {})
        assert sample_registry.canonical_type_for_token("a1") == "shop.client.OrderProxy"

    def test_source_dicts_are_copied(self) -> None:
        tokens = {"t": "pkg.T"}
        registry = Registry({}, {}, tokens)
        tokens["u"] = "pkg.U"
        assert registry.canonical_type_for_token("u") is None
        assert not registry.is_referenced_type("pkg.U")


class TestEmptyAndSnapshot:
    def test_empty(self) -> None:
        registry = Registry.empty()
        assert registry.canonical_type_for_token("a") is None
        assert registry.referenced_types == frozenset()
        assert registry.proxies_for_domain_type("x") is None

    def test_to_dict(self, sample_registry: Registry) -> None:
        snapshot = sample_registry.to_dict()
        assert snapshot["type_tokens"] == {
            "a1": "shop.client.OrderProxy",
            "a2": "shop.client.CustomerProxy",
        }
        assert snapshot["domain_to_client_types"] == {
            "shop.model.Order": ["shop.client.DetailedOrderProxy", "shop.client.OrderProxy"]
        }
        assert snapshot["operations"]["op-find"]["method_name"] == "find"
        assert snapshot["referenced_types"] == [
            "shop.client.CustomerProxy",
            "shop.client.OrderProxy",
        ]

    def test_repr_has_counts(self, sample_registry: Registry) -> None:
        assert repr(sample_registry) == "Registry(tokens=2, domains=1, operations=1)"
