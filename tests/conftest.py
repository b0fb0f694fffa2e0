"""Shared pytest fixtures and test helpers for deobf tests."""

from __future__ import annotations

import logging
from collections.abc import Iterator

import pytest
from click.testing import CliRunner

from deobf.domain.builder import RegistryBuilder
from deobf.domain.operations import OperationData, OperationKey
from deobf.domain.registry import Registry

ORDER_FIND = OperationData(
    domain_method_descriptor="(I)Lshop.model.Order;",
    request_context="shop.client.OrderRequest",
    client_method_descriptor="(I)Lshop.client.OrderProxy;",
    method_name="find",
)

ORDER_SAVE = OperationData(
    domain_method_descriptor="(Lshop.model.Order;)V",
    request_context="shop.client.OrderRequest",
    client_method_descriptor="(Lshop.client.OrderProxy;)V",
    method_name="save",
)


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture(autouse=True)
def _restore_logging() -> Iterator[None]:
    """Restore root logger state after each test (the CLI reconfigures it)."""
    root = logging.getLogger()
    original_handlers = root.handlers[:]
    original_level = root.level
    deobf_logger = logging.getLogger("deobf")
    deobf_level = deobf_logger.level
    yield
    root.handlers = original_handlers
    root.setLevel(original_level)
    deobf_logger.setLevel(deobf_level)


@pytest.fixture
def sample_registry() -> Registry:
    """A small registry with tokens, one proxied domain type, and one operation."""
    return (
        RegistryBuilder()
        .with_raw_type_token("a1", "shop.client.OrderProxy")
        .with_raw_type_token("a2", "shop.client.CustomerProxy")
        .with_client_to_domain_mappings(
            "shop.model.Order", ["shop.client.DetailedOrderProxy", "shop.client.OrderProxy"]
        )
        .with_operation(OperationKey("op-find"), ORDER_FIND)
        .build()
    )
