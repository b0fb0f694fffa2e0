"""LookupService — CLI-facing queries over a built Registry.

Registry misses come back as ``NOT_FOUND`` failures so the CLI can exit
non-zero; the registry itself never raises for them.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from deobf.domain.operations import OperationKey
from deobf.services.result import ServiceResult

if TYPE_CHECKING:
    from deobf.domain.registry import Registry

NOT_FOUND = "NOT_FOUND"


class LookupService:
    """Read-only queries against one registry."""

    def __init__(self, registry: Registry) -> None:
        self._registry = registry

    def token(self, token: str) -> ServiceResult:
        op = "lookup_token"
        name = self._registry.canonical_type_for_token(token)
        if name is None:
            return ServiceResult.failure(op, NOT_FOUND, f"Unknown type token: {token}", token=token)
        return ServiceResult(ok=True, op=op, data={"token": token, "type": name})

    def proxies(self, domain_type: str) -> ServiceResult:
        op = "lookup_proxies"
        proxies = self._registry.proxies_for_domain_type(domain_type)
        if proxies is None:
            return ServiceResult.failure(
                op, NOT_FOUND, f"No proxies for domain type: {domain_type}", domain_type=domain_type
            )
        return ServiceResult(
            ok=True, op=op, data={"domain_type": domain_type, "proxies": list(proxies)}
        )

    def operation(self, operation: str | OperationKey) -> ServiceResult:
        """Report the dispatch metadata of *operation*."""
        op = "lookup_operation"
        key = OperationKey.coerce(operation)
        data = self._registry.operation(key)
        if data is None:
            return ServiceResult.failure(
                op, NOT_FOUND, f"Unknown operation: {key}", operation=key.value
            )
        return ServiceResult(
            ok=True,
            op=op,
            data={
                "operation": key.value,
                "request_context": self._registry.request_context_for(key),
                "method_name": self._registry.request_context_method_name_for(key),
                "client_method_descriptor": self._registry.request_context_method_descriptor_for(
                    key
                ),
                "domain_method_descriptor": self._registry.domain_method_descriptor_for(key),
            },
        )

    def referenced(self, name: str) -> ServiceResult:
        return ServiceResult(
            ok=True,
            op="lookup_referenced",
            data={"type": name, "referenced": self._registry.is_referenced_type(name)},
        )

    def dump(self, *, full: bool = False) -> ServiceResult:
        """Summarize the registry; *full* includes every entry."""
        registry = self._registry
        data = {
            "tokens": len(registry.type_tokens),
            "domains": len(registry.domain_to_client_types),
            "operations": len(registry.operation_data),
            "referenced_types": len(registry.referenced_types),
        }
        if full:
            data["entries"] = registry.to_dict()
        return ServiceResult(ok=True, op="dump", data=data)
