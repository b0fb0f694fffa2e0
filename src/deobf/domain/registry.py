"""Registry — the immutable deobfuscation lookup table.

Built once by :class:`~deobf.domain.builder.RegistryBuilder` and read
many times afterwards. Every accessor is a pure read; a miss returns
``None`` (or ``False``) instead of raising.

INVARIANT: a Registry never changes after construction, so it can be
shared between threads without locking.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any

from deobf.domain.operations import OperationData, OperationKey


@dataclass(frozen=True, slots=True, eq=False, repr=False)
class Registry:
    """Lookup table for type tokens, proxy types, and operation metadata.

    The three maps are copied on construction and exposed read-only.
    """

    # domain type -> client proxy types, most-derived first
    domain_to_client_types: Mapping[str, tuple[str, ...]]
    operation_data: Mapping[OperationKey, OperationData]
    # obfuscated token -> canonical type name
    type_tokens: Mapping[str, str]
    referenced_types: frozenset[str] = field(init=False)

    def __post_init__(self) -> None:
        tokens = MappingProxyType(dict(self.type_tokens))
        object.__setattr__(
            self, "domain_to_client_types", MappingProxyType(dict(self.domain_to_client_types))
        )
        object.__setattr__(self, "operation_data", MappingProxyType(dict(self.operation_data)))
        object.__setattr__(self, "type_tokens", tokens)
        object.__setattr__(self, "referenced_types", frozenset(tokens.values()))

    @classmethod
    def empty(cls) -> Registry:
        """Return a registry with no entries."""
        return cls({}, {}, {})

    # ------------------------------------------------------------------
    # Lookups
    # ------------------------------------------------------------------

    def proxies_for_domain_type(self, domain_type: str) -> tuple[str, ...] | None:
        """Return the client proxy types for *domain_type*.

        Ordered so that the most-derived proxy comes first. ``None`` when
        the domain type has no known proxies.
        """
        return self.domain_to_client_types.get(domain_type)

    def operation(self, operation: str | OperationKey) -> OperationData | None:
        """Return the full metadata record for *operation*, if any."""
        return self.operation_data.get(OperationKey.coerce(operation))

    def domain_method_descriptor_for(self, operation: str | OperationKey) -> str | None:
        """Descriptor of the method to invoke on the service object."""
        data = self.operation(operation)
        return None if data is None else data.domain_method_descriptor

    def request_context_for(self, operation: str | OperationKey) -> str | None:
        data = self.operation(operation)
        return None if data is None else data.request_context

    def request_context_method_descriptor_for(self, operation: str | OperationKey) -> str | None:
        data = self.operation(operation)
        return None if data is None else data.client_method_descriptor

    def request_context_method_name_for(self, operation: str | OperationKey) -> str | None:
        data = self.operation(operation)
        return None if data is None else data.method_name

    def canonical_type_for_token(self, token: str) -> str | None:
        """Return the canonical type name behind an obfuscated *token*."""
        return self.type_tokens.get(token)

    def is_referenced_type(self, name: str) -> bool:
        return name in self.referenced_types

    # ------------------------------------------------------------------
    # Serialization
    # ------------------------------------------------------------------

    def to_dict(self) -> dict[str, Any]:
        """Return a JSON-friendly snapshot, keys sorted for stable output."""
        return {
            "type_tokens": dict(sorted(self.type_tokens.items())),
            "domain_to_client_types": {
                domain: list(clients)
                for domain, clients in sorted(self.domain_to_client_types.items())
            },
            "operations": {
                key.value: {
                    "domain_method_descriptor": data.domain_method_descriptor,
                    "request_context": data.request_context,
                    "client_method_descriptor": data.client_method_descriptor,
                    "method_name": data.method_name,
                }
                for key, data in sorted(self.operation_data.items(), key=lambda kv: kv[0].value)
            },
            "referenced_types": sorted(self.referenced_types),
        }

    def __repr__(self) -> str:
        return (
            f"Registry(tokens={len(self.type_tokens)}, "
            f"domains={len(self.domain_to_client_types)}, "
            f"operations={len(self.operation_data)})"
        )
