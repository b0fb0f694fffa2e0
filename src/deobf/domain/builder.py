"""RegistryBuilder — accumulates entries and finalizes them into a Registry.

Generated builders subclass :class:`RegistryBuilder` and stage their
entries in :meth:`RegistryBuilder.populate`, which runs at the end of
construction. A builder can also absorb an already-built registry via
:meth:`RegistryBuilder.merge`.

INVARIANT: a builder is single-use. After ``build()`` every mutating call
raises :class:`~deobf.errors.BuilderSpentError`.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import Self

from deobf.domain.operations import OperationData, OperationKey
from deobf.domain.ordering import TypeOrder, lexical_order, ordered_union
from deobf.domain.registry import Registry
from deobf.errors import BuilderSpentError

logger = logging.getLogger(__name__)


class RegistryBuilder:
    """Mutable staging area for a :class:`Registry`.

    Args:
        type_order: Ordering used to re-sort client proxy lists on merge.
            Defaults to alphabetical order.
    """

    def __init__(self, type_order: TypeOrder | None = None) -> None:
        self._type_order: TypeOrder = type_order or lexical_order
        self._domain_to_client_types: dict[str, tuple[str, ...]] = {}
        self._operation_data: dict[OperationKey, OperationData] = {}
        self._type_tokens: dict[str, str] = {}
        self._spent = False
        self.populate()

    def populate(self) -> None:
        """Stage generated entries. Subclasses override; the base is empty."""

    @property
    def type_order(self) -> TypeOrder:
        return self._type_order

    @property
    def is_spent(self) -> bool:
        """Whether :meth:`build` has already been called."""
        return self._spent

    # ------------------------------------------------------------------
    # Accumulation
    # ------------------------------------------------------------------

    def with_raw_type_token(self, token: str, name: str) -> Self:
        """Map an obfuscated *token* to a canonical type *name*."""
        self._check_open()
        self._type_tokens[token] = name
        return self

    def with_operation(self, key: str | OperationKey, data: OperationData) -> Self:
        self._check_open()
        self._operation_data[OperationKey.coerce(key)] = data
        return self

    def with_client_to_domain_mappings(self, domain: str, client_names: Sequence[str]) -> Self:
        """Set the client proxy types of *domain*, replacing any earlier list.

        The sequence is copied; callers keep ownership of *client_names*.
        """
        self._check_open()
        match len(client_names):
            case 0:
                clients: tuple[str, ...] = ()
            case 1:
                clients = (client_names[0],)
            case _:
                clients = tuple(client_names)
        self._domain_to_client_types[domain] = clients
        return self

    # ------------------------------------------------------------------
    # Merge
    # ------------------------------------------------------------------

    def merge(self, existing: Registry, *, type_order: TypeOrder | None = None) -> Self:
        """Fold a built registry into the staged entries.

        Operation data and type tokens from *existing* overwrite staged
        entries with the same key. Client proxy lists are unioned per
        domain and re-sorted by *type_order* (or the builder's order).
        Referenced types are recomputed by :meth:`build`.
        """
        self._check_open()
        order = type_order or self._type_order
        domains = self._domain_to_client_types.keys() | existing.domain_to_client_types.keys()
        for domain in domains:
            self._domain_to_client_types[domain] = ordered_union(
                self._domain_to_client_types.get(domain),
                existing.domain_to_client_types.get(domain),
                order,
            )
        self._operation_data.update(existing.operation_data)
        self._type_tokens.update(existing.type_tokens)
        logger.debug(
            "Merged registry: %d domains, %d operations, %d tokens",
            len(domains),
            len(existing.operation_data),
            len(existing.type_tokens),
        )
        return self

    # ------------------------------------------------------------------
    # Finalization
    # ------------------------------------------------------------------

    def build(self) -> Registry:
        """Finalize the staged entries into an immutable :class:`Registry`."""
        self._check_open()
        registry = Registry(
            self._domain_to_client_types,
            self._operation_data,
            self._type_tokens,
        )
        self._spent = True
        self._domain_to_client_types = {}
        self._operation_data = {}
        self._type_tokens = {}
        logger.debug("Built %r", registry)
        return registry

    def _check_open(self) -> None:
        if self._spent:
            raise BuilderSpentError()
