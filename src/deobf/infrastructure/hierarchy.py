"""TypeHierarchy — declared subtype graph for hosts without the proxy classes.

Edges point from a subtype to each of its direct supertypes. A name is a
subtype of another when the supertype is reachable from it. Names that
were never declared are unrelated to everything.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping

import networkx as nx

from deobf.domain.ordering import SubtypeOrder

type _Graph = nx.DiGraph


class TypeHierarchy:
    """Subtype relation over canonical type names backed by a NetworkX DiGraph."""

    def __init__(self, edges: Iterable[tuple[str, str]] = ()) -> None:
        self._graph: _Graph = nx.DiGraph()
        self._graph.add_edges_from(edges)
        if not nx.is_directed_acyclic_graph(self._graph):
            cycle = nx.find_cycle(self._graph)
            msg = f"Type hierarchy contains a cycle: {cycle}"
            raise ValueError(msg)
        self._closure: dict[str, frozenset[str]] = {}

    @classmethod
    def from_mapping(cls, supertypes: Mapping[str, Iterable[str]]) -> TypeHierarchy:
        """Build from ``{subtype: [supertype, ...]}``."""
        return cls((sub, sup) for sub, sups in supertypes.items() for sup in sups)

    @property
    def graph(self) -> _Graph:
        return self._graph

    def supertypes(self, name: str) -> frozenset[str]:
        """All transitive supertypes of *name*."""
        found = self._closure.get(name)
        if found is None:
            found = frozenset()
            if name in self._graph:
                found = frozenset(nx.descendants(self._graph, name))
            self._closure[name] = found
        return found

    def is_subtype(self, sub: str, sup: str) -> bool:
        return sub == sup or sup in self.supertypes(sub)

    def type_order(self) -> SubtypeOrder:
        """Most-derived-first order backed by this hierarchy."""
        return _HierarchyOrder(self)


class _HierarchyOrder(SubtypeOrder):
    """Lays names out with a lexicographical topological sort of the hierarchy."""

    __slots__ = ("_hierarchy",)

    def __init__(self, hierarchy: TypeHierarchy) -> None:
        super().__init__(hierarchy.is_subtype)
        self._hierarchy = hierarchy

    def layout(self, names: list[str]) -> list[str]:
        wanted = set(names)
        view: _Graph = nx.DiGraph()
        view.add_nodes_from(names)
        view.add_edges_from(
            (name, sup) for name in names for sup in self._hierarchy.supertypes(name) & wanted
        )
        return list(nx.lexicographical_topological_sort(view))
