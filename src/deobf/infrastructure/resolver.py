"""TypeResolver — canonical type names resolved to live Python classes.

Accepted name forms:
- ``package.module.Outer.Inner`` (module boundary found by trial import)
- ``package.module:Outer.Inner`` (explicit module boundary)
- ``package.module.Outer$Inner`` (generator-style nested separator)

Resolved classes are cached per resolver; the cache only ever grows.
"""

from __future__ import annotations

import importlib
import logging

from deobf.domain.ordering import SubtypeOrder, subtype_first
from deobf.errors import TypeResolutionError

logger = logging.getLogger(__name__)


class TypeResolver:
    """Resolves canonical names and answers subtype questions via ``issubclass``."""

    def __init__(self) -> None:
        self._cache: dict[str, type] = {}

    def resolve(self, name: str) -> type:
        """Return the class named *name*.

        Raises:
            TypeResolutionError: If no importable class has that name.
        """
        cls = self._cache.get(name)
        if cls is None:
            cls = self._load(name)
            self._cache[name] = cls
        return cls

    def is_subtype(self, sub: str, sup: str) -> bool:
        """Whether class *sub* derives from (or is) class *sup*."""
        return issubclass(self.resolve(sub), self.resolve(sup))

    def type_order(self) -> SubtypeOrder:
        """Most-derived-first order backed by this resolver."""
        return subtype_first(self.is_subtype)

    def _load(self, name: str) -> type:
        normalized = name.replace("$", ".")
        if ":" in normalized:
            module_name, _, qualname = normalized.partition(":")
            candidates = [(module_name, qualname)]
        else:
            parts = normalized.split(".")
            candidates = [
                (".".join(parts[:i]), ".".join(parts[i:])) for i in range(len(parts) - 1, 0, -1)
            ]

        for module_name, qualname in candidates:
            try:
                module = importlib.import_module(module_name)
            except ImportError:
                continue
            obj: object = module
            for attr in qualname.split("."):
                obj = getattr(obj, attr, None)
                if obj is None:
                    break
            if isinstance(obj, type):
                logger.debug("Resolved %s to %s.%s", name, module_name, qualname)
                return obj
        raise TypeResolutionError(name)
