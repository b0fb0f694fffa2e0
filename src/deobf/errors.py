"""Exception taxonomy for deobf.

Lookup misses are never exceptions: registry accessors return ``None``.
Everything raised here is either a fatal bootstrap condition or a
programming error.
"""

from __future__ import annotations


class DeobfError(Exception):
    """Base class for all deobf errors."""


class BootstrapError(DeobfError):
    """A registry builder for a schema could not be provided."""

    def __init__(self, schema: str, message: str) -> None:
        super().__init__(message)
        self.schema = schema


class BuilderNotFoundError(BootstrapError):
    """No builder satisfying the contract is registered for the schema.

    Indicates the generation step for the schema was skipped.
    """

    def __init__(self, schema: str) -> None:
        super().__init__(
            schema,
            f"No registry builder found for schema {schema!r}; "
            "run the registry generator for this schema",
        )


class BuilderConstructionError(BootstrapError):
    """A builder class was found but could not be instantiated."""

    def __init__(self, schema: str, builder_cls: type) -> None:
        super().__init__(
            schema,
            f"Registry builder {builder_cls.__qualname__} for schema {schema!r} "
            "failed to construct",
        )
        self.builder_cls = builder_cls


class BuilderSpentError(DeobfError, RuntimeError):
    """A builder was used after ``build()``."""

    def __init__(self) -> None:
        super().__init__("RegistryBuilder.build() was already called; builders are single-use")


class TypeResolutionError(DeobfError, LookupError):
    """A canonical type name could not be resolved to a class."""

    def __init__(self, name: str) -> None:
        super().__init__(f"Cannot resolve type {name!r}")
        self.name = name
