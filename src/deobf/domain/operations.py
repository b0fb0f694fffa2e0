"""Operation keys and per-operation metadata.

An operation is one remote-invocable request method. Generated code
identifies it on the wire by a short key; the registry maps that key to
the descriptors needed to dispatch it.
"""

from __future__ import annotations

import base64
import hashlib
from dataclasses import dataclass
from typing import ClassVar


@dataclass(frozen=True, slots=True)
class OperationKey:
    """Opaque, hashable identifier of one remote operation."""

    HASH_LENGTH: ClassVar[int] = 28

    value: str

    @classmethod
    def for_method(cls, request_context: str, method_name: str, descriptor: str) -> OperationKey:
        """Derive the key generated code uses for a request method.

        Base64 of the SHA-1 digest of ``"{context}::{method}{descriptor}"``,
        always :attr:`HASH_LENGTH` characters long.
        """
        raw = f"{request_context}::{method_name}{descriptor}"
        digest = hashlib.sha1(raw.encode("utf-8")).digest()
        return cls(base64.b64encode(digest).decode("ascii"))

    @classmethod
    def coerce(cls, operation: str | OperationKey) -> OperationKey:
        """Wrap a raw string, passing existing keys through."""
        if isinstance(operation, OperationKey):
            return operation
        return cls(operation)

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True, slots=True)
class OperationData:
    """Dispatch metadata for one operation."""

    domain_method_descriptor: str
    request_context: str
    client_method_descriptor: str
    method_name: str
