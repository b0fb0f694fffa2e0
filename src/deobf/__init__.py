"""deobf — deobfuscation registry for obfuscated RPC payloads.

Maps generator-assigned type tokens back to canonical type names and
domain types to their client proxy types, most-derived first.
"""

from deobf.domain.builder import RegistryBuilder
from deobf.domain.operations import OperationData, OperationKey
from deobf.domain.registry import Registry
from deobf.plugins.bootstrap import load_builder

__version__ = "0.1.0"

__all__ = [
    "OperationData",
    "OperationKey",
    "Registry",
    "RegistryBuilder",
    "__version__",
    "load_builder",
]
