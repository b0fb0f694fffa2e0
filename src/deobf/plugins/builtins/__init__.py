"""Built-in plugins registered by every PluginManager."""

from deobf.plugins.builtins.table import BuilderTable

__all__ = ["BuilderTable"]
