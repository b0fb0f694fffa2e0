"""Extension layer — builder discovery via pluggy.

Discovery: entry points in the ``deobf.builders`` group, a local plugin
directory, and the built-in registration table.
INVARIANT: Plugin loading failures are warnings; a missing builder is an error.
"""

from deobf.plugins.bootstrap import load_builder
from deobf.plugins.hookspecs import hookimpl
from deobf.plugins.manager import PluginManager

__all__ = ["PluginManager", "hookimpl", "load_builder"]
