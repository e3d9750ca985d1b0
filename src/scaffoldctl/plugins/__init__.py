"""Plugin system built on pluggy.

Sources: the ``scaffoldctl.plugins`` entry point group and ``[plugins] local_dir``.
INVARIANT: Plugin failures are warnings, never errors.
"""

from scaffoldctl.plugins.hookspecs import hookimpl
from scaffoldctl.plugins.manager import PluginManager

__all__ = ["PluginManager", "hookimpl"]
