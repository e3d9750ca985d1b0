"""Workspace, the single dependency injected into every service.

Owns the framework registry, the filesystem capability, and the plugin
manager for one process (CLI invocation or MCP server). Nothing here is a
module-level singleton: tests construct isolated workspaces freely.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING

from scaffoldctl.frameworks.registry import FrameworkRegistry, default_registry
from scaffoldctl.infrastructure.filesystem import Filesystem, LocalFilesystem

if TYPE_CHECKING:
    from scaffoldctl.config.settings import ScaffoldSettings
    from scaffoldctl.plugins.manager import PluginManager

logger = logging.getLogger(__name__)


class Workspace:
    """Registry, filesystem, and plugins bound to resolved settings.

    The registry is built lazily so that plugin families discovered by
    :meth:`init_plugins` are included, and so ``--help`` never imports the
    family tables.
    """

    def __init__(
        self,
        settings: ScaffoldSettings,
        *,
        registry: FrameworkRegistry | None = None,
        filesystem: Filesystem | None = None,
        plugins: PluginManager | None = None,
    ) -> None:
        self._settings = settings
        self._registry = registry
        self._filesystem: Filesystem = filesystem or LocalFilesystem()
        self._plugins = plugins

    @property
    def settings(self) -> ScaffoldSettings:
        return self._settings

    @property
    def output_root(self) -> Path:
        """Parent directory for requests that name no target root."""
        return self._settings.output_root

    @property
    def filesystem(self) -> Filesystem:
        return self._filesystem

    @property
    def plugins(self) -> PluginManager | None:
        """The plugin manager (None if plugins were never initialized)."""
        return self._plugins

    @property
    def registry(self) -> FrameworkRegistry:
        if self._registry is None:
            extra = self._plugins.collect_families() if self._plugins is not None else []
            self._registry = default_registry(extra, template_dir=self._settings.template_dir)
        return self._registry

    def init_plugins(self) -> None:
        """Discover entry-point and local plugins.

        Must run before the registry is first used for plugin families to
        be registered. A no-op when ``[plugins] enabled`` is false.
        """
        if not self._settings.plugins.enabled:
            return
        from scaffoldctl.plugins.manager import PluginManager

        pm = PluginManager()
        names = pm.discover_and_load(local_dir=self._settings.plugin_dir)
        if names:
            logger.debug("Loaded plugins: %s", ", ".join(names))
        self._plugins = pm
        self._registry = None
