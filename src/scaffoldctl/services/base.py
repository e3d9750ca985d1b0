"""Shared base for services.

A service is constructed around one :class:`Workspace` and reaches the
registry, filesystem and plugins through it.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from scaffoldctl.infrastructure.workspace import Workspace

logger = logging.getLogger(__name__)


class BaseService:
    def __init__(self, workspace: Workspace) -> None:
        self._workspace = workspace

    def _notify_plugins(self, hook_name: str, warnings: list[str], **payload: Any) -> None:
        """Call *hook_name* on every plugin.

        A failing hook adds a warning to *warnings*; the operation that
        triggered it still succeeds.
        """
        plugins = self._workspace.plugins
        if plugins is None:
            return
        hook = getattr(plugins.hook, hook_name)
        try:
            hook(**payload)
        except Exception:
            logger.warning("Plugin hook %s raised", hook_name, exc_info=True)
            warnings.append(f"Plugin hook {hook_name} failed")
