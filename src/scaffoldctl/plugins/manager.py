"""Plugin loading for scaffoldctl.

Plugins come from two places: the ``scaffoldctl.plugins`` entry point
group of installed distributions, and single ``*.py`` files dropped into
the ``[plugins] local_dir`` directory. A plugin may contribute framework
families and observe finished builds. A broken plugin is logged and
skipped; it never fails the command that loaded it.
"""

from __future__ import annotations

import importlib.util
import inspect
import logging
import sys
from collections.abc import Iterator
from pathlib import Path
from types import ModuleType
from typing import TYPE_CHECKING

import pluggy

from scaffoldctl.plugins.hookspecs import ScaffoldctlHookSpec

if TYPE_CHECKING:
    from scaffoldctl.domain.composer import FamilySpec

PROJECT_NAME = "scaffoldctl"
ENTRY_POINT_GROUP = "scaffoldctl.plugins"
LOCAL_MODULE_PREFIX = "scaffoldctl_local_plugin_"

# HookimplMarker(PROJECT_NAME) tags decorated methods with this attribute.
_IMPL_ATTR = f"{PROJECT_NAME}_impl"

logger = logging.getLogger(__name__)


def _implements_hooks(cls: type) -> bool:
    return any(
        getattr(getattr(cls, attr, None), _IMPL_ATTR, None)
        for attr in dir(cls)
        if not attr.startswith("_")
    )


def _import_file(path: Path, module_name: str) -> ModuleType | None:
    spec = importlib.util.spec_from_file_location(module_name, path)
    if spec is None or spec.loader is None:
        logger.warning("Cannot import plugin file %s", path)
        return None
    module = importlib.util.module_from_spec(spec)
    sys.modules[module_name] = module
    try:
        spec.loader.exec_module(module)
    except Exception:
        sys.modules.pop(module_name, None)
        logger.warning("Plugin file %s failed to import", path, exc_info=True)
        return None
    return module


def _plugin_classes(module: ModuleType) -> Iterator[type]:
    """Yield classes defined in *module* (not imported into it) with hookimpls."""
    for _, cls in inspect.getmembers(module, inspect.isclass):
        if cls.__module__ == module.__name__ and _implements_hooks(cls):
            yield cls


class PluginManager:
    """Wraps a pluggy manager with scaffoldctl's discovery rules."""

    def __init__(self) -> None:
        self._pm = pluggy.PluginManager(PROJECT_NAME)
        self._pm.add_hookspecs(ScaffoldctlHookSpec)
        self._loaded = False

    @property
    def is_loaded(self) -> bool:
        return self._loaded

    @property
    def hook(self) -> pluggy.HookRelay:
        return self._pm.hook

    def discover_and_load(self, *, local_dir: Path | None = None) -> list[str]:
        """Load entry point plugins, then any files in *local_dir*.

        Returns the names of every registered plugin afterwards.
        """
        self._pm.load_setuptools_entrypoints(ENTRY_POINT_GROUP)
        self._instantiate_registered_classes()
        if local_dir is not None and local_dir.is_dir():
            for path in sorted(local_dir.glob("*.py")):
                if not path.name.startswith("_"):
                    self._load_local_file(path)
        self._loaded = True
        return self.list_plugin_names()

    def register_plugin(self, plugin: object, name: str | None = None) -> None:
        plugin_name = name or type(plugin).__name__
        self._pm.register(plugin, name=plugin_name)
        logger.debug("Registered plugin: %s", plugin_name)

    def unregister(self, plugin: object) -> None:
        self._pm.unregister(plugin)

    def get_plugins(self) -> list[object]:
        return list(self._pm.get_plugins())

    def list_plugin_names(self) -> list[str]:
        return [self._name_of(plugin) for plugin in self._pm.get_plugins()]

    def collect_families(self) -> list[FamilySpec]:
        """Ask each plugin for extra framework families.

        Plugins are asked one at a time so that a hook which raises, or
        returns something other than a list of FamilySpec, only loses its
        own contributions.
        """
        from scaffoldctl.domain.composer import FamilySpec

        collected: list[FamilySpec] = []
        for plugin in self._pm.get_plugins():
            register = getattr(plugin, "register_frameworks", None)
            if register is None:
                continue
            name = self._name_of(plugin)
            try:
                offered = register()
            except Exception:
                logger.warning("Plugin %s failed in register_frameworks", name, exc_info=True)
                continue
            if offered is None:
                continue
            if not isinstance(offered, list | tuple):
                logger.warning("Plugin %s must return a list of families", name)
                continue
            for item in offered:
                if isinstance(item, FamilySpec):
                    collected.append(item)
                else:
                    logger.warning("Plugin %s offered %r, not a FamilySpec", name, item)
        return collected

    def _name_of(self, plugin: object) -> str:
        return self._pm.get_name(plugin) or type(plugin).__name__

    def _load_local_file(self, path: Path) -> None:
        module_name = f"{LOCAL_MODULE_PREFIX}{path.stem}"
        module = _import_file(path, module_name)
        if module is None:
            return
        for cls in _plugin_classes(module):
            try:
                instance = cls()
            except Exception:
                logger.warning("Cannot instantiate %s from %s", cls.__name__, path, exc_info=True)
                continue
            self.register_plugin(instance, name=module_name)

    def _instantiate_registered_classes(self) -> None:
        # An entry point may name a class; pluggy registers it as-is, which
        # leaves hook methods unbound. Swap such classes for instances.
        for plugin in self.get_plugins():
            if not inspect.isclass(plugin) or not _implements_hooks(plugin):
                continue
            name = self._name_of(plugin)
            self._pm.unregister(plugin)
            try:
                self._pm.register(plugin(), name=name)
            except Exception:
                logger.warning("Cannot instantiate entry point plugin %s", name, exc_info=True)
