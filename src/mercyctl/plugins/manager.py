"""Plugin discovery, loading, and capability collection."""

from __future__ import annotations

import importlib.util
import inspect
import logging
import sys
from collections.abc import Callable
from pathlib import Path

import pluggy

from mercyctl.plugins.hookspecs import MercyHookSpec

PROJECT_NAME = "mercyctl"
ENTRY_POINT_GROUP = "mercyctl.plugins"

logger = logging.getLogger(__name__)


class PluginManager:
    """Manages plugin discovery and capability collection."""

    def __init__(self) -> None:
        self._pm = pluggy.PluginManager(PROJECT_NAME)
        self._pm.add_hookspecs(MercyHookSpec)
        self._loaded = False

    def discover_and_load(self, *, local_dir: Path | None = None) -> list[str]:
        """Load entry-point plugins, then single-file plugins from *local_dir*.

        Returns the names of all registered plugins.
        """
        self._pm.load_setuptools_entrypoints(ENTRY_POINT_GROUP)
        self._normalize_plugin_instances()
        if local_dir is not None:
            self._discover_local(local_dir)
        self._loaded = True
        return self.list_plugin_names()

    def register_plugin(self, plugin: object, name: str | None = None) -> None:
        """Register a plugin instance directly."""
        resolved_name = name or plugin.__class__.__name__
        self._pm.register(plugin, name=resolved_name)
        logger.debug("Registered plugin: %s", resolved_name)

    @property
    def is_loaded(self) -> bool:
        return self._loaded

    def list_plugin_names(self) -> list[str]:
        return [self._pm.get_name(p) or p.__class__.__name__ for p in self._pm.get_plugins()]

    def collect_capabilities(self) -> dict[str, Callable[[str], str]]:
        """Merge capability mappings from every plugin.

        Plugins registered later lose on name clashes. Non-callable values
        and non-dict returns are skipped with a warning.
        """
        collected: dict[str, Callable[[str], str]] = {}
        for plugin in self._pm.get_plugins():
            plugin_name = self._pm.get_name(plugin) or plugin.__class__.__name__
            hook = getattr(plugin, "register_capabilities", None)
            if hook is None:
                continue
            try:
                mapping = hook()
            except Exception:
                logger.warning(
                    "Failed to collect capabilities from plugin %s",
                    plugin_name,
                    exc_info=True,
                )
                continue
            if mapping is None:
                continue
            if not isinstance(mapping, dict):
                logger.warning("Plugin %s returned non-dict capabilities", plugin_name)
                continue
            for name, func in mapping.items():
                if not callable(func):
                    logger.warning("Skipping non-callable capability %r from %s", name, plugin_name)
                    continue
                collected.setdefault(str(name), func)
        return collected

    # ------------------------------------------------------------------
    # Local directory discovery
    # ------------------------------------------------------------------

    def _discover_local(self, local_dir: Path) -> None:
        """Load each ``*.py`` in *local_dir* (``_``-prefixed files skipped).

        Classes carrying hookimpl-decorated methods are instantiated and
        registered. Broken files are logged and skipped.
        """
        if not local_dir.is_dir():
            return

        for py_file in sorted(local_dir.glob("*.py")):
            if py_file.name.startswith("_"):
                continue
            module_name = f"mercyctl_local_plugin_{py_file.stem}"
            try:
                spec = importlib.util.spec_from_file_location(module_name, py_file)
                if spec is None or spec.loader is None:
                    logger.warning("Could not create module spec for %s", py_file)
                    continue
                module = importlib.util.module_from_spec(spec)
                sys.modules[module_name] = module
                spec.loader.exec_module(module)
            except Exception:
                logger.warning("Failed to load local plugin %s", py_file, exc_info=True)
                sys.modules.pop(module_name, None)
                continue

            for _attr_name, obj in inspect.getmembers(module, inspect.isclass):
                if obj.__module__ != module_name or not self._has_hook_impls(obj):
                    continue
                try:
                    self.register_plugin(obj(), name=module_name)
                except Exception:
                    logger.warning(
                        "Failed to instantiate plugin class %s from %s",
                        obj.__name__,
                        py_file,
                        exc_info=True,
                    )

    def _normalize_plugin_instances(self) -> None:
        """Replace entry-point plugin classes with instances.

        Hook calls against a class object leave ``self`` unbound.
        """
        for plugin in list(self._pm.get_plugins()):
            if not inspect.isclass(plugin) or not self._has_hook_impls(plugin):
                continue

            plugin_name = self._pm.get_name(plugin) or plugin.__name__
            self._pm.unregister(plugin)
            try:
                instance = plugin()
            except Exception:
                logger.warning(
                    "Failed to instantiate entry-point plugin %s",
                    plugin_name,
                    exc_info=True,
                )
                continue
            self._pm.register(instance, name=plugin_name)

    @staticmethod
    def _has_hook_impls(cls: type) -> bool:
        """Whether *cls* has a method marked with ``@hookimpl``."""
        for name in dir(cls):
            if name.startswith("_"):
                continue
            method = getattr(cls, name, None)
            if callable(method) and getattr(method, f"{PROJECT_NAME}_impl", None):
                return True
        return False
