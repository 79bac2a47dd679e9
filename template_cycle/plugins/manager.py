"""Plugin manager for template-cycle.

Keeps the template plugins available to a host, keyed by the name a
template uses them under, and constructs the objects they bind. Plugins
come from the built-in set, from a directory scan, or from package
entry points.
"""

from __future__ import annotations

import importlib.metadata
import importlib.util
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from template_cycle.plugins.base import Plugin
from template_cycle.plugins.cycle import CyclePlugin

logger = logging.getLogger(__name__)


@dataclass
class PluginInfo:
    """A registered plugin and where it was found."""

    name: str
    version: str
    description: str
    author: str
    source: str
    instance: Plugin


class PluginManager:
    """Registry of template plugins keyed by name.

    Usage::

        manager = PluginManager()
        manager.register(CyclePlugin)
        rowclass = manager.load("Cycle", "normalrow", "alternaterow")

    """

    def __init__(self) -> None:
        self._registry: dict[str, PluginInfo] = {}

    def register(self, plugin_cls: type[Plugin], source: str = "builtin") -> None:
        """Register a plugin class under its ``name``.

        Args:
            plugin_cls: A subclass of Plugin.
            source: Where the plugin came from, shown in listings.

        Raises:
            TypeError: If plugin_cls is not a subclass of Plugin.
            ValueError: If a plugin with the same name is already registered.
        """
        if not (isinstance(plugin_cls, type) and issubclass(plugin_cls, Plugin)):
            raise TypeError(f"{plugin_cls} is not a subclass of Plugin")

        plugin = plugin_cls()
        existing = self._registry.get(plugin.name)
        if existing is not None:
            raise ValueError(
                f"Plugin '{plugin.name}' is already registered (from {existing.source})"
            )

        self._registry[plugin.name] = PluginInfo(
            name=plugin.name,
            version=plugin.version,
            description=plugin.description,
            author=plugin.author,
            source=source,
            instance=plugin,
        )
        logger.info("Registered plugin: %s v%s (%s)", plugin.name, plugin.version, source)

    def discover(self, directory: str | Path) -> int:
        """Register the plugins defined in a directory of modules.

        Every ``.py`` file not starting with ``_`` is imported, and each
        ``Plugin`` subclass defined in it (not merely imported) is
        registered. Modules that fail to import are logged and skipped.

        Returns:
            Number of plugins registered.
        """
        directory = Path(directory)
        if not directory.is_dir():
            logger.warning("Plugin directory does not exist: %s", directory)
            return 0

        count = 0
        for py_file in sorted(directory.glob("*.py")):
            if py_file.name.startswith("_"):
                continue

            spec = importlib.util.spec_from_file_location(
                f"template_cycle_plugins.{py_file.stem}", py_file
            )
            if spec is None or spec.loader is None:
                continue
            module = importlib.util.module_from_spec(spec)
            try:
                spec.loader.exec_module(module)
            except Exception as e:
                logger.warning("Failed to load plugin from %s: %s", py_file, e)
                continue

            for attr in vars(module).values():
                if (
                    isinstance(attr, type)
                    and issubclass(attr, Plugin)
                    and attr.__module__ == module.__name__
                ):
                    try:
                        self.register(attr, source=str(py_file))
                        count += 1
                    except ValueError as e:
                        logger.warning("Skipping %s: %s", attr.__name__, e)

        logger.info("Discovered %d plugins in %s", count, directory)
        return count

    def discover_entry_points(self, group: str = "template_cycle.plugins") -> int:
        """Register plugins advertised by installed packages.

        Returns:
            Number of plugins registered.
        """
        count = 0
        for ep in importlib.metadata.entry_points(group=group):
            try:
                self.register(ep.load(), source=f"entry point {ep.value}")
                count += 1
            except Exception as e:
                logger.warning("Failed to load entry point %s: %s", ep.name, e)
        return count

    def list_plugins(self) -> list[str]:
        """Return names of all registered plugins."""
        return list(self._registry)

    def load(self, name: str, *args: Any, **kwargs: Any) -> Any:
        """Construct the object a plugin binds into a template.

        Args:
            name: Plugin name, as used in the template.
            *args: Passed through to the plugin's ``new``.
            **kwargs: Passed through to the plugin's ``new``.

        Raises:
            KeyError: If plugin is not registered.
        """
        if name not in self._registry:
            raise KeyError(f"Plugin '{name}' is not registered")
        logger.debug("Loading plugin: %s", name)
        return self._registry[name].instance.new(*args, **kwargs)

    def summary(self) -> list[dict[str, str]]:
        """Return a summary of all registered plugins."""
        return [
            {
                "name": info.name,
                "version": info.version,
                "description": info.description,
                "author": info.author,
                "source": info.source,
            }
            for info in self._registry.values()
        ]


def default_manager() -> PluginManager:
    """Return a manager with the built-in plugins registered."""
    manager = PluginManager()
    manager.register(CyclePlugin)
    return manager
