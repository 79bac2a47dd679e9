"""Template plugins for template-cycle."""

from template_cycle.plugins.base import Plugin
from template_cycle.plugins.cycle import CycleBinding, CyclePlugin
from template_cycle.plugins.manager import PluginInfo, PluginManager, default_manager

__all__ = [
    "CycleBinding",
    "CyclePlugin",
    "Plugin",
    "PluginInfo",
    "PluginManager",
    "default_manager",
]
