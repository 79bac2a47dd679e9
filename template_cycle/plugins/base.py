"""Base class for template plugins.

All plugins should subclass ``Plugin`` and implement ``new``.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any


class Plugin(ABC):
    """Abstract base class for template plugins.

    A host template loads a plugin by name and binds the object returned
    by ``new`` into its namespace.
    """

    # Plugin metadata, override in subclasses
    name: str = "unnamed_plugin"
    version: str = "0.1.0"
    description: str = ""
    author: str = ""

    @abstractmethod
    def new(self, *args: Any, **kwargs: Any) -> Any:
        """Construct the object to bind into the template namespace.

        Args:
            *args: Positional arguments given where the plugin is used.
            **kwargs: Named arguments given where the plugin is used.

        Returns:
            The object the host binds.
        """
        ...
