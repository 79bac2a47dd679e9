"""Named cycle sets and their JSON persistence.

A config file maps template names to the values each cycle steps
through, so the same sets can be bound into every rendering pass::

    {
      "meta": {"name": "site", "description": "", "version": "0.1.0"},
      "cycles": {"rowclass": ["normalrow", "alternaterow"]}
    }
"""

from __future__ import annotations

import json
import logging
from dataclasses import asdict, dataclass, field, fields
from datetime import datetime, timezone
from pathlib import Path
from typing import Any

from template_cycle.core.cycle import Cycle
from template_cycle.plugins.manager import PluginManager, default_manager

logger = logging.getLogger(__name__)


@dataclass
class ConfigMeta:
    """Top-level config metadata."""

    name: str = "Untitled"
    description: str = ""
    version: str = "0.1.0"
    modified: str = ""

    def touch(self) -> None:
        """Update the modified timestamp."""
        self.modified = datetime.now(timezone.utc).isoformat()


@dataclass
class CycleConfig:
    """Cycle sets keyed by the name they are bound to in a template."""

    meta: ConfigMeta = field(default_factory=ConfigMeta)
    cycles: dict[str, Any] = field(default_factory=dict)

    def build(self, manager: PluginManager | None = None) -> dict[str, Cycle]:
        """Create a fresh cycle for every configured name.

        Each call returns new cycles positioned before their first value,
        independent of any built earlier. Cycles are constructed through
        the ``Cycle`` plugin of ``manager`` (the built-in plugins when
        omitted).

        Raises:
            ValueError: If ``cycles`` is not a mapping or any entry's
                values are not a list.
            KeyError: If ``manager`` has no ``Cycle`` plugin.
        """
        if not isinstance(self.cycles, dict):
            raise ValueError(f"cycles must be a mapping, got {type(self.cycles).__name__}")

        if manager is None:
            manager = default_manager()
        built: dict[str, Cycle] = {}
        for name, values in self.cycles.items():
            if not isinstance(values, list):
                raise ValueError(
                    f"Values for cycle '{name}' must be a list, got {type(values).__name__}"
                )
            built[name] = manager.load("Cycle", *values)
        return built


def save_cycle_config(config: CycleConfig, path: str | Path) -> None:
    """Save a cycle config to a JSON file."""
    path = Path(path)
    config.meta.touch()

    with open(path, "w") as f:
        json.dump(asdict(config), f, indent=2)

    logger.info("Saved cycle config to %s", path)


def load_cycle_config(path: str | Path) -> CycleConfig:
    """Load a cycle config from a JSON file.

    The shape of ``cycles`` is not checked here; run
    ``validate_cycle_config`` on the result.

    Raises:
        FileNotFoundError: If the file does not exist.
        json.JSONDecodeError: If the file is not valid JSON.
        ValueError: If the document or its ``meta`` section is not an
            object, or ``meta`` has unknown keys.
    """
    path = Path(path)
    with open(path) as f:
        data = json.load(f)

    if not isinstance(data, dict):
        raise ValueError(f"Config must be a JSON object, got {type(data).__name__}")

    meta_data = data.get("meta", {})
    if not isinstance(meta_data, dict):
        raise ValueError(f"meta must be a JSON object, got {type(meta_data).__name__}")
    unknown = sorted(set(meta_data) - {f.name for f in fields(ConfigMeta)})
    if unknown:
        raise ValueError(f"Unknown meta keys: {', '.join(unknown)}")

    config = CycleConfig(meta=ConfigMeta(**meta_data), cycles=data.get("cycles", {}))
    logger.info("Loaded cycle config '%s' from %s", config.meta.name, path)
    return config
