"""The ``Cycle`` template plugin and its host binding."""

from __future__ import annotations

from typing import Any

from template_cycle.core.cycle import Cycle
from template_cycle.plugins.base import Plugin


class CyclePlugin(Plugin):
    """Cyclically insert from a sequence of values.

    Mostly useful for alternating table row classes::

        USE rowclass = Cycle('normalrow', 'alternaterow')
    """

    name = "Cycle"
    version = "0.1.0"
    description = "Cyclically insert from a sequence of values"
    author = "template-cycle"

    def new(self, *values: Any) -> Cycle:
        return Cycle(*values)


class CycleBinding:
    """Host-side wrapper that advances a cycle whenever it is rendered.

    ``str(binding)`` and ``format(binding)`` call ``Cycle.stringify``,
    so every interpolation of the bound name consumes one value. Method
    references from the template go through ``call``.

    Args:
        cycle: The cycle to expose.
    """

    # Names a template may invoke on a bound cycle
    METHODS = ("next", "value", "reset", "list", "elements", "init")

    def __init__(self, cycle: Cycle) -> None:
        self.cycle = cycle

    def call(self, method: str, *args: Any) -> Any:
        """Invoke a template-visible method on the cycle.

        Raises:
            AttributeError: If ``method`` is not exposed to templates.
        """
        if method not in self.METHODS:
            raise AttributeError(f"Cycle has no template method '{method}'")
        return getattr(self.cycle, method)(*args)

    def __str__(self) -> str:
        return self.cycle.stringify()

    def __format__(self, format_spec: str) -> str:
        return format(self.cycle.stringify(), format_spec)

    def __repr__(self) -> str:
        return f"CycleBinding({self.cycle!r})"
