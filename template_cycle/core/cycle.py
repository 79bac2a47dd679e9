"""Cyclically return values from a fixed sequence.

A ``Cycle`` is bound into a template namespace and hands out the next
value of its sequence each time it is read, wrapping back to the first
value after the last one::

    row_class = Cycle("normalrow", "alternaterow")
    row_class.next()   # "normalrow"
    row_class.next()   # "alternaterow"
    row_class.next()   # "normalrow"
    row_class.reset()
    row_class.next()   # "normalrow"

Reading the cycle as text is an explicit operation (``stringify``); the
object does not advance itself through ``str()``. Hosts that want
"reference the name, get the next value" behaviour wrap the cycle in a
``CycleBinding`` (see ``template_cycle.plugins.cycle``).
"""

from __future__ import annotations

import logging
from typing import Any

logger = logging.getLogger(__name__)

# Cursor value meaning no value has been returned since init/reset
_BEFORE_FIRST = -1


class Cycle:
    """A positional cursor over an ordered, fixed list of values.

    Args:
        *values: Initial values to cycle through. Optional; a cycle
            created without values is empty until ``init`` is called.
    """

    def __init__(self, *values: Any) -> None:
        self._values: tuple[Any, ...] = ()
        self._cursor: int = _BEFORE_FIRST
        if values:
            self.init(*values)

    def init(self, *values: Any) -> str:
        """Replace the values to cycle through and rewind the cursor.

        Returns:
            The empty string, so nothing is inserted when called from
            a template.
        """
        self._values = tuple(values)
        self._cursor = _BEFORE_FIRST
        logger.debug("Cycle initialised with %d values", len(self._values))
        return ""

    def elements(self) -> int:
        """Return the number of values currently set."""
        return len(self._values)

    def list(self) -> tuple[Any, ...]:
        """Return the values in their original order.

        This is the way to look at a particular position without moving
        the cursor.
        """
        return self._values

    def next(self) -> Any:
        """Return the next value, wrapping to the first after the last.

        Returns ``None`` when no values are set.
        """
        count = len(self._values)
        if not count:
            return None
        if count == 1:
            self._cursor = 0
        else:
            self._cursor = (self._cursor + 1) % count
        return self._values[self._cursor]

    def value(self) -> Any:
        """Same as ``next``."""
        return self.next()

    def reset(self) -> str:
        """Rewind so that the next value returned is the first one.

        Returns:
            The empty string, as for ``init``.
        """
        self._cursor = _BEFORE_FIRST
        logger.debug("Cycle reset")
        return ""

    def stringify(self) -> str:
        """Advance the cycle and return the value as text.

        This moves the cursor exactly like ``next``. An empty cycle
        renders as ``""``.
        """
        value = self.next()
        return "" if value is None else str(value)

    def __bool__(self) -> bool:
        # Truthy even when empty
        return True

    def __repr__(self) -> str:
        return f"Cycle({', '.join(repr(v) for v in self._values)})"
