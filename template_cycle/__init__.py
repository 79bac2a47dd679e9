"""template-cycle: cyclically insert values from a sequence into templates."""

from template_cycle.core.cycle import Cycle

__app_name__ = "tcycle"
__version__ = "0.1.0"

__all__ = ["Cycle", "__app_name__", "__version__"]
