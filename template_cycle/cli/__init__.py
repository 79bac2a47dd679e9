"""template-cycle command-line interface package.

Supports ``python -m template_cycle.cli`` as an alternative to the ``tcycle`` entry point.
"""

from template_cycle.cli.main import cli, main

__all__ = ["cli", "main"]
