"""Natural Units command-line interface package.

Supports ``python -m natural_units.cli`` as an alternative to the ``natunits`` entry point.
"""

from natural_units.cli.main import cli, main

__all__ = ["cli", "main"]
