"""Command-line interface for boilerstrip.

Commands are organized into modules by functionality:

- extract: Main content extraction from a file or stdin
"""

# Import command modules to register them with the app
from boilerstrip.cli import extract  # noqa: F401
from boilerstrip.cli._common import app

__all__ = ["app"]
