"""CLI commands for learnspring."""
# Import all command modules to register them with the main app
from learnspring.cli import messages, server  # noqa: F401
from learnspring.cli.base import app

__all__ = ["app", "messages", "server"]
