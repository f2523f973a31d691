"""Commands printing the demo service messages."""
from __future__ import annotations

from learnspring.cli.base import app, console
from learnspring.services.demo import DemoService


@app.command("greet")  # type: ignore[misc]
def greet(user: str) -> None:
    """Print the hello message for USER."""
    console.print(DemoService().get_hello_message(user), markup=False, highlight=False)


@app.command("welcome")  # type: ignore[misc]
def welcome() -> None:
    """Print the welcome message."""
    console.print(DemoService().get_welcome_message(), markup=False, highlight=False)
