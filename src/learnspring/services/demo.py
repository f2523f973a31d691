"""Demo message provider and its FastAPI dependency."""
from __future__ import annotations

from fastapi import Request

from learnspring.services.interfaces import DemoServiceProtocol

HELLO_PREFIX = "Hello "
WELCOME_MESSAGE = "Welcome to this Demo application."


class DemoService:
    """Stateless provider of the demo greeting strings."""

    def get_hello_message(self, user: str) -> str:
        """Return ``"Hello "`` followed by ``user`` exactly as given."""
        return HELLO_PREFIX + user

    def get_welcome_message(self) -> str:
        return WELCOME_MESSAGE


def get_demo_service(request: Request) -> DemoServiceProtocol:
    """Return the provider constructed by ``create_app``."""
    service: DemoServiceProtocol = request.app.state.demo_service
    return service
