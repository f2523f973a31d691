"""Protocols describing the services handlers depend on."""
from __future__ import annotations

from typing import Protocol


class DemoServiceProtocol(Protocol):
    def get_hello_message(self, user: str) -> str: ...
    def get_welcome_message(self) -> str: ...
