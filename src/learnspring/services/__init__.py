"""Service layer for learnspring."""
from learnspring.services.demo import DemoService, get_demo_service
from learnspring.services.interfaces import DemoServiceProtocol

__all__ = ["DemoService", "DemoServiceProtocol", "get_demo_service"]
