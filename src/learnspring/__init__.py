"""learnspring: controller/service wiring demo on FastAPI."""
__version__ = "0.1.0"

__all__ = ["__version__"]
