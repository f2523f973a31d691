"""Application factory for the learnspring FastAPI app."""
from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError

from learnspring import __version__
from learnspring.core.errors import AppError, app_error_handler, validation_error_handler
from learnspring.core.logging import get_logger
from learnspring.core.settings import Settings, get_settings
from learnspring.routers import hello
from learnspring.services.demo import DemoService
from learnspring.services.interfaces import DemoServiceProtocol


def create_app(
    settings: Settings | None = None,
    demo_service: DemoServiceProtocol | None = None,
) -> FastAPI:
    settings = settings or get_settings()

    app = FastAPI(
        title="learnspring API",
        version=__version__,
        description="Controller/service wiring demo built on FastAPI",
        debug=settings.debug,
    )

    # Services are constructed here and handed to handlers via Depends
    app.state.demo_service = demo_service or DemoService()

    # Include routers
    app.include_router(hello.router, tags=["hello"])

    # Error handlers
    app.add_exception_handler(AppError, app_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)

    get_logger().info("learnspring app created (environment=%s)", settings.environment)
    return app


app = create_app()
