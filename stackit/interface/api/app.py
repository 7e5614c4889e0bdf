"""FastAPI application."""

from dishka import AsyncContainer
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from stackit.config import Settings
from stackit.interface.api.errors import register_exception_handlers
from stackit.interface.api.routes import answers, feed, health, questions, votes
from stackit.util.di.container import create_container, setup_di
from stackit.util.observability import instrument_fastapi


def create_app(container: AsyncContainer | None = None) -> FastAPI:
    """Create FastAPI application.

    Note: Logfire should be configured before calling this function.
    In production, start_app.py handles this.

    Args:
        container: DI container to use (tests pass one built with mocks);
            the production container is built when omitted
    """
    settings = Settings()

    app_instance = FastAPI(
        title="StackIt API",
        description="Backend API for StackIt - a community Q&A platform",
        version="0.1.0",
    )

    # Instrument FastAPI for automatic tracing of HTTP requests
    instrument_fastapi(app_instance)

    app_instance.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["GET", "POST", "DELETE", "OPTIONS"],
        allow_headers=["Content-Type", "Accept", "Origin", "X-User-Id"],
        max_age=600,  # Cache preflight requests for 10 minutes
    )

    register_exception_handlers(app_instance)

    setup_di(app_instance, container or create_container())

    app_instance.include_router(health.router)
    app_instance.include_router(questions.router)
    app_instance.include_router(answers.router)
    app_instance.include_router(votes.router)
    app_instance.include_router(feed.router)

    return app_instance


# Create app instance for uvicorn
# Note: Logfire must be configured before this module is imported
app = create_app()
