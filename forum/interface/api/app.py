"""FastAPI application."""

from dishka import AsyncContainer
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from forum.config import Settings
from forum.interface.api.routes import (
    auth,
    bugs,
    comments,
    friends,
    health,
    likes,
    moderation,
    notifications,
    plans,
    points,
    polls,
    posts,
    questions,
    users,
)
from forum.util.di.container import create_container, setup_di
from forum.util.observability import instrument_fastapi

ROUTE_MODULES = (
    health,
    auth,
    users,
    friends,
    posts,
    likes,
    polls,
    comments,
    questions,
    notifications,
    points,
    bugs,
    plans,
    moderation,
)


def create_app(container: AsyncContainer | None = None) -> FastAPI:
    """Create FastAPI application.

    Note: Logfire should be configured before calling this function.
    In production, start_app.py handles this.

    Args:
        container: DI container to use; the production container when None.
            Tests pass a container built by ``tests.di.build_test_container``.
    """
    settings = Settings()

    app_instance = FastAPI(
        title="Forum API",
        description="Backend API for a social forum with posts, polls, friendships, questions and a points ledger",
        version="0.1.0",
    )

    # Instrument FastAPI for automatic tracing of HTTP requests
    instrument_fastapi(app_instance)

    app_instance.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors.allowed_origins,
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS", "PATCH"],
        allow_headers=[
            "Authorization",
            "Content-Type",
            "Accept",
            "Origin",
            "User-Agent",
            "Cache-Control",
            "X-Requested-With",
            "X-Webhook-Signature",
        ],
        expose_headers=["Content-Length", "Content-Type"],
        max_age=600,  # Cache preflight requests for 10 minutes
    )

    # Request-scoped dependencies come from dishka
    setup_di(app_instance, container or create_container())

    for module in ROUTE_MODULES:
        app_instance.include_router(module.router)

    return app_instance


# Create app instance for uvicorn
# Note: Logfire must be configured before this module is imported
# In production: start_app.py handles this
app = create_app()
