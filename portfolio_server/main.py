from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from portfolio_server.config.logging_config import setup_logging
from portfolio_server.core.config import settings
from portfolio_server.exceptions.handlers import register_exception_handlers
from portfolio_server.routers import router
from portfolio_server.services.container import ServiceContainer


def create_app(container: ServiceContainer = None) -> FastAPI:
    # Initialize FastAPI application
    app = FastAPI(
        title=settings.app_name,
        description="Link metadata and preview API for the portfolio site",
        version=settings.app_version,
    )

    # Services (and the metadata cache) are built once per process
    app.state.container = container or ServiceContainer()

    # CORS configuration
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=settings.cors_allow_credentials,
        allow_methods=settings.cors_allow_methods,
        allow_headers=settings.cors_allow_headers,
        max_age=settings.cors_max_age,
    )

    register_exception_handlers(app)

    # Include the centralized router
    app.include_router(router, prefix="/api")
    return app


setup_logging()

app = create_app()
