"""
Brew Bliss Cafe - Reservation API
"""

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
import structlog

from brewbliss import __version__
from brewbliss.api import health, reservations
from brewbliss.api.exceptions import register_exception_handlers
from brewbliss.config import Settings, get_settings
from brewbliss.database import Database

logger = structlog.get_logger()


def configure_logging(settings: Settings) -> None:
    """Configure structured logging"""
    logging.basicConfig(format="%(message)s", level=settings.log_level.upper())

    if settings.log_format == "console":
        renderer = structlog.dev.ConsoleRenderer()
    else:
        renderer = structlog.processors.JSONRenderer()

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            renderer,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """Build the application; the database handle lives on ``app.state.db``."""
    settings = settings or get_settings()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Application lifespan manager"""
        configure_logging(settings)
        database = Database(settings.database_url, echo=settings.api_debug)
        if settings.create_tables:
            await database.create_all()
        app.state.db = database
        logger.info("Database connected", version=__version__)
        try:
            yield
        finally:
            await database.dispose()
            logger.info("Shutting down Brew Bliss API")

    app = FastAPI(
        title="Brew Bliss Cafe",
        description="Table reservations for Brew Bliss Cafe",
        version=__version__,
        lifespan=lifespan,
    )

    # Configure CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins_list,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(app)

    app.include_router(health.router, prefix="/api", tags=["Health"])
    app.include_router(reservations.router, prefix="/api/reservations", tags=["Reservations"])

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        "brewbliss.main:app",
        host=settings.api_host,
        port=settings.port,
        reload=settings.api_debug,
    )
