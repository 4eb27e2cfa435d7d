"""ASGI entry point for the EcoBazaar auth API.

``create_app`` assembles the application: the ``/auth`` router, CORS for
the storefront origin, JSON error handlers and two service endpoints
(``/health`` and ``/``). Run it through ``ecobazaar serve`` or any ASGI
server that accepts an app factory.
"""

import logging
import sys
from contextlib import asynccontextmanager
from functools import lru_cache
from typing import AsyncIterator

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from ecobazaar.presentation.api.dependencies import create_tables, get_engine
from ecobazaar.presentation.api.exception_handlers import (
    setup_exception_handlers,
)
from ecobazaar.presentation.api.routers import auth_router
from ecobazaar_config.settings import Settings, get_settings

logger = logging.getLogger(__name__)

API_VERSION = "1.0.0"
AUTH_PREFIX = "/auth"

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
OWN_LOGGERS = ("ecobazaar", "ecobazaar_auth", "ecobazaar_config")
CHATTY_LOGGERS = ("sqlalchemy.engine", "aiosqlite", "asyncpg")

OPENAPI_TAGS = [
    {
        "name": "Authentication",
        "description": (
            "Signup with email, password and optional role (USER when "
            "omitted), and login for a signed bearer token."
        ),
    },
    {"name": "Health", "description": "Liveness probe."},
    {"name": "Info", "description": "Service name, version and endpoints."},
]


@lru_cache(maxsize=1)
def _configure_logging() -> None:
    """Route all records to stdout at the configured level. Runs once."""
    level = getattr(logging, get_settings().log_level.upper(), logging.INFO)

    logging.basicConfig(
        level=level,
        format=LOG_FORMAT,
        datefmt=LOG_DATE_FORMAT,
        stream=sys.stdout,
        force=True,
    )
    for name in OWN_LOGGERS:
        logging.getLogger(name).setLevel(level)
    for name in CHATTY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)


@asynccontextmanager
async def lifespan(_: FastAPI) -> AsyncIterator[None]:
    """Ensure the schema exists on startup; release the pool on shutdown."""
    logger.info("EcoBazaar auth API %s starting", API_VERSION)
    engine = get_engine()
    try:
        await create_tables(engine)
    except OSError:
        logger.critical("Database unreachable, aborting startup")
        raise SystemExit(1) from None

    yield

    await engine.dispose()
    logger.info("EcoBazaar auth API stopped")


def create_app(settings: Settings | None = None) -> FastAPI:
    """Build the FastAPI application.

    Parameters
    ----------
    settings
        Explicit settings, mainly for tests. When omitted, the cached
        environment settings are used and logging is configured.
    """
    if settings is None:
        _configure_logging()
        settings = get_settings()

    # Interactive docs only in debug mode
    docs_enabled = settings.api_debug

    app = FastAPI(
        title=f"{settings.app_name} API",
        description="Signup and login for the EcoBazaar marketplace.",
        version=API_VERSION,
        docs_url="/docs" if docs_enabled else None,
        redoc_url="/redoc" if docs_enabled else None,
        openapi_url="/openapi.json" if docs_enabled else None,
        openapi_tags=OPENAPI_TAGS,
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    setup_exception_handlers(app)
    app.include_router(auth_router, prefix=AUTH_PREFIX, tags=["Authentication"])

    @app.get("/health", tags=["Health"])
    async def health() -> dict:
        return {"status": "healthy", "version": API_VERSION}

    @app.get("/", tags=["Info"])
    async def info() -> dict:
        return {
            "name": f"{settings.app_name} API",
            "version": API_VERSION,
            "docs": "/docs" if docs_enabled else None,
            "endpoints": {
                "health": "/health",
                "signup": f"{AUTH_PREFIX}/signup",
                "login": f"{AUTH_PREFIX}/login",
                "me": f"{AUTH_PREFIX}/me",
            },
        }

    return app
