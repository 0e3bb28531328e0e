"""
nicephrase HTTP service - bytes <-> passphrase conversion
Nothing submitted to the service is stored or logged.
"""

from contextlib import asynccontextmanager
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from nicephrase import __version__
from nicephrase.config import settings, validate_settings
from nicephrase.logging_config import log_dictionary_ready, setup_logging
from nicephrase.routers import health, passphrase
from nicephrase.wordlist import get_dictionary


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler"""
    # Setup logging
    setup_logging(settings.LOG_LEVEL)

    # Validate settings before loading anything.
    validate_settings(settings)

    # Load and verify the word table once, before serving requests
    dictionary = get_dictionary()
    log_dictionary_ready(dictionary.fingerprint)

    yield


def create_app() -> FastAPI:
    """Application factory"""
    app = FastAPI(
        title="nicephrase",
        description="Human-pronounceable passphrases for binary data",
        version=__version__,
        docs_url=None,      # Disable Swagger in production
        redoc_url=None,     # Disable ReDoc in production
        openapi_url=None,   # Disable OpenAPI schema
        lifespan=lifespan
    )

    # CORS - restrictive
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=False,
        allow_methods=["GET", "POST"],
        allow_headers=["Content-Type"],
    )

    # Register routers
    app.include_router(health.router, tags=["health"])
    app.include_router(passphrase.router, prefix="/api", tags=["passphrase"])

    return app


app = create_app()
