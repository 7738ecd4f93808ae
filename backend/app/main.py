"""
Watch Party Backend - scheduled group viewing sessions
The server relays encrypted chat and never decrypts anything.
"""

from contextlib import asynccontextmanager
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from app.config import settings, validate_settings
from app.database import init_db, close_db
from app.routers import health, marathon, watch_parties
from app.logging_config import setup_logging
from app.services.container import build_services, build_tmdb_client


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler"""
    setup_logging(settings.LOG_LEVEL)

    # Validate deployment-critical settings before opening connections.
    validate_settings(settings)

    # Startup
    pool = await init_db()
    tmdb_client = build_tmdb_client(settings)
    app.state.services = build_services(pool, tmdb_client, settings)

    yield

    # Shutdown
    await tmdb_client.aclose()
    await close_db()


async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """Malformed or missing request fields are a client error (400)"""
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"detail": "Missing or invalid request fields"},
    )


def create_app() -> FastAPI:
    """Application factory"""
    app = FastAPI(
        title="Watch Party",
        description="Watch party scheduling and encrypted chat relay",
        version="1.0.0",
        lifespan=lifespan
    )

    app.add_exception_handler(RequestValidationError, validation_exception_handler)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=[settings.FRONTEND_URL],
        allow_credentials=True,
        allow_methods=["GET", "POST", "DELETE"],
        allow_headers=["Authorization", "Content-Type"],
    )

    # Register routers
    app.include_router(health.router, tags=["health"])
    app.include_router(watch_parties.router, prefix="/api/tools/watchparty", tags=["watchparty"])
    app.include_router(marathon.router, prefix="/api/tools/marathon", tags=["marathon"])

    return app


app = create_app()
