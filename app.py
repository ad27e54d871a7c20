import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from redis.asyncio import Redis

import config
from db import create_db_and_tables
from middleware.security_headers import SecurityHeadersMiddleware
from services.session import SessionProvider
from web.api_router import api_router

APP_TITLE = "Basket API"
APP_VERSION = "1.0.0"


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Lifespan event handler for startup and shutdown."""
    # Startup
    await create_db_and_tables()
    logging.info("[Startup] Database tables ready")

    redis = None
    if getattr(app.state, "session_provider", None) is None:
        redis = Redis(host=config.REDIS_HOST, port=config.REDIS_PORT, password=config.REDIS_PASSWORD)
        app.state.session_provider = SessionProvider(redis, ttl_seconds=config.SESSION_TTL_SECONDS)
        logging.info(f"[Startup] Session registry connected to Redis at {config.REDIS_HOST}:{config.REDIS_PORT}")

    yield

    # Shutdown
    if redis is not None:
        await redis.aclose()
        app.state.session_provider = None
    logging.warning('Shutting down..')


async def exception_handler(request: Request, exc: Exception):
    """Last-resort handler for failures the routers don't translate (store outages etc.)."""
    logging.error(f"Unhandled exception on {request.method} {request.url.path}: {exc}", exc_info=exc)
    return JSONResponse(
        status_code=500,
        content={"status": "error", "message": "Internal server error"},
    )


def create_app(session_provider: SessionProvider | None = None) -> FastAPI:
    app = FastAPI(title=APP_TITLE, version=APP_VERSION, lifespan=lifespan)
    app.state.session_provider = session_provider

    if config.SECURITY_HEADERS_ENABLED:
        app.add_middleware(SecurityHeadersMiddleware)
        logging.info("[Startup] Security headers middleware enabled")
    else:
        logging.debug("[Startup] Security headers middleware disabled")

    app.include_router(api_router)
    app.add_exception_handler(Exception, exception_handler)

    # Health check endpoint (for Docker container monitoring)
    @app.get("/health")
    async def health_check():
        """Health check endpoint for Docker healthcheck."""
        return {"status": "healthy"}

    return app


app = create_app()
