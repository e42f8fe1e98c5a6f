"""FastAPI application bootstrap and router wiring."""

from contextlib import asynccontextmanager
import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
import uvicorn

from catalog.api.routers import health, products
from catalog.core.config import get_settings
from catalog.core.errors import register_exception_handlers
from catalog.core.logging_config import setup_logging
from catalog.db.session import init_db

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    settings = get_settings()
    if settings.auto_create_tables:
        init_db()
    yield


def create_app() -> FastAPI:
    """Instantiate the FastAPI app and include top-level routers."""
    settings = get_settings()
    setup_logging(settings.log_level)

    app = FastAPI(title=settings.app_name, version="0.1.0", lifespan=lifespan)

    cors_origins = settings.cors_origins
    logger.info(f"[CORS] Environment variable FRONTEND_URL: {settings.frontend_url_raw}")
    logger.info(f"[CORS] Parsed allowed origins: {cors_origins}")

    app.add_middleware(
        CORSMiddleware,
        allow_origins=cors_origins,
        allow_methods=["GET", "POST", "PUT", "DELETE"],
        allow_headers=["Content-Type", "Authorization", "Accept", "Origin"],
    )

    register_exception_handlers(app)

    app.include_router(health.root_router)
    app.include_router(health.router)
    app.include_router(products.router, prefix="/api/products", tags=["products"])

    return app


app = create_app()


if __name__ == "__main__":
    settings = get_settings()
    logger.info(f"Server listening on http://localhost:{settings.port}")
    uvicorn.run(app, host=settings.host, port=settings.port, log_level=settings.log_level.lower())
