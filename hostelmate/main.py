from __future__ import annotations

import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from hostelmate import __version__
from hostelmate.api.v1.router import router as api_v1_router
from hostelmate.config.logging import setup_logging
from hostelmate.config.settings import settings
from hostelmate.core.middleware import register_exception_handlers, register_middlewares
from hostelmate.db.init_db import init_db

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    setup_logging()
    if not settings.is_production():
        # For dev/demo only; production schemas are managed outside the app
        init_db()
    logger.info(f"{settings.APP_NAME} {__version__} started ({settings.ENVIRONMENT})")
    yield
    logger.info(f"{settings.APP_NAME} shutting down")


def create_app() -> FastAPI:
    """
    Application factory for the FastAPI app.

    - Configures title, version, debug mode from Settings.
    - Registers CORS, core middleware, and exception handlers.
    - Includes the API router under settings.API_PREFIX.
    """
    app = FastAPI(
        title=settings.APP_NAME,
        debug=settings.DEBUG,
        version=settings.API_VERSION,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS or ["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_middlewares(app)
    register_exception_handlers(app)

    app.include_router(api_v1_router, prefix=settings.API_PREFIX)

    @app.get("/health", tags=["Health"])
    def health() -> dict:
        return {"status": "ok", "version": __version__}

    return app


app = create_app()


if __name__ == "__main__":
    uvicorn.run(
        "hostelmate.main:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=settings.RELOAD,
    )
