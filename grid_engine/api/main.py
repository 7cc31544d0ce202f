"""FastAPI application factory."""

from __future__ import annotations

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from grid_engine.api.errors import register_exception_handlers
from grid_engine.api.routes import router
from grid_engine.utils.config import Config
from grid_engine.utils.logging import setup_logger

logger = setup_logger("grid_engine")


def create_app() -> FastAPI:
    Config.validate()

    app = FastAPI(
        title="Curtain-Wall Grid Engine",
        description="Mullion grid generation and editing for glazing openings",
        version="0.1.0",
        debug=Config.DEBUG,
    )

    # CORS: allow the editor frontend
    app.add_middleware(
        CORSMiddleware,
        allow_origins=Config.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(app)
    app.include_router(router, prefix="/api")

    logger.info("Grid engine API ready (%s)", Config.ENVIRONMENT)
    return app


app = create_app()
