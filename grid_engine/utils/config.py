"""Application configuration loaded from environment variables."""

import os
import logging

logger = logging.getLogger(__name__)


class Config:
    """Application configuration loaded from environment variables"""

    ENVIRONMENT = os.environ.get("ENVIRONMENT", "development")
    DEBUG = os.environ.get("DEBUG", "false").lower() == "true"

    # Server
    API_HOST = os.environ.get("API_HOST", "0.0.0.0")
    API_PORT = int(os.environ.get("API_PORT", "8000"))
    CORS_ORIGINS = [
        o.strip() for o in os.environ.get("CORS_ORIGINS", "*").split(",") if o.strip()
    ]

    # Interactive editor
    DEFAULT_CANVAS_SCALE = float(os.environ.get("DEFAULT_CANVAS_SCALE", "30"))

    @classmethod
    def is_production(cls) -> bool:
        return cls.ENVIRONMENT == "production"

    @classmethod
    def validate(cls):
        """Validate critical configuration values"""
        if cls.is_production() and "*" in cls.CORS_ORIGINS:
            logger.warning("CORS allows every origin - not secure for production!")

        if cls.is_production() and cls.DEBUG:
            logger.warning("DEBUG is enabled in production")

        if cls.DEFAULT_CANVAS_SCALE <= 0:
            logger.error("DEFAULT_CANVAS_SCALE must be positive, got %s", cls.DEFAULT_CANVAS_SCALE)
