#!/usr/bin/env python3
"""Start the Curtain-Wall Grid Engine API server."""

import uvicorn

from grid_engine.utils.config import Config

if __name__ == "__main__":
    uvicorn.run(
        "grid_engine.api.main:app",
        host=Config.API_HOST,
        port=Config.API_PORT,
        reload=Config.DEBUG,
        reload_dirs=["grid_engine"],
    )
