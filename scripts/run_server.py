#!/usr/bin/env python3
"""Development server runner for keysmith."""

import logging

import uvicorn
from keysmith.api.settings import ServerSettings

if __name__ == "__main__":
    settings = ServerSettings()
    logging.basicConfig(level=settings.logging_level)
    uvicorn.run(
        "keysmith.api:app",
        host=settings.host,
        port=settings.port,
        reload=settings.reload,
        log_level=settings.log_level
    )
