#!/usr/bin/env python3
"""
Startup script for the Task Management API
This script starts the FastAPI server with proper configuration
"""

import logging

import uvicorn

from app.config.settings import settings

logger = logging.getLogger(__name__)

def main():
    logging.basicConfig(level=settings.LOG_LEVEL)

    logger.info("Starting Task Management API server...")
    logger.info(f"Host: {settings.HOST}")
    logger.info(f"Port: {settings.PORT}")
    logger.info(f"Reload: {settings.RELOAD}")

    # Start the server
    uvicorn.run(
        "main:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=settings.RELOAD,
        log_level=settings.LOG_LEVEL.lower(),
    )

if __name__ == "__main__":
    main()
