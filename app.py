#!/usr/bin/env python3
"""
Main entry point for URL shortener service.

Concurrency: requests run as asyncio tasks in a single uvicorn process. All
mappings live in that process's memory, so the service always runs with one
worker.

Usage:
    python app.py

Environment variables:
    HOST - Interface to bind to
    PORT - Port to listen on
    KEY_LENGTH - Length of generated short keys
    MAX_COLLISION_RETRIES - Extra attempts when a generated key is taken
    TRUST_FORWARDED_HOST - Set to 'true' to render links with X-Forwarded-Host
    LOG_LEVEL - Logging level
    LOG_FILE - Optional log file
    LOG_JSON - Set to 'true' for JSON-shaped logs
"""

import signal
import sys
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI

from config import Config, load_config
from quicklink.engine import InMemoryUrlShortener
from quicklink.service import UrlService
from quicklink.common.logging_config import setup_logging
from web_app import create_app


def build_service(config: Config, logger=None) -> UrlService:
    """Build the service shared by all requests."""
    shortener = InMemoryUrlShortener(
        key_length=config.key_length,
        max_collision_retries=config.max_collision_retries,
    )
    return UrlService(shortener=shortener, logger=logger)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Lifespan context manager for startup and shutdown."""
    logger = app.state.logger

    logger.info("Starting URL shortener service...")
    yield

    stats = app.state.service.get_statistics()
    logger.info(f"Shutting down, discarding {stats['total_urls']} in-memory mappings")


def main():
    """Main entry point."""
    config = load_config()

    logger = setup_logging(
        level=config.log_level,
        log_file=config.log_file,
        json_format=config.log_json,
    )

    logger.info("URL Shortener Service")
    logger.info(f"Configuration: {config.model_dump()}")

    service = build_service(config, logger=logger)
    app = create_app(service_instance=service, config=config)
    app.state.logger = logger
    app.router.lifespan_context = lifespan

    uvicorn_config = uvicorn.Config(
        app,
        host=config.host,
        port=config.port,
        log_level=config.log_level.lower(),
        access_log=True,
    )

    server = uvicorn.Server(uvicorn_config)

    def handle_signal(signum, frame):
        logger.info(f"Received signal {signum}, initiating graceful shutdown...")
        server.should_exit = True

    signal.signal(signal.SIGINT, handle_signal)
    signal.signal(signal.SIGTERM, handle_signal)

    try:
        logger.info(f"Starting server on {config.host}:{config.port}")
        server.run()
    except Exception as e:
        logger.error(f"Server error: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
