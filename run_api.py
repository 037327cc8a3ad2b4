#!/usr/bin/env python3
"""
Script to run the books API server.
"""

import asyncio
import os
import sys

import uvicorn

from books_api.config import config
from utilities.logger import setup_logging, get_logger

logger = get_logger(__name__)


def handle_loop_exception(loop: asyncio.AbstractEventLoop, context: dict) -> None:
    """Log an exception that escaped to the event loop and stop the process."""
    exc = context.get("exception")
    logger.critical(
        "Unhandled asynchronous fault",
        message=context.get("message"),
        error=str(exc) if exc else None,
        exc_info=exc
    )
    os._exit(1)


async def serve() -> None:
    """Start uvicorn on the running loop with fatal fault handling."""
    asyncio.get_running_loop().set_exception_handler(handle_loop_exception)

    server = uvicorn.Server(uvicorn.Config(
        "books_api.main:app",
        host=config.host,
        port=config.port,
        log_level=config.log_level.lower(),
        access_log=True
    ))
    await server.serve()

    # uvicorn reports bind failures by logging and leaving serve() early
    if not server.started:
        raise RuntimeError(f"Server failed to start on {config.host}:{config.port}")


def main():
    """Run the API server."""
    setup_logging(
        log_level=config.log_level,
        log_format=config.log_format,
        log_file=config.log_file or None,
        debug=config.debug
    )
    logger.info(
        "Starting books API server",
        host=config.host,
        port=config.port,
        documentation=f"http://{config.host}:{config.port}{config.docs_path}"
    )

    try:
        asyncio.run(serve())
    except SystemExit as e:
        if e.code:
            logger.error("Server exited during startup", exit_code=e.code)
        raise
    except Exception as e:
        logger.error("Error starting server", error=str(e))
        sys.exit(1)


if __name__ == "__main__":
    main()
