#!/usr/bin/env python3
"""Start the FastAPI application with Logfire error tracking for startup errors."""

import sys

import logfire
import uvicorn

from icebreaker.config import Settings
from icebreaker.util.logging import get_logger, setup_logging
from icebreaker.util.observability import configure_logfire

logger = get_logger("icebreaker.start_app")


def main() -> int:
    """Start the application and log any startup errors to Logfire."""
    settings = Settings()

    # Configure logging and Logfire early to catch startup errors
    setup_logging(settings)
    configure_logfire(settings)

    try:
        logger.info(
            "Serving %s storage from %s", settings.environment, settings.storage.path
        )
        logfire.info("Starting FastAPI application", port=settings.port)

        # The app module builds its own container on import
        uvicorn.run(
            "icebreaker.interface.api.app:app",
            host=settings.host,
            port=settings.port,
            log_level="debug" if settings.debug else "info",
        )

        return 0

    except Exception as e:
        logfire.error(
            "Application startup failed",
            error=str(e),
            error_type=type(e).__name__,
            _exc_info=sys.exc_info(),
        )
        # Re-raise so the process exits non-zero
        raise


if __name__ == "__main__":
    sys.exit(main())
