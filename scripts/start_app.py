#!/usr/bin/env python3
"""Serve the Q&A API under uvicorn, reporting startup failures to Logfire."""

import sys

import logfire
import uvicorn

from qna.config import Settings
from qna.util.logging import setup_logging
from qna.util.observability import configure_logfire


def main() -> int:
    """Configure logging and telemetry, then run the API server."""
    settings = Settings()

    # Telemetry first so import-time errors in the app are captured
    configure_logfire(settings)
    setup_logging(settings)

    try:
        logfire.info(
            "Starting Q&A API",
            environment=settings.environment,
            git_sha=settings.git_sha,
            port=settings.port,
        )

        uvicorn.run(
            "qna.interface.api.app:app",
            host="0.0.0.0",
            port=settings.port,
            log_level="debug" if settings.debug else "info",
        )

        return 0

    except Exception as e:
        logfire.error(
            "API server failed to start",
            error=str(e),
            error_type=type(e).__name__,
            _exc_info=sys.exc_info(),
        )
        # Exit non-zero so the orchestrator restarts us
        raise


if __name__ == "__main__":
    sys.exit(main())
