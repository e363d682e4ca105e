"""
Main entrypoint: FastAPI scoring server.

Env: API_HOST, API_PORT, LOG_LEVEL, LOG_FORMAT (see backend_creditscore.config).

Equivalent: uvicorn backend_creditscore.api_server.app:app --host 0.0.0.0 --port 8000
"""

import sys

from backend_creditscore.config import get_settings


def main() -> None:
    """Resolve settings, configure logging from them, and run the API server."""
    try:
        settings = get_settings()
    except ValueError as e:
        # Logging takes its level and format from these settings; report plainly
        print(f"[main] invalid configuration: {e}", file=sys.stderr)
        sys.exit(1)

    from backend_creditscore.creditscore_logging import configure_logging, get_logger

    configure_logging(settings)
    logger = get_logger("main")

    from backend_creditscore.api_server.app import app
    import uvicorn

    logger.info("main_server_starting", host=settings.api_host, port=settings.api_port)
    uvicorn.run(app, host=settings.api_host, port=settings.api_port, log_level=settings.log_level.lower())


if __name__ == "__main__":
    main()
