"""Command-line entrypoint that serves the API with uvicorn."""

import logging

import uvicorn

from real_gains.api.app import create_app
from real_gains.containers import build_container


def main() -> None:
    """Build the app and serve it on the configured host and port."""
    container = build_container()
    app = create_app(container)
    settings = container.settings
    logger = logging.getLogger(__name__)
    logger.info("Server running on http://localhost:%s", settings.port)
    logger.info(
        "Health check available at: http://localhost:%s/api/health", settings.port
    )
    uvicorn.run(app, host=settings.host, port=settings.port, log_level="info")


if __name__ == "__main__":
    main()
