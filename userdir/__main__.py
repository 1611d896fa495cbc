"""Main entry point for the FastAPI application."""

import argparse
import logging

import uvicorn

from userdir.app import configure_fastapi_app
from userdir.config import configure_logging, load_config_from_env, valid_port

LOGGER = logging.getLogger(__name__)


def main() -> None:
    """Run the FastAPI application using Uvicorn.

    The store lives in process memory, so the server always runs a single
    worker process.
    """
    parser = argparse.ArgumentParser(
        description="Run the user directory FastAPI application.",
    )
    parser.add_argument(
        "--env-file",
        type=str,
        default=".env",
        help="Path to the environment configuration file.",
    )
    parser.add_argument(
        "--port",
        type=int,
        default=None,
        help="Port to run the application on, overrides SERVER_PORT.",
    )
    parser.add_argument(
        "--host",
        type=str,
        default=None,
        help="Host to run the application on, overrides SERVER_HOST.",
    )
    args = parser.parse_args()

    if args.port is not None and not valid_port(args.port):
        parser.error(f"invalid port number: {args.port}")

    config = load_config_from_env(args.env_file)
    configure_logging(config)

    port = args.port if args.port is not None else config.server_port
    host = args.host or config.server_host

    app = configure_fastapi_app(config)

    LOGGER.info("Server running on port %s", port)
    uvicorn.run(app, host=host, port=port)


if __name__ == "__main__":
    main()
