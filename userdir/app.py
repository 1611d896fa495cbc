"""FastAPI application factory for the user directory."""

from __future__ import annotations

import logging
import os
from contextlib import asynccontextmanager
from typing import TYPE_CHECKING, Any

from fastapi import APIRouter, FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .config import configure_logging, load_config_from_env
from .store import UserStore
from .users import configure_user_router, register_error_handlers

if TYPE_CHECKING:
    from collections.abc import AsyncGenerator

    from .config import AppConfig

LOGGER = logging.getLogger(__name__)


def configure_fastapi_app(
    config: AppConfig,
    store: UserStore | None = None,
) -> FastAPI:
    """Configure and return the FastAPI application.

    :param config: Application configuration
    :param store: Store backing the routes; a fresh one is created if omitted
    :return: Configured FastAPI application
    """
    user_store = store if store is not None else UserStore()

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncGenerator[Any, Any]:
        """Application lifespan manager, logs startup and shutdown."""
        LOGGER.info("User directory service is starting")
        yield
        LOGGER.info(
            "User directory service is shutting down, discarding %d users",
            len(app.state.store),
        )

    app = FastAPI(
        title="User Directory API",
        version="0.0.1",
        lifespan=lifespan,
        root_path=config.root_path,
    )
    app.state.store = user_store

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=False,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_error_handlers(app)
    app.include_router(
        configure_user_router(APIRouter(), user_store),
        tags=["users"],
    )

    @app.get("/")
    def read_root() -> str:
        return "User Directory API"

    return app


def create_app(env_file: str | None = os.environ.get("ENV_FILE", ".env")) -> FastAPI:
    """Create and configure the FastAPI application.

    The default here is for uvicorn command line usage, in which case the user
    should set ENV_FILE environment variable if they want a different file.

    :param env_file: Optional path to the environment configuration file
    :return: Configured FastAPI application
    """
    config = load_config_from_env(env_file)
    configure_logging(config)
    return configure_fastapi_app(config)
