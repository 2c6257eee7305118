from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import Any, AsyncIterator, Dict, Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .config import Settings
from .container import ApplicationContainer
from .logging import configure_logging
from ..application.services.user_directory_service import UserDirectoryService
from ..infrastructure.persistence.sqlite import SQLitePersistence
from ..presentation.api.errors import register_error_handlers
from ..presentation.api.routers import users as users_router
from ..services.password_hasher import PasswordHasher

logger = logging.getLogger(__name__)


def create_application(settings: Optional[Settings] = None) -> FastAPI:
    settings = settings or Settings()

    app = FastAPI(title="User Directory Service", lifespan=_create_lifespan(settings))

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_allow_origins,
        allow_credentials=False,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_error_handlers(app)
    app.include_router(users_router.router)

    @app.get("/health")
    async def health() -> Dict[str, Any]:
        return {"ok": True}

    return app


def _create_lifespan(settings: Settings):
    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        configure_logging(settings.log_level)
        persistence = SQLitePersistence(
            settings.database_path, timeout=settings.database_timeout_seconds
        )
        password_hasher = PasswordHasher(rounds=settings.password_hash_rounds)
        user_directory_service = UserDirectoryService(
            persistence,
            password_hasher,
            default_page_size=settings.default_page_size,
            max_page_size=settings.max_page_size,
        )

        container = ApplicationContainer(
            settings=settings,
            persistence=persistence,
            password_hasher=password_hasher,
            user_directory_service=user_directory_service,
        )

        app.state.container = container  # type: ignore[attr-defined]
        logger.info("User directory ready, database at %s", settings.database_path)

        try:
            yield
        finally:
            persistence.close()

    return lifespan
