"""FastAPI ASGI application entrypoint."""

import os

import uvicorn

from .core.app_factory import create_application

app = create_application()


def run() -> None:
    """Serve the application with uvicorn (``user-directory`` console script)."""
    uvicorn.run(
        "user_directory.main:app",
        host=os.getenv("HOST", "0.0.0.0"),
        port=int(os.getenv("PORT", "8000")),
    )


__all__ = ("app", "run")
