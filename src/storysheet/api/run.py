from __future__ import annotations

from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .. import __version__
from ..config import Settings
from ..log import configure_logging
from ..sheets import SheetClientFactory
from .deps import lifespan
from .errors import register_error_handlers
from .routers import router


def create_app(
    settings: Optional[Settings] = None,
    client_factory: Optional[SheetClientFactory] = None,
) -> FastAPI:
    """
    Build the API service.

    Args:
        settings: Configuration; read from the environment when None.
        client_factory: Pre-built Sheets client factory; resolved from
                        `settings` at startup when None.
    """
    settings = settings or Settings.from_env()
    configure_logging(settings.log_level)

    app = FastAPI(
        title="storysheet",
        version=__version__,
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.client_factory = client_factory

    app.add_middleware(
        CORSMiddleware,
        allow_origins=list(settings.cors_origins),
        allow_methods=["*"],
        allow_headers=["*"],
    )
    register_error_handlers(app)
    app.include_router(router)

    return app


# ASGI entrypoint (uvicorn storysheet.api.run:app)
app = create_app()
