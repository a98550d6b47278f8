from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI, Request

from ..config import Settings
from ..sheets import RowAppender, SheetClientFactory, resolve_credentials

logger = logging.getLogger(__name__)


def build_client_factory(settings: Settings) -> SheetClientFactory:
    """
    Resolve the credential source once and wrap it in a lazy client factory.
    """
    source = resolve_credentials(settings.environ, settings.key_file)
    logger.info("Using Google credentials from %s", source.describe())
    return SheetClientFactory(source)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """
    App startup/shutdown:
      - resolve credentials and create the (not yet built) Sheets client factory
      - expose the row appender on app.state
    """
    settings: Settings = app.state.settings
    if not settings.sheet_id:
        logger.warning("GOOGLE_SHEET_ID is not set; appends will fail")

    factory = getattr(app.state, "client_factory", None) or build_client_factory(settings)
    app.state.client_factory = factory
    app.state.appender = RowAppender(factory, settings.sheet_id)
    try:
        yield
    finally:
        app.state.appender = None


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_appender(request: Request) -> RowAppender:
    """
    Dependency to retrieve the RowAppender from app.state.
    """
    appender = getattr(request.app.state, "appender", None)
    if appender is None:
        raise RuntimeError("RowAppender not available on app.state (lifespan not initialized).")
    return appender
