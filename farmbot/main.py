from __future__ import annotations

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI

from farmbot.core.config import Settings, settings as default_settings
from farmbot.core.logging_config import setup_logging
from farmbot.integrations.messaging.media import MediaFetcher
from farmbot.integrations.messaging.whatsapp import WhatsAppProvider
from farmbot.llm.engine import CompletionClient
from farmbot.services.dispatcher import WebhookDispatcher

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    # Startup
    settings: Settings = app.state.settings
    media = MediaFetcher(settings)
    messenger = WhatsAppProvider(settings)
    app.state.completion = CompletionClient(settings)
    app.state.dispatcher = WebhookDispatcher(
        verify_token=settings.verify_token,
        completion=app.state.completion,
        media=media,
        messenger=messenger,
    )
    logger.info(f"FarmBot server running on port {settings.port}")
    yield
    # Shutdown
    await media.close()
    await messenger.close()


def create_app(settings: Settings | None = None) -> FastAPI:
    settings = settings or default_settings
    setup_logging(settings.log_level)

    app = FastAPI(
        title=settings.app_name,
        version="1.0",
        lifespan=lifespan,
    )
    app.state.settings = settings

    # Register routes
    from farmbot.api.router import api_router

    app.include_router(api_router)

    return app


app = create_app()


def run() -> None:
    """Serve the app with uvicorn on the configured host and port."""
    uvicorn.run(
        "farmbot.main:app",
        host=default_settings.host,
        port=default_settings.port,
        log_level=default_settings.log_level.lower(),
    )
