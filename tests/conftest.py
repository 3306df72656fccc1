from __future__ import annotations

import os

os.environ["GEMINI_API_KEY"] = "test-key"
os.environ["VERIFY_TOKEN"] = "test-verify-token"
os.environ["WHATSAPP_TOKEN"] = "fake-whatsapp-token"
os.environ["PHONE_NUMBER_ID"] = "1029384756"
os.environ["GRAPH_API_URL"] = "http://fake-graph"

from collections.abc import AsyncGenerator
from unittest.mock import AsyncMock

import pytest
from httpx import ASGITransport, AsyncClient

from farmbot.core.config import Settings
from farmbot.integrations.messaging.base import SendResult
from farmbot.llm.engine import CompletionResult
from farmbot.main import app
from farmbot.schemas import MediaPayload
from farmbot.services.dispatcher import WebhookDispatcher


@pytest.fixture
def settings() -> Settings:
    return Settings(_env_file=None)


@pytest.fixture
def completion() -> AsyncMock:
    mock = AsyncMock()
    mock.complete_text.return_value = CompletionResult(
        text="Use well-drained soil.", ok=True, model="test-model"
    )
    mock.complete_with_image.return_value = CompletionResult(
        text="Looks like early blight.", ok=True, model="test-model"
    )
    return mock


@pytest.fixture
def media() -> AsyncMock:
    mock = AsyncMock()
    mock.fetch.return_value = MediaPayload(data=b"\xff\xd8\xffjpeg", mime_type="image/png")
    return mock


@pytest.fixture
def messenger() -> AsyncMock:
    mock = AsyncMock()
    mock.send_text.return_value = SendResult(ok=True, status_code=200, message_id="wamid.1")
    return mock


@pytest.fixture
def dispatcher(
    settings: Settings,
    completion: AsyncMock,
    media: AsyncMock,
    messenger: AsyncMock,
) -> WebhookDispatcher:
    return WebhookDispatcher(
        verify_token=settings.verify_token,
        completion=completion,
        media=media,
        messenger=messenger,
    )


@pytest.fixture
async def client(
    dispatcher: WebhookDispatcher,
    completion: AsyncMock,
) -> AsyncGenerator[AsyncClient, None]:
    # ASGITransport does not run the lifespan, so wire the state by hand
    app.state.dispatcher = dispatcher
    app.state.completion = completion
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
