from __future__ import annotations

from fastapi import Request

from farmbot.llm.engine import CompletionClient
from farmbot.services.dispatcher import WebhookDispatcher


def get_dispatcher(request: Request) -> WebhookDispatcher:
    return request.app.state.dispatcher


def get_completion_client(request: Request) -> CompletionClient:
    return request.app.state.completion
