from __future__ import annotations

import logging

from fastapi import APIRouter, BackgroundTasks, Depends, Query, Request
from fastapi.responses import PlainTextResponse

from farmbot.api.deps import get_dispatcher
from farmbot.schemas import WebhookAck
from farmbot.services.dispatcher import WebhookDispatcher

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/webhook", response_class=PlainTextResponse)
async def verify_webhook(
    mode: str | None = Query(None, alias="hub.mode"),
    token: str | None = Query(None, alias="hub.verify_token"),
    challenge: str | None = Query(None, alias="hub.challenge"),
    dispatcher: WebhookDispatcher = Depends(get_dispatcher),
) -> PlainTextResponse:
    """Meta subscription handshake: echo the challenge if the token matches."""
    status_code, body = dispatcher.verify(mode, token, challenge)
    return PlainTextResponse(body, status_code=status_code)


@router.post("/webhook", response_model=WebhookAck)
async def receive_webhook(
    request: Request,
    background_tasks: BackgroundTasks,
    dispatcher: WebhookDispatcher = Depends(get_dispatcher),
) -> WebhookAck:
    """Acknowledge a delivery right away and process it after the response.

    Meta only needs the 200; the reply is sent from a background task.
    """
    try:
        payload = await request.json()
    except ValueError:
        logger.debug("Ignoring webhook delivery with a non-JSON body")
        return WebhookAck()

    background_tasks.add_task(dispatcher.receive, payload)
    return WebhookAck()
