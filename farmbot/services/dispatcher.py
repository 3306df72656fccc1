from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import StrEnum
from typing import Any

from pydantic import ValidationError

from farmbot.core.security import verify_token_matches
from farmbot.integrations.messaging.base import MessagingProvider
from farmbot.integrations.messaging.media import MediaFetcher
from farmbot.llm.engine import CompletionClient
from farmbot.llm.prompts import DEFAULT_IMAGE_PROMPT
from farmbot.schemas.message import InboundMessage, MessageType
from farmbot.schemas.webhook import WhatsAppMessage

logger = logging.getLogger(__name__)

UNSUPPORTED_TYPE_REPLY = (
    "Please send a text message or a photo of your crop/field and I'll help you! 🌾"
)


class DispatchStatus(StrEnum):
    IGNORED = "ignored"
    REPLIED = "replied"
    FAILED = "failed"


@dataclass
class DispatchResult:
    status: DispatchStatus
    sender: str | None = None
    reply: str | None = None


def extract_first_message(payload: Any) -> InboundMessage | None:
    """Return the first inbound message of a delivery, or None.

    Only ``entry[0].changes[0].value.messages[0]`` is read and validated;
    sibling entries and later messages are never inspected. Status callbacks
    (delivered/read receipts) carry no ``messages`` and malformed payloads
    are not an error either; both yield None.
    """
    try:
        raw_message = payload["entry"][0]["changes"][0]["value"]["messages"][0]
    except (KeyError, IndexError, TypeError):
        return None

    try:
        message = WhatsAppMessage.model_validate(raw_message)
    except ValidationError:
        logger.debug("Ignoring webhook message that does not match the message schema")
        return None

    return InboundMessage.from_whatsapp(message)


class WebhookDispatcher:
    """Routes one webhook delivery to the model and back to the sender.

    1. Extract the first message of the delivery.
    2. Text goes to the model as is; images are downloaded first and sent
       with their caption (or a default vision prompt).
    3. Anything else gets a fixed hint without touching the model.
    4. The reply is sent back to the sender.
    """

    def __init__(
        self,
        verify_token: str,
        completion: CompletionClient,
        media: MediaFetcher,
        messenger: MessagingProvider,
    ) -> None:
        self._verify_token = verify_token
        self.completion = completion
        self.media = media
        self.messenger = messenger

    def verify(self, mode: str | None, token: str | None, challenge: str | None) -> tuple[int, str]:
        """Answer the webhook subscription handshake."""
        if mode == "subscribe" and verify_token_matches(token, self._verify_token):
            logger.info("Webhook verified by Meta")
            return 200, challenge or ""

        logger.warning(f"Webhook verification failed (mode={mode!r})")
        return 403, "Forbidden"

    async def receive(self, payload: Any) -> DispatchResult:
        """Handle one delivery callback. Never raises."""
        message = extract_first_message(payload)
        if message is None:
            return DispatchResult(status=DispatchStatus.IGNORED)

        logger.info(f"Message from {message.sender} | type: {message.raw_type}")

        try:
            reply = await self._build_reply(message)
            result = await self.messenger.send_text(message.sender, reply)
        except Exception:
            logger.exception(f"Webhook processing failed for {message.sender}")
            return DispatchResult(status=DispatchStatus.FAILED, sender=message.sender)

        status = DispatchStatus.REPLIED if result.ok else DispatchStatus.FAILED
        return DispatchResult(status=status, sender=message.sender, reply=reply)

    async def _build_reply(self, message: InboundMessage) -> str:
        if message.type == MessageType.TEXT and message.text is not None:
            completion = await self.completion.complete_text(message.text)
            return completion.text

        if message.type == MessageType.IMAGE and message.media is not None:
            caption = message.media.caption or DEFAULT_IMAGE_PROMPT
            media = await self.media.fetch(message.media.id)
            completion = await self.completion.complete_with_image(
                media.data, media.mime_type or message.media.mime_type, caption
            )
            return completion.text

        return UNSUPPORTED_TYPE_REPLY
