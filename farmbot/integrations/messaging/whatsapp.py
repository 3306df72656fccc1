from __future__ import annotations

import logging
from typing import Any

import httpx

from farmbot.core.config import Settings
from farmbot.integrations.messaging.base import MessagingProvider, SendResult
from farmbot.schemas.message import OutboundReply

logger = logging.getLogger(__name__)


class WhatsAppProvider(MessagingProvider):
    """WhatsApp Cloud API client implementing MessagingProvider protocol.

    Sends are one-shot: a failed send is logged and reported in the
    returned ``SendResult``, never raised and never retried.
    """

    def __init__(
        self,
        settings: Settings,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.phone_number_id = settings.phone_number_id
        self.client = httpx.AsyncClient(
            base_url=settings.graph_base_url,
            headers={
                "Authorization": f"Bearer {settings.whatsapp_token}",
                "Content-Type": "application/json",
            },
            timeout=httpx.Timeout(settings.http_timeout),
            transport=transport,
        )

    async def send_text(self, chat_id: str, text: str) -> SendResult:
        """Send a text message to ``chat_id`` (the sender's wa_id)."""
        reply = OutboundReply(to=chat_id, body=text)

        try:
            response = await self.client.post(
                f"/{self.phone_number_id}/messages",
                json=reply.to_payload(),
            )
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            logger.error(
                f"Send message error for {chat_id}: "
                f"{e.response.status_code} {e.response.text}"
            )
            return SendResult(
                ok=False,
                status_code=e.response.status_code,
                error=e.response.text,
            )
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            logger.error(f"Send message error for {chat_id}: {type(e).__name__}: {e}")
            return SendResult(ok=False, error=str(e) or type(e).__name__)

        logger.info(f"Message sent to {chat_id} | status: {response.status_code}")
        return SendResult(
            ok=True,
            status_code=response.status_code,
            message_id=_extract_message_id(response),
        )

    async def __aenter__(self) -> WhatsAppProvider:
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: object,
    ) -> None:
        await self.close()

    async def close(self) -> None:
        """Close the underlying HTTP client."""
        await self.client.aclose()


def _extract_message_id(response: httpx.Response) -> str | None:
    """Pull ``messages[0].id`` out of a send response, if it parses."""
    try:
        data: Any = response.json()
    except ValueError:
        return None
    if isinstance(data, dict):
        messages = data.get("messages")
        if isinstance(messages, list) and messages and isinstance(messages[0], dict):
            return messages[0].get("id")
    return None
