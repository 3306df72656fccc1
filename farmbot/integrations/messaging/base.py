from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol


@dataclass(frozen=True)
class SendResult:
    """Outcome of a single outbound send. Failures are reported, not raised."""

    ok: bool
    status_code: int | None = None
    message_id: str | None = None
    error: str | None = None


class MessagingProvider(Protocol):
    """Abstract messaging provider interface.

    Implement this protocol to add new messaging channels
    (Meta Cloud API, Telegram, etc.)
    """

    async def send_text(self, chat_id: str, text: str) -> SendResult:
        """Send a text message. Never raises."""
        ...
