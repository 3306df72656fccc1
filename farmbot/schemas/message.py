from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel, ConfigDict

from .webhook import WhatsAppMessage


class MessageType(StrEnum):
    TEXT = "text"
    IMAGE = "image"
    OTHER = "other"


class MediaReference(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    caption: str | None = None
    mime_type: str | None = None


class InboundMessage(BaseModel):
    """The first message of a webhook delivery, reduced to what the bot uses."""

    model_config = ConfigDict(frozen=True)

    sender: str
    type: MessageType
    raw_type: str
    text: str | None = None
    media: MediaReference | None = None

    @classmethod
    def from_whatsapp(cls, message: WhatsAppMessage) -> InboundMessage:
        if message.type == MessageType.TEXT and message.text is not None:
            return cls(
                sender=message.from_,
                type=MessageType.TEXT,
                raw_type=message.type,
                text=message.text.body,
            )
        if message.type == MessageType.IMAGE and message.image is not None:
            return cls(
                sender=message.from_,
                type=MessageType.IMAGE,
                raw_type=message.type,
                media=MediaReference(
                    id=message.image.id,
                    caption=message.image.caption,
                    mime_type=message.image.mime_type,
                ),
            )
        # A text/image tag without its body object is handled like any other
        # unsupported message.
        return cls(sender=message.from_, type=MessageType.OTHER, raw_type=message.type)


class OutboundReply(BaseModel):
    """Text envelope for the Graph API send-message endpoint."""

    to: str
    body: str

    def to_payload(self) -> dict[str, object]:
        return {
            "messaging_product": "whatsapp",
            "to": self.to,
            "type": "text",
            "text": {"body": self.body},
        }
