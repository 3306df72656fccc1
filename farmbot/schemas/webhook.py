from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class WhatsAppText(BaseModel):
    body: str


class WhatsAppMedia(BaseModel):
    id: str
    mime_type: str | None = None
    sha256: str | None = None
    caption: str | None = None


class WhatsAppMessage(BaseModel):
    """One entry of ``value.messages`` in a WhatsApp Cloud API delivery.

    ref: https://developers.facebook.com/docs/whatsapp/cloud-api/webhooks/payload-examples
    """

    model_config = ConfigDict(populate_by_name=True, extra="allow")

    from_: str = Field(..., alias="from")
    id: str | None = None
    timestamp: str | None = None
    type: str
    text: WhatsAppText | None = None
    image: WhatsAppMedia | None = None


class WebhookAck(BaseModel):
    status: str = "ok"
