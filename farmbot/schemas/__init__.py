from __future__ import annotations

from .health import DiagnosticReplyResponse, StatusResponse
from .media import MediaInfo, MediaPayload
from .message import InboundMessage, MediaReference, MessageType, OutboundReply
from .webhook import WebhookAck, WhatsAppMedia, WhatsAppMessage, WhatsAppText

__all__ = [
    # health
    "DiagnosticReplyResponse",
    "StatusResponse",
    # media
    "MediaInfo",
    "MediaPayload",
    # message
    "InboundMessage",
    "MediaReference",
    "MessageType",
    "OutboundReply",
    # webhook
    "WebhookAck",
    "WhatsAppMedia",
    "WhatsAppMessage",
    "WhatsAppText",
]
