from __future__ import annotations

from pydantic import BaseModel


class StatusResponse(BaseModel):
    status: str
    version: str


class DiagnosticReplyResponse(BaseModel):
    reply: str
