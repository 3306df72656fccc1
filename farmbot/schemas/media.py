from __future__ import annotations

from dataclasses import dataclass

from pydantic import BaseModel


class MediaInfo(BaseModel):
    """Media metadata returned by the Graph API for a media ID."""

    id: str | None = None
    url: str
    mime_type: str | None = None
    sha256: str | None = None
    file_size: int | None = None


@dataclass(frozen=True)
class MediaPayload:
    data: bytes
    mime_type: str | None = None

    def __repr__(self) -> str:
        return f"MediaPayload(mime_type={self.mime_type!r}, size={len(self.data)})"
