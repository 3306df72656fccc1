from __future__ import annotations

import logging

import httpx
from pydantic import ValidationError

from farmbot.core.config import Settings
from farmbot.schemas.media import MediaInfo, MediaPayload

logger = logging.getLogger(__name__)


class MediaFetchError(Exception):
    """Resolving or downloading a WhatsApp media object failed."""


class MediaFetcher:
    """Downloads inbound WhatsApp media through the Graph API.

    Two dependent calls, both with the same bearer token:
    1. ``GET /{media_id}`` resolves the ID to a short-lived URL and MIME type.
    2. ``GET {url}`` downloads the bytes.
    """

    def __init__(
        self,
        settings: Settings,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.client = httpx.AsyncClient(
            base_url=settings.graph_base_url,
            headers={"Authorization": f"Bearer {settings.whatsapp_token}"},
            timeout=httpx.Timeout(settings.http_timeout),
            transport=transport,
        )

    async def fetch(self, media_id: str) -> MediaPayload:
        """Return the media bytes and MIME type for ``media_id``.

        Raises:
            MediaFetchError: if either request fails or the metadata is unusable.
        """
        try:
            meta_response = await self.client.get(f"/{media_id}")
            meta_response.raise_for_status()
            info = MediaInfo.model_validate(meta_response.json())

            # The URL is a signed temporary link; it must not reach the logs.
            media_response = await self.client.get(info.url)
            media_response.raise_for_status()
        except httpx.HTTPStatusError as e:
            raise MediaFetchError(
                f"Graph API returned {e.response.status_code} for media {media_id}"
            ) from e
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            raise MediaFetchError(
                f"Media request failed for {media_id}: {type(e).__name__}"
            ) from e
        except (ValueError, ValidationError) as e:
            raise MediaFetchError(f"Invalid media metadata for {media_id}") from e

        payload = MediaPayload(data=media_response.content, mime_type=info.mime_type)
        logger.info(f"Downloaded media {media_id} ({payload.mime_type}, {len(payload.data)} bytes)")
        return payload

    async def __aenter__(self) -> MediaFetcher:
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
