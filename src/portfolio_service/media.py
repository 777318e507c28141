"""Media ingestion: turning uploaded images into storable strings."""

import base64
from typing import Optional, Protocol

from fastapi import UploadFile

from .config import get_settings
from .errors import ValidationError


class MediaIngestor(Protocol):
    """Converts an uploaded file into the value stored in an ``image`` field."""

    async def ingest(self, upload: Optional[UploadFile]) -> Optional[str]:
        ...


class DataUrlIngestor:
    """Inline uploads as base64 data URLs.

    Size and content-type limits are off unless configured.
    """

    def __init__(
        self,
        max_bytes: int = 0,
        allowed_types: Optional[list[str]] = None,
    ) -> None:
        self.max_bytes = max_bytes
        self.allowed_types = set(allowed_types or [])

    async def ingest(self, upload: Optional[UploadFile]) -> Optional[str]:
        """Read the upload and return ``data:<type>;base64,<payload>``.

        Returns None when no file was selected.
        """
        if upload is None or not upload.filename:
            return None

        data = await upload.read()
        if not data:
            return None

        content_type = upload.content_type or "application/octet-stream"
        if self.allowed_types and content_type not in self.allowed_types:
            raise ValidationError(
                f"Unsupported image type: {content_type}",
                details=[{"field": "image", "message": "Unsupported content type"}],
            )
        if self.max_bytes and len(data) > self.max_bytes:
            raise ValidationError(
                f"Image is too large ({len(data)} bytes, limit {self.max_bytes})",
                details=[{"field": "image", "message": "File too large"}],
            )

        encoded = base64.b64encode(data).decode()
        return f"data:{content_type};base64,{encoded}"


def get_media_ingestor() -> MediaIngestor:
    """Dependency returning the configured ingestor."""
    settings = get_settings()
    return DataUrlIngestor(
        max_bytes=settings.media_max_bytes,
        allowed_types=settings.media_allowed_types,
    )
