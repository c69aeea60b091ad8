"""Async client for the remote resume rendering API."""

from __future__ import annotations

import logging
import time
from typing import Any, Dict, Optional

import httpx

from .config import Settings

logger = logging.getLogger(__name__)

PDF_CONTENT_TYPE = "application/pdf"
BODY_PREVIEW_CHARS = 500


class RenderError(RuntimeError):
    """Raised when the rendering API does not hand back a PDF."""


class ResumeRenderer:
    """Posts resume JSON to the rendering API and returns the PDF bytes."""

    def __init__(self, settings: Settings, transport: Optional[httpx.AsyncBaseTransport] = None):
        self.settings = settings
        self._transport = transport

    async def render(self, payload: Dict[str, Any]) -> bytes:
        headers = {
            "Content-Type": "application/json",
            "User-Agent": self.settings.user_agent,
        }
        timeout = httpx.Timeout(self.settings.request_timeout)
        start_time = time.monotonic()

        async with httpx.AsyncClient(timeout=timeout, transport=self._transport) as client:
            response = await client.post(self.settings.api_url, headers=headers, json=payload)

        logger.debug(
            "Resume API response: status=%s content_type=%s bytes=%s time_ms=%.2f",
            response.status_code,
            response.headers.get("content-type"),
            len(response.content),
            (time.monotonic() - start_time) * 1000,
        )

        if not response.is_success:
            raise RenderError(
                f"Resume API responded with status: {response.status_code} "
                f"{response.reason_phrase}. Response: {response.text}"
            )

        content_type = response.headers.get("content-type")
        if not content_type or PDF_CONTENT_TYPE not in content_type:
            raise RenderError(
                f"Expected PDF response but got: {content_type}. "
                f"Response: {response.text[:BODY_PREVIEW_CHARS]}..."
            )

        return response.content
