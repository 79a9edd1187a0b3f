"""Text renderers for the report export endpoints.

They exist so content negotiation accepts ``Accept: text/plain`` and
``Accept: text/csv``; report bodies are strings and pass through as-is.
Error payloads (dicts) are encoded by DRF's ``JSONRenderer``.
"""

from __future__ import annotations

from rest_framework.renderers import BaseRenderer, JSONRenderer


class _TextRenderer(BaseRenderer):
    charset = "utf-8"

    def render(self, data, accepted_media_type=None, renderer_context=None) -> bytes:
        if data is None:
            return b""
        if isinstance(data, str):
            return data.encode(self.charset)
        return JSONRenderer().render(data)


class PlainTextRenderer(_TextRenderer):
    media_type = "text/plain"
    format = "txt"


class CSVRenderer(_TextRenderer):
    media_type = "text/csv"
    format = "csv"
