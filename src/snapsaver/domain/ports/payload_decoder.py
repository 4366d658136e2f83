from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class PayloadDecoderPort(Protocol):
    """Recovers the download-section HTML from a raw upstream response.

    Raises ``MalformedPayloadError`` or ``PayloadEncodingError``.
    """

    def decrypt(self, raw: str) -> str: ...
