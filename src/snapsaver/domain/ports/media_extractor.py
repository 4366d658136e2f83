from __future__ import annotations

from typing import Protocol, runtime_checkable

from snapsaver.domain.entities import ExtractionResult


@runtime_checkable
class MediaExtractorPort(Protocol):
    """Extracts media descriptors from download-section HTML.

    Never raises for unknown layouts; returns a result with empty media.
    """

    def extract(self, html: str) -> ExtractionResult: ...
