"""Port for fetching the raw SnapSave response for a post URL."""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class MediaFetcherPort(Protocol):
    """Submits a post URL to the upstream service and returns the raw body.

    Implementations raise ``TransportError`` when the request fails.
    """

    async def fetch(self, url: str) -> str: ...
