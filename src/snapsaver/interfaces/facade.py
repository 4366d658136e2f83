"""Library entry point mirroring the HTTP endpoint."""

from __future__ import annotations

import httpx

from snapsaver.domain.entities import DownloadResponse
from snapsaver.infrastructure.config import AppConfig, load_config
from snapsaver.interfaces.composition import build_download_use_case


async def download(
    url: str,
    *,
    config: AppConfig | None = None,
    http_client: httpx.AsyncClient | None = None,
) -> DownloadResponse:
    """Resolve a Facebook/Instagram/TikTok post URL to downloadable media.

    Without *config*, settings are loaded like the CLI does: defaults,
    then ``SNAPSAVER_*`` environment variables (invalid values raise
    ``pydantic.ValidationError``). A temporary HTTP client is
    created when *http_client* is not given.
    Otherwise never raises; failures come back as ``DownloadResponse(success=False)``.
    """
    config = config or load_config()
    if http_client is not None:
        return await build_download_use_case(config, http_client).execute(url)

    async with httpx.AsyncClient(timeout=config.http_timeout_seconds) as client:
        return await build_download_use_case(config, client).execute(url)
