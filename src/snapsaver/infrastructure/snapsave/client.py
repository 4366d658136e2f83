"""httpx transport for the SnapSave ``action.php`` endpoint."""

from __future__ import annotations

import httpx
import structlog

from snapsaver.domain.exceptions import TransportError
from snapsaver.infrastructure.snapsave.urls import normalize_url

log = structlog.get_logger(__name__)

DEFAULT_API_URL = "https://snapsave.app/action.php?lang=en"
DEFAULT_ORIGIN = "https://snapsave.app"
DEFAULT_USER_AGENT = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/128.0.0.0"
)


class SnapSaveHttpClient:
    """Posts a post URL to SnapSave and returns the (encoded) response body."""

    def __init__(
        self,
        http_client: httpx.AsyncClient,
        *,
        api_url: str = DEFAULT_API_URL,
        origin: str = DEFAULT_ORIGIN,
        user_agent: str = DEFAULT_USER_AGENT,
        timeout: float = 30.0,
    ) -> None:
        self._http = http_client
        self._api_url = api_url
        self._timeout = timeout
        self._headers = {
            "accept": "*/*",
            "content-type": "application/x-www-form-urlencoded",
            "origin": origin,
            "referer": origin.rstrip("/") + "/",
            "user-agent": user_agent,
        }

    async def fetch(self, url: str) -> str:
        target = normalize_url(url)
        try:
            resp = await self._http.post(
                self._api_url,
                data={"url": target},
                headers=self._headers,
                timeout=self._timeout,
            )
        except httpx.HTTPError as e:
            log.warning("snapsave_request_failed", url=target, error=str(e))
            raise TransportError(f"request to {self._api_url} failed: {e}") from e

        if not resp.is_success:
            log.warning("snapsave_http_error", status=resp.status_code, url=target)
            raise TransportError(f"{self._api_url} answered {resp.status_code}")

        log.debug("snapsave_response_received", url=target, size=len(resp.text))
        return resp.text
