"""Download use case: post URL in, media descriptors (or a failure) out."""

from __future__ import annotations

import structlog

from snapsaver.domain.entities import DownloadResponse, ExtractionResult
from snapsaver.domain.exceptions import (
    InvalidInputError,
    NoMediaFoundError,
    SnapSaverError,
)
from snapsaver.domain.ports import (
    MediaExtractorPort,
    MediaFetcherPort,
    PayloadDecoderPort,
    UrlValidatorPort,
)

log = structlog.get_logger(__name__)

MSG_INVALID_URL = "Invalid URL"
MSG_NO_MEDIA = "No downloadable media found"
MSG_FAILED = "Failed to process download request"


class DownloadMediaUseCase:
    """Validate -> fetch -> decrypt -> extract -> respond.

    Every failure short-circuits into a failure response. Only an invalid
    URL and an empty extraction get their own message; every other error
    collapses into ``MSG_FAILED`` and is logged instead of returned.
    """

    def __init__(
        self,
        *,
        validator: UrlValidatorPort,
        fetcher: MediaFetcherPort,
        decoder: PayloadDecoderPort,
        extractor: MediaExtractorPort,
    ) -> None:
        self._validator = validator
        self._fetcher = fetcher
        self._decoder = decoder
        self._extractor = extractor

    async def execute(self, url: str) -> DownloadResponse:
        try:
            result = await self._run(url)
        except InvalidInputError:
            log.info("download_invalid_url", url=url)
            return DownloadResponse.fail(MSG_INVALID_URL)
        except NoMediaFoundError:
            log.info("download_no_media", url=url)
            return DownloadResponse.fail(MSG_NO_MEDIA)
        except SnapSaverError as e:
            log.warning(
                "download_failed",
                url=url,
                error_kind=type(e).__name__,
                error=str(e),
            )
            return DownloadResponse.fail(MSG_FAILED)
        except Exception:
            log.exception("download_unexpected_error", url=url)
            return DownloadResponse.fail(MSG_FAILED)

        log.info(
            "download_resolved",
            url=url,
            layout=result.layout.value if result.layout else None,
            media_count=len(result.media),
        )
        return DownloadResponse.ok(result)

    async def _run(self, url: str) -> ExtractionResult:
        if not self._validator.is_valid(url):
            raise InvalidInputError(url)

        raw = await self._fetcher.fetch(url)
        html = self._decoder.decrypt(raw)
        result = self._extractor.extract(html)

        if not result.media:
            raise NoMediaFoundError(url)
        return result
