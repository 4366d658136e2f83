"""Composition root: wires ports to adapters, FastAPI lifespan."""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import AsyncIterator, cast

import httpx
import structlog
from fastapi import FastAPI

from snapsaver.application.use_cases import DownloadMediaUseCase
from snapsaver.infrastructure.config import AppConfig
from snapsaver.infrastructure.snapsave import (
    RegexUrlValidator,
    SnapSaveDecoder,
    SnapSaveHttpClient,
    SnapSaveLayoutExtractor,
)
from snapsaver.interfaces.app_state import AppState

log = structlog.get_logger(__name__)


def build_download_use_case(
    config: AppConfig,
    http_client: httpx.AsyncClient,
) -> DownloadMediaUseCase:
    """Create the download use case around a caller-owned HTTP client."""
    snapsave = config.snapsave
    return DownloadMediaUseCase(
        validator=RegexUrlValidator(snapsave.platforms),
        fetcher=SnapSaveHttpClient(
            http_client,
            api_url=snapsave.api_url,
            origin=snapsave.origin,
            user_agent=config.http_user_agent,
            timeout=config.http_timeout_seconds,
        ),
        decoder=SnapSaveDecoder(),
        extractor=SnapSaveLayoutExtractor(progress_host=snapsave.origin),
    )


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    state = cast(AppState, app.state)
    config = state.config

    state.http_client = httpx.AsyncClient(timeout=config.http_timeout_seconds)
    try:
        state.download_uc = build_download_use_case(config, state.http_client)
        log.info(
            "app_started",
            app_name=config.app_name,
            environment=config.environment,
            platforms=[p.value for p in config.snapsave.platforms],
        )
        yield
    finally:
        await state.http_client.aclose()
        log.info("app_shutdown")
