"""Application state container for FastAPI dependency injection."""

from __future__ import annotations

import httpx
from starlette.datastructures import State

from snapsaver.application.use_cases import DownloadMediaUseCase
from snapsaver.infrastructure.config import AppConfig


class AppState(State):
    """FastAPI application state.

    Lifecycle managed by composition.py::lifespan().
    """

    config: AppConfig
    http_client: httpx.AsyncClient
    download_uc: DownloadMediaUseCase
