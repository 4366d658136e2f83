from __future__ import annotations

import time

import structlog
from fastapi import FastAPI, Request

from snapsaver.infrastructure.config import AppConfig
from snapsaver.interfaces.app_state import AppState
from snapsaver.interfaces.composition import lifespan

log = structlog.get_logger(__name__)


def build_app(config: AppConfig) -> FastAPI:
    """Build the FastAPI app. Only configuration happens here.

    The HTTP client and use case are created in lifespan().
    """
    app = FastAPI(
        title="SnapSaver",
        description="Downloadable media for Facebook, Instagram and TikTok posts",
        version="0.1.0",
        lifespan=lifespan,
    )

    app.state = AppState()
    app.state.config = config

    from snapsaver.interfaces.api.download.router import router as download_router

    app.include_router(download_router)

    @app.get("/healthz")
    async def healthz() -> dict[str, str]:
        return {"status": "ok"}

    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        start = time.perf_counter()
        status_code = 500
        try:
            response = await call_next(request)
            status_code = response.status_code
            return response
        finally:
            log.info(
                "http_request",
                method=request.method,
                path=request.url.path,
                status_code=status_code,
                duration_ms=round((time.perf_counter() - start) * 1000.0, 2),
                client_host=(request.client.host if request.client else None),
            )

    return app
