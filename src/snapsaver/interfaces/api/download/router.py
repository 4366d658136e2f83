"""Download endpoint: resolve a post URL to downloadable media."""

from __future__ import annotations

from typing import cast

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field

from snapsaver.application.use_cases.download_media import (
    MSG_INVALID_URL,
    MSG_NO_MEDIA,
)
from snapsaver.interfaces.app_state import AppState


router = APIRouter(tags=["download"])

_FAILURE_STATUS: dict[str | None, int] = {
    MSG_INVALID_URL: 400,
    MSG_NO_MEDIA: 404,
}


class DownloadRequest(BaseModel):
    url: str = Field(min_length=1, description="Facebook/Instagram/TikTok post URL")


@router.post("/api/v1/download")
async def download_media(body: DownloadRequest, request: Request) -> JSONResponse:
    """Resolve *body.url* via SnapSave.

    The body always follows the ``{success, message?, data?}`` schema;
    the status code tells failures apart (400 invalid URL, 404 no media,
    502 everything else).
    """
    state = cast(AppState, request.app.state)

    response = await state.download_uc.execute(body.url)
    if response.success:
        status_code = 200
    else:
        status_code = _FAILURE_STATUS.get(response.message, 502)

    return JSONResponse(content=response.to_dict(), status_code=status_code)
