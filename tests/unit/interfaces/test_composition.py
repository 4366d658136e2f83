"""Tests for the FastAPI lifespan wiring."""

from __future__ import annotations

import pytest

from snapsaver.infrastructure.config import AppConfig
from snapsaver.interfaces import composition
from snapsaver.interfaces.main import build_app


@pytest.mark.asyncio()
async def test_lifespan_closes_client_on_shutdown() -> None:
    app = build_app(AppConfig(environment="test"))

    async with composition.lifespan(app):
        client = app.state.http_client
        assert not client.is_closed
        assert app.state.download_uc is not None

    assert client.is_closed


@pytest.mark.asyncio()
async def test_lifespan_closes_client_when_wiring_fails(
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    def _broken(*_args: object) -> None:
        raise RuntimeError("wiring failed")

    monkeypatch.setattr(composition, "build_download_use_case", _broken)
    app = build_app(AppConfig(environment="test"))

    with pytest.raises(RuntimeError, match="wiring failed"):
        async with composition.lifespan(app):
            pass

    assert app.state.http_client.is_closed
