"""Tests for the snapsaver command line."""

from __future__ import annotations

import json
from typing import Any
from unittest.mock import AsyncMock, MagicMock

import pytest

from snapsaver.domain.entities import (
    DownloadResponse,
    ExtractionResult,
    MediaDescriptor,
    MediaType,
)
from snapsaver.interfaces.cli import cli


@pytest.fixture()
def no_logging_setup(monkeypatch: pytest.MonkeyPatch) -> MagicMock:
    configure = MagicMock(return_value={})
    monkeypatch.setattr(cli, "configure_logging", configure)
    return configure


class TestPlatformCommand:
    def test_known_platform(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert cli.start(["platform", "https://vm.tiktok.com/ZMabc12/"]) == 0
        assert capsys.readouterr().out.strip() == "TikTok"

    def test_unknown_platform(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert cli.start(["platform", "https://example.com/"]) == 1
        assert capsys.readouterr().out.strip() == "unknown"


class TestDownloadCommand:
    def test_prints_json_and_exits_zero(
        self,
        monkeypatch: pytest.MonkeyPatch,
        capsys: pytest.CaptureFixture[str],
        no_logging_setup: MagicMock,
    ) -> None:
        response = DownloadResponse.ok(
            ExtractionResult(
                media=[MediaDescriptor(url="https://x/v.mp4", type=MediaType.VIDEO)]
            )
        )
        fake = AsyncMock(return_value=response)
        monkeypatch.setattr(cli, "download", fake)

        code = cli.start(["download", "https://www.instagram.com/p/Cabc/"])

        assert code == 0
        assert json.loads(capsys.readouterr().out) == {
            "success": True,
            "data": {"media": [{"url": "https://x/v.mp4", "type": "video"}]},
        }
        fake.assert_awaited_once()
        assert fake.await_args.args == ("https://www.instagram.com/p/Cabc/",)
        no_logging_setup.assert_called_once()

    def test_failure_exits_one(
        self,
        monkeypatch: pytest.MonkeyPatch,
        capsys: pytest.CaptureFixture[str],
        no_logging_setup: MagicMock,
    ) -> None:
        monkeypatch.setattr(
            cli, "download", AsyncMock(return_value=DownloadResponse.fail("Invalid URL"))
        )

        code = cli.start(["--log-level", "DEBUG", "download", "https://example.com/"])

        assert code == 1
        assert json.loads(capsys.readouterr().out)["message"] == "Invalid URL"
        config = no_logging_setup.call_args.args[0]
        assert config.log_level == "DEBUG"


class TestServeCommand:
    def test_runs_uvicorn_with_log_config(
        self, monkeypatch: pytest.MonkeyPatch, no_logging_setup: MagicMock
    ) -> None:
        calls: list[dict[str, Any]] = []
        monkeypatch.setattr(cli.uvicorn, "run", lambda app, **kw: calls.append(kw))

        assert cli.start(["serve", "--host", "127.0.0.1", "--port", "9000"]) == 0

        assert calls == [{"host": "127.0.0.1", "port": 9000, "log_config": {}}]


def test_command_is_required() -> None:
    with pytest.raises(SystemExit):
        cli.start([])
