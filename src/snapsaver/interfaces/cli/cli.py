from __future__ import annotations

import argparse
import asyncio
import json
import os
import sys
from collections.abc import Iterable
from pathlib import Path
from typing import Any

import structlog
import uvicorn

from snapsaver.infrastructure.config import AppConfig, load_config
from snapsaver.infrastructure.logging.setup import configure_logging
from snapsaver.infrastructure.snapsave import detect_platform
from snapsaver.interfaces.facade import download
from snapsaver.interfaces.main import build_app

log = structlog.get_logger(__name__)


def _parse_args(argv: Iterable[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="snapsaver")

    # Config wiring flags, shared by all commands
    parser.add_argument("--config", default=None, help="Path to YAML config file.")
    parser.add_argument("--dotenv", default=None, help="Path to .env file.")
    parser.add_argument(
        "--log-level",
        default=None,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Override log level.",
    )
    parser.add_argument(
        "--log-format",
        default=None,
        choices=["json", "console"],
        help="Override log format.",
    )

    sub = parser.add_subparsers(dest="command", required=True)

    serve = sub.add_parser("serve", help="Run the HTTP API.")
    serve.add_argument("--host", default=None, help="Bind host (overrides HOST env).")
    serve.add_argument(
        "--port", default=None, type=int, help="Bind port (overrides PORT env)."
    )

    dl = sub.add_parser("download", help="Resolve a post URL and print JSON.")
    dl.add_argument("url")
    dl.add_argument("--indent", default=2, type=int, help="JSON indentation.")

    platform = sub.add_parser("platform", help="Print the platform of a post URL.")
    platform.add_argument("url")

    return parser.parse_args(list(argv) if argv is not None else None)


def _load(args: argparse.Namespace) -> AppConfig:
    cli_overrides: dict[str, Any] = {}
    if args.log_level:
        cli_overrides["log_level"] = args.log_level
    if args.log_format:
        cli_overrides["log_format"] = args.log_format

    return load_config(
        config_path=Path(args.config) if args.config else None,
        dotenv_path=Path(args.dotenv) if args.dotenv else None,
        cli_overrides=cli_overrides,
    )


def _serve(args: argparse.Namespace, config: AppConfig, log_config: dict) -> int:
    host = args.host or os.getenv("HOST", "0.0.0.0")
    port = int(args.port or os.getenv("PORT", "7980"))
    log.info("server_starting", host=host, port=port)
    uvicorn.run(build_app(config), host=host, port=port, log_config=log_config)
    return 0


def _download(args: argparse.Namespace, config: AppConfig) -> int:
    response = asyncio.run(download(args.url, config=config))
    print(json.dumps(response.to_dict(), indent=args.indent or None, ensure_ascii=False))
    return 0 if response.success else 1


def _platform(args: argparse.Namespace) -> int:
    platform = detect_platform(args.url)
    if platform is None:
        print("unknown")
        return 1
    print(platform.value)
    return 0


def start(argv: Iterable[str] | None = None) -> int:
    """Process entrypoint. Config is loaded exactly once here."""
    if argv is None:
        argv = sys.argv[1:]

    args = _parse_args(argv)
    if args.command == "platform":
        return _platform(args)

    config = _load(args)
    log_config = configure_logging(config)

    if args.command == "serve":
        return _serve(args, config, log_config)
    return _download(args, config)


if __name__ == "__main__":
    raise SystemExit(start())
