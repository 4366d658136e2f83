"""SnapSaver: resolve social media post URLs to downloadable media via SnapSave."""

from __future__ import annotations

from snapsaver.interfaces.facade import download

__all__ = ["download"]
