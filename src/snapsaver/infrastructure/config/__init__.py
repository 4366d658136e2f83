from __future__ import annotations

from .load import load_config
from .schema import AppConfig, EnvOverrides, SnapSaveConfig

__all__ = ["AppConfig", "EnvOverrides", "SnapSaveConfig", "load_config"]
