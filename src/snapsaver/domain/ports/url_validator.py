from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class UrlValidatorPort(Protocol):
    """Decides whether a post URL belongs to a supported platform."""

    def is_valid(self, url: str) -> bool: ...
