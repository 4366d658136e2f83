"""Domain entities for resolved media.

Pure value objects, no framework dependencies, no I/O.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class MediaType(str, Enum):
    IMAGE = "image"
    VIDEO = "video"


class LayoutVariant(str, Enum):
    """HTML layouts SnapSave renders its download section in."""

    TABLE = "table"
    CARD = "card"
    SIMPLE = "simple"
    DOWNLOAD_ITEMS = "download_items"

    @property
    def has_metadata(self) -> bool:
        """Whether the layout carries a description and preview image."""
        return self is not LayoutVariant.DOWNLOAD_ITEMS


@dataclass(frozen=True)
class MediaDescriptor:
    """A single downloadable media item.

    ``should_render`` marks a URL that points at SnapSave's progress API
    and needs one more request before the file itself is downloadable.
    """

    url: str
    type: MediaType
    resolution: str | None = None
    thumbnail: str | None = None
    should_render: bool | None = None

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {"url": self.url, "type": self.type.value}
        if self.resolution is not None:
            data["resolution"] = self.resolution
        if self.thumbnail is not None:
            data["thumbnail"] = self.thumbnail
        if self.should_render is not None:
            data["shouldRender"] = self.should_render
        return data


@dataclass(frozen=True)
class ExtractionResult:
    """Everything extracted from one decoded download section."""

    media: list[MediaDescriptor] = field(default_factory=list)
    description: str | None = None
    preview: str | None = None
    layout: LayoutVariant | None = None

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {}
        if self.description is not None:
            data["description"] = self.description
        if self.preview is not None:
            data["preview"] = self.preview
        data["media"] = [m.to_dict() for m in self.media]
        return data


@dataclass(frozen=True)
class DownloadResponse:
    """Result of one download request: either data or a failure message."""

    success: bool
    data: ExtractionResult | None = None
    message: str | None = None

    def __post_init__(self) -> None:
        if self.success and (self.data is None or self.message is not None):
            raise ValueError("successful response requires data and no message")
        if not self.success and (self.message is None or self.data is not None):
            raise ValueError("failed response requires a message and no data")

    @classmethod
    def ok(cls, data: ExtractionResult) -> DownloadResponse:
        return cls(success=True, data=data)

    @classmethod
    def fail(cls, message: str) -> DownloadResponse:
        return cls(success=False, message=message)

    def to_dict(self) -> dict[str, Any]:
        if self.success:
            assert self.data is not None
            return {"success": True, "data": self.data.to_dict()}
        return {"success": False, "message": self.message}
