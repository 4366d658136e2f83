from .media import (
    DownloadResponse,
    ExtractionResult,
    LayoutVariant,
    MediaDescriptor,
    MediaType,
)
from .payload import CipherArguments
from .platform import Platform

__all__ = [
    "CipherArguments",
    "DownloadResponse",
    "ExtractionResult",
    "LayoutVariant",
    "MediaDescriptor",
    "MediaType",
    "Platform",
]
