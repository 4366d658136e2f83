from .client import SnapSaveHttpClient
from .decoder import SnapSaveDecoder, decrypt, unwrap_html
from .layouts import SnapSaveLayoutExtractor, detect_layout
from .platforms import RegexUrlValidator, detect_platform

__all__ = [
    "RegexUrlValidator",
    "SnapSaveDecoder",
    "SnapSaveHttpClient",
    "SnapSaveLayoutExtractor",
    "decrypt",
    "detect_layout",
    "detect_platform",
    "unwrap_html",
]
