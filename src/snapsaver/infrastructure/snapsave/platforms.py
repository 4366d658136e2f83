"""Post URL patterns for the platforms SnapSave understands."""

from __future__ import annotations

import re
from collections.abc import Iterable

from snapsaver.domain.entities import Platform

FACEBOOK_RE = re.compile(
    r"^https?://(?:www\.|web\.|m\.)?facebook\.com/"
    r"(?:(?:watch(?:\?v=|/\?v=)[0-9]+(?!/))"
    r"|(?:reel/[0-9]+)"
    r"|(?:[a-zA-Z0-9.\-_]+/(?:videos|posts)/[0-9]+)"
    r"|(?:[0-9]+/(?:videos|posts)/[0-9]+)"
    r"|(?:share/(?:v|r)/[a-zA-Z0-9\-_]+/?)"
    r"|(?:[a-zA-Z0-9.\-_]+))"
    r"(?:[^/?#&]+)?.*$"
    r"|^https://fb\.watch/[a-zA-Z0-9\-_]+$"
)
INSTAGRAM_RE = re.compile(
    r"^https?://(?:www\.)?instagram\.com/(?:p|reel|reels|tv|stories|share)/([^/?#&]+).*"
)
TIKTOK_RE = re.compile(
    r"^https?://(?:www\.|m\.|vm\.|vt\.)?tiktok\.com/"
    r"(?:@[^/]+/(?:video|photo)/\d+|v/\d+|t/[\w]+|[\w-]+)/?",
    re.IGNORECASE,
)
YOUTUBE_RE = re.compile(
    r"^https?://(?:www\.)?(?:youtube\.com/(?:watch\?(?:.*&)?v=|shorts/|embed/)|youtu\.be/)"
    r"([a-zA-Z0-9_-]{11})(?:[?&][^#\s]*)?"
)
TWITTER_RE = re.compile(
    r"^https?://(?:www\.)?(?:twitter\.com|x\.com)/(?:#!/)?"
    r"(?:[\w_]+/status(?:es)?/)([0-9]+)(?:[?&][^#\s]*)?"
)

# Detection order: first match wins.
PLATFORM_PATTERNS: dict[Platform, re.Pattern[str]] = {
    Platform.FACEBOOK: FACEBOOK_RE,
    Platform.INSTAGRAM: INSTAGRAM_RE,
    Platform.TIKTOK: TIKTOK_RE,
    Platform.YOUTUBE: YOUTUBE_RE,
    Platform.TWITTER: TWITTER_RE,
}

SUPPORTED_PLATFORMS: tuple[Platform, ...] = (
    Platform.FACEBOOK,
    Platform.INSTAGRAM,
    Platform.TIKTOK,
)


def detect_platform(url: str) -> Platform | None:
    """Return the platform a post URL belongs to, or ``None``."""
    for platform, pattern in PLATFORM_PATTERNS.items():
        if pattern.search(url):
            return platform
    return None


class RegexUrlValidator:
    """Accepts URLs matching any of the configured platform patterns."""

    def __init__(self, platforms: Iterable[Platform] = SUPPORTED_PLATFORMS) -> None:
        self._patterns = [PLATFORM_PATTERNS[p] for p in platforms]

    def is_valid(self, url: str) -> bool:
        return any(p.search(url) for p in self._patterns)
