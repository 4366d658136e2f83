"""URL helpers for requests to and responses from SnapSave."""

from __future__ import annotations

import re
from urllib.parse import unquote

THUMBNAIL_PROXY_PREFIX = "https://snapinsta.app/photo.php?photo="

_BARE_HOST_RE = re.compile(r"^(https?://)(?!www\.)[a-z0-9]+", re.IGNORECASE)
_TWO_LABEL_HOST_RE = re.compile(r"^(https?://)([^./]+\.[^./]+)(/.*)?$")


def normalize_url(url: str) -> str:
    """Prefix a bare two-label host with ``www.``.

    ``https://instagram.com/p/x`` becomes ``https://www.instagram.com/p/x``;
    subdomains and already prefixed hosts are left alone.
    """
    if not _BARE_HOST_RE.search(url):
        return url
    return _TWO_LABEL_HOST_RE.sub(r"\1www.\2\3", url)


def fix_thumbnail(url: str) -> str:
    """Unwrap a thumbnail served through the snapinsta photo proxy."""
    if THUMBNAIL_PROXY_PREFIX not in url:
        return url
    return unquote(url.replace(THUMBNAIL_PROXY_PREFIX, ""))
