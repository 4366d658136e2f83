"""Media extraction from the decoded SnapSave download section.

SnapSave renders the download section in one of four layouts depending on
the platform and post type:

``table``
    Facebook/TikTok videos. One ``<tr>`` per quality; the third cell holds
    a direct link or a ``get_progressApi('/render.php?...')`` button for
    qualities that still have to be rendered server-side.
``card``
    Instagram carousels with a preview. One ``div.card`` per item.
``simple``
    A preview plus a single download anchor/button.
``download_items``
    Instagram posts/reels. One ``div.download-items`` block per item with
    a proxied thumbnail.

The first three carry a description and preview image (``table.table`` or
``article.media > figure`` present) and take priority over the fourth.
"""

from __future__ import annotations

import re
from collections.abc import Callable

import structlog
from bs4 import BeautifulSoup, Tag

from snapsaver.domain.entities import (
    ExtractionResult,
    LayoutVariant,
    MediaDescriptor,
    MediaType,
)
from snapsaver.infrastructure.snapsave.urls import fix_thumbnail

log = structlog.get_logger(__name__)

DEFAULT_PROGRESS_HOST = "https://snapsave.app"

PHOTO_LABEL = "Download Photo"

_PROGRESS_API_RE = re.compile(r"get_progressApi", re.IGNORECASE)
_PROGRESS_PATH_RE = re.compile(r"get_progressApi\('(.*?)'\)", re.IGNORECASE)


def parse_html(html: str) -> BeautifulSoup:
    return BeautifulSoup(html, "lxml")


def _select_items(root: BeautifulSoup | Tag, *selectors: str) -> list[Tag]:
    """Return the matches of the first selector that matches anything."""
    for sel in selectors:
        items = root.select(sel)
        if items:
            return items
    return []


def _attr(root: BeautifulSoup | Tag | None, selector: str, attr: str) -> str | None:
    """Attribute of the first element matching *selector*, if set."""
    if root is None:
        return None
    match = root.select_one(selector)
    if match is None:
        return None
    value = match.get(attr)
    if not value:
        return None
    return value if isinstance(value, str) else " ".join(value)


def _text(root: BeautifulSoup | Tag | None, selector: str) -> str:
    if root is None:
        return ""
    match = root.select_one(selector)
    return match.get_text().strip() if match is not None else ""


def media_type_for_label(label: str) -> MediaType:
    """SnapSave labels photo buttons ``Download Photo``; everything else is video."""
    return MediaType.IMAGE if label == PHOTO_LABEL else MediaType.VIDEO


def detect_layout(soup: BeautifulSoup) -> LayoutVariant | None:
    """Pick the layout variant in priority order, or ``None``."""
    has_table = soup.select_one("table.table") is not None
    if has_table or soup.select_one("article.media > figure") is not None:
        if has_table:
            return LayoutVariant.TABLE
        if soup.select_one("div.card") is not None:
            return LayoutVariant.CARD
        return LayoutVariant.SIMPLE
    if soup.select_one("div.download-items") is not None:
        return LayoutVariant.DOWNLOAD_ITEMS
    return None


def extract_metadata(soup: BeautifulSoup) -> tuple[str | None, str | None]:
    """Return ``(description, preview)`` of a metadata-bearing layout."""
    description = _text(soup, "span.video-des") or None
    preview = _attr(soup, "article.media > figure img", "src")
    return description, preview


def extract_table_media(
    soup: BeautifulSoup,
    progress_host: str = DEFAULT_PROGRESS_HOST,
) -> list[MediaDescriptor]:
    """One descriptor per quality row."""
    media: list[MediaDescriptor] = []
    # lxml does not insert <tbody> the way browsers do
    rows = _select_items(soup, "tbody > tr", "table.table tr")
    for row in rows:
        cells = row.find_all("td")
        if len(cells) < 3:
            continue
        resolution = cells[0].get_text().strip()
        action = _attr(cells[2], "a", "href") or _attr(cells[2], "button", "onclick")
        if not action:
            continue

        should_render: bool | None = None
        url = action
        if _PROGRESS_API_RE.search(action):
            should_render = True
            m = _PROGRESS_PATH_RE.search(action)
            if m:
                url = progress_host + m.group(1)

        media.append(
            MediaDescriptor(
                url=url,
                type=MediaType.VIDEO if resolution else MediaType.IMAGE,
                resolution=resolution,
                should_render=should_render,
            )
        )
    return media


def extract_card_media(soup: BeautifulSoup) -> list[MediaDescriptor]:
    media: list[MediaDescriptor] = []
    for card in soup.select("div.card"):
        body = card.select_one("div.card-body")
        url = _attr(body, "a", "href")
        if not url:
            continue
        media.append(
            MediaDescriptor(url=url, type=media_type_for_label(_text(body, "a")))
        )
    return media


def extract_simple_media(soup: BeautifulSoup) -> list[MediaDescriptor]:
    url = _attr(soup, "a", "href") or _attr(soup, "button", "onclick")
    if not url:
        return []
    return [MediaDescriptor(url=url, type=media_type_for_label(_text(soup, "a")))]


def extract_download_items_media(soup: BeautifulSoup) -> list[MediaDescriptor]:
    media: list[MediaDescriptor] = []
    for item in soup.select("div.download-items"):
        button = item.select_one("div.download-items__btn")
        url = _attr(button, "a", "href")
        if not url:
            continue
        media_type = media_type_for_label(_text(button, "span"))
        thumbnail = _attr(item, "div.download-items__thumb > img", "src")
        media.append(
            MediaDescriptor(
                url=url,
                type=media_type,
                thumbnail=(
                    fix_thumbnail(thumbnail)
                    if media_type is MediaType.VIDEO and thumbnail
                    else None
                ),
            )
        )
    return media


class SnapSaveLayoutExtractor:
    """Detects the layout of a download section and extracts its media."""

    def __init__(self, progress_host: str = DEFAULT_PROGRESS_HOST) -> None:
        self._extractors: dict[
            LayoutVariant, Callable[[BeautifulSoup], list[MediaDescriptor]]
        ] = {
            LayoutVariant.TABLE: lambda s: extract_table_media(s, progress_host),
            LayoutVariant.CARD: extract_card_media,
            LayoutVariant.SIMPLE: extract_simple_media,
            LayoutVariant.DOWNLOAD_ITEMS: extract_download_items_media,
        }

    def extract(self, html: str | BeautifulSoup) -> ExtractionResult:
        soup = parse_html(html) if isinstance(html, str) else html

        layout = detect_layout(soup)
        if layout is None:
            log.debug("snapsave_layout_unknown")
            return ExtractionResult()

        description = preview = None
        if layout.has_metadata:
            description, preview = extract_metadata(soup)

        media = self._extractors[layout](soup)
        log.debug("snapsave_layout_extracted", layout=layout.value, count=len(media))
        return ExtractionResult(
            media=media,
            description=description,
            preview=preview,
            layout=layout,
        )
