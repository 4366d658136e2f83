"""Shared test fixtures for the SnapSaver test suite."""

from __future__ import annotations

from typing import Callable

import pytest

from snapsaver.infrastructure.snapsave.base_converter import convert_base

# Symbol map used by the test encoder: digits V w L x f, delimiter S.
TEST_CHAR_MAP = "VwLxfSmQ"
TEST_BASE = 5
TEST_OFFSET = 43


def encode_cipher_text(
    script: str,
    *,
    char_map: str = TEST_CHAR_MAP,
    base: int = TEST_BASE,
    offset: int = TEST_OFFSET,
) -> str:
    """Encode *script* the way SnapSave does: one segment per UTF-8 byte."""
    segments: list[str] = []
    for byte in script.encode("utf-8"):
        digits = convert_base(str(byte + offset), 10, base)
        segments.append("".join(char_map[int(d)] for d in digits) + char_map[base])
    return "".join(segments)


def wrap_download_section(html: str) -> str:
    """The script SnapSave hides behind the cipher, HTML escaped as in the wild."""
    escaped = html.replace('"', '\\"').replace("/", "\\/")
    return (
        'document.getElementById("download-section").innerHTML = "'
        + escaped
        + '"; document.getElementById("inputData").remove(); '
        + "window.scrollTo(0, 0);"
    )


def build_raw_response(
    script: str,
    *,
    char_map: str = TEST_CHAR_MAP,
    base: int = TEST_BASE,
    offset: int = TEST_OFFSET,
) -> str:
    """A full action.php body wrapping the encoded *script*."""
    cipher = encode_cipher_text(script, char_map=char_map, base=base, offset=offset)
    return (
        "var _0xc=['length'];"
        "eval(function(h,u,n,t,e,r){r=\"\";for(var i=0,len=h.length;i<len;i++)"
        "{var s=\"\";while(h[i]!==n[e]){s+=h[i];i++}r+=String.fromCharCode(s)}"
        "return decodeURIComponent(escape(r))}"
        f'("{cipher}",28,"{char_map}",{offset},{base},17))'
    )


TABLE_HTML = """
<div class="download-box">
  <article class="media">
    <figure><p class="image"><img src="https://cdn.example.com/preview.jpg"></p></figure>
    <div class="media-content"><span class="video-des">Sunset at the pier</span></div>
  </article>
  <table class="table">
    <thead><tr><th>Quality</th><th>Render</th><th>Download</th></tr></thead>
    <tbody>
      <tr>
        <td class="video-quality">720p (HD)</td>
        <td>No</td>
        <td><a href="https://video.example.com/720.mp4" class="button">Download</a></td>
      </tr>
      <tr>
        <td class="video-quality">360p</td>
        <td>Yes</td>
        <td><button class="button" onclick="get_progressApi('/render.php?token=abc123')">Render</button></td>
      </tr>
    </tbody>
  </table>
</div>
"""

DOWNLOAD_ITEMS_HTML = """
<ul class="download-box">
  <li>
    <div class="download-items">
      <div class="download-items__thumb">
        <img src="https://snapinsta.app/photo.php?photo=https%3A%2F%2Fcdn.example.com%2Freel.jpg">
      </div>
      <div class="download-items__btn">
        <a href="https://rapid.example.com/reel.mp4"><span>Download Video</span></a>
      </div>
    </div>
  </li>
  <li>
    <div class="download-items">
      <div class="download-items__thumb">
        <img src="https://snapinsta.app/photo.php?photo=https%3A%2F%2Fcdn.example.com%2Fpic.jpg">
      </div>
      <div class="download-items__btn">
        <a href="https://rapid.example.com/pic.jpg"><span>Download Photo</span></a>
      </div>
    </div>
  </li>
</ul>
"""

NO_MEDIA_HTML = '<div class="error"><p>Unable to connect to Instagram</p></div>'


@pytest.fixture()
def raw_response() -> Callable[[str], str]:
    """Build an encoded action.php body around a download-section HTML."""

    def _build(html: str) -> str:
        return build_raw_response(wrap_download_section(html))

    return _build


@pytest.fixture()
def table_html() -> str:
    return TABLE_HTML


@pytest.fixture()
def download_items_html() -> str:
    return DOWNLOAD_ITEMS_HTML


@pytest.fixture()
def no_media_html() -> str:
    return NO_MEDIA_HTML
