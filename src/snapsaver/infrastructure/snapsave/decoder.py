"""Turn a raw SnapSave response into the HTML of its download section."""

from __future__ import annotations

import re

from snapsaver.domain.exceptions import MalformedPayloadError
from snapsaver.infrastructure.snapsave.cipher import (
    decode_payload,
    parse_cipher_arguments,
)

HTML_START_MARKER = 'getElementById("download-section").innerHTML = "'
HTML_END_MARKER = '"; document.getElementById("inputData").remove(); '

# A backslash, optionally doubled, is dropped entirely.
_ESCAPE_RE = re.compile(r"\\(\\)?")


def unwrap_html(decoded: str) -> str:
    """Extract and unescape the HTML assigned to the download section."""
    start = decoded.find(HTML_START_MARKER)
    if start == -1:
        raise MalformedPayloadError("download-section assignment not found")
    start += len(HTML_START_MARKER)

    end = decoded.find(HTML_END_MARKER, start)
    if end == -1:
        raise MalformedPayloadError("download-section assignment is not terminated")

    return _ESCAPE_RE.sub("", decoded[start:end])


def decrypt(raw: str) -> str:
    """Full decode chain: cipher arguments, segment decoding, HTML unwrap."""
    return unwrap_html(decode_payload(parse_cipher_arguments(raw)))


class SnapSaveDecoder:
    """Stateless adapter exposing :func:`decrypt` through the decoder port."""

    def decrypt(self, raw: str) -> str:
        return decrypt(raw)
