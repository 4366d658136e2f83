"""SnapSave response cipher: argument extraction and segment decoding.

SnapSave does not return the download section as HTML. The response body is
a script that calls an inline decoder function::

    eval(function(h,u,n,t,e,r){...return decodeURIComponent(escape(r))}(
        "<cipher text>", 8, "<symbol map>", 43, 3, 55))

Every byte of the real script is encoded as one segment of the cipher
text. A segment is a number written in base ``e`` with the first ``e``
symbols of the symbol map as digits, and is terminated by the symbol at
index ``e``. Decoding a segment and subtracting ``t`` gives the byte.
"""

from __future__ import annotations

import structlog

from snapsaver.domain.entities import CipherArguments
from snapsaver.domain.exceptions import MalformedPayloadError, PayloadEncodingError
from snapsaver.infrastructure.snapsave.base_converter import (
    MAX_BASE,
    MIN_BASE,
    convert_base,
)

log = structlog.get_logger(__name__)

CALL_MARKER = "decodeURIComponent(escape(r))}("
CLOSE_MARKER = "))"

_QUOTES = ('"', "'")
_ARG_COUNT = 5


class _ArgumentScanner:
    """Reads comma separated call arguments up to the closing marker.

    Quoted arguments are returned without their quotes, bare arguments
    are whitespace-trimmed.
    """

    def __init__(self, text: str, pos: int) -> None:
        self._text = text
        self._pos = pos

    def _at_end(self) -> bool:
        return self._pos >= len(self._text)

    def _skip_whitespace(self) -> None:
        while not self._at_end() and self._text[self._pos].isspace():
            self._pos += 1

    def _at_close(self) -> bool:
        return self._text.startswith(CLOSE_MARKER, self._pos)

    def _read_quoted(self) -> str:
        quote = self._text[self._pos]
        end = self._text.find(quote, self._pos + 1)
        if end == -1:
            raise MalformedPayloadError(
                f"unterminated quoted argument at offset {self._pos}"
            )
        value = self._text[self._pos + 1 : end]
        self._pos = end + 1
        return value.strip()

    def _read_bare(self) -> str:
        start = self._pos
        while not self._at_end():
            char = self._text[self._pos]
            if char == "," or self._at_close():
                break
            self._pos += 1
        return self._text[start : self._pos].strip()

    def scan(self) -> list[str]:
        args: list[str] = []
        while True:
            self._skip_whitespace()
            if self._at_end():
                raise MalformedPayloadError("closing marker not found")
            if self._at_close() and not args:
                return args

            if self._text[self._pos] in _QUOTES:
                args.append(self._read_quoted())
            else:
                args.append(self._read_bare())

            self._skip_whitespace()
            if self._at_end():
                raise MalformedPayloadError("closing marker not found")
            if self._at_close():
                return args
            if self._text[self._pos] != ",":
                raise MalformedPayloadError(
                    f"unexpected character {self._text[self._pos]!r} "
                    f"at offset {self._pos}"
                )
            self._pos += 1


def _parse_int(value: str, name: str) -> int:
    try:
        return int(value)
    except ValueError:
        raise MalformedPayloadError(f"{name} is not an integer: {value!r}") from None


def parse_cipher_arguments(raw: str) -> CipherArguments:
    """Extract the decoder call arguments from a raw SnapSave response."""
    start = raw.find(CALL_MARKER)
    if start == -1:
        raise MalformedPayloadError("decoder call marker not found")

    args = _ArgumentScanner(raw, start + len(CALL_MARKER)).scan()
    if len(args) < _ARG_COUNT:
        raise MalformedPayloadError(
            f"expected {_ARG_COUNT} decoder arguments, got {len(args)}"
        )

    cipher_text, delimiter_char, char_map, offset, base = args[:_ARG_COUNT]
    subtract_offset = _parse_int(offset, "subtract offset")
    base_value = _parse_int(base, "base")
    if not MIN_BASE <= base_value <= MAX_BASE:
        raise MalformedPayloadError(f"base out of range: {base_value}")
    if base_value >= len(char_map):
        raise MalformedPayloadError(
            f"symbol map of length {len(char_map)} has no delimiter at {base_value}"
        )

    return CipherArguments(
        cipher_text=cipher_text,
        delimiter_char=delimiter_char,
        char_map=char_map,
        subtract_offset=subtract_offset,
        base=base_value,
    )


def decode_segments(args: CipherArguments) -> bytes:
    """Decode every delimiter-terminated segment into one byte."""
    text = args.cipher_text
    delimiter = args.delimiter
    out = bytearray()
    pos = 0

    while pos < len(text):
        end = text.find(delimiter, pos)
        if end == -1:
            raise MalformedPayloadError(f"unterminated segment at offset {pos}")

        segment = text[pos:end]
        # Map order matters: later symbols must not rewrite earlier digits.
        for index, symbol in enumerate(args.char_map):
            segment = segment.replace(symbol, str(index))

        value = int(convert_base(segment, args.base, 10)) - args.subtract_offset
        if not 0 <= value <= 0xFF:
            raise PayloadEncodingError(
                f"segment at offset {pos} decodes to {value}, not a byte"
            )
        out.append(value)
        pos = end + 1

    return bytes(out)


def repair_encoding(data: bytes) -> str:
    """Decode the byte buffer as UTF-8 text."""
    try:
        return data.decode("utf-8")
    except UnicodeDecodeError as e:
        raise PayloadEncodingError(f"decoded payload is not UTF-8: {e}") from e


def decode_payload(args: CipherArguments) -> str:
    """Reverse the cipher and return the decoded script text."""
    data = decode_segments(args)
    log.debug("snapsave_payload_decoded", byte_count=len(data))
    return repair_encoding(data)
