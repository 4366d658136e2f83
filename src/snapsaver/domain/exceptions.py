"""Error taxonomy for the download workflow."""

from __future__ import annotations


class SnapSaverError(Exception):
    """Base error for all download workflow failures."""


class InvalidInputError(SnapSaverError):
    """The URL does not belong to a supported platform."""


class MalformedPayloadError(SnapSaverError):
    """Expected markers or cipher arguments are missing from the payload."""


class PayloadEncodingError(SnapSaverError):
    """Decoded bytes are not valid UTF-8 (or not bytes at all)."""


class TransportError(SnapSaverError):
    """Network / HTTP errors while talking to the upstream service."""


class NoMediaFoundError(SnapSaverError):
    """The download section was decoded but holds no media."""
