from .media_extractor import MediaExtractorPort
from .media_fetcher import MediaFetcherPort
from .payload_decoder import PayloadDecoderPort
from .url_validator import UrlValidatorPort

__all__ = [
    "MediaExtractorPort",
    "MediaFetcherPort",
    "PayloadDecoderPort",
    "UrlValidatorPort",
]
