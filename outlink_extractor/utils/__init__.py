"""Utility helpers for URL validation and logging."""

from outlink_extractor.utils.url import (
    DEFAULT_PATTERNS,
    UrlNormalizer,
    UrlPatterns,
    is_crawlable_source,
)
from outlink_extractor.utils.log import setup_logging, log

__all__ = [
    "DEFAULT_PATTERNS",
    "UrlNormalizer",
    "UrlPatterns",
    "is_crawlable_source",
    "setup_logging",
    "log",
]
