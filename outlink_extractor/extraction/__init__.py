"""Extraction pipeline stages: stream collection and link scanning."""

from outlink_extractor.extraction.stream import consume_stream, detect_charset
from outlink_extractor.extraction.links import MalformedMarkup, scan_links

__all__ = ["consume_stream", "detect_charset", "MalformedMarkup", "scan_links"]
