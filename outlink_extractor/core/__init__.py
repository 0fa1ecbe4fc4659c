"""Core extraction logic – the extractor and its outcome types."""

from outlink_extractor.core.extractor import (
    OutlinkExtractor,
    extract_outlinks,
    filter_outlinks,
)
from outlink_extractor.core.result import Fault, FetchResult, NoResult, Ok, Reason

__all__ = [
    "OutlinkExtractor",
    "extract_outlinks",
    "filter_outlinks",
    "Fault",
    "FetchResult",
    "NoResult",
    "Ok",
    "Reason",
]
