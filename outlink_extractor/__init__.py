"""
outlink_extractor
=================
Link-extraction stage of a web crawler: turns a fetched page into the set
of crawlable outlinks it contains.

Package structure
-----------------
outlink_extractor/
├── __init__.py       – package init and public API
├── config.py         – configuration constants and URL regexes
├── session.py        – requests.Session factory and stream opener
├── cli.py            – argparse CLI (``python -m outlink_extractor``)
├── core/             – OutlinkExtractor and its outcome types
├── extraction/       – stream collection and <a href> scanning
└── utils/            – URL validation and logging

Quick start
-----------
    from outlink_extractor import OutlinkExtractor, Ok

    outcome = OutlinkExtractor().extract("https://example.com/")
    if isinstance(outcome, Ok):
        print(sorted(outcome.result.outlinks))
"""

from .core    import (
    Fault,
    FetchResult,
    NoResult,
    Ok,
    OutlinkExtractor,
    Reason,
    extract_outlinks,
    filter_outlinks,
)
from .utils   import DEFAULT_PATTERNS, UrlNormalizer, UrlPatterns

__all__ = [
    "OutlinkExtractor",
    "extract_outlinks",
    "filter_outlinks",
    "Fault",
    "FetchResult",
    "NoResult",
    "Ok",
    "Reason",
    "DEFAULT_PATTERNS",
    "UrlNormalizer",
    "UrlPatterns",
]
