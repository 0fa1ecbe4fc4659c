"""
Extraction outcomes.

Every call to ``OutlinkExtractor.extract`` returns exactly one of ``Ok``,
``NoResult`` or ``Fault``; none of them is ever raised.
"""

from dataclasses import dataclass
from enum import Enum


@dataclass(frozen=True)
class FetchResult:
    """The outlinks found on one page."""

    source_url: str
    outlinks: frozenset[str]


class Reason(Enum):
    """Why an extraction was declined."""

    INPUT_REJECTED = "input-rejected"       # empty, non-HTTP or overlong URL
    NO_BASE_URL = "no-base-url"             # no scheme://host in the source URL
    MALFORMED_MARKUP = "malformed-markup"   # document could not be parsed


@dataclass(frozen=True)
class Ok:
    result: FetchResult


@dataclass(frozen=True)
class NoResult:
    reason: Reason


@dataclass(frozen=True)
class Fault:
    """An unexpected failure (I/O, HTTP status, decoding, ...)."""

    url: str
    message: str


Outcome = Ok | NoResult | Fault
