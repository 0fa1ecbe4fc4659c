"""
URL validation and root-relative resolution for extracted outlinks.
"""

import re
from dataclasses import dataclass
from typing import Iterable

from outlink_extractor.config import (
    ABSOLUTE_URL_RE,
    IGNORED_SUFFIX_RE,
    MAX_URL_LENGTH,
)


@dataclass(frozen=True)
class UrlPatterns:
    """The two regexes an outlink has to pass.

    ``absolute_url`` recognises a ``scheme://host[:port]`` prefix and
    ``ignored_suffix`` recognises links to content that cannot be parsed
    for further outlinks (stylesheets, media, archives, documents).
    """

    absolute_url: re.Pattern
    ignored_suffix: re.Pattern


DEFAULT_PATTERNS = UrlPatterns(
    absolute_url=ABSOLUTE_URL_RE,
    ignored_suffix=IGNORED_SUFFIX_RE,
)


def is_crawlable_source(url: str | None, max_length: int = MAX_URL_LENGTH) -> bool:
    """Cheap guard against malformed frontier input."""
    return bool(url) and url.startswith("http") and len(url) <= max_length


class UrlNormalizer:
    """
    Turns raw ``href`` values into absolute, crawlable URLs.

    Only two forms survive: hrefs that already are absolute URLs, and
    root-relative hrefs (``/path``) which are appended to the base URL of
    the page they were found on.  ``../``, ``./``, ``javascript:``,
    ``mailto:`` and fragment-only hrefs are dropped.
    """

    def __init__(self, patterns: UrlPatterns = DEFAULT_PATTERNS) -> None:
        self.patterns = patterns

    def base_url(self, url: str) -> str | None:
        """Return the leftmost ``scheme://host[:port]`` in *url*, or ``None``."""
        m = self.patterns.absolute_url.search(url)
        return m.group(0) if m else None

    def is_valid(self, href: str) -> bool:
        """
        True if *href* starts with an absolute URL prefix and does not end
        with an ignored suffix such as ``.pdf``.
        """
        return (
            self.patterns.absolute_url.match(href) is not None
            and self.patterns.ignored_suffix.search(href) is None
        )

    def resolve(self, href: str, base: str) -> str | None:
        if self.is_valid(href):
            return href
        # retry once by expanding root-relative links
        if href.startswith("/"):
            expanded = base + href
            if self.is_valid(expanded):
                return expanded
        return None

    def normalize(self, hrefs: Iterable[str], base: str) -> set[str]:
        """Resolve every href against *base* and return the distinct survivors."""
        found: set[str] = set()
        for href in hrefs:
            n = self.resolve(href, base)
            if n:
                found.add(n)
        return found
