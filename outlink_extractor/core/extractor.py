"""
Outlink extraction: stream → markup scan → URL normalisation.

``OutlinkExtractor.extract`` opens a page through a pluggable opener,
decodes it with the detected charset, collects the ``<a href>`` values
and resolves them into the set of crawlable absolute URLs.  Failures are
returned as ``NoResult`` / ``Fault`` values, never raised.

The extractor holds no per-call state, so a single instance can serve
many worker threads at once.
"""

import re
from typing import BinaryIO, Callable, ContextManager, Iterable

from outlink_extractor.config import FAULT_MESSAGE_LIMIT, MAX_URL_LENGTH
from outlink_extractor.core.result import (
    Fault,
    FetchResult,
    NoResult,
    Ok,
    Outcome,
    Reason,
)
from outlink_extractor.extraction.links import MalformedMarkup, scan_links
from outlink_extractor.extraction.stream import consume_stream
from outlink_extractor.session import make_opener
from outlink_extractor.utils.log import log
from outlink_extractor.utils.url import UrlNormalizer, is_crawlable_source

StreamOpener = Callable[[str], ContextManager[BinaryIO]]


def extract_outlinks(
    html: str,
    page_url: str,
    normalizer: UrlNormalizer | None = None,
) -> set[str] | None:
    """
    Return the outlinks of an already decoded page, or ``None`` when
    *page_url* has no base URL to resolve root-relative links against.

    Raises ``MalformedMarkup`` if *html* cannot be scanned.
    """
    normalizer = normalizer or UrlNormalizer()
    base = normalizer.base_url(page_url)
    if base is None:
        return None
    return normalizer.normalize(scan_links(html), base)


def filter_outlinks(
    links: Iterable[str],
    pattern: str | re.Pattern | None,
) -> set[str]:
    """Keep only the links that fully match *pattern* (all of them if ``None``)."""
    if pattern is None:
        return set(links)
    if isinstance(pattern, str):
        pattern = re.compile(pattern)
    return {link for link in links if pattern.fullmatch(link)}


def fault_message(exc: BaseException, url: str) -> str:
    """Single-line diagnostic: truncated error text plus the failing URL."""
    text = str(exc) or type(exc).__name__
    text = text[:FAULT_MESSAGE_LIMIT].replace("\r", "").replace("\n", "")
    return f'{text} >>> URL was: "{url}"'


class OutlinkExtractor:
    """
    Extracts the outlinks of a page.

    Parameters
    ----------
    normalizer : UrlNormalizer | None
        Resolves and validates raw hrefs; defaults to the stock patterns.
    opener : callable | None
        ``opener(url)`` returns a context manager yielding a binary stream
        of the page.  Defaults to a streaming ``requests`` GET.
    max_url_length : int
        Source URLs longer than this are rejected up front.
    """

    def __init__(
        self,
        normalizer: UrlNormalizer | None = None,
        opener: StreamOpener | None = None,
        max_url_length: int = MAX_URL_LENGTH,
    ) -> None:
        self.normalizer = normalizer or UrlNormalizer()
        self.opener = opener or make_opener()
        self.max_url_length = max_url_length

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def extract(self, page_url: str) -> Outcome:
        """Fetch *page_url* through the opener and extract its outlinks."""
        declined = self._check_source(page_url)
        if declined is not None:
            return declined
        try:
            with self.opener(page_url) as stream:
                return self._extract(page_url, stream)
        except Exception as exc:
            return self._fault(page_url, exc)

    def extract_from_stream(self, page_url: str, stream: BinaryIO) -> Outcome:
        """Extract outlinks from an already opened *stream* (left open)."""
        declined = self._check_source(page_url)
        if declined is not None:
            return declined
        try:
            return self._extract(page_url, stream)
        except Exception as exc:
            return self._fault(page_url, exc)

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    def _check_source(self, page_url: str) -> NoResult | None:
        if not is_crawlable_source(page_url, self.max_url_length):
            return NoResult(Reason.INPUT_REJECTED)
        if self.normalizer.base_url(page_url) is None:
            log.debug("[SKIP] No base URL in %s", page_url)
            return NoResult(Reason.NO_BASE_URL)
        return None

    def _extract(self, page_url: str, stream: BinaryIO) -> Outcome:
        html = consume_stream(stream)
        try:
            outlinks = extract_outlinks(html, page_url, self.normalizer)
        except MalformedMarkup:
            return NoResult(Reason.MALFORMED_MARKUP)
        if outlinks is None:
            return NoResult(Reason.NO_BASE_URL)
        log.debug("[LINKS] %d outlinks from %s", len(outlinks), page_url)
        return Ok(FetchResult(page_url, frozenset(outlinks)))

    @staticmethod
    def _fault(page_url: str, exc: Exception) -> Fault:
        msg = fault_message(exc, page_url)
        log.warning("[FAULT] %s", msg)
        return Fault(page_url, msg)
