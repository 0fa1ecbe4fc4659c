"""
Hyperlink scanning via BeautifulSoup.

Only ``<a href>`` counts as an outlink; ``<link>``, ``<img>``, ``<script>``
and friends reference resources of the page, not further pages.
"""

import unicodedata

from bs4 import BeautifulSoup, ParserRejectedMarkup

from outlink_extractor.config import NOISE_RATIO

_BS4_PARSER = "lxml"

# Only the head of the document is inspected for binary noise.
_NOISE_SAMPLE = 8192


class MalformedMarkup(Exception):
    """The decoded document is not markup that can be scanned for links."""


def _looks_like_noise(text: str) -> bool:
    sample = text[:_NOISE_SAMPLE]
    if not sample:
        return False
    bad = sum(
        1 for ch in sample
        if ch == "\ufffd"
        or (unicodedata.category(ch) == "Cc" and ch not in "\t\n\r\f")
    )
    return bad / len(sample) > NOISE_RATIO


def scan_links(html: str) -> list[str]:
    """
    Return the ``href`` of every ``<a>`` tag in *html*, in document order.

    Tags without an ``href`` or with an empty one are skipped.  Raises
    ``MalformedMarkup`` when *html* is binary noise or the parser rejects it.
    """
    if _looks_like_noise(html):
        raise MalformedMarkup("document is not markup")
    try:
        soup = BeautifulSoup(html.replace("\x00", ""), _BS4_PARSER)
    except ParserRejectedMarkup as exc:
        raise MalformedMarkup(str(exc)) from exc

    hrefs: list[str] = []
    for el in soup.find_all("a"):
        val = el.get("href")
        if val and val.strip():
            hrefs.append(val.strip())
    return hrefs
