"""
HTTP session creation and stream opening for the outlink extractor.

This is the fetch layer around the extraction core: retries on 5xx,
request timeouts and browser-like headers all live here, so that the
core only ever sees an open byte stream.
"""

import contextlib
from typing import BinaryIO, Callable, ContextManager, Iterator

import requests
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry

from outlink_extractor.config import (
    MAX_RETRIES,
    REQUEST_TIMEOUT,
    RETRY_STATUS_CODES,
    USER_AGENT,
)


def build_session(verify_ssl: bool = True, pool_size: int = 20) -> requests.Session:
    """Return a ``requests.Session`` with retry logic, keep-alive and a
    desktop browser User-Agent."""
    session = requests.Session()
    retry = Retry(
        total=MAX_RETRIES,
        backoff_factor=0.5,
        status_forcelist=list(RETRY_STATUS_CODES),
    )
    adapter = HTTPAdapter(
        max_retries=retry,
        pool_connections=pool_size,
        pool_maxsize=pool_size,
    )
    session.mount("http://", adapter)
    session.mount("https://", adapter)
    session.verify = verify_ssl
    session.headers.update({
        "User-Agent": USER_AGENT,
        "Accept": (
            "text/html,application/xhtml+xml,application/xml;q=0.9,"
            "*/*;q=0.8"
        ),
        "Accept-Language": "en-US,en;q=0.9",
        "Accept-Encoding": "gzip, deflate",
        "Connection": "keep-alive",
    })
    return session


@contextlib.contextmanager
def open_stream(
    url: str,
    session: requests.Session | None = None,
    timeout: float = REQUEST_TIMEOUT,
) -> Iterator[BinaryIO]:
    """
    Issue a streaming GET for *url* and yield the raw body stream.

    Content-Encoding (gzip/deflate) is undone while reading.  Raises
    ``requests.HTTPError`` on 4xx/5xx responses; the response is closed
    when the block exits.
    """
    session = session or build_session()
    resp = session.get(url, timeout=timeout, stream=True, allow_redirects=True)
    try:
        resp.raise_for_status()
        resp.raw.decode_content = True
        yield resp.raw
    finally:
        resp.close()


def make_opener(
    session: requests.Session | None = None,
    timeout: float = REQUEST_TIMEOUT,
) -> Callable[[str], ContextManager[BinaryIO]]:
    """Bind *session* (built on demand) into an ``opener(url)`` callable."""
    session = session or build_session()

    def opener(url: str) -> ContextManager[BinaryIO]:
        return open_stream(url, session=session, timeout=timeout)

    return opener
