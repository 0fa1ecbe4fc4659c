"""
Tests for HTTP session creation and stream opening.
"""

import unittest
from unittest.mock import MagicMock

import requests

from outlink_extractor.config import MAX_RETRIES, REQUEST_TIMEOUT, USER_AGENT
from outlink_extractor.session import build_session, make_opener, open_stream


URL = "http://example.com/index.html"


def _session(status_error: Exception | None = None) -> MagicMock:
    resp = MagicMock()
    if status_error is not None:
        resp.raise_for_status.side_effect = status_error
    session = MagicMock()
    session.get.return_value = resp
    return session


class TestBuildSession(unittest.TestCase):
    def test_user_agent(self):
        session = build_session()
        self.assertEqual(session.headers["User-Agent"], USER_AGENT)

    def test_retry_adapter_mounted(self):
        session = build_session()
        for prefix in ("http://", "https://"):
            adapter = session.get_adapter(prefix + "example.com")
            self.assertEqual(adapter.max_retries.total, MAX_RETRIES)
            self.assertIn(503, adapter.max_retries.status_forcelist)

    def test_verify_ssl(self):
        self.assertFalse(build_session(verify_ssl=False).verify)


class TestOpenStream(unittest.TestCase):
    def test_yields_raw_body(self):
        session = _session()
        resp = session.get.return_value
        with open_stream(URL, session=session) as stream:
            self.assertIs(stream, resp.raw)
            self.assertTrue(stream.decode_content)
        session.get.assert_called_once_with(
            URL, timeout=REQUEST_TIMEOUT, stream=True, allow_redirects=True
        )
        resp.close.assert_called_once()

    def test_http_error_raised_and_closed(self):
        session = _session(requests.HTTPError("404 Client Error"))
        with self.assertRaises(requests.HTTPError):
            with open_stream(URL, session=session):
                pass
        session.get.return_value.close.assert_called_once()

    def test_closed_when_body_fails(self):
        session = _session()
        with self.assertRaises(OSError):
            with open_stream(URL, session=session):
                raise OSError("read failed")
        session.get.return_value.close.assert_called_once()


class TestMakeOpener(unittest.TestCase):
    def test_binds_session_and_timeout(self):
        session = _session()
        opener = make_opener(session, timeout=5)
        with opener(URL):
            pass
        session.get.assert_called_once_with(
            URL, timeout=5, stream=True, allow_redirects=True
        )


if __name__ == "__main__":
    unittest.main()
