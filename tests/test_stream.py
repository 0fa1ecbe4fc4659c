"""
Tests for byte-stream collection and charset detection.
"""

import codecs
import io
import unittest
from unittest.mock import MagicMock, patch

from outlink_extractor.extraction.stream import consume_stream, detect_charset


TEXT = (
    "<html><body><p>Grüße aus Köln – naïve café, crème brûlée, "
    "smørrebrød, jalapeño, Ærø, señor, façade, déjà vu.</p></body></html>\n"
) * 200


class _ChunkStream:
    """Returns predetermined chunks regardless of the requested size."""

    def __init__(self, chunks):
        self._chunks = list(chunks)
        self.calls = 0

    def read(self, n=-1):
        self.calls += 1
        if not self._chunks:
            return b""
        return self._chunks.pop(0)


def _split(data: bytes, sizes):
    chunks, pos, i = [], 0, 0
    while pos < len(data):
        size = sizes[i % len(sizes)]
        chunks.append(data[pos:pos + size])
        pos += size
        i += 1
    return chunks


class TestConsumeStream(unittest.TestCase):
    def test_utf8_roundtrip(self):
        data = TEXT.encode("utf-8")
        self.assertEqual(consume_stream(io.BytesIO(data)), TEXT)

    def test_chunking_and_growth_do_not_change_text(self):
        data = TEXT.encode("utf-8")
        # odd chunk sizes split multi-byte characters across chunks
        chunks = _split(data, [1, 7, 333, 4096, 2])
        direct = data.decode(detect_charset(data))
        for capacity in (1, 16, 1024, len(data), 1024 * 1024):
            with self.subTest(capacity=capacity):
                result = consume_stream(
                    _ChunkStream(chunks), initial_capacity=capacity
                )
                self.assertEqual(result, direct)
                self.assertEqual(result, TEXT)

    def test_small_read_size(self):
        data = TEXT.encode("utf-8")
        result = consume_stream(io.BytesIO(data), chunk_size=5, initial_capacity=8)
        self.assertEqual(result, TEXT)

    def test_utf16_with_bom(self):
        text = "<a href='/päge'>link</a>"
        data = codecs.BOM_UTF16_LE + text.encode("utf-16-le")
        self.assertEqual(consume_stream(io.BytesIO(data)), text)

    def test_empty_stream(self):
        self.assertEqual(consume_stream(io.BytesIO(b"")), "")

    def test_reads_until_exhausted(self):
        stream = _ChunkStream([b"<a>", b"</a>"])
        self.assertEqual(consume_stream(stream), "<a></a>")
        self.assertEqual(stream.calls, 3)

    def test_every_chunk_fed_once_in_order(self):
        chunks = [b"abc", b"def", b"ghi"]
        detector = MagicMock()
        detector.result = {"encoding": "ascii"}
        with patch(
            "outlink_extractor.extraction.stream.UniversalDetector",
            return_value=detector,
        ):
            consume_stream(_ChunkStream(chunks))
        fed = [c.args[0] for c in detector.feed.call_args_list]
        self.assertEqual(fed, chunks)
        detector.close.assert_called_once()

    def test_inconclusive_detection_falls_back(self):
        detector = MagicMock()
        detector.result = {"encoding": None}
        with patch(
            "outlink_extractor.extraction.stream.UniversalDetector",
            return_value=detector,
        ):
            result = consume_stream(io.BytesIO("héllo".encode("utf-8")))
        self.assertEqual(result, "héllo")

    def test_unknown_charset_raises(self):
        detector = MagicMock()
        detector.result = {"encoding": "no-such-charset"}
        with patch(
            "outlink_extractor.extraction.stream.UniversalDetector",
            return_value=detector,
        ):
            with self.assertRaises(LookupError):
                consume_stream(io.BytesIO(b"abc"))

    def test_io_error_propagates(self):
        stream = MagicMock()
        stream.read.side_effect = OSError("connection reset")
        with self.assertRaises(OSError):
            consume_stream(stream)


class TestDetectCharset(unittest.TestCase):
    def test_detector_from_package_root(self):
        import chardet
        from outlink_extractor.extraction import stream
        self.assertIs(stream.UniversalDetector, chardet.UniversalDetector)

    def test_ascii(self):
        self.assertEqual(detect_charset(b"<html></html>").lower(), "ascii")

    def test_empty_falls_back(self):
        self.assertEqual(detect_charset(b""), "utf-8")


if __name__ == "__main__":
    unittest.main()
