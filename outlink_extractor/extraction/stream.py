"""
Byte-stream collection with incremental charset detection.
"""

import logging
from typing import BinaryIO

from chardet import UniversalDetector

from outlink_extractor.config import BUFFER_SIZE, DEFAULT_CHARSET, INITIAL_CAPACITY

log = logging.getLogger("outlink-extractor")


def consume_stream(
    stream: BinaryIO,
    chunk_size: int = BUFFER_SIZE,
    initial_capacity: int = INITIAL_CAPACITY,
    default_charset: str = DEFAULT_CHARSET,
) -> str:
    """
    Read *stream* to exhaustion and return its content as text.

    Every chunk is fed to the charset detector in the order it was read,
    before the detector is closed, so detection sees each byte exactly once.
    The bytes are collected in a buffer that doubles when the next chunk
    would not fit.  I/O errors propagate to the caller.
    """
    detector = UniversalDetector()
    dest = bytearray(initial_capacity)
    offset = 0
    for chunk in iter(lambda: stream.read(chunk_size), b""):
        detector.feed(chunk)
        end = offset + len(chunk)
        if end > len(dest):
            capacity = max(len(dest), 1)
            while end > capacity:
                capacity *= 2
            dest.extend(bytes(capacity - len(dest)))
        dest[offset:end] = chunk
        offset = end
    detector.close()

    encoding = detector.result.get("encoding") or default_charset
    log.debug("Read %d bytes, charset %s", offset, encoding)
    del dest[offset:]
    return dest.decode(encoding, errors="replace")


def detect_charset(data: bytes, default_charset: str = DEFAULT_CHARSET) -> str:
    """Best-guess charset of a complete byte string."""
    detector = UniversalDetector()
    detector.feed(data)
    detector.close()
    return detector.result.get("encoding") or default_charset
