"""
Configuration constants for the outlink extractor.
"""

import re

# ---------------------------------------------------------------------------
# Stream collection
# ---------------------------------------------------------------------------
BUFFER_SIZE = 64 * 1024            # bytes read from the stream per chunk
INITIAL_CAPACITY = 1024 * 1024     # websites approach 1 MiB, start there
DEFAULT_CHARSET = "utf-8"          # used when charset detection is inconclusive

# ---------------------------------------------------------------------------
# Markup scanning
# ---------------------------------------------------------------------------
# Share of control / replacement characters above which a decoded document is
# treated as binary noise instead of markup.
NOISE_RATIO = 0.10

# ---------------------------------------------------------------------------
# Entry guards and diagnostics
# ---------------------------------------------------------------------------
MAX_URL_LENGTH = 500
FAULT_MESSAGE_LIMIT = 150

# ---------------------------------------------------------------------------
# Fetching (outside the extraction core)
# ---------------------------------------------------------------------------
REQUEST_TIMEOUT = 30
MAX_RETRIES = 3
RETRY_STATUS_CODES = (500, 502, 503, 504)
DEFAULT_WORKERS = 8

USER_AGENT = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64; rv:128.0) "
    "Gecko/20100101 Firefox/128.0"
)

# ---------------------------------------------------------------------------
# URL validation patterns
# ---------------------------------------------------------------------------
# Well-formed absolute URL prefix: scheme://host[:port]
ABSOLUTE_URL_RE = re.compile(r"https?://[a-z0-9.\-]+(?::[0-9]+)?", re.IGNORECASE)

# Links to content the crawler cannot parse for further outlinks.
IGNORED_SUFFIX_RE = re.compile(
    r"\.(css|js|bmp|gif|jpe?g|png|tiff?|mid|mp2|mp3|mp4|wav|avi|mov|mpeg|"
    r"ram|m4v|pdf|rm|smil|wmv|swf|wma|zip|rar|gz)$",
    re.IGNORECASE,
)
