"""
Command-line interface for the outlink extractor.
"""

import argparse
import json
import logging
import re
import sys
import time
from concurrent.futures import ThreadPoolExecutor

import urllib3
from tqdm import tqdm

from outlink_extractor.config import DEFAULT_WORKERS
from outlink_extractor.core.extractor import OutlinkExtractor, filter_outlinks
from outlink_extractor.core.result import Fault, NoResult, Ok
from outlink_extractor.session import build_session, make_opener
from outlink_extractor.utils.log import log, setup_logging


def _regex(value: str) -> re.Pattern:
    try:
        return re.compile(value)
    except re.error as exc:
        raise argparse.ArgumentTypeError(
            f"invalid regular expression {value!r}: {exc}"
        ) from exc


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Fetch web pages and print the outlinks they contain.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Examples:\n"
            "  python -m outlink_extractor https://example.com\n"
            "  python -m outlink_extractor https://a.com https://b.com --json\n"
            "  python -m outlink_extractor https://example.com "
            "--filter 'https://example\\.com/.*'\n"
        ),
    )
    parser.add_argument(
        "urls", nargs="+", metavar="URL",
        help="Page URL(s) to extract outlinks from",
    )
    parser.add_argument(
        "--filter", dest="pattern", metavar="REGEX", type=_regex,
        help="Only print outlinks that fully match this regular expression",
    )
    parser.add_argument(
        "--workers", type=int, default=DEFAULT_WORKERS, metavar="N",
        help=f"Number of pages extracted in parallel (default: {DEFAULT_WORKERS})",
    )
    parser.add_argument(
        "--json", dest="as_json", action="store_true",
        help="Print a JSON object mapping each page to its outlinks",
    )
    parser.add_argument(
        "--no-verify-ssl", dest="verify_ssl", action="store_false", default=True,
        help="Disable TLS certificate verification",
    )
    parser.add_argument(
        "--no-progress", dest="progress", action="store_false", default=True,
        help="Hide the progress bar",
    )
    parser.add_argument(
        "--debug", action="store_true",
        help="Enable verbose debug logging",
    )
    parser.add_argument(
        "--log-file",
        help="Write detailed logs to this file (always at DEBUG level)",
    )
    return parser.parse_args(argv)


def main(argv: list[str] | None = None, extractor: OutlinkExtractor | None = None) -> int:
    args = parse_args(argv)

    setup_logging(debug=args.debug, log_file=args.log_file)

    if args.debug:
        logging.getLogger("urllib3").setLevel(logging.DEBUG)

    if not args.verify_ssl:
        urllib3.disable_warnings(urllib3.exceptions.InsecureRequestWarning)
        log.warning("TLS certificate verification is DISABLED (--no-verify-ssl)")

    workers = max(1, args.workers)
    if extractor is None:
        session = build_session(verify_ssl=args.verify_ssl, pool_size=workers)
        extractor = OutlinkExtractor(opener=make_opener(session))

    t0 = time.monotonic()
    results: dict[str, list[str]] = {}
    stats = {"ok": 0, "skip": 0, "err": 0}
    with ThreadPoolExecutor(max_workers=workers) as pool:
        outcomes = pool.map(extractor.extract, args.urls)
        for url, outcome in tqdm(
            zip(args.urls, outcomes),
            total=len(args.urls),
            desc="Extracting",
            unit="page",
            disable=not args.progress,
            file=sys.stderr,
        ):
            if isinstance(outcome, Ok):
                links = filter_outlinks(outcome.result.outlinks, args.pattern)
                results[url] = sorted(links)
                stats["ok"] += 1
            elif isinstance(outcome, NoResult):
                log.info("[SKIP] %s (%s)", url, outcome.reason.value)
                stats["skip"] += 1
            elif isinstance(outcome, Fault):
                stats["err"] += 1

    if args.as_json:
        print(json.dumps(results, indent=2))
    else:
        for links in results.values():
            for link in links:
                print(link)

    log.info(
        "Done: %d ok, %d skipped, %d failed in %.1f s",
        stats["ok"], stats["skip"], stats["err"], time.monotonic() - t0,
    )
    return 0 if stats["ok"] else 1


if __name__ == "__main__":
    sys.exit(main())
