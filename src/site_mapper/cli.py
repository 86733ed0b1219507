"""Command line interface for the sitemap crawler."""

from __future__ import annotations

import argparse
import logging
from typing import Optional, Sequence

from .core.config import DEFAULT_OUTPUT_NAME, load_configuration
from .core.errors import ConfigurationError, SitemapWriteError
from .core.sitemap import SitemapDocument
from .recon.crawler import Crawler

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s %(levelname)-7s %(name)s: %(message)s"

EXIT_OK = 0
EXIT_WRITE_FAILED = 1
EXIT_USAGE = 2
EXIT_INTERRUPTED = 130


def parse_arguments(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Crawl a website and write its sitemap")
    parser.add_argument("-t", "--target", default="", help="Target URL (also the same-site prefix)")
    parser.add_argument("-n", "--max-links", type=int, default=None, help="Number of links to crawl (default 100)")
    parser.add_argument("-o", "--output", default=f"./{DEFAULT_OUTPUT_NAME}", help="Sitemap output file")
    parser.add_argument("-w", "--workers", type=int, default=None, help="Concurrent fetch workers (default 15)")
    parser.add_argument("--timeout", type=float, default=None, help="Per-request timeout in seconds")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    return parser.parse_args(argv)


def configure_logging(verbose: bool = False) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format=LOG_FORMAT,
        datefmt="%H:%M:%S",
    )
    # urllib3 is chatty at DEBUG
    logging.getLogger("urllib3").setLevel(logging.WARNING)


def _printable(value: object) -> str:
    # undecodable argv bytes arrive as lone surrogates
    return str(value).encode("utf-8", "backslashreplace").decode("utf-8")


def run_cli(argv: Optional[Sequence[str]] = None) -> int:
    args = parse_arguments(argv)
    configure_logging(args.verbose)

    if not args.target:
        logger.error("You must specify a target url")
        return EXIT_USAGE

    try:
        config = load_configuration(
            args.target,
            args.output,
            max_links=args.max_links,
            max_workers=args.workers,
            request_timeout=args.timeout,
        )
    except ConfigurationError as exc:
        logger.error("Invalid configuration: %s", exc)
        return EXIT_USAGE

    print(f"[*] Crawling {_printable(config.target_url)} (up to {config.max_links} links)")
    crawler = Crawler(config)
    try:
        urls = crawler.start()
    except KeyboardInterrupt:
        print("[!] Crawl interrupted by the user, no sitemap written")
        return EXIT_INTERRUPTED

    document = SitemapDocument.from_iterable(urls)
    try:
        document.save(config.output_path)
    except SitemapWriteError as exc:
        logger.error("Failed to write sitemap: %s", exc)
        return EXIT_WRITE_FAILED

    print(f"[+] Sitemap saved to {_printable(config.output_path)}")
    print(f"    URLs in sitemap : {len(document)}")
    if crawler.state.stopped:
        print(f"    * Link budget of {config.max_links} reached")
    logger.info("Crawl completed")
    return EXIT_OK


def main() -> None:
    raise SystemExit(run_cli())


if __name__ == "__main__":
    main()
