"""
Popular Pages – command-line entry point.

Usage:
    popular-pages --property_id 123456789 --site_content_path ./content \
        --pages_root_url https://example.com --format_option markdown --top_n 10

The only place a failure becomes an exit status: 0 on success, 1 on any
configuration, API, file or front matter error.
"""

import logging
import sys

from popular_pages.config import config_from_args, parse_args
from popular_pages.errors import PopularPagesError
from popular_pages.report import run_report

logger = logging.getLogger(__name__)


def main(argv: list[str] | None = None, client=None) -> int:
    """Parse flags, run the report, and return the process exit code."""
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )
    # Quiet noisy loggers
    logging.getLogger("google").setLevel(logging.WARNING)
    logging.getLogger("grpc").setLevel(logging.WARNING)

    try:
        config = config_from_args(args)
        run_report(config, client=client)
    except PopularPagesError as e:
        logger.error("%s", e)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
