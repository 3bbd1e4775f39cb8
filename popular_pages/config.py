"""
Popular Pages – configuration.

Command-line flags, with defaults taken from the environment (and a .env
file) so the same run can be configured either way:

    GA4_PROPERTY_ID       --property_id
    SITE_CONTENT_PATH     --site_content_path
    PAGES_ROOT_URL        --pages_root_url
    GA4_CREDENTIALS_PATH  --credentials_path
"""

import argparse
import os

from dotenv import load_dotenv
from pydantic import ValidationError

from popular_pages.errors import ConfigError
from popular_pages.models import DEFAULT_HEADING, DEFAULT_TOP_N, OutputFormat, ReportConfig


def build_parser() -> argparse.ArgumentParser:
    load_dotenv()
    parser = argparse.ArgumentParser(
        prog="popular-pages",
        description="Print the most visited pages of the last year from GA4 as Markdown or HTML.",
    )
    parser.add_argument(
        "--property_id", type=str, default=os.getenv("GA4_PROPERTY_ID", ""),
        help="Google Analytics (GA4) property ID",
    )
    parser.add_argument(
        "--site_content_path", type=str, default=os.getenv("SITE_CONTENT_PATH", ""),
        help="Path to site content in the static site generator (e.g. Hugo)",
    )
    parser.add_argument(
        "--pages_root_url", type=str, default=os.getenv("PAGES_ROOT_URL", ""),
        help="Pages root URL (e.g. https://example.com)",
    )
    parser.add_argument(
        "--format_option", type=str, default=OutputFormat.MARKDOWN.value,
        choices=[f.value for f in OutputFormat],
        help="markdown or html (default: markdown)",
    )
    parser.add_argument(
        "--top_n", type=int, default=DEFAULT_TOP_N,
        help=f"Number of top pages to list (default: {DEFAULT_TOP_N})",
    )
    parser.add_argument(
        "--heading", type=str, default=DEFAULT_HEADING,
        help="Heading text placed before 'Top{N}'",
    )
    parser.add_argument(
        "--credentials_path", type=str, default=os.getenv("GA4_CREDENTIALS_PATH"),
        help="Service account key file (default: application default credentials)",
    )
    parser.add_argument(
        "--verbose", "-v", action="store_true",
        help="Enable verbose (DEBUG) logging",
    )
    return parser


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    return build_parser().parse_args(argv)


def config_from_args(args: argparse.Namespace) -> ReportConfig:
    """
    Validate parsed flags into a ReportConfig.

    Raises:
        ConfigError: if a required flag is empty or top_n is not positive.
    """
    try:
        return ReportConfig(
            property_id=args.property_id,
            site_content_path=args.site_content_path,
            pages_root_url=args.pages_root_url,
            format_option=args.format_option,
            top_n=args.top_n,
            heading=args.heading,
            credentials_path=args.credentials_path or None,
        )
    except ValidationError as e:
        problems = ", ".join(
            f"{'.'.join(str(loc) for loc in err['loc'])} ({err['msg']})" for err in e.errors()
        )
        raise ConfigError(f"Missing required arguments: {problems}") from e
