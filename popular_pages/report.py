"""
Popular Pages – report generation.

Fetches the one-year report, resolves each page's title from the site
content tree, and prints a ranked Top-N list. Any failure raises a
PopularPagesError; lines already printed stay printed (an HTML list opened
before the failure is left unclosed).
"""

import logging
import sys
from collections.abc import Iterable
from datetime import date
from typing import TextIO

from popular_pages.analytics import fetch_report_rows, get_client
from popular_pages.content import resolve_title
from popular_pages.models import PageEntry, ReportConfig, ReportRow
from popular_pages.render import render_entry, render_footer, render_header

logger = logging.getLogger(__name__)


def build_entry(config: ReportConfig, row: ReportRow) -> PageEntry:
    """Resolve a row's title and public URL (root URL + page path, verbatim)."""
    return PageEntry(
        view_count=row.view_count,
        title=resolve_title(config.site_content_path, row.page_path),
        url=config.pages_root_url + row.page_path,
    )


def generate_report(
    config: ReportConfig,
    rows: Iterable[ReportRow],
    out: TextIO | None = None,
) -> int:
    """
    Print the Top-N list for rows already fetched from the API.

    The site root ("/") is skipped and does not take a slot. Iteration stops
    once top_n entries have been emitted, so later rows are never read.

    Args:
        config: Validated report configuration
        rows: Report rows in API order
        out: Stream to write to (default: sys.stdout)

    Returns:
        Number of entries emitted.
    """
    if out is None:
        out = sys.stdout
    fmt = config.format_option

    for line in render_header(fmt, config.heading, config.top_n):
        print(line, file=out)

    emitted = 0
    for row in rows:
        if emitted >= config.top_n:
            break
        if row.is_root:
            logger.debug("Skipping site root (%s users)", row.view_count)
            continue
        entry = build_entry(config, row)
        print(render_entry(fmt, entry), file=out)
        emitted += 1

    for line in render_footer(fmt):
        print(line, file=out)

    if emitted < config.top_n:
        logger.info("Only %d of %d entries available.", emitted, config.top_n)
    return emitted


def run_report(
    config: ReportConfig,
    client=None,
    out: TextIO | None = None,
    today: date | None = None,
) -> int:
    """
    Fetch the report for config.property_id and print it.

    Args:
        config: Validated report configuration
        client: GA4 Data API client (default: created from config credentials)
        out: Stream to write to (default: sys.stdout)
        today: Override the local date used for the window start

    Returns:
        Number of entries emitted.
    """
    if client is None:
        client = get_client(config.credentials_path)
    rows = fetch_report_rows(client, config.property_id, today=today)
    return generate_report(config, rows, out=out)
