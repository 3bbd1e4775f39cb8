"""
Popular Pages – GA4 Data API access.

Builds the one-year pagePath / totalUsers report request, runs it with a
BetaAnalyticsDataClient and converts the response rows to ReportRow.

API: BetaAnalyticsDataClient.run_report(RunReportRequest)
Dimension: pagePath
Metric: totalUsers (distinct users, used as the view count)
Date range: [one year ago, "today"]
"""

import logging
import os
from datetime import date

from google.analytics.data_v1beta import BetaAnalyticsDataClient
from google.analytics.data_v1beta.types import (
    DateRange,
    Dimension,
    Metric,
    RunReportRequest,
)
from google.api_core.exceptions import GoogleAPIError
from google.auth.exceptions import GoogleAuthError
from google.oauth2 import service_account

from popular_pages.errors import AnalyticsError
from popular_pages.models import ReportRow

logger = logging.getLogger(__name__)

DIMENSION = "pagePath"
METRIC = "totalUsers"
# Resolved by the API backend, avoids clock/timezone skew with the local host
END_DATE = "today"


def one_year_ago(today: date | None = None) -> str:
    """
    Return the ISO date one calendar year before today (local date).

    Feb 29 has no counterpart in the previous year and rolls forward to Mar 1.
    """
    if today is None:
        today = date.today()
    try:
        start = today.replace(year=today.year - 1)
    except ValueError:
        start = date(today.year - 1, 3, 1)
    return start.isoformat()


def build_report_request(property_id: str, start_date: str) -> RunReportRequest:
    """Build the single pagePath / totalUsers request for one property."""
    return RunReportRequest(
        property=f"properties/{property_id}",
        dimensions=[Dimension(name=DIMENSION)],
        metrics=[Metric(name=METRIC)],
        date_ranges=[DateRange(start_date=start_date, end_date=END_DATE)],
    )


def get_client(credentials_path: str | None = None) -> BetaAnalyticsDataClient:
    """
    Create a GA4 Data API client.

    Uses the service account key at credentials_path when one is given,
    otherwise application default credentials.

    Raises:
        AnalyticsError: if the key file is missing or invalid, or no usable
            default credentials are found.
    """
    if credentials_path and not os.path.isfile(credentials_path):
        raise AnalyticsError(f"Service account key not found: {credentials_path}")
    try:
        if credentials_path:
            logger.debug("Using service account key %s", credentials_path)
            credentials = service_account.Credentials.from_service_account_file(credentials_path)
            return BetaAnalyticsDataClient(credentials=credentials)
        return BetaAnalyticsDataClient()
    except (GoogleAuthError, ValueError, OSError) as e:
        raise AnalyticsError(f"Failed to create client: {e}") from e


def rows_from_response(response) -> list[ReportRow]:
    """Convert RunReportResponse rows to ReportRow, keeping the API's order."""
    return [
        ReportRow(
            page_path=row.dimension_values[0].value,
            view_count=row.metric_values[0].value,
        )
        for row in response.rows
    ]


def fetch_report_rows(
    client: BetaAnalyticsDataClient,
    property_id: str,
    today: date | None = None,
) -> list[ReportRow]:
    """
    Run the one-year report for property_id and return its rows.

    Args:
        client: GA4 Data API client
        property_id: GA4 property ID (numeric string)
        today: Override the local date used for the window start (default: today)

    Returns:
        Rows in the order the API ranked them.

    Raises:
        AnalyticsError: if the report request fails.
    """
    request = build_report_request(property_id, one_year_ago(today))
    logger.info(
        "Requesting %s report for %s (%s..%s)",
        METRIC,
        request.property,
        request.date_ranges[0].start_date,
        END_DATE,
    )
    try:
        response = client.run_report(request)
    except (GoogleAPIError, GoogleAuthError) as e:
        raise AnalyticsError(f"Failed to run GA report: {e}") from e

    rows = rows_from_response(response)
    logger.info("Fetched %d report rows.", len(rows))
    return rows
