"""
Popular Pages – Pydantic models for report configuration and rows.

Single source of truth for the validated run configuration and for the
rows read back from the GA4 report.
"""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, field_validator

DEFAULT_HEADING = "直近一年間の人気記事"
DEFAULT_TOP_N = 10
ROOT_PATH = "/"


class OutputFormat(str, Enum):
    MARKDOWN = "markdown"
    HTML = "html"


class ReportConfig(BaseModel):
    """
    Validated configuration for one report run.

    Built once from CLI flags (and .env defaults); never mutated.
    """

    model_config = ConfigDict(frozen=True)

    property_id: str
    site_content_path: str
    pages_root_url: str
    format_option: OutputFormat = OutputFormat.MARKDOWN
    top_n: int = Field(DEFAULT_TOP_N, gt=0)
    heading: str = DEFAULT_HEADING
    credentials_path: str | None = None

    @field_validator("property_id", "site_content_path", "pages_root_url")
    @classmethod
    def _not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("must not be empty")
        return value


class ReportRow(BaseModel):
    """One row of the pagePath / totalUsers report, in API order."""

    model_config = ConfigDict(frozen=True)

    page_path: str
    view_count: str

    @property
    def is_root(self) -> bool:
        return self.page_path == ROOT_PATH


class PageEntry(BaseModel):
    """A report row enriched with its page title and public URL."""

    model_config = ConfigDict(frozen=True)

    view_count: str
    title: str
    url: str
