"""Shared fixtures: a fake GA4 client, a small Hugo-style content tree, a clean env."""

from types import SimpleNamespace

import pytest

ENV_VARS = (
    "GA4_PROPERTY_ID",
    "SITE_CONTENT_PATH",
    "PAGES_ROOT_URL",
    "GA4_CREDENTIALS_PATH",
)


def make_response(rows: list[tuple[str, str]]):
    """Build an object shaped like RunReportResponse from (pagePath, totalUsers) pairs."""
    return SimpleNamespace(
        rows=[
            SimpleNamespace(
                dimension_values=[SimpleNamespace(value=path)],
                metric_values=[SimpleNamespace(value=count)],
            )
            for path, count in rows
        ]
    )


class FakeAnalyticsClient:
    """Stands in for BetaAnalyticsDataClient; records requests."""

    def __init__(self, rows=None, error=None):
        self.rows = rows or []
        self.error = error
        self.requests = []

    def run_report(self, request):
        self.requests.append(request)
        if self.error is not None:
            raise self.error
        return make_response(self.rows)


def _write_page(root, page_path: str, front_matter: str) -> None:
    path = root / page_path.strip("/") / "index.md"
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(front_matter + "\nBody text.\n", encoding="utf-8")


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep the caller's environment and any .env file out of flag defaults."""
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setattr("popular_pages.config.load_dotenv", lambda: False)


@pytest.fixture
def fake_client():
    """Factory for FakeAnalyticsClient(rows=..., error=...)."""
    return FakeAnalyticsClient


@pytest.fixture
def write_page():
    """Write {root}{page_path}index.md with the given front matter block."""
    return _write_page


@pytest.fixture
def site(tmp_path):
    """Content tree with pages /a/ and /b/ titled A and B (no /c/)."""
    _write_page(tmp_path, "/a/", '---\ntitle: "A"\n---')
    _write_page(tmp_path, "/b/", '+++\ntitle = "B"\n+++')
    return tmp_path


@pytest.fixture
def scenario_rows():
    return [("/", "500"), ("/a/", "300"), ("/b/", "200"), ("/c/", "100")]
