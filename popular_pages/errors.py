"""Errors raised while generating the popular pages report."""


class PopularPagesError(Exception):
    """Base class; the CLI turns any of these into a non-zero exit."""


class ConfigError(PopularPagesError):
    """Missing or invalid command-line / environment configuration."""


class AnalyticsError(PopularPagesError):
    """GA4 client construction or report request failed."""


class ContentReadError(PopularPagesError):
    """A page's content file is missing or unreadable."""


class FrontMatterError(PopularPagesError):
    """A content file's front matter block could not be parsed."""
