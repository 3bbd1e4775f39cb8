"""
Popular Pages – page titles from static site content.

For page path P the title lives in the front matter of
{site_content_path}{P}index.md (Hugo page bundle layout). YAML (---),
TOML (+++) and JSON ({ }) front matter are recognized.
"""

import logging
from pathlib import Path

import frontmatter
import yaml

from popular_pages.errors import ContentReadError, FrontMatterError

logger = logging.getLogger(__name__)

INDEX_FILENAME = "index.md"
TITLE_KEY = "title"


def content_file_path(site_content_path: str, page_path: str) -> Path:
    """Join root + page path + index.md exactly as given (no separator added)."""
    return Path(site_content_path + page_path + INDEX_FILENAME)


def title_from_metadata(metadata: dict) -> str:
    """Return the title field (any key casing), or "" when absent."""
    for key, value in metadata.items():
        if str(key).lower() == TITLE_KEY:
            return "" if value is None else str(value)
    return ""


def resolve_title(site_content_path: str, page_path: str) -> str:
    """
    Read a page's content file and return the title from its front matter.

    Args:
        site_content_path: Root of the site's content tree
        page_path: Page path as reported by GA4 (starts with "/")

    Returns:
        The title, or "" if the metadata has no title field.

    Raises:
        ContentReadError: if the file is missing or unreadable.
        FrontMatterError: if the front matter block is malformed.
    """
    path = content_file_path(site_content_path, page_path)
    logger.debug("Reading %s", path)
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise ContentReadError(f"Failed to read markdown file {path}: {e}") from e

    try:
        post = frontmatter.loads(text)
    except (yaml.YAMLError, ValueError) as e:
        raise FrontMatterError(f"Failed to parse markdown file {path}: {e}") from e

    return title_from_metadata(post.metadata)
