"""
Popular Pages – output formatting.

markdown:
    ## {heading} Top{N}
    (blank line)
    1. `{views}` unique user access: [{title}]({url})

html:
    <h2>{heading} Top{N}</h2>
    <ol>
    <li><code>{views}</code> unique user access: <a href="{url}">{title}</a></li>
    </ol>
"""

from html import escape

from popular_pages.models import OutputFormat, PageEntry


def render_header(fmt: OutputFormat, heading: str, top_n: int) -> list[str]:
    """Lines printed before the first list item."""
    if fmt is OutputFormat.HTML:
        return [f"<h2>{escape(heading)} Top{top_n}</h2>", "<ol>"]
    return [f"## {heading} Top{top_n}", ""]


def render_entry(fmt: OutputFormat, entry: PageEntry) -> str:
    """One ranked list item."""
    if fmt is OutputFormat.HTML:
        return (
            f"<li><code>{escape(entry.view_count)}</code> unique user access: "
            f'<a href="{escape(entry.url)}">{escape(entry.title)}</a></li>'
        )
    return f"1. `{entry.view_count}` unique user access: [{entry.title}]({entry.url})"


def render_footer(fmt: OutputFormat) -> list[str]:
    """Lines printed after the last list item."""
    if fmt is OutputFormat.HTML:
        return ["</ol>"]
    return []
