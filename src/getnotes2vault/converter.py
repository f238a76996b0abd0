"""HTML to Markdown conversion."""

from markdownify import ATX, markdownify


def html_to_markdown(html: str) -> str:
    """Convert a full HTML document to Markdown with ATX headings.

    ``<pre>`` blocks come out as fenced code blocks.
    """
    return markdownify(html, heading_style=ATX)
