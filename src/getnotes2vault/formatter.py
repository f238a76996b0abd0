"""YAML frontmatter and Obsidian markdown formatting."""

import re
from typing import Optional, Sequence

_NEEDS_QUOTES_RE = re.compile(r"[:#\[\]{}|>*&!%@,]")


def escape_yaml(text: str) -> str:
    """Quote a scalar when it would otherwise be misread as YAML syntax."""
    if _NEEDS_QUOTES_RE.search(text) or text != text.strip():
        return '"' + text.replace('"', '\\"') + '"'
    return text


def format_frontmatter(
    title: str,
    tags: Sequence[str] = (),
    created: Optional[str] = None,
) -> str:
    """Generate YAML frontmatter for a note."""
    lines = [
        "---",
        f"title: {escape_yaml(title)}",
    ]
    if created:
        lines.append(f"created: {escape_yaml(created)}")
    if tags:
        lines.append("tags:")
        for tag in tags:
            lines.append(f"  - {escape_yaml(tag)}")
    lines.append("---")
    return "\n".join(lines)


def format_note(
    body: str,
    title: str,
    tags: Sequence[str] = (),
    created: Optional[str] = None,
) -> str:
    """Format a complete note with frontmatter and content."""
    frontmatter = format_frontmatter(title, tags, created)
    return f"{frontmatter}\n\n{body}"
