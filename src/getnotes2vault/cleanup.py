"""Post-processing of converted Markdown.

The exported pages embed scripts and markup that the HTML converter passes
through as text; these passes strip them and drop the page title line that
the export repeats above the note's own heading.
"""

import re

from .text import are_similar

# ASCII only: CJK text followed by a parenthetical is not a function call.
_IDENT = r"[A-Za-z0-9_]+"

# Applied in order; script blocks must go before the generic tag sweep.
CLEANUP_PATTERNS: list[tuple[re.Pattern, str]] = [
    (re.compile(r"document\.addEventListener\([^)]+\);?"), ""),
    (re.compile(r"window\.addEventListener\([^)]+\);?"), ""),
    # Non-recursive: a body with nested braces is cut at the first '}'.
    (re.compile(rf"function\s+{_IDENT}\s*\([^)]*\)\s*\{{[\s\S]*?\}}"), ""),
    (re.compile(r"<script[\s\S]*?</script>"), ""),
    (re.compile(rf'on{_IDENT}="[^"]*"'), ""),
    (re.compile(r"<!--[\s\S]*?-->"), ""),
    (re.compile(r"</?[a-z][^>]*>", re.IGNORECASE), ""),
    (re.compile(rf"\n*{_IDENT}\([^)]*\);?\s*\Z"), ""),
]

TAG_LABELS = ("标签", "tags", "关键词", "keywords")
TIME_LABELS = ("创建于", "创建时间", "created", "发布于", "发布时间", "published", "日期", "date")

METADATA_LINE_PATTERNS = [
    re.compile(rf"^{label}[：:].*$", re.MULTILINE | re.IGNORECASE)
    for label in TAG_LABELS + TIME_LABELS
]

_BLANK_RUN_RE = re.compile(r"\n{3,}")


def _first_text_line(lines: list[str]) -> str:
    for line in lines:
        stripped = line.strip()
        if stripped and not stripped.startswith("#"):
            return stripped
    return ""


def _first_heading(lines: list[str]) -> str:
    for line in lines:
        stripped = line.strip()
        if stripped.startswith("# "):
            return stripped[2:]
    return ""


def remove_duplicate_title(markdown: str) -> str:
    """Drop the first text line when it restates the first level-1 heading.

    The line is located by content, so the earliest line with that exact
    text is the one removed.
    """
    lines = markdown.split("\n")
    if len(lines) <= 2:
        return markdown

    text_line = _first_text_line(lines)
    heading = _first_heading(lines)
    if text_line and heading and are_similar(text_line, heading):
        for i, line in enumerate(lines):
            if line.strip() == text_line:
                del lines[i]
                break
    return "\n".join(lines)


def cleanup_markdown(markdown: str) -> str:
    """Strip script leftovers, markup remnants and a duplicated title line."""
    for pattern, replacement in CLEANUP_PATTERNS:
        markdown = pattern.sub(replacement, markdown)

    markdown = remove_duplicate_title(markdown)

    markdown = _BLANK_RUN_RE.sub("\n\n", markdown)
    return markdown.rstrip("\n") + "\n"


def strip_metadata_lines(markdown: str) -> str:
    """Remove body lines restating tags or timestamps now held in front matter."""
    for pattern in METADATA_LINE_PATTERNS:
        markdown = pattern.sub("", markdown)
    return _BLANK_RUN_RE.sub("\n\n", markdown)
