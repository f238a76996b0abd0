"""Heuristic metadata extraction from exported note HTML.

Nothing here builds a DOM. Each field is recovered by a table of regular
expressions run over the raw markup: the first match wins for the title and
the creation time, while every tag source contributes to the tag list.
Missing metadata is never an error; extractors return ``None``, an empty
list or the current time instead.
"""

import re
from datetime import datetime
from typing import Callable, Optional

from .dates import normalize_datetime, now_timestamp
from .models import ExtractedMetadata
from .text import clean_tag_text, strip_tags

APP_TAG = "Get笔记"

_TITLE_SUFFIX_RE = re.compile(r" - Get ?笔记$")


def _title_element(html: str) -> Optional[str]:
    match = re.search(r"<title>(.*?)</title>", html, re.IGNORECASE)
    if not match or not match.group(1):
        return None
    return _TITLE_SUFFIX_RE.sub("", match.group(1).strip())


def _pattern_matcher(pattern: str, strip_markup: bool = True) -> Callable[[str], Optional[str]]:
    regex = re.compile(pattern, re.IGNORECASE)

    def matcher(html: str) -> Optional[str]:
        match = regex.search(html)
        if not match or not match.group(1):
            return None
        value = match.group(1)
        if strip_markup:
            value = strip_tags(value)
        return value.strip()

    return matcher


TITLE_MATCHERS: list[Callable[[str], Optional[str]]] = [
    _title_element,
    _pattern_matcher(r"<h1[^>]*>(.*?)</h1>"),
    _pattern_matcher(r"""<meta\s+name=["']title["']\s+content=["'](.*?)["']""", strip_markup=False),
    _pattern_matcher(r"<header[^>]*>[\s\S]*?<h[0-9][^>]*>(.*?)</h[0-9]>"),
    _pattern_matcher(r"<h[0-9][^>]*>(.*?)</h[0-9]>"),
]


def extract_title(html: str) -> Optional[str]:
    """Return the note title, or None when no title source matches."""
    for matcher in TITLE_MATCHERS:
        title = matcher(html)
        if title is not None:
            return title
    return None


# "标签: a, b" style labels; the capture stops at a closing tag or line end.
TAG_LABEL_PATTERNS = [
    re.compile(rf"{label}[：:]\s*(.*?)(?:</|$|\n)", re.IGNORECASE)
    for label in ("标签", "tags", "关键词", "keywords")
]
_TAG_SPLIT_RE = re.compile(r"[\s,;]+")
_META_KEYWORDS_RE = re.compile(
    r"""<meta\s+name=["']keywords["']\s+content=["'](.*?)["']""", re.IGNORECASE
)
_TAG_CLASS_RE = re.compile(
    r"""<[^>]+class=["'][^"']*tag[^"']*["'][^>]*>(.*?)</[^>]+>""", re.IGNORECASE
)
_TAG_CONTAINER_RE = re.compile(
    r"""<div[^>]*class=["'][^"']*tags[^"']*["'][^>]*>([\s\S]*?)</div>""", re.IGNORECASE
)
_TAG_SPAN_RE = re.compile(
    r"""<span[^>]*class=["']tag["'][^>]*>(.*?)</span>""", re.IGNORECASE
)
_QUOTES_RE = re.compile(r"""^["']+|["']+$""")


def _labeled_tags(html: str) -> list[str]:
    tags = []
    for pattern in TAG_LABEL_PATTERNS:
        match = pattern.search(html)
        if match and match.group(1):
            tags.extend(t for t in _TAG_SPLIT_RE.split(match.group(1).strip()) if t.strip())
    return tags


def _meta_keyword_tags(html: str) -> list[str]:
    match = _META_KEYWORDS_RE.search(html)
    if not match or not match.group(1):
        return []
    return [k for k in re.split(r",\s*", match.group(1).strip()) if k.strip()]


def _tag_class_tags(html: str) -> list[str]:
    tags = []
    for match in _TAG_CLASS_RE.finditer(html):
        text = strip_tags(match.group(1)).strip()
        if text:
            tags.append(text)
    return tags


def _tag_container_tags(html: str) -> list[str]:
    container = _TAG_CONTAINER_RE.search(html)
    if not container or not container.group(1):
        return []
    tags = []
    for match in _TAG_SPAN_RE.finditer(container.group(1)):
        text = strip_tags(match.group(1)).strip()
        if text:
            tags.append(text)
    return tags


def _app_tags(html: str) -> list[str]:
    if "Get笔记" in html or "Get 笔记" in html:
        return [APP_TAG]
    return []


TAG_SOURCES: list[Callable[[str], list[str]]] = [
    _labeled_tags,
    _meta_keyword_tags,
    _tag_class_tags,
    _tag_container_tags,
    _app_tags,
]


def extract_tags(html: str) -> list[str]:
    """Collect tags from every tag source, cleaned and de-duplicated in order."""
    raw_tags: list[str] = []
    for source in TAG_SOURCES:
        raw_tags.extend(source(html))

    tags: list[str] = []
    for raw in raw_tags:
        tag = _QUOTES_RE.sub("", clean_tag_text(raw))
        if tag and tag not in tags:
            tags.append(tag)
    return tags


_HYPHEN_DATE = r"([0-9-]+\s+[0-9:]+)"
_SLASH_DATE = r"([0-9/]+\s+[0-9:]+)"


def _labeled(label: str, date: str = _HYPHEN_DATE) -> re.Pattern:
    return re.compile(rf"{label}[：:]\s*{date}", re.IGNORECASE)


def _meta(attribute: str, value: str) -> re.Pattern:
    return re.compile(
        rf"""<meta\s+{attribute}=["']{value}["']\s+content=["'](.*?)["']""", re.IGNORECASE
    )


CREATED_TIME_PATTERNS: list[re.Pattern] = [
    _labeled("创建于"),
    _labeled("创建时间"),
    _labeled("created"),
    _labeled("创建于", _SLASH_DATE),
    _labeled("创建时间", _SLASH_DATE),
    _labeled("created", _SLASH_DATE),
    _labeled("发布于"),
    _labeled("发布时间"),
    _labeled("published"),
    _labeled("日期"),
    _labeled("date"),
    _meta("name", "created"),
    _meta("name", "date"),
    _meta("name", "published"),
    _meta("name", "pubdate"),
    _meta("property", "article:published_time"),
    _labeled("最后修改"),
]


def extract_created_time(html: str, now: Optional[datetime] = None) -> str:
    """Return the note's creation time in canonical form.

    Falls back to the current local time when the HTML carries no
    recognizable timestamp, so the result is never empty.
    """
    for pattern in CREATED_TIME_PATTERNS:
        match = pattern.search(html)
        if match and match.group(1):
            return normalize_datetime(match.group(1).strip())
    return now_timestamp(now)


def extract_metadata(html: str, now: Optional[datetime] = None) -> ExtractedMetadata:
    """Run all three extractors over a note's HTML."""
    return ExtractedMetadata(
        title=extract_title(html),
        created=extract_created_time(html, now),
        tags=extract_tags(html),
    )
