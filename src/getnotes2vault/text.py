"""Low-level text cleanup shared by the extractors and the Markdown cleanup."""

import re

_TAG_RE = re.compile(r"<[^>]+>")
_ENTITY_RE = re.compile(r"&[a-z]+;")
_SYMBOL_RE = re.compile(r"""[×\[\](){}|*&^%$#@!~`'"<>]""")
# Fragments of markup that leak into tag text when a class-based match overruns.
_LEAKED_MARKUP_RE = re.compile(r"class=|span|tag", re.IGNORECASE)
_WHITESPACE_RE = re.compile(r"\s+")

_EMOJI_RE = re.compile(
    "["
    "\U0001F600-\U0001F64F"  # emoticons
    "\U0001F300-\U0001F5FF"  # symbols & pictographs
    "\U0001F680-\U0001F6FF"  # transport & map
    "\U0001F700-\U0001F77F"  # alchemical
    "\U0001F780-\U0001F7FF"  # geometric shapes extended
    "\U0001F800-\U0001F8FF"  # supplemental arrows-c
    "\U0001F900-\U0001F9FF"  # supplemental symbols & pictographs
    "\U0001FA00-\U0001FA6F"  # chess symbols
    "\U0001FA70-\U0001FAFF"  # symbols & pictographs extended-a
    "\u2600-\u26FF"  # misc symbols
    "\u2700-\u27BF"  # dingbats
    "]"
)
_PUNCTUATION_RE = re.compile(r"[^\w\s]")


def strip_tags(html: str) -> str:
    """Remove every <...> span. Nesting is not balanced or validated."""
    return _TAG_RE.sub("", html)


def clean_tag_text(text: str) -> str:
    """Clean a raw tag candidate pulled out of HTML.

    Removes tags, named entities, a denylist of symbols and the words
    that show up when an attribute leaks into the captured text
    (``class=``, ``span``, ``tag``), then collapses whitespace.
    """
    cleaned = strip_tags(text)
    cleaned = _ENTITY_RE.sub("", cleaned)
    cleaned = _SYMBOL_RE.sub("", cleaned)
    cleaned = _LEAKED_MARKUP_RE.sub("", cleaned)
    return _WHITESPACE_RE.sub(" ", cleaned).strip()


def _normalize_for_comparison(text: str) -> str:
    text = _EMOJI_RE.sub("", text)
    text = _PUNCTUATION_RE.sub("", text)
    text = _WHITESPACE_RE.sub("", text)
    return text.lower()


def are_similar(a: str, b: str) -> bool:
    """Whether two lines are the same text modulo emoji, punctuation and case.

    True when the normalized forms are equal or one contains the other.
    """
    left = _normalize_for_comparison(a)
    right = _normalize_for_comparison(b)
    return left == right or left in right or right in left
