"""Data models for getnotes2vault."""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from .formatter import format_note


@dataclass(frozen=True)
class RawNote:
    """A single HTML note read from the export archive."""

    path: str
    html: str


@dataclass
class ExtractedMetadata:
    """Metadata recovered from a note's raw HTML."""

    title: Optional[str]
    created: str
    tags: list[str] = field(default_factory=list)


@dataclass
class ProcessedDocument:
    """A converted note ready to be written to the vault."""

    title: str
    body: str
    created: Optional[str] = None
    tags: list[str] = field(default_factory=list)

    @property
    def filename(self) -> str:
        return f"{self.title}.md"

    def render(self) -> str:
        """Front matter followed by the Markdown body."""
        return format_note(self.body, self.title, self.tags, self.created)


@dataclass
class ImportResult:
    """Counters and outputs accumulated over one archive import."""

    imported: int = 0
    failed: int = 0
    written: list[Path] = field(default_factory=list)
    errors: list[str] = field(default_factory=list)
