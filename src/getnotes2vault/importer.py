"""Archive import orchestration."""

from enum import Enum
from pathlib import Path
from typing import Callable, Optional

import click

from .archive import entry_name, open_archive
from .cleanup import cleanup_markdown, strip_metadata_lines
from .converter import html_to_markdown
from .extractor import extract_metadata
from .models import ImportResult, ProcessedDocument, RawNote
from .utils import note_stem, sanitize_filename
from .writer import VaultWriter

Converter = Callable[[str], str]


class Stage(str, Enum):
    """Per-entry processing stages, used to report where an entry failed."""

    READING = "reading"
    EXTRACTING = "extracting"
    CONVERTING = "converting"
    CLEANING = "cleaning"
    COMPOSING = "composing"
    WRITING = "writing"


class StageTracker:
    """Remembers the last stage an entry entered."""

    def __init__(self):
        self.stage = Stage.READING

    def enter(self, stage: Stage) -> None:
        self.stage = stage


def process_note(
    note: RawNote,
    converter: Converter = html_to_markdown,
    progress: Optional[StageTracker] = None,
) -> ProcessedDocument:
    """Turn one raw HTML note into a document ready to write.

    Pure transformation; nothing is read from or written to disk.
    """
    progress = progress or StageTracker()

    progress.enter(Stage.EXTRACTING)
    metadata = extract_metadata(note.html)
    title = sanitize_filename(metadata.title or note_stem(note.path))

    progress.enter(Stage.CONVERTING)
    markdown = converter(note.html)

    progress.enter(Stage.CLEANING)
    markdown = cleanup_markdown(markdown)
    markdown = strip_metadata_lines(markdown)

    progress.enter(Stage.COMPOSING)
    return ProcessedDocument(
        title=title,
        body=markdown,
        created=metadata.created,
        tags=metadata.tags,
    )


def import_archive(
    archive_path: Path,
    vault_path: Path,
    folder: str,
    converter: Converter = html_to_markdown,
    writer: Optional[VaultWriter] = None,
    verbose: bool = False,
) -> ImportResult:
    """Import every note in the archive into ``vault_path / folder``.

    A failing entry is reported and counted, then the import moves on.
    Raises ArchiveError when the archive itself cannot be opened, and
    WriteError when the output folder cannot be created.
    """
    writer = writer or VaultWriter(vault_path)
    result = ImportResult()

    with open_archive(archive_path) as archive:
        entries = archive.note_entries()
        writer.ensure_folder(folder)
        if verbose:
            click.echo(f"  Found {len(entries)} note(s) in archive")

        for i, entry in enumerate(entries):
            progress = StageTracker()
            try:
                note = archive.read(entry)
                document = process_note(note, converter, progress)
                rendered = document.render()

                progress.enter(Stage.WRITING)
                path = writer.write(folder, document.filename, rendered)
            except Exception as e:
                error_msg = f"{entry_name(entry)}: {progress.stage.value}: {e}"
                result.failed += 1
                result.errors.append(error_msg)
                click.echo(f"  Failed to import {error_msg}", err=True)
                continue

            result.imported += 1
            result.written.append(path)
            if verbose:
                click.echo(f"  [{i + 1}/{len(entries)}] Wrote {path}")

    return result
