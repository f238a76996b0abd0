"""Utility functions for getnotes2vault."""

import re
from pathlib import PurePosixPath

MAX_FILENAME_LENGTH = 100


def sanitize_filename(name: str) -> str:
    """Replace characters that are invalid in filenames with '-'."""
    name = re.sub(r'[\\/:*?"<>|]', "-", name)
    if len(name) > MAX_FILENAME_LENGTH:
        name = name[:MAX_FILENAME_LENGTH]
    if not name.strip():
        return "untitled"
    return name


def note_stem(entry_path: str) -> str:
    """Base name of an archive entry with the .html extension removed."""
    return PurePosixPath(entry_path).name.removesuffix(".html")
