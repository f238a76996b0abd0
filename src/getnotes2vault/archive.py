"""Reading notes out of a Get笔记 export archive."""

import zipfile
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator

from .exceptions import ArchiveError
from .models import RawNote

NOTES_PREFIX = "notes/"
NOTES_SUFFIX = ".html"

_UTF8_FLAG = 0x800


def entry_name(info: zipfile.ZipInfo) -> str:
    """Entry name, recovering UTF-8 names stored without the UTF-8 flag."""
    if info.flag_bits & _UTF8_FLAG:
        return info.filename
    try:
        return info.filename.encode("cp437").decode("utf-8")
    except (UnicodeEncodeError, UnicodeDecodeError):
        return info.filename


class NoteArchive:
    """Qualifying note entries of an open export archive."""

    def __init__(self, zf: zipfile.ZipFile):
        self._zf = zf

    def note_entries(self) -> list[zipfile.ZipInfo]:
        """HTML files under notes/, in archive order, without directory entries."""
        return [
            info
            for info in self._zf.infolist()
            if not info.is_dir()
            and entry_name(info).startswith(NOTES_PREFIX)
            and entry_name(info).endswith(NOTES_SUFFIX)
        ]

    def read(self, info: zipfile.ZipInfo) -> RawNote:
        html = self._zf.read(info).decode("utf-8", errors="replace")
        return RawNote(path=entry_name(info), html=html)


@contextmanager
def open_archive(path: Path) -> Iterator[NoteArchive]:
    """Open an export archive, raising ArchiveError if it is missing or not a zip."""
    try:
        zf = zipfile.ZipFile(path)
    except FileNotFoundError as e:
        raise ArchiveError(f"Archive not found: {path}") from e
    except (zipfile.BadZipFile, OSError) as e:
        raise ArchiveError(f"Could not open archive {path}: {e}") from e

    with zf:
        yield NoteArchive(zf)
