"""Custom exceptions for getnotes2vault."""


class GetNotesError(Exception):
    """Base exception for getnotes2vault."""


class ConfigError(GetNotesError):
    """Raised when configuration is missing or invalid."""


class ArchiveError(GetNotesError):
    """Raised when the export archive cannot be opened or read."""


class WriteError(GetNotesError):
    """Raised when a note cannot be written to the vault."""
