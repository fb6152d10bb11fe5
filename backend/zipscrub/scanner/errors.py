from __future__ import annotations

from pathlib import Path


class ScrubError(Exception):
    def __init__(self, message: str, code: str) -> None:
        super().__init__(message)
        self.code = code


class PlaceholderMissingError(ScrubError):
    pass


class RewriteError(ScrubError):
    """Failure while rewriting a single archive; ``path`` names the archive."""

    def __init__(self, message: str, code: str, path: Path | str) -> None:
        super().__init__(message, code)
        self.path = Path(path)


class OpenArchiveError(RewriteError):
    pass


class CorruptArchiveError(RewriteError):
    pass


class EntryCopyError(RewriteError):
    def __init__(self, message: str, code: str, path: Path | str, entry: str) -> None:
        super().__init__(message, code, path)
        self.entry = entry


class ArchiveFinalizeError(RewriteError):
    pass


class ArchiveWriteError(RewriteError):
    pass
