from __future__ import annotations

import logging
from pathlib import Path
from typing import Protocol

logger = logging.getLogger(__name__)


class FailurePolicy(Protocol):
    def handle(self, path: Path, error: BaseException) -> bool:
        """React to a failed rewrite of ``path``; return True if the file was removed."""
        ...


class DeleteOnFailure:
    """
    Remove any archive whose rewrite failed.

    Destructive: a transient I/O error also costs the user the original archive.
    """

    def handle(self, path: Path, error: BaseException) -> bool:
        try:
            path.unlink()
        except FileNotFoundError:
            return False
        except OSError as exc:
            logger.error("Could not remove failed archive %s: %s", path, exc)
            return False
        logger.warning("Removed %s after failed rewrite", path)
        return True


class PreserveOnFailure:
    """Leave failed archives on disk untouched."""

    def handle(self, path: Path, error: BaseException) -> bool:
        logger.debug("Keeping %s after failed rewrite", path)
        return False
