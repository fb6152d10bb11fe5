from __future__ import annotations

import io
import logging
import shutil
import zipfile
import zlib
from pathlib import Path

from .errors import (
    ArchiveFinalizeError,
    ArchiveWriteError,
    CorruptArchiveError,
    EntryCopyError,
    OpenArchiveError,
    PlaceholderMissingError,
)
from .filters import classify_entry
from .models import DEFAULT_PLACEHOLDER_PATH, EntryKind, RewriteResult

_COPY_CHUNK_SIZE = 64 * 1024  # 64 KiB chunks when streaming entry bytes.

# Errors zipfile may surface while decompressing or recompressing a member.
_ENTRY_ERRORS = (
    OSError,
    EOFError,
    RuntimeError,
    NotImplementedError,
    zlib.error,
    zipfile.BadZipFile,
)

logger = logging.getLogger(__name__)


def load_placeholder(path: Path | str = DEFAULT_PLACEHOLDER_PATH) -> bytes:
    """Read the placeholder image once; every rewrite shares the returned bytes."""
    try:
        return Path(path).read_bytes()
    except FileNotFoundError as exc:
        raise PlaceholderMissingError(
            f"Placeholder PNG file not found at {path}", "PLACEHOLDER_MISSING"
        ) from exc
    except OSError as exc:
        raise PlaceholderMissingError(
            f"Could not read placeholder PNG at {path}: {exc}", "PLACEHOLDER_MISSING"
        ) from exc


def rewrite_archive(archive_path: Path | str, placeholder: bytes) -> RewriteResult:
    """
    Rewrite a .zip archive in place.

    Excluded entries are dropped, retained ``.png`` entries receive the
    placeholder bytes and everything else is copied through unchanged. Names,
    timestamps and entry order are preserved. The new archive is assembled in
    memory and only written over the original once it is complete, so any
    failure before the final write leaves the file on disk untouched.
    """
    archive = Path(archive_path)
    result = RewriteResult(path=archive)

    try:
        source = zipfile.ZipFile(archive)
    except (zipfile.BadZipFile, EOFError) as exc:
        raise CorruptArchiveError(
            f"could not read zip file: {exc}", "CORRUPT_ARCHIVE", archive
        ) from exc
    except OSError as exc:
        raise OpenArchiveError(
            f"could not open zip file: {exc}", "OPEN_ERROR", archive
        ) from exc

    buffer = io.BytesIO()
    with source:
        target = zipfile.ZipFile(buffer, mode="w", compression=zipfile.ZIP_DEFLATED)
        try:
            for info in source.infolist():
                _transfer_entry(source, target, info, placeholder, result)
        except BaseException:
            # The half-built archive is discarded with its buffer.
            target.close()
            raise
        try:
            target.close()
        except (OSError, ValueError, RuntimeError, zipfile.LargeZipFile) as exc:
            raise ArchiveFinalizeError(
                f"could not close new zip writer: {exc}", "FINALIZE_ERROR", archive
            ) from exc

    payload = buffer.getvalue()
    try:
        # Truncate-and-write; a crash mid-write can leave a damaged archive.
        archive.write_bytes(payload)
    except OSError as exc:
        raise ArchiveWriteError(
            f"could not overwrite zip file: {exc}", "WRITE_ERROR", archive
        ) from exc

    result.bytes_written = len(payload)
    logger.debug(
        "Rewrote %s: %d kept, %d replaced, %d excluded",
        archive,
        result.kept,
        result.replaced,
        len(result.excluded),
    )
    return result


def _transfer_entry(
    source: zipfile.ZipFile,
    target: zipfile.ZipFile,
    info: zipfile.ZipInfo,
    placeholder: bytes,
    result: RewriteResult,
) -> None:
    kind = classify_entry(info.filename)
    if kind is EntryKind.EXCLUDED:
        logger.info("Excluding file %s", info.filename)
        result.excluded.append(info.filename)
        return

    header = _copy_header(info)
    try:
        if kind is EntryKind.IMAGE:
            target.writestr(header, placeholder)
            result.replaced += 1
            return
        # Sized up front so zipfile picks zip64 headers for large members.
        header.file_size = info.file_size
        with source.open(info) as src, target.open(header, mode="w") as dst:
            shutil.copyfileobj(src, dst, _COPY_CHUNK_SIZE)
        result.kept += 1
    except _ENTRY_ERRORS as exc:
        action = "replace PNG file" if kind is EntryKind.IMAGE else "copy file to new zip"
        raise EntryCopyError(
            f"could not {action} {info.filename}: {exc}",
            "ENTRY_COPY_ERROR",
            result.path,
            info.filename,
        ) from exc


def _copy_header(info: zipfile.ZipInfo) -> zipfile.ZipInfo:
    # Only name and timestamp carry over; every entry is re-deflated.
    header = zipfile.ZipInfo(info.filename, date_time=info.date_time)
    header.compress_type = zipfile.ZIP_DEFLATED
    return header
