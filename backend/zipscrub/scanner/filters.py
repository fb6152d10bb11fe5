from __future__ import annotations

from .models import EntryKind

_EXCLUDED_MARKER = "img-source"

_EXCLUDED_EXTENSIONS = {
    ".lua",
    ".psd",
    ".xcf",
    ".blend",
    ".jpg",
}

_EXCLUDED_BASENAMES = {
    "LICENSE",
    "README.md",
    "script.dat",
    "banner.png",
    "preview.png",
    "preview.jpg",
}

IMAGE_EXTENSION = ".png"
ARCHIVE_EXTENSION = ".zip"


def entry_basename(name: str) -> str:
    # Last "/" segment; trailing slashes of directory entries are ignored.
    stripped = name.rstrip("/")
    if not stripped:
        return "/" if name else ""
    return stripped.rsplit("/", 1)[-1]


def entry_extension(name: str) -> str:
    """Suffix of the final path segment from its last dot, exactly as written.

    Unlike ``PurePath.suffix`` a leading-dot name counts, so ``".lua"`` has
    the extension ``".lua"``. No case folding is applied.
    """
    segment = name.rsplit("/", 1)[-1]
    index = segment.rfind(".")
    if index < 0:
        return ""
    return segment[index:]


def should_exclude(name: str) -> bool:
    if _EXCLUDED_MARKER in name:
        return True
    if entry_extension(name) in _EXCLUDED_EXTENSIONS:
        return True
    return entry_basename(name) in _EXCLUDED_BASENAMES


def classify_entry(name: str) -> EntryKind:
    if should_exclude(name):
        return EntryKind.EXCLUDED
    if entry_extension(name) == IMAGE_EXTENSION:
        return EntryKind.IMAGE
    return EntryKind.PASS_THROUGH


def is_archive_name(name: str) -> bool:
    return entry_extension(name) == ARCHIVE_EXTENSION
