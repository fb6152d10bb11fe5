"""
Pytest configuration and fixtures
"""
from __future__ import annotations

import io
import sys
import zipfile
from pathlib import Path
from typing import Iterable, Tuple

import pytest
from PIL import Image


# Define paths
PROJECT_ROOT = Path(__file__).resolve().parent.parent
BACKEND_ROOT = PROJECT_ROOT / "backend"

# Make the zipscrub package importable without an install
if str(BACKEND_ROOT) not in sys.path:
    sys.path.insert(0, str(BACKEND_ROOT))


ENTRY_TIME = (2021, 6, 15, 12, 30, 0)


def _write_zip(path: Path, entries: Iterable[Tuple[str, bytes]]) -> Path:
    """Write ``entries`` to a stored (uncompressed) zip with a fixed timestamp."""
    path.parent.mkdir(parents=True, exist_ok=True)
    with zipfile.ZipFile(path, "w", compression=zipfile.ZIP_STORED) as zf:
        for name, data in entries:
            zf.writestr(zipfile.ZipInfo(name, date_time=ENTRY_TIME), data)
    return path


def _read_zip(path: Path) -> list[tuple[str, tuple[int, ...], bytes]]:
    with zipfile.ZipFile(path) as zf:
        return [(info.filename, info.date_time, zf.read(info)) for info in zf.infolist()]


def _png_bytes(size: tuple[int, int], color: tuple[int, int, int]) -> bytes:
    buffer = io.BytesIO()
    Image.new("RGB", size, color=color).save(buffer, format="PNG")
    return buffer.getvalue()


@pytest.fixture
def placeholder_bytes() -> bytes:
    return _png_bytes((1, 1), (255, 0, 255))


@pytest.fixture
def original_png() -> bytes:
    return _png_bytes((64, 32), (123, 45, 67))


@pytest.fixture
def placeholder_file(tmp_path: Path, placeholder_bytes: bytes) -> Path:
    path = tmp_path / "placeholder.png"
    path.write_bytes(placeholder_bytes)
    return path


@pytest.fixture
def make_zip():
    return _write_zip


@pytest.fixture
def zip_contents():
    return _read_zip
