from __future__ import annotations

import pytest

from zipscrub.scanner.filters import (
    classify_entry,
    entry_basename,
    entry_extension,
    is_archive_name,
    should_exclude,
)
from zipscrub.scanner.models import EntryKind


@pytest.mark.parametrize(
    "name",
    [
        "img-source/hero.png",
        "assets/img-source/notes.txt",
        "textures/wall-img-source.dds",
        "img-source",
    ],
)
def test_should_exclude_img_source_marker_anywhere(name: str):
    assert should_exclude(name) is True


@pytest.mark.parametrize(
    "name",
    ["scripts/init.lua", "art/layers.psd", "art/layers.xcf", "models/ship.blend", "photos/cover.jpg", ".lua"],
)
def test_should_exclude_blocked_extensions(name: str):
    assert should_exclude(name) is True


@pytest.mark.parametrize(
    "name",
    [
        "LICENSE",
        "docs/README.md",
        "data/script.dat",
        "banner.png",
        "mod/preview.png",
        "mod/preview.jpg",
    ],
)
def test_should_exclude_blocked_basenames(name: str):
    assert should_exclude(name) is True


@pytest.mark.parametrize(
    "name",
    [
        "sprites/player.png",
        "data/config.json",
        "photos/cover.JPG",
        "scripts/init.LUA",
        "license",
        "docs/readme.md",
        "LICENSE.txt",
        "README.md.bak",
        "img_source/hero.png",
        "textures/",
        "",
    ],
)
def test_should_exclude_keeps_everything_else(name: str):
    assert should_exclude(name) is False


def test_entry_extension_follows_last_dot_of_final_segment():
    assert entry_extension("a/b/archive.tar.png") == ".png"
    assert entry_extension("dir.d/file") == ""
    assert entry_extension("dir.d/") == ""
    assert entry_extension(".lua") == ".lua"
    assert entry_extension("noext") == ""


def test_entry_basename_ignores_trailing_slash():
    assert entry_basename("docs/README.md") == "README.md"
    assert entry_basename("assets/icons/") == "icons"
    assert entry_basename("LICENSE") == "LICENSE"


def test_classify_entry():
    assert classify_entry("sprites/player.png") is EntryKind.IMAGE
    assert classify_entry("banner.png") is EntryKind.EXCLUDED
    assert classify_entry("img-source/player.png") is EntryKind.EXCLUDED
    assert classify_entry("sprites/player.PNG") is EntryKind.PASS_THROUGH
    assert classify_entry("data/level.json") is EntryKind.PASS_THROUGH


def test_is_archive_name_is_case_sensitive():
    assert is_archive_name("mod.zip") is True
    assert is_archive_name("mod.ZIP") is False
    assert is_archive_name("mod.zip.bak") is False
