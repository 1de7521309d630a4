import os

import pytest

from plz.errors import PathHasNoParent
from plz.utils.names import normalize_for_match, slugify
from plz.utils.paths import normalize_path, parent_directory


def test_parent_directory_of_executable(tmp_path):
    exe = tmp_path / 'Game' / 'game.exe'
    assert parent_directory(str(exe)) == str(tmp_path / 'Game')


def test_parent_directory_of_relative_path(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    assert parent_directory('game.exe') == os.path.normpath(str(tmp_path.resolve()))


def test_filesystem_root_has_no_parent():
    root = os.path.abspath(os.sep)
    with pytest.raises(PathHasNoParent):
        parent_directory(root)


def test_normalize_path_collapses_dots(tmp_path):
    assert normalize_path(str(tmp_path / 'a' / '..' / 'b.exe')) == str(tmp_path / 'b.exe')


@pytest.mark.parametrize("name, expected", [
    ("Hollow Knight", "hollow-knight"),
    ("Hollow Knight: Silksong (2025)", "hollow-knight-silksong"),
    ("Baldur's Gate 3", "baldurs-gate-3"),
    ("  DOOM   Eternal [GOG] ", "doom-eternal"),
    ("???", ""),
])
def test_slugify(name, expected):
    assert slugify(name) == expected


def test_normalize_for_match_strips_tags():
    assert normalize_for_match("GAME.NAME (EU)") == "game name"
