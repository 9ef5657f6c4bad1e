"""Shared fixtures for sitefs tests."""

from os.path import join

import pytest
from click.testing import CliRunner


# Canonical dummy tree: hidden folder, hidden file, visible files, and a
# visible folder holding one hidden file.
DUMMY_FILES = {
    join(".hidden", "a.txt"): "a",
    join(".hidden", "b.js"): "b",
    join(".hidden", "c", "d"): "d",
    "e.txt": "e",
    "f.js": "f",
    ".g": "g",
    join("folder", "h.txt"): "h",
    join("folder", "i.js"): "i",
    join("folder", ".j"): "j",
}

VISIBLE_FILES = {"e.txt", "f.js", join("folder", "h.txt"), join("folder", "i.js")}


def _write_tree(root, files):
    for rel, body in files.items():
        p = root / rel
        p.parent.mkdir(parents=True, exist_ok=True)
        p.write_text(body)
    return root


@pytest.fixture
def dummy_files():
    return dict(DUMMY_FILES)


@pytest.fixture
def visible_files():
    return set(VISIBLE_FILES)


@pytest.fixture
def dummy_tree(tmp_path):
    """The canonical dummy tree under ``tmp_path / "tree"``."""
    return _write_tree(tmp_path / "tree", DUMMY_FILES)


@pytest.fixture
def hidden_only_tree(tmp_path):
    """A tree whose only folder holds nothing but hidden files."""
    return _write_tree(tmp_path / "tree", {
        join("folder", ".txt"): "txt",
        join("folder", ".js"): "js",
    })


@pytest.fixture
def runner():
    return CliRunner()
