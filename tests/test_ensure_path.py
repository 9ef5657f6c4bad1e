"""Tests for collision-free path allocation."""

import asyncio
import os

import pytest

import sitefs
from sitefs._unused import find_unused_path, split_name


def run(aw):
    return asyncio.run(_await(aw))


async def _await(aw):
    return await aw


@pytest.fixture
def crowded(tmp_path):
    target = tmp_path / "test"
    for name in ("foo.txt", "foo-1.txt", "foo-2.md", "bar.txt"):
        sitefs.write_file_sync(str(target / name))
    return target


class TestFindUnusedPath:
    def test_extension_must_match(self):
        siblings = ["foo.txt", "foo-1.txt", "foo-2.md", "bar.txt"]
        assert find_unused_path(os.path.join("d", "foo.txt"), siblings) == os.path.join("d", "foo-2.txt")

    def test_first_collision_is_one(self):
        assert find_unused_path("foo.txt", ["foo.txt"]) == "foo-1.txt"

    def test_highest_number_wins(self):
        assert find_unused_path("foo.txt", ["foo.txt", "foo-7.txt", "foo-3.txt"]) == "foo-8.txt"

    def test_gaps_are_not_filled(self):
        assert find_unused_path("foo.txt", ["foo.txt", "foo-5.txt"]) == "foo-6.txt"

    def test_unrelated_names_ignored(self):
        siblings = ["foo.txt", "foobar-9.txt", "foo-x.txt", "foo-1.txt.bak", "xfoo-4.txt"]
        assert find_unused_path("foo.txt", siblings) == "foo-1.txt"

    def test_no_extension(self):
        assert find_unused_path("README", ["README", "README-1"]) == "README-2"

    def test_regex_characters_escaped(self):
        assert find_unused_path("a+b(1).txt", ["a+b(1).txt", "aab(1).txt"]) == "a+b(1)-1.txt"

    def test_dotfile(self):
        assert split_name(".bashrc") == (".bashrc", "")
        assert find_unused_path(".bashrc", [".bashrc"]) == ".bashrc-1"

    def test_multi_dot_name(self):
        assert split_name("archive.tar.gz") == ("archive.tar", ".gz")
        assert find_unused_path("archive.tar.gz", ["archive.tar.gz"]) == "archive.tar-1.gz"


class TestEnsurePath:
    def test_file_exists(self, crowded):
        result = run(sitefs.ensure_path(str(crowded / "foo.txt")))
        assert result == str(crowded / "foo-2.txt")

    def test_file_exists_sync(self, crowded):
        assert sitefs.ensure_path_sync(str(crowded / "foo.txt")) == str(crowded / "foo-2.txt")

    def test_file_not_exist(self, tmp_path):
        target = str(tmp_path / "foo.txt")
        assert run(sitefs.ensure_path(target)) == target
        assert sitefs.ensure_path_sync(target) == target

    def test_other_extension_free(self, crowded):
        target = str(crowded / "foo.md")
        assert sitefs.ensure_path_sync(target) == target

    def test_result_is_unused(self, crowded):
        result = sitefs.ensure_path_sync(str(crowded / "bar.txt"))
        assert result == str(crowded / "bar-1.txt")
        assert not os.path.exists(result)
