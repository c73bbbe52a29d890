"""Tests for copy: destination resolution, rules, nested destinations."""

import os
import sys

import pytest

from filekit import copy, readdir


def files_under(root):
    """Relative paths of every file and empty directory under *root*."""
    return {p.replace(os.sep, "/") for p in readdir(root, recursive=True, rebase=False)}


TREE = {"1.txt", "b", "c/2.txt", "c/d"}


class TestDirectory:
    def test_to_new_path(self, tree):
        copy("a", "out")
        assert files_under("out") == TREE
        assert (tree.parent / "out" / "c" / "2.txt").read_text() == "a_2"

    def test_into_with_trailing_separator(self, tree):
        copy("a", "out/")
        assert files_under("out") == {"a/" + p for p in TREE}

    def test_contents_with_trailing_separator(self, tree):
        copy("a/", "out/")
        assert files_under("out") == TREE

    def test_merges_into_existing(self, tree, workdir):
        (workdir / "out").mkdir()
        (workdir / "out" / "keep.txt").write_text("keep")
        copy("a", "out")
        assert files_under("out") == TREE | {"keep.txt"}

    def test_overwrites_existing_files(self, tree, workdir):
        (workdir / "out").mkdir()
        (workdir / "out" / "1.txt").write_text("old")
        copy("a", "out")
        assert (workdir / "out" / "1.txt").read_text() == "a_1"

    def test_missing_source(self, workdir):
        with pytest.raises(FileNotFoundError):
            copy("nope", "out")


class TestFile:
    def test_to_file(self, tree, workdir):
        copy("a/1.txt", "copy.txt")
        assert (workdir / "copy.txt").read_text() == "a_1"

    def test_into_trailing_separator(self, tree, workdir):
        copy("a/1.txt", "out/")
        assert (workdir / "out" / "1.txt").read_text() == "a_1"

    def test_into_existing_directory(self, tree, workdir):
        copy("a/1.txt", "a/b")
        assert (workdir / "a" / "b" / "1.txt").read_text() == "a_1"

    def test_creates_parents(self, tree, workdir):
        copy("a/1.txt", "x/y/z.txt")
        assert (workdir / "x" / "y" / "z.txt").read_text() == "a_1"


class TestRules:
    def test_filter(self, image_tree):
        copy("a", "out", filter="*.(png|jpg|gif)")
        assert files_under("out") == {"imgs/1.png", "c/imgs/2.jpg", "c/imgs/3.gif"}

    def test_ignore(self, image_tree):
        copy("a", "out", ignore="imgs/")
        assert files_under("out") == TREE

    def test_ignore_and_filter(self, image_tree):
        copy("a", "out", filter="*.(png|jpg|gif)", ignore="/c")
        assert files_under("out") == {"imgs/1.png"}

    def test_ignore_rules_are_source_relative(self, project):
        copy("proj", "out/", ignore=["node_modules/", "/build", "*.map"])
        assert files_under("out/proj") == {
            ".gitignore", ".env", "package.json", "src/index.js",
            "src/util/helpers.js", "src/util/helpers.test.js",
        }

    def test_ignore_callable(self, tree):
        copy("a", "out", ignore=lambda tag: tag == "/c/")
        assert files_under("out") == {"1.txt", "b"}


class TestNested:
    def test_into_own_subdirectory(self, tree, workdir):
        copy("a", "a/backup/")
        assert files_under("a/backup/a") == TREE
        assert not (workdir / "a" / "backup" / "a" / "backup").exists()

    def test_to_own_subdirectory(self, tree, workdir):
        copy("a", "a/backup")
        assert files_under("a/backup") == TREE
        assert not (workdir / "a" / "backup" / "backup").exists()

    def test_nested_with_filter(self, tree):
        copy("a", "a/backup", filter="*.txt")
        assert files_under("a/backup") == {"1.txt", "c/2.txt"}

    def test_nested_with_ignore(self, tree):
        copy("a", "a/backup", ignore="c")
        assert files_under("a/backup") == {"1.txt", "b"}

    def test_onto_itself(self, tree):
        copy("a", "a")
        assert files_under("a") == TREE


@pytest.mark.skipif(sys.platform == "win32", reason="symlinks")
class TestSymlinks:
    def test_link_copied_as_link(self, tree, workdir):
        os.symlink("1.txt", "a/link.txt")
        copy("a", "out")
        link = workdir / "out" / "link.txt"
        assert link.is_symlink()
        assert os.readlink(link) == "1.txt"

    def test_link_copied_as_link_with_filter(self, tree, workdir):
        os.symlink("c", "a/linkdir")
        copy("a", "out", filter=lambda tag: tag in ("/linkdir", "/1.txt"))
        assert (workdir / "out" / "linkdir").is_symlink()
        assert (workdir / "out" / "1.txt").read_text() == "a_1"

    def test_existing_link_replaced(self, tree, workdir):
        os.symlink("1.txt", "a/link.txt")
        copy("a", "out", filter="*.txt")
        copy("a", "out", filter="*.txt")
        assert os.readlink(workdir / "out" / "link.txt") == "1.txt"
