"""Tests for the asyncio API: same results as the blocking one."""

import asyncio
import os

import pytest

from filekit import aio, readdir

IMAGES = {"a/imgs/1.png", "a/c/imgs/2.jpg", "a/c/imgs/3.gif"}


def run(coro):
    return asyncio.run(coro)


def norm(paths):
    return {p.replace(os.sep, "/") for p in paths}


class TestFiles:
    def test_save_read(self, workdir):
        run(aio.save("x/y.txt", "hello"))
        assert run(aio.read("x/y.txt")) == "hello"
        assert run(aio.read("x/y.txt", encoding=None)) == b"hello"

    def test_mkdir_remove(self, workdir):
        run(aio.mkdir("p/q"))
        run(aio.mkdir("p/q"))
        assert run(aio.is_directory("p/q"))
        run(aio.remove("p"))
        run(aio.remove("p"))
        assert not run(aio.is_directory("p"))

    def test_read_missing(self, workdir):
        with pytest.raises(FileNotFoundError):
            run(aio.read("missing"))

    def test_classification(self, tree):
        assert run(aio.is_file("a/1.txt"))
        assert not run(aio.is_file("a"))
        assert not run(aio.is_symlink("a"))
        assert aio.is_path("./a")


class TestListing:
    def test_matches_blocking(self, image_tree):
        kwargs = dict(recursive=True, only_leaf=False, rebase="/")
        assert run(aio.readdir("a", **kwargs)) == readdir("a", **kwargs)

    def test_alias(self, tree):
        assert run(aio.list_directory("a")) == readdir("a")

    def test_filter(self, image_tree):
        result = run(aio.readdir("a", recursive=True, filter="*.(png|jpg|gif)"))
        assert norm(result) == IMAGES

    def test_missing_root(self, workdir):
        with pytest.raises(FileNotFoundError):
            run(aio.readdir("missing"))

    def test_search(self, tree):
        assert norm(run(aio.search("a", "txt", recursive=True))) == {"a/1.txt", "a/c/2.txt"}
        assert run(aio.search("missing", "txt")) == []

    def test_concurrent_calls_do_not_share_results(self, image_tree, workdir):
        (workdir / "other").mkdir()
        (workdir / "other" / "x.png").write_text("x")

        async def both():
            return await asyncio.gather(
                aio.readdir("a", recursive=True, filter="*.png"),
                aio.readdir("other", recursive=True, filter="*.png"),
            )

        first, second = run(both())
        assert norm(first) == {"a/imgs/1.png"}
        assert norm(second) == {"other/x.png"}


class TestCopy:
    def test_copy_tree(self, tree, workdir):
        run(aio.copy("a", "out/"))
        assert (workdir / "out" / "a" / "c" / "2.txt").read_text() == "a_2"

    def test_copy_nested_with_filter(self, image_tree):
        run(aio.copy("a", "a/backup", filter="*.png"))
        assert norm(readdir("a/backup", recursive=True)) == {"a/backup/imgs/1.png"}


class TestGitignore:
    def test_parse(self, project):
        rules = run(aio.parse_gitignore("proj/.gitignore"))
        assert rules == ["node_modules/", "/build", "*.map"]

    def test_rule(self, project):
        rules = run(aio.gitignore_rule("proj/.gitignore"))
        assert rules.matches("/node_modules/")
        assert not rules.matches("/src/")
