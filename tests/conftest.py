"""Shared fixtures for filekit tests."""

import pytest
from click.testing import CliRunner


@pytest.fixture
def workdir(tmp_path, monkeypatch):
    """Run the test inside *tmp_path* so relative paths stay short."""
    monkeypatch.chdir(tmp_path)
    return tmp_path


@pytest.fixture
def tree(workdir):
    """A small tree under ./a.

    Tree:
        a/1.txt
        a/b/            (empty)
        a/c/2.txt
        a/c/d/          (empty)
    """
    root = workdir / "a"
    (root / "b").mkdir(parents=True)
    (root / "c" / "d").mkdir(parents=True)
    (root / "1.txt").write_text("a_1")
    (root / "c" / "2.txt").write_text("a_2")
    return root


@pytest.fixture
def image_tree(tree):
    """``tree`` plus images at two depths.

    Adds: a/imgs/1.png, a/c/imgs/2.jpg, a/c/imgs/3.gif
    """
    (tree / "imgs").mkdir()
    (tree / "imgs" / "1.png").write_text("png")
    (tree / "c" / "imgs").mkdir()
    (tree / "c" / "imgs" / "2.jpg").write_text("jpg")
    (tree / "c" / "imgs" / "3.gif").write_text("gif")
    return tree


@pytest.fixture
def project(workdir):
    """A project-like tree with a dependency folder and dotfiles.

    Tree:
        proj/.gitignore
        proj/.env
        proj/package.json
        proj/src/index.js
        proj/src/util/helpers.js
        proj/src/util/helpers.test.js
        proj/node_modules/lib/index.js
        proj/build/out.js
        proj/build/out.js.map
    """
    root = workdir / "proj"
    files = {
        ".gitignore": "node_modules/\n/build\n*.map\n",
        ".env": "SECRET=1",
        "package.json": "{}",
        "src/index.js": "index",
        "src/util/helpers.js": "helpers",
        "src/util/helpers.test.js": "test",
        "node_modules/lib/index.js": "lib",
        "build/out.js": "out",
        "build/out.js.map": "map",
    }
    for rel, content in files.items():
        p = root / rel
        p.parent.mkdir(parents=True, exist_ok=True)
        p.write_text(content)
    return root


@pytest.fixture
def runner():
    return CliRunner()
