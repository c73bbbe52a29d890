"""Blocking filesystem helpers.

Every function here has an ``async`` twin of the same name in
:mod:`filekit.aio`.
"""

from __future__ import annotations

import re

from . import _ops
from ._exclude import gitignore_rule_steps, parse_gitignore_steps
from ._io import run_blocking
from ._ops import DEFAULT_ENCODING, is_path
from ._rules import Rule, RuleSet
from ._types import Entry

__all__ = [
    "save", "read", "mkdir", "remove", "copy",
    "readdir", "list_directory", "search",
    "is_directory", "is_file", "is_symlink", "is_path",
    "parse_gitignore", "gitignore_rule",
]


def save(path: str, data: str | bytes, encoding: str = DEFAULT_ENCODING) -> None:
    """Write *data* to *path*, creating parent directories as needed.

    ``str`` data is encoded with *encoding*; ``bytes`` are written verbatim.
    """
    run_blocking(_ops.save(path, data, encoding))


def read(path: str, encoding: str | None = DEFAULT_ENCODING) -> str | bytes:
    """Return the contents of *path*; pass ``encoding=None`` for bytes."""
    return run_blocking(_ops.read(path, encoding))


def mkdir(path: str, mode: int = 0o777) -> None:
    """Create *path* and any missing parents.  Existing paths are fine."""
    run_blocking(_ops.mkdir(path, mode))


def remove(path: str) -> None:
    """Delete a file, symlink or directory tree.  Missing paths are fine."""
    run_blocking(_ops.remove(path))


def copy(source: str, dest: str, *, filter: Rule = None, ignore: Rule = None) -> None:
    """Copy a file or directory tree.

    ``copy("a", "b")`` copies ``a`` *to* ``b``; ``copy("a", "b/")`` copies it
    *into* ``b`` as ``b/a``; ``copy("a/", "b")`` copies the contents of
    ``a``.  The destination may lie inside the source
    (``copy("a", "a/backup/")``).

    *filter* and *ignore* take the same rules as :func:`readdir`, evaluated
    against paths relative to *source*.
    """
    run_blocking(_ops.copy(source, dest, filter=filter, ignore=ignore))


def readdir(
    path: str,
    *,
    recursive: bool = False,
    as_entries: bool = False,
    absolute: bool = False,
    only_leaf: bool = True,
    rebase: bool | str | None = True,
    filter: Rule = None,
    ignore: Rule = None,
) -> list[str] | list[Entry]:
    """List *path*, optionally recursively and through filter/ignore rules.

    Args:
        path: Directory to list.  A file (or symlink) yields a one-element
            list describing itself.
        recursive: Descend into subdirectories (symlinks are never followed).
        as_entries: Return :class:`~filekit.Entry` objects instead of paths.
        absolute: Report absolute paths.
        only_leaf: Drop directories that had entries beneath them, keeping
            only files and empty directories.
        rebase: ``True`` reports paths under *path*, ``False`` relative to
            it, and a string reports them under that prefix (e.g. ``"/"``).
        filter: Keep only entries matching these rules.
        ignore: Skip entries matching these rules, without descending into
            ignored directories.

    Rules are gitignore-style strings (``"*.js"``, ``"node_modules/"``,
    ``"/build"``, ``"src/**/test"``), compiled ``re.Pattern`` objects, a
    list of those, or a callable.  Each is matched against the entry's path
    relative to *path*, always starting with ``/`` and ending with ``/`` for
    directories, e.g. ``"/src/app.js"`` or ``"/node_modules/"``.

    Listing order follows the filesystem and is not sorted.  Each directory's
    contents follow the directory's own position.
    """
    return run_blocking(_ops.readdir(
        path, recursive=recursive, as_entries=as_entries, absolute=absolute,
        only_leaf=only_leaf, rebase=rebase, filter=filter, ignore=ignore,
    ))


list_directory = readdir


def search(
    directory: str,
    match: str,
    *,
    recursive: bool = False,
    as_entries: bool = False,
    absolute: bool = False,
    only_leaf: bool = True,
    ignore: Rule = None,
) -> list[str] | list[Entry]:
    """List files under *directory* with extension *match* (``"js"`` or ``".js"``).

    Returns ``[]`` when *directory* is not a directory.
    """
    return run_blocking(_ops.search(
        directory, match, recursive=recursive, as_entries=as_entries,
        absolute=absolute, only_leaf=only_leaf, ignore=ignore,
    ))


def is_directory(path: str, follow_symlinks: bool = True) -> bool:
    """True if *path* is a directory.  With ``follow_symlinks=False`` a
    symlink to a directory is not one.  Never raises."""
    return run_blocking(_ops.is_directory(path, follow_symlinks))


def is_file(path: str, follow_symlinks: bool = True) -> bool:
    """True if *path* is a regular file.  Never raises."""
    return run_blocking(_ops.is_file(path, follow_symlinks))


def is_symlink(path: str) -> bool:
    """True if *path* is a symbolic link.  Never raises."""
    return run_blocking(_ops.is_symlink(path))


def parse_gitignore(path: str, as_matcher: bool = False) -> list[str] | list[re.Pattern[str]]:
    """Read the rules of a ``.gitignore``-style file.

    Blank lines and lines starting with ``#`` or ``:`` are skipped.  With
    *as_matcher* the rules are returned compiled.  Negation (``!``) is not
    interpreted; use :func:`gitignore_rule` for full git semantics.
    """
    return run_blocking(parse_gitignore_steps(path, as_matcher))


def gitignore_rule(path: str, *, ignorecase: bool = False) -> RuleSet:
    """Load a ``.gitignore`` file as a rule set with full git semantics.

    The result can be passed as ``ignore`` (or ``filter``) to
    :func:`readdir`, :func:`search` and :func:`copy`.
    """
    return run_blocking(gitignore_rule_steps(path, ignorecase=ignorecase))
