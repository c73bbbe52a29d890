"""Public operations, written once as I/O steps.

:mod:`filekit.file` runs these with :func:`~filekit._io.run_blocking` and
:mod:`filekit.aio` with :func:`~filekit._io.run_suspending`.
"""

from __future__ import annotations

import os
import re
import sys

from . import _io
from ._copy import copy_steps
from ._io import Steps, call
from ._rules import Rule, parse_rules
from ._types import Entry, TraversalOptions
from ._walk import search as _search
from ._walk import walk

DEFAULT_ENCODING = "utf-8"


# ---------------------------------------------------------------------------
# Read / write
# ---------------------------------------------------------------------------

def save(path: str, data: str | bytes, encoding: str = DEFAULT_ENCODING) -> Steps[None]:
    parent = os.path.dirname(path)
    if parent:
        yield call(_io.ensure_dir, parent)
    yield call(_io.write_file, path, data, encoding)


def read(path: str, encoding: str | None = DEFAULT_ENCODING) -> Steps[str | bytes]:
    return (yield call(_io.read_file, path, encoding))


def mkdir(path: str, mode: int = 0o777) -> Steps[None]:
    yield call(_io.ensure_dir, path, mode)


def remove(path: str) -> Steps[None]:
    yield call(_io.remove_tree, path)


# ---------------------------------------------------------------------------
# Classification
# ---------------------------------------------------------------------------

def is_directory(path: str, follow_symlinks: bool = True) -> Steps[bool]:
    return (yield call(_io.is_directory, path, follow_symlinks))


def is_file(path: str, follow_symlinks: bool = True) -> Steps[bool]:
    return (yield call(_io.is_file, path, follow_symlinks))


def is_symlink(path: str) -> Steps[bool]:
    return (yield call(_io.is_symlink, path))


_POSIX_PATH = (
    re.compile(r"^(\.{1,2}/)?[^:]+$"),
    re.compile(r"^/[^:]+$"),
)
_WINDOWS_PATH = (
    re.compile(r'^(\.{1,2}[/\\])?[^:/*?|"<>]+$'),
    re.compile(r'^[a-zA-Z]:\\[^,:;/*?|!\'"<>\[\]{}\t\r\n]*$'),
)


def is_path(text: str) -> bool:
    """Heuristic: does *text* look like a local filesystem path?

    URLs (``http://...``, ``file://...``) and empty strings do not.
    """
    text = text.strip()
    patterns = _WINDOWS_PATH if sys.platform == "win32" else _POSIX_PATH
    return any(p.match(text) for p in patterns)


# ---------------------------------------------------------------------------
# Listing
# ---------------------------------------------------------------------------

def _options(
    recursive: bool, only_leaf: bool, absolute: bool,
    rebase: bool | str | None, filter: Rule, ignore: Rule,
) -> TraversalOptions:
    return TraversalOptions(
        recursive=recursive,
        only_leaf=only_leaf,
        absolute=absolute,
        rebase=rebase,
        filter=parse_rules(filter),
        ignore=parse_rules(ignore),
    )


def _project(entries: list[Entry], as_entries: bool) -> list[Entry] | list[str]:
    if as_entries:
        return entries
    return [e.path for e in entries]


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
) -> Steps[list[Entry] | list[str]]:
    options = _options(recursive, only_leaf, absolute, rebase, filter, ignore)
    entries = yield from walk(path, options)
    return _project(entries, as_entries)


def search(
    directory: str,
    match: str,
    *,
    recursive: bool = False,
    as_entries: bool = False,
    absolute: bool = False,
    only_leaf: bool = True,
    ignore: Rule = None,
) -> Steps[list[Entry] | list[str]]:
    options = _options(recursive, only_leaf, absolute, True, None, ignore)
    entries = yield from _search(directory, match, options)
    return _project(entries, as_entries)


# ---------------------------------------------------------------------------
# Copy
# ---------------------------------------------------------------------------

def copy(source: str, dest: str, *, filter: Rule = None, ignore: Rule = None) -> Steps[None]:
    yield from copy_steps(
        source, dest, filter=parse_rules(filter), ignore=parse_rules(ignore),
    )
