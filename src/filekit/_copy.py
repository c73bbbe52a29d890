"""Copy a file or directory tree, honoring filter and ignore rules."""

from __future__ import annotations

import logging
import os
from typing import Callable

from ._io import (
    Steps,
    call,
    copy_file,
    copy_tree,
    ensure_dir,
    is_directory,
    is_symlink,
    stat_kind,
)
from ._rules import RuleSet
from ._types import FileKind, TraversalOptions
from ._walk import walk

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Destination resolution
# ---------------------------------------------------------------------------

def _ends_with_sep(path: str) -> bool:
    return path.endswith(os.sep) or bool(os.altsep and path.endswith(os.altsep))


def _inside(path: str, parent: str) -> bool:
    """True if *path* is *parent* or lies underneath it."""
    try:
        rel = os.path.relpath(os.path.abspath(path), os.path.abspath(parent))
    except ValueError:
        # Different drives on Windows.
        return False
    return rel != os.pardir and not rel.startswith(os.pardir + os.sep)


def _tag_of(path: str, root: str) -> str:
    """Directory tag of *path* relative to the traversal *root*."""
    rel = os.path.relpath(os.path.abspath(path), os.path.abspath(root))
    if rel == os.curdir:
        return "/"
    return "/" + rel.replace(os.sep, "/") + "/"


# ---------------------------------------------------------------------------
# Rule adaptation
# ---------------------------------------------------------------------------

def _prune_subtree(rules: RuleSet | None, tag_prefix: str) -> RuleSet:
    """Extend ignore *rules* so nothing under *tag_prefix* is visited."""
    def _ignored(tag: str) -> bool:
        if tag.startswith(tag_prefix):
            return True
        return rules is not None and rules.matches(tag)
    return RuleSet(callback=_ignored)


def _copytree_ignore(
    source: str, rules: RuleSet,
) -> Callable[[str, list[str]], set[str]]:
    """Translate ignore *rules* into a ``shutil.copytree`` ignore callable."""
    def _ignored(directory: str, names: list[str]) -> set[str]:
        base = _tag_of(directory, source)
        skipped = set()
        for name in names:
            tag = base + name
            full = os.path.join(directory, name)
            if is_directory(full) and not is_symlink(full):
                tag += "/"
            if rules.matches(tag):
                skipped.add(name)
        return skipped
    return _ignored


# ---------------------------------------------------------------------------
# Copy
# ---------------------------------------------------------------------------

def copy_steps(
    source: str,
    dest: str,
    *,
    filter: RuleSet | None = None,
    ignore: RuleSet | None = None,
) -> Steps[None]:
    """Copy *source* to *dest*.

    A trailing separator on *dest* (and, for files, an existing directory at
    *dest*) means "copy into": the source's base name is appended.  A
    trailing separator on a directory *source* copies its contents.

    A destination inside the source tree is supported: the whole listing is
    taken before anything is written and the destination subtree is never
    visited.
    """
    source_kind = yield call(stat_kind, source, True)
    if source_kind is None:
        raise FileNotFoundError(f"Path not found: {source}")

    if source_kind is FileKind.DIRECTORY:
        if _ends_with_sep(dest) and not _ends_with_sep(source):
            dest = os.path.join(dest, os.path.basename(source))
    else:
        dest_is_dir = yield call(is_directory, dest)
        if _ends_with_sep(dest) or dest_is_dir:
            dest = os.path.join(dest, os.path.basename(source))
        logger.debug(f"Copying file {source} -> {dest}")
        yield call(ensure_dir, os.path.dirname(dest) or os.curdir)
        yield call(copy_file, source, dest)
        return

    nested = _inside(dest, source)
    if not nested and filter is None:
        logger.debug(f"Copying tree {source} -> {dest}")
        yield call(copy_tree, source, dest,
                   _copytree_ignore(source, ignore) if ignore is not None else None)
        return

    if nested:
        ignore = _prune_subtree(ignore, _tag_of(dest, source))
    options = TraversalOptions(
        recursive=True, only_leaf=True, rebase=False, filter=filter, ignore=ignore,
    )
    entries = yield from walk(source, options)
    logger.debug(f"Copying {len(entries)} entries {source} -> {dest}")
    yield call(ensure_dir, dest)
    for entry in entries:
        target = os.path.join(dest, entry.path)
        if entry.kind is FileKind.DIRECTORY:
            yield call(ensure_dir, target)
        else:
            yield call(ensure_dir, os.path.dirname(target))
            yield call(copy_file, entry.physical, target)
