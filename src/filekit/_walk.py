"""Directory traversal with filter / ignore rules, rebasing and pruning."""

from __future__ import annotations

import logging
import os
from dataclasses import replace

from ._io import Steps, call, is_directory, list_entries, stat_kind
from ._rules import RuleSet, parse_rules
from ._types import Entry, FileKind, TraversalOptions

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Reported paths
# ---------------------------------------------------------------------------

def _root_prefix(path: str, rebase: bool | str | None) -> str:
    """Prefix that children of the listed root are reported under."""
    if rebase is True:
        return path
    if not rebase:
        return ""
    return str(rebase)


def _report(prefix: str, name: str, physical: str, absolute: bool) -> str:
    if absolute:
        return os.path.abspath(physical)
    return os.path.join(prefix, name) if prefix else name


def _single_entry(path: str, kind: FileKind, options: TraversalOptions) -> Entry:
    """Entry for a listed root that is not a directory."""
    name = os.path.basename(path)
    if options.absolute:
        reported = os.path.abspath(path)
    elif options.rebase is True:
        reported = path
    elif options.rebase:
        reported = os.path.join(str(options.rebase), name)
    else:
        reported = name
    return Entry(name=name, path=reported, physical=path, kind=kind, tag="/" + name)


# ---------------------------------------------------------------------------
# Walking
# ---------------------------------------------------------------------------

def _walk_dir(
    directory: str, prefix: str, tag_base: str, options: TraversalOptions,
) -> Steps[list[Entry]]:
    """List *directory*, recursing depth-first when ``options.recursive``.

    Each child is followed immediately by its own expansion.  Ignored
    children are dropped before they are listed; with ``only_leaf`` a
    directory that produced entries is replaced by them.  A subdirectory
    that disappears before it can be listed is dropped.
    """
    children = yield call(list_entries, directory)
    ignore = options.ignore
    result: list[Entry] = []
    for name, kind in children:
        physical = os.path.join(directory, name)
        tag = tag_base + name
        if kind is FileKind.DIRECTORY:
            tag += "/"
        if ignore is not None and ignore.matches(tag):
            logger.debug(f"Ignoring {tag}")
            continue

        relative = os.path.join(prefix, name) if prefix else name
        entry = Entry(
            name=name,
            path=_report(prefix, name, physical, options.absolute),
            physical=physical,
            kind=kind,
            tag=tag,
        )
        expansion: list[Entry] = []
        if options.recursive and kind is FileKind.DIRECTORY:
            try:
                expansion = yield from _walk_dir(physical, relative, tag, options)
            except (FileNotFoundError, NotADirectoryError):
                logger.debug(f"Skipping vanished directory: {physical}")
                continue
        if not (options.only_leaf and expansion):
            result.append(entry)
        result.extend(expansion)
    return result


def walk(path: str, options: TraversalOptions) -> Steps[list[Entry]]:
    """Enumerate *path* according to *options*.

    A *path* that is not a directory yields a single entry for itself.  When
    ``options.filter`` is set the result holds only the entries whose tag
    matches it, in traversal order; the collection is local to this call.
    A filter that matches nothing gives an empty list, never the unfiltered
    listing.
    """
    root_kind = yield call(stat_kind, path, True)
    if root_kind is not FileKind.DIRECTORY:
        kind = yield call(stat_kind, path, False)
        if kind is None:
            raise FileNotFoundError(f"Path not found: {path}")
        return [_single_entry(path, kind, options)]

    entries = yield from _walk_dir(path, _root_prefix(path, options.rebase), "/", options)
    if options.filter is None:
        return entries
    return _collect(entries, options.filter)


def _collect(entries: list[Entry], rules: RuleSet) -> list[Entry]:
    matched: list[Entry] = []
    for entry in entries:
        if rules.matches(entry.tag):
            matched.append(entry)
    return matched


def search(directory: str, match: str, options: TraversalOptions) -> Steps[list[Entry]]:
    """Find entries under *directory* whose name ends with extension *match*.

    ``options.filter`` is replaced by the ``*.<ext>`` rule built from *match*.
    A *directory* that is not a directory yields an empty list.
    """
    if not match.startswith("."):
        match = "." + match
    found = yield call(is_directory, directory)
    if not found:
        return []
    return (yield from walk(directory, replace(options, filter=parse_rules("*" + match))))
