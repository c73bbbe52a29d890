"""asyncio twins of :mod:`filekit.file`.

Each filesystem call runs in a worker thread and is awaited before the next
one starts, so results and ordering are identical to the blocking API.
"""

from __future__ import annotations

import re

from . import _ops
from ._exclude import gitignore_rule_steps, parse_gitignore_steps
from ._io import run_suspending
from ._ops import DEFAULT_ENCODING, is_path
from ._rules import Rule, RuleSet
from ._types import Entry

__all__ = [
    "save", "read", "mkdir", "remove", "copy",
    "readdir", "list_directory", "search",
    "is_directory", "is_file", "is_symlink", "is_path",
    "parse_gitignore", "gitignore_rule",
]


async def save(path: str, data: str | bytes, encoding: str = DEFAULT_ENCODING) -> None:
    await run_suspending(_ops.save(path, data, encoding))


async def read(path: str, encoding: str | None = DEFAULT_ENCODING) -> str | bytes:
    return await run_suspending(_ops.read(path, encoding))


async def mkdir(path: str, mode: int = 0o777) -> None:
    await run_suspending(_ops.mkdir(path, mode))


async def remove(path: str) -> None:
    await run_suspending(_ops.remove(path))


async def copy(source: str, dest: str, *, filter: Rule = None, ignore: Rule = None) -> None:
    """See :func:`filekit.file.copy`."""
    await run_suspending(_ops.copy(source, dest, filter=filter, ignore=ignore))


async def readdir(
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
    """See :func:`filekit.file.readdir`."""
    return await run_suspending(_ops.readdir(
        path, recursive=recursive, as_entries=as_entries, absolute=absolute,
        only_leaf=only_leaf, rebase=rebase, filter=filter, ignore=ignore,
    ))


list_directory = readdir


async def search(
    directory: str,
    match: str,
    *,
    recursive: bool = False,
    as_entries: bool = False,
    absolute: bool = False,
    only_leaf: bool = True,
    ignore: Rule = None,
) -> list[str] | list[Entry]:
    """See :func:`filekit.file.search`."""
    return await run_suspending(_ops.search(
        directory, match, recursive=recursive, as_entries=as_entries,
        absolute=absolute, only_leaf=only_leaf, ignore=ignore,
    ))


async def is_directory(path: str, follow_symlinks: bool = True) -> bool:
    return await run_suspending(_ops.is_directory(path, follow_symlinks))


async def is_file(path: str, follow_symlinks: bool = True) -> bool:
    return await run_suspending(_ops.is_file(path, follow_symlinks))


async def is_symlink(path: str) -> bool:
    return await run_suspending(_ops.is_symlink(path))


async def parse_gitignore(path: str, as_matcher: bool = False) -> list[str] | list[re.Pattern[str]]:
    return await run_suspending(parse_gitignore_steps(path, as_matcher))


async def gitignore_rule(path: str, *, ignorecase: bool = False) -> RuleSet:
    return await run_suspending(gitignore_rule_steps(path, ignorecase=ignorecase))
