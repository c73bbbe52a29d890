"""Filesystem primitives and the blocking / suspending drivers.

Operations such as ``readdir`` and ``copy`` are written once, as generators
that ``yield`` a :class:`Call` for every filesystem access and receive its
result back.  :func:`run_blocking` executes those calls inline;
:func:`run_suspending` awaits each one in a worker thread.  Calls are issued
one at a time in program order in both modes, and an exception raised by a
primitive is thrown back into the generator at the ``yield``.
"""

from __future__ import annotations

import asyncio
import logging
import os
import shutil
from typing import Any, Callable, Generator, NamedTuple, TypeVar

from ._types import FileKind

logger = logging.getLogger(__name__)

T = TypeVar("T")


class Call(NamedTuple):
    """A pending primitive invocation: ``func(*args)``."""
    func: Callable[..., Any]
    args: tuple

    def __call__(self) -> Any:
        return self.func(*self.args)


def call(func: Callable[..., Any], *args: Any) -> Call:
    return Call(func, args)


Steps = Generator[Call, Any, T]


def run_blocking(steps: Steps[T]) -> T:
    """Drive *steps* to completion, executing each call inline."""
    try:
        request = next(steps)
        while True:
            try:
                result = request()
            except Exception as exc:
                request = steps.throw(exc)
            else:
                request = steps.send(result)
    except StopIteration as stop:
        return stop.value


async def run_suspending(steps: Steps[T]) -> T:
    """Drive *steps* to completion, awaiting each call in a worker thread."""
    try:
        request = next(steps)
        while True:
            try:
                result = await asyncio.to_thread(request.func, *request.args)
            except Exception as exc:
                request = steps.throw(exc)
            else:
                request = steps.send(result)
    except StopIteration as stop:
        return stop.value


# ---------------------------------------------------------------------------
# Classification
# ---------------------------------------------------------------------------

def stat_kind(path: str, follow_symlinks: bool = False) -> FileKind | None:
    """Return the :class:`FileKind` of *path*, or ``None`` if it is missing."""
    try:
        st = os.stat(path, follow_symlinks=follow_symlinks)
    except (FileNotFoundError, NotADirectoryError):
        return None
    return FileKind.from_mode(st.st_mode)


def _probe(path: str, follow_symlinks: bool, kind: FileKind) -> bool:
    try:
        st = os.stat(path, follow_symlinks=follow_symlinks)
    except (OSError, ValueError):
        return False
    return FileKind.from_mode(st.st_mode) is kind


def is_directory(path: str, follow_symlinks: bool = True) -> bool:
    """True if *path* is a directory.  Never raises."""
    return _probe(path, follow_symlinks, FileKind.DIRECTORY)


def is_file(path: str, follow_symlinks: bool = True) -> bool:
    """True if *path* is a regular file.  Never raises."""
    return _probe(path, follow_symlinks, FileKind.FILE)


def is_symlink(path: str) -> bool:
    """True if *path* is a symbolic link.  Never raises."""
    return _probe(path, False, FileKind.SYMLINK)


# ---------------------------------------------------------------------------
# Directory listing
# ---------------------------------------------------------------------------

def _dirent_kind(entry: os.DirEntry) -> FileKind:
    if entry.is_symlink():
        return FileKind.SYMLINK
    if entry.is_dir(follow_symlinks=False):
        return FileKind.DIRECTORY
    if entry.is_file(follow_symlinks=False):
        return FileKind.FILE
    return FileKind.from_mode(entry.stat(follow_symlinks=False).st_mode)


def list_entries(path: str) -> list[tuple[str, FileKind]]:
    """Return ``(name, kind)`` for each child of *path*, in listing order.

    Children that disappear while being classified are skipped.
    """
    result: list[tuple[str, FileKind]] = []
    with os.scandir(path) as it:
        for entry in it:
            try:
                kind = _dirent_kind(entry)
            except FileNotFoundError:
                logger.debug(f"Skipping vanished entry: {entry.path}")
                continue
            result.append((entry.name, kind))
    return result


# ---------------------------------------------------------------------------
# Reading and writing
# ---------------------------------------------------------------------------

def read_file(path: str, encoding: str | None = "utf-8") -> str | bytes:
    """Read *path* as text, or as bytes when *encoding* is ``None``."""
    if encoding is None:
        with open(path, "rb") as f:
            return f.read()
    with open(path, encoding=encoding, newline="") as f:
        return f.read()


def write_file(path: str, data: str | bytes, encoding: str = "utf-8") -> None:
    """Write *data* to *path*; bytes are written verbatim."""
    if isinstance(data, (bytes, bytearray, memoryview)):
        with open(path, "wb") as f:
            f.write(data)
    else:
        with open(path, "w", encoding=encoding, newline="") as f:
            f.write(data)


def ensure_dir(path: str, mode: int = 0o777) -> None:
    """Create *path* and its parents; an existing path is not an error."""
    try:
        os.makedirs(path, mode)
    except FileExistsError:
        pass


def remove_tree(path: str) -> None:
    """Remove a file, symlink or directory tree.  Missing paths are ignored."""
    kind = stat_kind(path)
    if kind is None:
        return
    if kind is FileKind.DIRECTORY:
        shutil.rmtree(path)
    else:
        os.unlink(path)


# ---------------------------------------------------------------------------
# Copying
# ---------------------------------------------------------------------------

def copy_file(src: str, dst: str) -> None:
    """Copy one file with metadata; symlinks are copied as links."""
    if os.path.lexists(dst) and os.path.islink(src):
        os.unlink(dst)
    shutil.copy2(src, dst, follow_symlinks=False)


def copy_tree(
    src: str,
    dst: str,
    ignore: Callable[[str, list[str]], set[str]] | None = None,
) -> None:
    """Copy a whole directory tree onto *dst*, merging into existing dirs."""
    shutil.copytree(src, dst, symlinks=True, ignore=ignore, dirs_exist_ok=True)
