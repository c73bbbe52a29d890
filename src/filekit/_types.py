"""Data structures shared by the traversal, copy and public API layers."""

from __future__ import annotations

import stat
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ._rules import RuleSet


class FileKind(str, Enum):
    """Filesystem object kind.

    Members: ``FILE``, ``DIRECTORY``, ``SYMLINK``, ``FIFO``, ``SOCKET``,
    ``CHAR_DEVICE``, ``BLOCK_DEVICE``, ``UNKNOWN``.
    """
    FILE = "file"
    DIRECTORY = "directory"
    SYMLINK = "symlink"
    FIFO = "fifo"
    SOCKET = "socket"
    CHAR_DEVICE = "char_device"
    BLOCK_DEVICE = "block_device"
    UNKNOWN = "unknown"

    def __str__(self) -> str:          # noqa: D105
        return self.value

    @classmethod
    def from_mode(cls, mode: int) -> FileKind:
        """Convert an ``st_mode`` value to a :class:`FileKind`."""
        for test, kind in _MODE_TESTS:
            if test(mode):
                return kind
        return cls.UNKNOWN


_MODE_TESTS = (
    (stat.S_ISREG, FileKind.FILE),
    (stat.S_ISDIR, FileKind.DIRECTORY),
    (stat.S_ISLNK, FileKind.SYMLINK),
    (stat.S_ISFIFO, FileKind.FIFO),
    (stat.S_ISSOCK, FileKind.SOCKET),
    (stat.S_ISCHR, FileKind.CHAR_DEVICE),
    (stat.S_ISBLK, FileKind.BLOCK_DEVICE),
)


@dataclass(frozen=True)
class Entry:
    """One filesystem object discovered by :func:`~filekit.readdir`.

    Attributes:
        name: Base name.
        path: Reported path, after the rebase / absolute rules.
        physical: Path usable for further I/O.
        kind: :class:`FileKind` of the object (symlinks are not followed).
        tag: Root-relative match path (``/src/app.js``, ``/src/``) that
            filter and ignore rules are evaluated against.
    """
    name: str
    path: str
    physical: str
    kind: FileKind
    tag: str

    def __str__(self) -> str:          # noqa: D105
        return self.path

    @property
    def is_file(self) -> bool:
        return self.kind is FileKind.FILE

    @property
    def is_dir(self) -> bool:
        return self.kind is FileKind.DIRECTORY

    @property
    def is_symlink(self) -> bool:
        return self.kind is FileKind.SYMLINK


@dataclass(frozen=True)
class TraversalOptions:
    """Per-call configuration of the traversal engine.

    Attributes:
        recursive: Descend into subdirectories.
        only_leaf: Drop directories whose expansion produced entries.
        absolute: Report absolute physical paths.
        rebase: ``True`` reports paths under the listed root, a falsy value
            reports paths relative to it, a string reports them under that
            prefix.
        filter: Keep only entries whose tag matches.
        ignore: Drop entries (and whole subtrees) whose tag matches.
    """
    recursive: bool = False
    only_leaf: bool = True
    absolute: bool = False
    rebase: bool | str | None = True
    filter: RuleSet | None = None
    ignore: RuleSet | None = None
