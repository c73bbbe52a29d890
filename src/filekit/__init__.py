from . import aio
from ._glob import compile_pattern
from ._rules import RuleSet, parse_rules
from ._types import Entry, FileKind
from .file import (
    copy,
    gitignore_rule,
    is_directory,
    is_file,
    is_path,
    is_symlink,
    list_directory,
    mkdir,
    parse_gitignore,
    read,
    readdir,
    remove,
    save,
    search,
)

__all__ = [
    "aio", "Entry", "FileKind", "RuleSet", "parse_rules", "compile_pattern",
    "save", "read", "mkdir", "remove", "copy",
    "readdir", "list_directory", "search",
    "is_directory", "is_file", "is_symlink", "is_path",
    "parse_gitignore", "gitignore_rule",
]
