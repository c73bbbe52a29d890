"""gitignore-style pattern compilation.

A rule string is translated into a case-insensitive regular expression that
is searched against a *tag*: the root-relative path of an entry, always
starting with ``/`` and ending with ``/`` for directories
(``/src/app.js``, ``/node_modules/``).

Three syntaxes are recognised, tried in order:

``foo``, ``foo/``, ``/foo``, ``/foo/``
    Exact segment.  Matches ``foo`` as an intermediate directory or as the
    last component; a trailing ``/`` matches directories only and a leading
    ``/`` anchors at the root.

``**``, ``**foo``, ``foo**``, ``a/**/b``
    Double star.  ``**`` crosses directory separators.

``*``, ``*.js``, ``foo*bar``
    Single star.  ``*`` stays inside one path segment; ``*.ext`` is anchored
    at the end of the tag.

In all three, ``?`` matches one non-separator character and any other regex
syntax is passed through, so ``*.(png|jpg)`` works as alternation.
"""

from __future__ import annotations

import logging
import re
from typing import Callable, Union

logger = logging.getLogger(__name__)

Pattern = Union[str, re.Pattern]

_EXACT_SEGMENT = re.compile(r"^/?[^*/]+/?$")
_DOUBLE_STAR = re.compile(r"^\*{2}$|^\*{2}[^*]|[^*]\*{2}$|[^*]\*{2}[^*]")
_SINGLE_STAR = re.compile(r"^\*$|^\*[^*]|[^*]\*$|[^*]\*[^*]")
_INNER_SLASH = re.compile(r"[^/]/[^/]")
_STAR_EXTENSION = re.compile(r"\*\.[^/*]+?$")


def _escape(pattern: str) -> str:
    return pattern.replace(".", r"\.").replace("?", "[^/]")


def _imply_root(pattern: str) -> str:
    """Root a multi-segment pattern (``src/*.js`` behaves like ``/src/*.js``)."""
    if _INNER_SLASH.search(pattern) and not pattern.startswith("/"):
        return "/" + pattern
    return pattern


def _exact_segment(pattern: str) -> str | None:
    if not _EXACT_SEGMENT.match(pattern):
        return None
    regex = _escape(pattern)
    if regex.startswith("/"):
        regex = "^" + regex
    else:
        regex = "/" + regex
    if regex.endswith("/"):
        return regex + r"\Z"
    return rf"({regex}/)|({regex}\Z)"


def _double_star(pattern: str) -> str | None:
    if not _DOUBLE_STAR.search(pattern):
        return None
    pattern = _escape(_imply_root(pattern))
    regex = re.sub(r"\*{2}", "[^*]+", pattern)
    if pattern.startswith("/"):
        regex = "^" + regex
    return regex


def _single_star(pattern: str) -> str | None:
    if not _SINGLE_STAR.search(pattern):
        return None
    pattern = _imply_root(pattern)
    if _STAR_EXTENSION.search(pattern):
        pattern += r"\Z"
    pattern = _escape(pattern)
    regex = pattern.replace("*", "[^/*]+")
    if pattern.startswith("/"):
        regex = "^" + regex
    return regex


# Order matters: the first translator that accepts the pattern wins.
_TRANSLATORS: tuple[Callable[[str], str | None], ...] = (
    _exact_segment,
    _double_star,
    _single_star,
)


def translate(pattern: str) -> str | None:
    """Return the regex source for *pattern*, or ``None`` if unsupported."""
    for translator in _TRANSLATORS:
        regex = translator(pattern)
        if regex is not None:
            return regex
    return None


def compile_pattern(pattern: Pattern) -> re.Pattern[str] | None:
    """Compile one rule into a case-insensitive regex.

    Pre-compiled ``re.Pattern`` objects are returned unchanged.  Patterns
    that match none of the supported syntaxes, or whose translation is not a
    valid regex, return ``None``: such a rule never matches anything.
    """
    if isinstance(pattern, re.Pattern):
        return pattern
    regex = translate(pattern)
    if regex is None:
        logger.debug(f"Unsupported pattern ignored: {pattern!r}")
        return None
    try:
        return re.compile(regex, re.IGNORECASE)
    except re.error as exc:
        logger.debug(f"Invalid pattern ignored: {pattern!r} ({exc})")
        return None
