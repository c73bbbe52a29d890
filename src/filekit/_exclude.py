""".gitignore loading.

Two flavours are offered:

* :func:`parse_gitignore_steps` reads a ``.gitignore``-style file into plain
  rule strings (or compiled patterns) for use as ``filter`` / ``ignore``.
  Blank lines and lines starting with ``#`` or ``:`` are skipped; ``!``
  negations are *not* interpreted, they are kept as literal rules.

* :func:`gitignore_rule_steps` builds a :class:`~filekit._rules.RuleSet` with full
  git semantics (negation, anchoring, ``**``), implemented by
  ``dulwich.ignore.IgnoreFilter``.
"""

from __future__ import annotations

import logging
import re

from dulwich.ignore import IgnoreFilter

from ._glob import compile_pattern
from ._io import Steps, call, read_file
from ._rules import RuleSet

logger = logging.getLogger(__name__)

_SKIP_PREFIXES = ("#", ":")


def clean_lines(text: str) -> list[str]:
    """Return the rule lines of a ``.gitignore`` text, stripped."""
    rules = []
    for raw in text.split("\n"):
        line = raw.strip()
        if line and not line.startswith(_SKIP_PREFIXES):
            rules.append(line)
    return rules


def parse_gitignore_steps(
    path: str, as_matcher: bool = False,
) -> Steps[list[str] | list[re.Pattern[str]]]:
    text = yield call(read_file, path, "utf-8")
    rules = clean_lines(text)
    if not as_matcher:
        return rules
    compiled = []
    for rule in rules:
        regex = compile_pattern(rule)
        if regex is None:
            logger.debug(f"{path}: skipping unsupported rule {rule!r}")
            continue
        compiled.append(regex)
    return compiled


def _dulwich_callback(ignore_filter: IgnoreFilter):
    def _ignored(tag: str) -> bool:
        # dulwich expects repo-relative paths without the leading "/"
        return ignore_filter.is_ignored(tag.lstrip("/")) is True
    return _ignored


def gitignore_rule_steps(path: str, *, ignorecase: bool = False) -> Steps[RuleSet]:
    text = yield call(read_file, path, "utf-8")
    lines = [line.encode("utf-8") for line in clean_lines(text)]
    ignore_filter = IgnoreFilter(lines, ignorecase=ignorecase)
    return RuleSet(callback=_dulwich_callback(ignore_filter))
