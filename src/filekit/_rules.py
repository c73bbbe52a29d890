"""Compiled filter / ignore rule sets."""

from __future__ import annotations

import re
from typing import Callable, Iterable, Sequence, Union

from ._glob import Pattern, compile_pattern

Rule = Union[Pattern, Sequence[Pattern], Callable[[str], object], "RuleSet", None]


class RuleSet:
    """A set of compiled patterns, or a single callback, matched with OR.

    Instances are immutable and already compiled: :func:`parse_rules` passes
    them through untouched, so one ``RuleSet`` can be built once and reused
    across calls.
    """

    __slots__ = ("_patterns", "_callback")

    def __init__(
        self,
        patterns: Iterable[re.Pattern[str]] = (),
        *,
        callback: Callable[[str], object] | None = None,
    ) -> None:
        self._patterns = tuple(patterns)
        self._callback = callback

    def __repr__(self) -> str:
        if self._callback is not None:
            return f"RuleSet(callback={self._callback!r})"
        return f"RuleSet({[p.pattern for p in self._patterns]!r})"

    @property
    def patterns(self) -> tuple[re.Pattern[str], ...]:
        """The compiled patterns, in input order (empty for a callback)."""
        return self._patterns

    def matches(self, tag: str) -> bool:
        """Return True if *tag* matches any pattern (or the callback)."""
        if self._callback is not None:
            return bool(self._callback(tag))
        return any(p.search(tag) for p in self._patterns)


def _compile_all(patterns: Iterable[Pattern]) -> list[re.Pattern[str]]:
    compiled = []
    for pattern in patterns:
        regex = compile_pattern(pattern)
        if regex is not None:
            compiled.append(regex)
    return compiled


def parse_rules(rule: Rule) -> RuleSet | None:
    """Normalize a user-supplied *filter* or *ignore* argument.

    Accepts a pattern string, a compiled ``re.Pattern``, a list/tuple of
    those, a callable taking the tag and returning a truthy value, or an
    existing :class:`RuleSet`.  Falsy values mean "no rule" and return
    ``None``.
    """
    if isinstance(rule, RuleSet):
        return rule
    if not rule:
        return None
    if isinstance(rule, (str, re.Pattern)):
        return RuleSet(_compile_all([rule]))
    if isinstance(rule, (list, tuple)):
        return RuleSet(_compile_all(rule))
    if callable(rule):
        return RuleSet(callback=rule)
    raise TypeError(f"Unsupported rule type: {type(rule).__name__}")
