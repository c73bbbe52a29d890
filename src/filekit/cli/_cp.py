"""The cp command."""

from __future__ import annotations

import click

from ..file import copy
from ._helpers import _build_ignore, _rule_options, _status, main


@main.command()
@click.argument("source")
@click.argument("dest")
@_rule_options
@click.pass_context
def cp(ctx, source, dest, filter_, ignore, gitignore, strict):
    """Copy SOURCE to DEST.

    \b
    A trailing '/' on DEST copies SOURCE into it, keeping its name;
    a trailing '/' on a directory SOURCE copies its contents.
    DEST may lie inside SOURCE.

    \b
    Examples:
      filekit cp src build/          # -> build/src/...
      filekit cp src/ build          # -> build/...
      filekit cp proj proj/backup/   # -> proj/backup/proj/...
      filekit cp assets out --filter '*.(png|jpg)'
    """
    ignore_rules = _build_ignore(ignore, gitignore, strict)
    _status(ctx, f"Copying {source} -> {dest}")
    try:
        copy(source, dest, filter=list(filter_) or None, ignore=ignore_rules)
    except OSError as exc:
        raise click.ClickException(str(exc))
