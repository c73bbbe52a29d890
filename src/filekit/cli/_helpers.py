"""Shared helpers, option decorators, and the main CLI group."""

from __future__ import annotations

import logging

import click

from ..file import gitignore_rule, parse_gitignore
from .._rules import parse_rules


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def _status(ctx, msg):
    """Emit a status message to stderr when verbose mode (-v) is on."""
    if ctx.obj.get("verbose"):
        click.echo(msg, err=True)


def _build_ignore(patterns, gitignore: str | None, strict: bool):
    """Combine --ignore patterns with an optional --gitignore file."""
    rules = list(patterns)
    if gitignore is None:
        return rules or None
    try:
        if not strict:
            return rules + parse_gitignore(gitignore)
        git_rules = gitignore_rule(gitignore)
    except OSError as exc:
        raise click.ClickException(f"Cannot read ignore file {gitignore}: {exc}")
    extra = parse_rules(rules)

    def _ignored(tag):
        return git_rules.matches(tag) or (extra is not None and extra.matches(tag))
    return _ignored


def _rule_options(f):
    """Shared --filter / --ignore / --gitignore / --strict options."""
    f = click.option(
        "--strict", is_flag=True, default=False,
        help="Interpret --gitignore with full git semantics (negation etc.).",
    )(f)
    f = click.option(
        "--gitignore", type=click.Path(dir_okay=False), envvar="FILEKIT_GITIGNORE",
        default=None,
        help="Read additional ignore rules from a .gitignore-style file "
             "(or set FILEKIT_GITIGNORE).",
    )(f)
    f = click.option(
        "--ignore", "ignore", multiple=True,
        help="Skip paths matching PATTERN (repeatable).",
        metavar="PATTERN",
    )(f)
    f = click.option(
        "--filter", "filter_", multiple=True,
        help="Keep only paths matching PATTERN (repeatable).",
        metavar="PATTERN",
    )(f)
    return f


def _format_option(f):
    return click.option(
        "--format", "fmt", type=click.Choice(["text", "json"]), default="text",
        show_default=True, help="Output format.",
    )(f)


# ---------------------------------------------------------------------------
# Main group
# ---------------------------------------------------------------------------

@click.group()
@click.option("-v", "--verbose", is_flag=True, help="Verbose output on stderr.")
@click.pass_context
def main(ctx, verbose):
    """List, search and copy files through gitignore-style rules.

    \b
    Quick start:
      filekit ls -R src --ignore node_modules/
      filekit search src js -R
      filekit cp src backup/ --ignore '*.log'
      filekit gitignore .gitignore --regex

    \b
    Patterns are matched against paths relative to the listed directory,
    starting with '/' and ending with '/' for directories:
      foo        any file or directory named foo
      foo/       directories named foo
      /foo       foo at the top level only
      *.js       files ending in .js
      src/**/x   x anywhere below src
    """
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")
