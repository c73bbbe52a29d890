"""Basic commands: ls, search, cat, mkdir, rm, gitignore."""

from __future__ import annotations

import json

import click

from ..file import mkdir as _mkdir
from ..file import parse_gitignore, read, readdir, remove
from ..file import search as _search
from ._helpers import _build_ignore, _format_option, _rule_options, _status, main


def _emit_entries(entries, long_, fmt):
    """Format and emit a list of :class:`~filekit.Entry`."""
    if fmt == "json" and not long_:
        click.echo(json.dumps([e.path for e in entries]))
    elif fmt == "json":
        click.echo(json.dumps([
            {"name": e.name, "path": e.path, "type": str(e.kind)} for e in entries
        ]))
    elif long_:
        width = max((len(str(e.kind)) for e in entries), default=0)
        for e in entries:
            click.echo(f"{str(e.kind):<{width}}  {e.path}")
    else:
        for e in entries:
            click.echo(e.path)


@main.command()
@click.argument("path", default=".")
@click.option("-R", "--recursive", is_flag=True, help="Descend into subdirectories.")
@click.option("--dirs", "include_dirs", is_flag=True,
              help="With -R, also list directories that have contents.")
@click.option("--absolute", is_flag=True, help="Print absolute paths.")
@click.option("--rebase", default=None, metavar="PREFIX",
              help="Print paths under PREFIX instead of PATH.")
@click.option("--no-rebase", is_flag=True, help="Print paths relative to PATH.")
@click.option("-l", "--long", "long_", is_flag=True, help="Show entry types.")
@_rule_options
@_format_option
@click.pass_context
def ls(ctx, path, recursive, include_dirs, absolute, rebase, no_rebase, long_,
       filter_, ignore, gitignore, strict, fmt):
    """List PATH (default: current directory).

    \b
    Examples:
      filekit ls src
      filekit ls -R src --ignore node_modules/ --ignore '*.map'
      filekit ls -R . --gitignore .gitignore --no-rebase
      filekit ls -R dist --rebase / --filter '*.(html|css)'
    """
    if rebase is not None and no_rebase:
        raise click.ClickException("--rebase and --no-rebase are mutually exclusive")
    if no_rebase:
        rebase_value = False
    elif rebase is not None:
        rebase_value = rebase
    else:
        rebase_value = True
    ignore_rules = _build_ignore(ignore, gitignore, strict)
    _status(ctx, f"Listing {path}")
    try:
        entries = readdir(
            path, recursive=recursive, as_entries=True, absolute=absolute,
            only_leaf=not include_dirs, rebase=rebase_value,
            filter=list(filter_) or None, ignore=ignore_rules,
        )
    except OSError as exc:
        raise click.ClickException(str(exc))
    _emit_entries(entries, long_, fmt)


@main.command()
@click.argument("directory")
@click.argument("extension")
@click.option("-R", "--recursive", is_flag=True, help="Descend into subdirectories.")
@click.option("--ignore", "ignore", multiple=True, metavar="PATTERN",
              help="Skip paths matching PATTERN (repeatable).")
@_format_option
def search(directory, extension, recursive, ignore, fmt):
    """List files in DIRECTORY whose extension is EXTENSION (e.g. 'js')."""
    try:
        entries = _search(directory, extension, recursive=recursive,
                          as_entries=True, ignore=list(ignore) or None)
    except OSError as exc:
        raise click.ClickException(str(exc))
    _emit_entries(entries, False, fmt)


@main.command()
@click.argument("path")
def cat(path):
    """Print the contents of PATH."""
    try:
        data = read(path, encoding=None)
    except OSError as exc:
        raise click.ClickException(str(exc))
    click.echo(data, nl=False)


@main.command()
@click.argument("paths", nargs=-1, required=True)
def mkdir(paths):
    """Create directories (with parents)."""
    for path in paths:
        try:
            _mkdir(path)
        except OSError as exc:
            raise click.ClickException(str(exc))


@main.command()
@click.argument("paths", nargs=-1, required=True)
@click.pass_context
def rm(ctx, paths):
    """Remove files or directory trees.  Missing paths are ignored."""
    for path in paths:
        _status(ctx, f"Removing {path}")
        try:
            remove(path)
        except OSError as exc:
            raise click.ClickException(str(exc))


@main.command()
@click.argument("path", default=".gitignore")
@click.option("--regex", is_flag=True, help="Print the compiled regular expressions.")
def gitignore(path, regex):
    """Print the rules read from a .gitignore-style file."""
    try:
        rules = parse_gitignore(path, as_matcher=regex)
    except OSError as exc:
        raise click.ClickException(str(exc))
    for rule in rules:
        click.echo(rule.pattern if regex else rule)
