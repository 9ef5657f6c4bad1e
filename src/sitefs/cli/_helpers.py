"""Shared helpers, option decorators, and the main CLI group."""

from __future__ import annotations

import logging
import re

import click

from .._filter import FilterConfig


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def _status(ctx, msg):
    """Emit a status message to stderr when verbose mode (-v) is on."""
    if ctx.obj.get("verbose"):
        click.echo(msg, err=True)


def _fail(exc: OSError) -> click.ClickException:
    """Turn a storage error into a one-line CLI error."""
    if exc.filename is not None and exc.strerror:
        return click.ClickException(f"{exc.strerror}: {exc.filename}")
    return click.ClickException(str(exc))


def _filter_options(f):
    """Shared --all / --ignore-pattern / --exclude options for tree commands."""
    f = click.option(
        "--exclude", "exclude", multiple=True, metavar="REL",
        help="Relative path to leave alone (repeatable).",
    )(f)
    f = click.option(
        "--ignore-pattern", "ignore_pattern", envvar="SITEFS_IGNORE_PATTERN",
        metavar="REGEX", default=None,
        help="Skip entries whose name matches REGEX (or set SITEFS_IGNORE_PATTERN).",
    )(f)
    f = click.option(
        "-a", "--all", "include_hidden", is_flag=True, default=False,
        help="Include dot-prefixed (hidden) entries.",
    )(f)
    return f


def _build_filter(include_hidden: bool, ignore_pattern: str | None, exclude) -> FilterConfig:
    try:
        return FilterConfig(
            ignore_hidden=not include_hidden,
            ignore_pattern=ignore_pattern or None,
            exclude=frozenset(exclude or ()),
        )
    except re.error as exc:
        raise click.ClickException(f"Invalid --ignore-pattern: {exc}")


def _print_paths(paths: list[str]) -> None:
    for p in paths:
        click.echo(p)


# ---------------------------------------------------------------------------
# Main group
# ---------------------------------------------------------------------------

@click.group()
@click.option("-v", "--verbose", is_flag=True, help="Verbose output on stderr.")
@click.pass_context
def main(ctx, verbose):
    """sitefs -- filesystem helpers for static site builds.

    \b
    Quick start:
      sitefs ls public/
      sitefs cp source/ public/
      sitefs empty public/ --exclude CNAME
      sitefs watch source/

    \b
    Hidden (dot-prefixed) entries are skipped unless -a is given.
    Set SITEFS_IGNORE_PATTERN to apply an ignore regex to every command.
    """
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")
