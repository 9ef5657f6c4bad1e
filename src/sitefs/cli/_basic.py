"""Basic commands: ls, cp, empty, rm, cat, unused."""

from __future__ import annotations

import click

from ..fs_sync import (
    copy_dir_sync,
    empty_dir_sync,
    ensure_path_sync,
    list_dir_sync,
    read_file_sync,
    rmdir_sync,
)
from ._helpers import (
    main,
    _build_filter,
    _fail,
    _filter_options,
    _print_paths,
    _status,
)


# ---------------------------------------------------------------------------
# ls
# ---------------------------------------------------------------------------

@main.command()
@click.argument("path", type=click.Path())
@_filter_options
@click.pass_context
def ls(ctx, path, include_hidden, ignore_pattern, exclude):
    """List every file under PATH, one relative path per line."""
    config = _build_filter(include_hidden, ignore_pattern, exclude)
    try:
        found = list_dir_sync(path, config)
    except OSError as exc:
        raise _fail(exc)
    _print_paths(found)
    _status(ctx, f"{len(found)} file(s)")


# ---------------------------------------------------------------------------
# cp
# ---------------------------------------------------------------------------

@main.command()
@click.argument("src", type=click.Path())
@click.argument("dest", type=click.Path())
@_filter_options
@click.pass_context
def cp(ctx, src, dest, include_hidden, ignore_pattern, exclude):
    """Copy the files under SRC into DEST and print what was copied."""
    config = _build_filter(include_hidden, ignore_pattern, exclude)
    try:
        copied = copy_dir_sync(src, dest, config)
    except OSError as exc:
        raise _fail(exc)
    _print_paths(copied)
    _status(ctx, f"Copied {len(copied)} file(s) to {dest}")


# ---------------------------------------------------------------------------
# empty
# ---------------------------------------------------------------------------

@main.command()
@click.argument("path", type=click.Path())
@_filter_options
@click.pass_context
def empty(ctx, path, include_hidden, ignore_pattern, exclude):
    """Delete the files under PATH and prune directories left empty.

    PATH itself is kept.  Hidden, ignored and excluded entries survive,
    along with the directories that hold them.
    """
    config = _build_filter(include_hidden, ignore_pattern, exclude)
    try:
        deleted = empty_dir_sync(path, config)
    except OSError as exc:
        raise _fail(exc)
    _print_paths(deleted)
    _status(ctx, f"Deleted {len(deleted)} file(s) from {path}")


# ---------------------------------------------------------------------------
# rm
# ---------------------------------------------------------------------------

@main.command()
@click.argument("path", type=click.Path())
@click.pass_context
def rm(ctx, path):
    """Remove PATH and everything below it."""
    try:
        rmdir_sync(path)
    except OSError as exc:
        raise _fail(exc)
    _status(ctx, f"Removed {path}")


# ---------------------------------------------------------------------------
# cat
# ---------------------------------------------------------------------------

@main.command()
@click.argument("path", type=click.Path())
@click.option("--raw", is_flag=True, help="Keep BOM and CRLF line endings.")
def cat(path, raw):
    """Print the text content of PATH."""
    try:
        content = read_file_sync(path, escape=not raw)
    except OSError as exc:
        raise _fail(exc)
    click.echo(content, nl=False)


# ---------------------------------------------------------------------------
# unused
# ---------------------------------------------------------------------------

@main.command()
@click.argument("path", type=click.Path())
def unused(path):
    """Print PATH, or the first free NAME-N.EXT beside it if PATH is taken."""
    try:
        click.echo(ensure_path_sync(path))
    except OSError as exc:
        raise _fail(exc)
