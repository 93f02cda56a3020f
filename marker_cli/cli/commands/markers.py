"""Marker commands: set, delete, retrieve, list."""

import json

import click
from rich.table import Table

from ...store import MarkerStore
from ...types import InvalidArgumentError, MarkerError
from ..display import console, print_error, printable, raw_path


def _non_empty(ctx: click.Context, param: click.Parameter, value: str | None) -> str | None:
    if value is not None and not value:
        raise click.BadParameter("must not be empty")
    return value


def flag_option(required: bool = True):
    """Shared --flag/-f option."""
    return click.option(
        "--flag", "-f",
        required=required,
        callback=_non_empty,
        help="Marker name",
    )


def _load_store(ctx: click.Context) -> MarkerStore:
    return MarkerStore.load(ctx.obj["store_path"], strict=ctx.obj["strict"])


def _save_store(ctx: click.Context, store: MarkerStore) -> None:
    store.save(ctx.obj["store_path"])


@click.command("set")
@flag_option()
@click.option("--directory", "-d", required=True, help="Directory to mark")
@click.pass_context
def set_marker(ctx: click.Context, flag: str, directory: str) -> None:
    """Attach FLAG to a directory, replacing any previous one.

    Examples:

        marker set -f proj -d ~/code/proj
    """
    try:
        store = _load_store(ctx)
        store.set(flag, directory)
        _save_store(ctx, store)
    except MarkerError as e:
        print_error(str(e))
        raise SystemExit(1)

    console.print(f"Set marker {printable(flag)} -> {printable(directory)}")


@click.command("delete")
@flag_option(required=False)
@click.option("--recursive", "-r", is_flag=True, help="Delete all markers")
@click.pass_context
def delete_marker(ctx: click.Context, flag: str | None, recursive: bool) -> None:
    """Delete one marker, or all of them with --recursive.

    Examples:

        marker delete -f proj

        marker delete -r
    """
    if flag and recursive:
        raise click.UsageError("--flag and --recursive are mutually exclusive")

    try:
        if not flag and not recursive:
            raise InvalidArgumentError("Either a flag or recursive must be specified")

        store = _load_store(ctx)
        removed = store.delete(flag, recursive=recursive)
        _save_store(ctx, store)
    except MarkerError as e:
        print_error(str(e))
        raise SystemExit(1)

    if recursive:
        console.print(f"Deleted all markers ({removed})")
    elif removed:
        console.print(f"Deleted marker '{printable(flag)}'")
    else:
        console.print(f"Marker '{printable(flag)}' does not exist")


@click.command("retrieve")
@flag_option()
@click.pass_context
def retrieve_marker(ctx: click.Context, flag: str) -> None:
    """Print the directory stored under FLAG.

    Only the path is printed, so the output can be used directly:

        cd "$(marker retrieve -f proj)"
    """
    try:
        directory = _load_store(ctx).retrieve(flag)
    except MarkerError as e:
        print_error(str(e))
        raise SystemExit(1)

    click.echo(raw_path(directory))


@click.command("list")
@click.option("--json", "as_json", is_flag=True, help="Output as a JSON object")
@click.pass_context
def list_markers(ctx: click.Context, as_json: bool) -> None:
    """List all markers."""
    try:
        markers = _load_store(ctx).list_markers()
    except MarkerError as e:
        print_error(str(e))
        raise SystemExit(1)

    if as_json:
        click.echo(json.dumps({m.flag: m.directory for m in markers}, indent=2))
        return

    if not markers:
        console.print("No markers set.")
        return

    table = Table(title="Markers")
    table.add_column("Flag", style="cyan", no_wrap=True)
    table.add_column("Directory", overflow="fold")

    for m in markers:
        table.add_row(printable(m.flag), printable(m.directory))

    console.print(table, soft_wrap=False)
    console.print(f"[dim]{len(markers)} marker(s) total[/dim]")
