"""Click entry point for valuescope.

Commands:
    diff     -- structural diff of two values files.
    compare  -- diff two chart versions stored in a values directory.
    path     -- dotted field path of a line in a values file.
    search   -- case-insensitive line search.

Output is plain text: ``+ `` added, ``- `` removed, two spaces for context.
"""

from __future__ import annotations

from pathlib import Path

import click

from valuescope import __version__
from valuescope.cache.store import ExpiringStore
from valuescope.config import load_config, parse_time_window
from valuescope.document.diff import diff_texts
from valuescope.document.path import resolve_path
from valuescope.document.search import find_matches
from valuescope.document.tokenizer import split_lines
from valuescope.loader.service import DirectoryValuesSource, FetchError, ValuesLoader
from valuescope.models.changes import ChangeKind, ChangeRecord
from valuescope.models.config import ValueScopeConfig
from valuescope.observability.logging import setup_logging

_LOG_LEVELS = ["debug", "info", "warning", "error"]

_PREFIXES = {
    ChangeKind.ADDED: "+ ",
    ChangeKind.REMOVED: "- ",
    ChangeKind.UNCHANGED: "  ",
}


def _format_record(record: ChangeRecord, show_lines: bool) -> str:
    text = _PREFIXES[record.kind] + record.line
    if show_lines:
        return f"{record.origin_line_index + 1:>5} {text}"
    return text


def _read_text(path: Path) -> str:
    try:
        return path.read_text(encoding="utf-8")
    except OSError as exc:
        raise click.ClickException(f"cannot read {path}: {exc}") from exc


@click.group()
@click.version_option(__version__, prog_name="valuescope")
@click.option(
    "--log-level",
    type=click.Choice(_LOG_LEVELS, case_sensitive=False),
    default=None,
    help="Override VALUESCOPE_LOG_LEVEL.",
)
@click.pass_context
def cli(ctx: click.Context, log_level: str | None) -> None:
    """Inspect and compare chart values documents."""
    try:
        config = load_config()
    except ValueError as exc:
        raise click.ClickException(str(exc)) from exc
    if log_level:
        config.log.level = log_level.lower()
    setup_logging(config.log.level, json_output=False)
    ctx.obj = config


@cli.command()
@click.argument("old", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.argument("new", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option("--context", "context_lines", type=int, default=None, help="Context lines around changes.")
@click.option("--line-numbers", is_flag=True, help="Prefix records with their source line number.")
@click.pass_obj
def diff(config: ValueScopeConfig, old: Path, new: Path, context_lines: int | None, line_numbers: bool) -> None:
    """Show changed regions between OLD and NEW values files."""
    if context_lines is None:
        context_lines = config.diff.context_lines
    records = diff_texts(_read_text(old), _read_text(new), context_lines=context_lines)
    if not records:
        click.echo("No differences.")
        return
    for record in records:
        click.echo(_format_record(record, line_numbers))


@cli.command()
@click.argument("name")
@click.argument("old_version")
@click.argument("new_version")
@click.option(
    "--values-dir",
    type=click.Path(exists=True, file_okay=False, path_type=Path),
    default=Path("."),
    show_default=True,
    help="Directory holding <name>@<version>.yaml files (chart repo prefixes as subdirectories).",
)
@click.pass_obj
def compare(config: ValueScopeConfig, name: str, old_version: str, new_version: str, values_dir: Path) -> None:
    """Compare two versions of chart NAME from a values directory."""
    loader = ValuesLoader(
        DirectoryValuesSource(values_dir),
        ExpiringStore(ttl=parse_time_window(config.cache.ttl)),
        context_lines=config.diff.context_lines,
    )
    try:
        result = loader.compare(name, old_version, new_version)
    except FetchError as exc:
        raise click.ClickException(str(exc)) from exc

    click.echo(f"{name}: {old_version} -> {new_version} (+{result.added} -{result.removed})")
    for record in result.records:
        click.echo(_format_record(record, show_lines=False))


@cli.command()
@click.argument("file", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.argument("line", type=click.IntRange(min=1))
@click.pass_context
def path(ctx: click.Context, file: Path, line: int) -> None:
    """Print the dotted field path of LINE (1-based) in FILE."""
    resolved = resolve_path(split_lines(_read_text(file)), line - 1)
    if not resolved:
        click.echo(f"No path for line {line}.", err=True)
        ctx.exit(1)
    click.echo(resolved)


@cli.command()
@click.argument("file", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.argument("query")
@click.option("--with-path", is_flag=True, help="Append the field path of each match.")
def search(file: Path, query: str, with_path: bool) -> None:
    """List lines of FILE containing QUERY (case-insensitive)."""
    lines = split_lines(_read_text(file))
    for index in find_matches(lines, query):
        out = f"{index + 1}: {lines[index]}"
        if with_path:
            out += f"  [{resolve_path(lines, index)}]"
        click.echo(out)
