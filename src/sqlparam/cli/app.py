# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Typer CLI application root."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Annotated

import typer

from sqlparam.cli.exit_codes import ExitCode
from sqlparam.core.constants import Dialect

app = typer.Typer(
    name="sqlparam",
    help="Rewrite ? placeholders into native positional parameters",
    no_args_is_help=True,
)


def _read_query(source: Path | None) -> str:
    from_stdin = source is None or str(source) == "-"
    if not from_stdin and not source.is_file():
        typer.echo(f"File not found: {source}", err=True)
        raise typer.Exit(ExitCode.INPUT_ERROR)
    try:
        if from_stdin:
            return sys.stdin.read()
        return source.read_text(encoding="utf-8")
    except UnicodeDecodeError as exc:
        name = "<stdin>" if from_stdin else source
        typer.echo(f"Input is not valid UTF-8: {name} (byte offset {exc.start})", err=True)
        raise typer.Exit(ExitCode.INPUT_ERROR) from exc


def _configure() -> tuple[Dialect, int | None]:
    from pydantic import ValidationError

    from sqlparam.core.config import get_settings
    from sqlparam.core.logging import setup_logging

    try:
        settings = get_settings()
    except ValidationError as exc:
        typer.echo(f"Invalid configuration: {exc}", err=True)
        raise typer.Exit(ExitCode.INPUT_ERROR) from exc
    setup_logging(settings.log_level, settings.log_format)
    return settings.dialect, settings.max_comment_depth


@app.command()
def rewrite(
    source: Annotated[
        Path | None,
        typer.Argument(help="SQL file to rewrite (stdin when omitted or '-')"),
    ] = None,
    dialect: Annotated[
        Dialect | None,
        typer.Option("--dialect", "-d", help="Target dialect (defaults to SQLPARAM_DIALECT)"),
    ] = None,
    output: Annotated[
        Path | None,
        typer.Option("--output", "-o", help="Output file path"),
    ] = None,
) -> None:
    """Rewrite ? placeholders in a SQL file for the target dialect."""
    from sqlparam.core.exceptions import RewriteError
    from sqlparam.rewriter import rewrite as rewrite_query

    default_dialect, max_depth = _configure()
    query = _read_query(source)

    try:
        result = rewrite_query(query, dialect or default_dialect, max_comment_depth=max_depth)
    except RewriteError as exc:
        typer.echo(str(exc), err=True)
        raise typer.Exit(ExitCode.REWRITE_ERROR) from exc

    if output:
        output.write_bytes(result)
        typer.echo(f"Rewritten query written to {output}", err=True)
    else:
        sys.stdout.write(result.decode("utf-8"))
        sys.stdout.flush()


@app.command()
def segments(
    source: Annotated[
        Path | None,
        typer.Argument(help="SQL file to classify (stdin when omitted or '-')"),
    ] = None,
) -> None:
    """Show how a query is split into text, literal and placeholder segments."""
    from sqlparam.cli.formatters.console import format_segments
    from sqlparam.core.exceptions import RewriteError
    from sqlparam.parsers.lexer import classify

    _, max_depth = _configure()
    query = _read_query(source)

    try:
        result = classify(query, max_depth)
    except RewriteError as exc:
        typer.echo(str(exc), err=True)
        raise typer.Exit(ExitCode.REWRITE_ERROR) from exc

    format_segments(result, str(source) if source else "<stdin>")


@app.command()
def version() -> None:
    """Print the sqlparam version."""
    from sqlparam import __version__

    typer.echo(f"sqlparam v{__version__}")
