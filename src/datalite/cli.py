"""
Click-based CLI for DataLite.
"""

import json
import logging
import sys
from pathlib import Path
from typing import Any, NoReturn

import click
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.syntax import Syntax
from rich.table import Table

from . import __version__
from .commands import clean_script, run_script, split_script
from .domain.errors import DataLiteError, ScriptExecutionError
from .domain.results import CommandResult
from .models import ScriptOptions
from .providers.base.executor import ExecutionConfig, ExecutionResult

console = Console(soft_wrap=True)
err_console = Console(stderr=True, soft_wrap=True)

SCRIPT_ARGUMENT = click.Path(dir_okay=False, allow_dash=True, path_type=Path)


@click.group()
@click.version_option(version=__version__, prog_name="datalite")
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
def cli(verbose: bool) -> None:
    """DataLite CLI for cleaning, splitting and running SQL scripts"""
    _configure_logging(verbose)


@cli.command()
@click.argument("script", type=SCRIPT_ARGUMENT)
@click.option(
    "--output",
    "-o",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Output file path (default: stdout)",
)
@click.option("--keep-comments", is_flag=True, help="Do not remove SQL comments")
@click.option("--keep-blank-lines", is_flag=True, help="Do not trim blank lines")
def clean(script: Path, output: Path | None, keep_comments: bool, keep_blank_lines: bool) -> None:
    """Remove comments and blank lines from an SQL script"""

    options = ScriptOptions(strip_comments=not keep_comments, trim_lines=not keep_blank_lines)
    try:
        text = clean_script(script, options)
    except DataLiteError as e:
        _fail(e)

    if output:
        output.parent.mkdir(parents=True, exist_ok=True)
        output.write_text(text + "\n" if text else text, encoding="utf-8")
        console.print(f"[green]✓[/green] Cleaned script written to {escape(str(output))}")
    else:
        _print_sql(text)


@cli.command()
@click.argument("script", type=SCRIPT_ARGUMENT)
@click.option("--json", "as_json", is_flag=True, help="Emit a JSON envelope")
@click.option("--raw", is_flag=True, help="Split the text as-is, without cleaning it first")
@click.option(
    "--lenient-keywords",
    is_flag=True,
    help="Match BEGIN/END anywhere, even inside longer words",
)
def split(script: Path, as_json: bool, raw: bool, lenient_keywords: bool) -> None:
    """List the statements of an SQL script"""

    options = ScriptOptions(
        strip_comments=not raw,
        trim_lines=not raw,
        strict_keywords=not lenient_keywords,
    )
    try:
        statements = split_script(script, options)
    except DataLiteError as e:
        _fail(e, as_json=as_json)

    if as_json:
        _emit_json(
            CommandResult(
                success=True,
                message=f"{len(statements)} statement(s)",
                data={"count": len(statements), "statements": statements},
            )
        )
        return

    if not statements:
        console.print("[yellow]No statements found[/yellow]")
        return

    for i, statement in enumerate(statements, 1):
        console.print(f"[cyan]-- Statement {i}/{len(statements)}[/cyan]")
        _print_sql(f"{statement.rstrip()};")


@cli.command()
@click.argument("database", type=click.Path(dir_okay=False, path_type=Path))
@click.argument("script", type=SCRIPT_ARGUMENT)
@click.option("--dry-run", is_flag=True, help="List the statements without executing them")
@click.option("--show-results", is_flag=True, help="Print rows returned by queries")
@click.option("--json", "as_json", is_flag=True, help="Emit a JSON envelope")
@click.option(
    "--lenient-keywords",
    is_flag=True,
    help="Match BEGIN/END anywhere, even inside longer words",
)
def run(
    database: Path,
    script: Path,
    dry_run: bool,
    show_results: bool,
    as_json: bool,
    lenient_keywords: bool,
) -> None:
    """Execute an SQL script against a SQLite database"""

    options = ScriptOptions(strict_keywords=not lenient_keywords)
    config = ExecutionConfig(dry_run=dry_run, fetch_results=show_results or as_json)
    try:
        result = run_script(database, script, options, config)
    except ScriptExecutionError as e:
        _fail(e, as_json=as_json, data=_result_data(e.result))
    except DataLiteError as e:
        _fail(e, as_json=as_json)

    if as_json:
        _emit_json(
            CommandResult(
                success=True,
                message=f"Executed {result.successful_statements} statement(s)",
                data=_result_data(result),
            )
        )
        return

    if dry_run:
        console.print(
            f"[yellow]Dry run:[/yellow] {result.total_statements} statement(s) would be executed"
        )
        for i, statement_result in enumerate(result.statement_results, 1):
            console.print(f"[cyan]-- Statement {i}/{result.total_statements}[/cyan]")
            _print_sql(f"{statement_result.sql.rstrip()};")
        return

    if show_results:
        for statement_result in result.statement_results:
            if statement_result.result_data:
                _print_rows(statement_result.result_data)

    seconds = result.total_execution_time_ms / 1000
    console.print(
        f"[green]✓[/green] Executed {result.successful_statements} statement(s) in {seconds:.2f}s"
    )


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=err_console, show_path=False)],
        force=True,
    )


def _print_sql(text: str) -> None:
    """Print SQL, highlighted on a terminal and verbatim otherwise."""
    if console.is_terminal:
        console.print(Syntax(text, "sql", theme="monokai", line_numbers=False))
    else:
        click.echo(text)


def _print_rows(rows: list[dict[str, object]]) -> None:
    table = Table()
    for column in rows[0]:
        table.add_column(escape(str(column)))
    for row in rows:
        table.add_row(*(escape(str(value)) for value in row.values()))
    console.print(table)


def _result_data(result: ExecutionResult | None) -> dict[str, Any]:
    return result.model_dump() if result is not None else {}


def _emit_json(result: CommandResult) -> None:
    click.echo(json.dumps(result.as_json_dict(), indent=2, default=str))


def _fail(
    error: DataLiteError, as_json: bool = False, data: dict[str, Any] | None = None
) -> NoReturn:
    if as_json:
        _emit_json(
            CommandResult(success=False, code=error.code, message=error.message, data=data or {})
        )
    else:
        err_console.print(f"[red]✗ Error:[/red] {escape(error.message)}")
    sys.exit(1)


def main() -> None:
    cli()


if __name__ == "__main__":
    main()
