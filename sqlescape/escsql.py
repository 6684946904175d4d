"""
sqlescape main module.

This module serves as the command line entry point for sqlescape, a rewriter
for ``{keyword args}`` escape clauses embedded in SQL text.

Features:
- Rewrites escape clauses using the standard SQLite handler registry
- Registers extra pass-through keywords from options or a handlers file
- Splits text into top-level comma separated fields
- Reads SQL from the command line or from piped stdin

Examples:
    Rewrite a query:
        $ escsql "SELECT * FROM t {limit 10}"

    Pipe a query in:
        $ echo "SELECT {fn ucase(name)} FROM t" | escsql

    Register a custom keyword:
        $ escsql --passthru top "SELECT {top 5} * FROM t"

    Split a field list:
        $ escsql --split "(select a, b), c, 'd, e'"

Note:
    Input priority order:
    1. SQL argument (if provided)
    2. stdin (if piped)
"""

import sys
from pathlib import Path
from typing import Final, Optional
import click
from rich.markup import escape
from rich.panel import Panel
from sqlescape.commands.base import RichCommand, rich_help
from sqlescape.config.settings import appsettings, console, handlers_load
from sqlescape.lib.log import LOG
from sqlescape.lib.parser import EscapeParser, handlerMap_build
from sqlescape.models.dataModel import ParseResult

__version__: Final[str] = "0.1.0"

HELP: Final[str] = rich_help(
    "escsql",
    "Rewrite {keyword args} escape clauses in SQL text.",
    "escsql [OPTIONS] [SQL]",
    {
        "SQL": "Escaped SQL; read from stdin when omitted",
        "--split": "Print the top-level comma separated fields instead",
        "--passthru KEYWORD": "Echo KEYWORD with its arguments (repeatable)",
        "--arg-only KEYWORD": "Replace KEYWORD clauses by their arguments (repeatable)",
        "--no-defaults": "Do not register the standard SQLite keywords",
        "--handlers PATH": "JSON file of extra keywords",
        "-V, --version": "Show the version and exit",
    },
)


def sql_read(sql: Optional[str]) -> Optional[str]:
    """Pick the SQL to process.

    Args:
        sql: SQL given on the command line, if any

    Returns:
        The SQL text, or None if there is nothing to read
    """
    if sql is not None:
        return sql
    if not sys.stdin.isatty():
        return sys.stdin.read().rstrip("\n")
    return None


def summary_print(result: ParseResult, keywords: list[str]) -> None:
    """Show a summary panel of a transform."""
    status: str = "[green]ok[/green]" if result.success else "[red]failed[/red]"
    console.print(
        Panel(
            f"status: {status}\nkeywords: {escape(', '.join(sorted(keywords)))}",
            title="escsql",
            expand=False,
            border_style="cyan",
        )
    )


@click.command(cls=RichCommand, help=HELP)
@click.argument("sql", required=False)
@click.option("--split", "split_mode", is_flag=True, help="Split into fields")
@click.option("--passthru", multiple=True, help="Keyword echoed with its arguments")
@click.option("--arg-only", multiple=True, help="Keyword replaced by its arguments")
@click.option("--no-defaults", is_flag=True, help="Skip the standard keywords")
@click.option(
    "--handlers",
    "handlers_file",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    default=None,
    help="JSON file of extra keywords",
)
@click.version_option(__version__, "-V", "--version", prog_name="escsql")
def main(
    sql: Optional[str],
    split_mode: bool,
    passthru: tuple[str, ...],
    arg_only: tuple[str, ...],
    no_defaults: bool,
    handlers_file: Optional[Path],
) -> None:
    text: Optional[str] = sql_read(sql)
    if text is None:
        console.print("[bold red]Error:[/bold red] no SQL given and stdin is a terminal")
        sys.exit(2)

    parser: EscapeParser
    try:
        extra = handlers_load(handlers_file or appsettings.handlersFile)
        parser = EscapeParser(
            handlerMap_build(
                passthru=passthru,
                arg_only=arg_only,
                defaults=not no_defaults,
                extra=extra,
            )
        )
    except ValueError as e:
        LOG(f"Handler configuration failed: {e}")
        console.print(f"[bold red]Configuration error:[/bold red] {escape(str(e))}")
        sys.exit(1)

    if split_mode:
        for field in parser.split(text):
            console.print(
                field, markup=False, highlight=False, emoji=False, soft_wrap=True
            )
        return

    result: ParseResult = parser.parse(text)
    if appsettings.detailedOutput:
        summary_print(result, list(parser.handlers))
    if not result.success:
        console.print(
            f"[bold red]Syntax error:[/bold red] {escape(result.error or '')}",
            soft_wrap=True,
        )
        sys.exit(1)
    console.print(
        result.text, markup=False, highlight=False, emoji=False, soft_wrap=True
    )


if __name__ == "__main__":
    main()
