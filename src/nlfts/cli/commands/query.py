"""Natural-language query commands."""

import os
from typing import Annotated

import typer

from nlfts.cli.context import CLIContext, InvocationError
from nlfts.cli.output import OutputFormatter
from nlfts.query import QueryExecutor, QueryTranslator, not_understood
from nlfts.schema import build_catalog

DatabaseArgument = Annotated[
    str | None,
    typer.Argument(
        help="SQLite database path or URL (default: $NLFTS_DATABASE)", show_default=False
    ),
]
QueryArgument = Annotated[
    str | None,
    typer.Argument(help="Free-text request, e.g. 'top 5 latest orders about refund'"),
]


def _resolve_arguments(database: str | None, query: str | None) -> tuple[str | None, str]:
    """Bind a lone positional to the query when NLFTS_DATABASE names the database."""
    if query is None and database is not None and os.getenv("NLFTS_DATABASE"):
        database, query = None, database
    return database, _require_query(query)


def _require_query(query: str | None) -> str:
    if query is None or not query.strip():
        raise InvocationError("Missing query: pass the free-text request to translate")
    return query


def ask_command(
    ctx: typer.Context,
    database: DatabaseArgument = None,
    query: QueryArgument = None,
) -> None:
    """Translate a free-text request into an FTS5 query and run it.

    Prints {query, sql, count, rows}, or {error} when no known table is named.

    Examples:

        nlfts ask library.db 'books about "the great gatsby" after 1950'
        nlfts --pretty ask shop.db "products under 20"
    """
    cli_ctx: CLIContext = ctx.obj
    formatter = OutputFormatter(cli_ctx.pretty)

    try:
        database, query = _resolve_arguments(database, query)
        store = cli_ctx.open_store(database)
    except InvocationError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)

    try:
        catalog = build_catalog(store, cli_ctx.config)
        sql = QueryTranslator(catalog, cli_ctx.config).translate(query)
        if sql is None:
            formatter.print_not_understood(not_understood())
            return

        report = QueryExecutor(store).execute(query, sql)
        formatter.print_report(report)

    except Exception as e:
        formatter.print_error(e)
        raise typer.Exit(code=1)
    finally:
        cli_ctx.close()


def translate_command(
    ctx: typer.Context,
    database: DatabaseArgument = None,
    query: QueryArgument = None,
) -> None:
    """Show the SQL a free-text request translates to, without running it.

    Examples:

        nlfts translate shop.db "show top 3 latest orders"
    """
    cli_ctx: CLIContext = ctx.obj
    formatter = OutputFormatter(cli_ctx.pretty)

    try:
        database, query = _resolve_arguments(database, query)
        store = cli_ctx.open_store(database)
    except InvocationError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)

    try:
        catalog = build_catalog(store, cli_ctx.config)
        sql = QueryTranslator(catalog, cli_ctx.config).translate(query)
        if sql is None:
            formatter.print_not_understood(not_understood())
            return

        formatter.print_sql(query, sql)

    except Exception as e:
        formatter.print_error(e)
        raise typer.Exit(code=1)
    finally:
        cli_ctx.close()


__all__ = ["ask_command", "translate_command"]
