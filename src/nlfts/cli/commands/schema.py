"""Schema inspection command."""

import typer

from nlfts.cli.commands.query import DatabaseArgument
from nlfts.cli.context import CLIContext, InvocationError
from nlfts.cli.output import OutputFormatter
from nlfts.schema import build_catalog


def schema_command(
    ctx: typer.Context,
    database: DatabaseArgument = None,
) -> None:
    """List mirrored tables and the column types inferred for them.

    Examples:

        nlfts schema library.db
        nlfts --pretty --sample-size 50 schema library.db
    """
    cli_ctx: CLIContext = ctx.obj
    formatter = OutputFormatter(cli_ctx.pretty)

    try:
        store = cli_ctx.open_store(database)
    except InvocationError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)

    try:
        catalog = build_catalog(store, cli_ctx.config)
        formatter.print_catalog(catalog, cli_ctx.config.mirror_suffix)
    except Exception as e:
        formatter.print_error(e)
        raise typer.Exit(code=1)
    finally:
        cli_ctx.close()


__all__ = ["schema_command"]
