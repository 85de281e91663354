"""nlfts CLI - Main entry point."""

from typing import Annotated

import typer
from pydantic import ValidationError

import nlfts
from nlfts.cli.context import CLIContext, configure_logging
from nlfts.core.config import NLFTSConfig

# Create main Typer app
app = typer.Typer(
    name="nlfts",
    help="nlfts - Ask SQLite full-text mirror tables questions in plain English",
    no_args_is_help=True,
)


@app.callback()
def main_callback(
    ctx: typer.Context,
    mirror_suffix: Annotated[
        str | None,
        typer.Option(
            "--suffix",
            "-s",
            envvar="NLFTS_MIRROR_SUFFIX",
            help="Suffix naming full-text mirror tables [default: _fts]",
            show_default=False,
        ),
    ] = None,
    sample_size: Annotated[
        int | None,
        typer.Option(
            "--sample-size",
            envvar="NLFTS_SAMPLE_SIZE",
            help="Values sampled per column for type inference [default: 10]",
            show_default=False,
        ),
    ] = None,
    pretty: Annotated[
        bool,
        typer.Option(
            "--pretty",
            "-p",
            help="Render Rich tables instead of JSON",
        ),
    ] = False,
    echo: Annotated[
        bool,
        typer.Option(
            "--echo",
            "-e",
            help="Echo SQL statements to console",
        ),
    ] = False,
    verbose: Annotated[
        bool,
        typer.Option(
            "--verbose",
            "-v",
            help="Log catalog and translation decisions to stderr",
        ),
    ] = False,
) -> None:
    """Initialize CLI context with global options."""
    configure_logging(verbose)

    overrides: dict[str, object] = {}
    if mirror_suffix is not None:
        overrides["mirror_suffix"] = mirror_suffix
    if sample_size is not None:
        overrides["sample_size"] = sample_size
    try:
        config = NLFTSConfig.model_validate(overrides)
    except ValidationError as e:
        typer.echo(f"Error: invalid option: {e.errors()[0]['msg']}", err=True)
        raise typer.Exit(code=1)

    # Store in Typer context for command access
    ctx.obj = CLIContext(config=config, pretty=pretty, echo=echo)


@app.command()
def version() -> None:
    """Show version information."""
    typer.echo(f"nlfts v{nlfts.__version__}")


# Register commands
from nlfts.cli.commands import query, schema  # noqa: E402

app.command(name="ask")(query.ask_command)
app.command(name="translate")(query.translate_command)
app.command(name="schema")(schema.schema_command)


def main() -> None:
    """Main entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
