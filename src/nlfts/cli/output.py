"""Output formatting for CLI commands."""

import json
from typing import Any

from rich.console import Console
from rich.panel import Panel
from rich.syntax import Syntax
from rich.table import Table

from nlfts.core.types import Catalog, QueryReport
from nlfts.exceptions import NLFTSError

console = Console()
err_console = Console(stderr=True)


class OutputFormatter:
    """Formats output as JSON (default) or Rich tables."""

    def __init__(self, pretty: bool = False) -> None:
        """Initialize formatter.

        Args:
            pretty: If True, render Rich tables and panels instead of JSON
        """
        self.pretty = pretty

    def print_json(self, data: Any) -> None:
        print(json.dumps(data, default=str, indent=2))

    def print_report(self, report: QueryReport) -> None:
        """Print a query report: the request, its SQL, and the matching rows.

        Args:
            report: Executed query report
        """
        if not self.pretty:
            self.print_json(report.model_dump())
            return

        console.print(f"[bold]Query:[/bold] {report.query}")
        console.print(Syntax(report.sql, "sql", word_wrap=True))
        if not report.rows:
            console.print("[yellow]No results found.[/yellow]")
            return

        columns = list(report.rows[0].keys())
        table = Table(show_header=True, header_style="bold magenta")
        for col in columns:
            table.add_column(col, max_width=60)
        for row in report.rows:
            table.add_row(*[str(row.get(col, "")) for col in columns])
        console.print(table)
        console.print(f"\n[dim]{report.count} result(s)[/dim]")

    def print_sql(self, query: str, sql: str) -> None:
        """Print the SQL translated from a request without executing it."""
        if not self.pretty:
            self.print_json({"query": query, "sql": sql})
            return

        console.print(f"[bold]Query:[/bold] {query}")
        console.print(Syntax(sql, "sql", word_wrap=True))

    def print_not_understood(self, payload: dict[str, Any]) -> None:
        """Print the structured result for a request naming no known table."""
        if not self.pretty:
            self.print_json(payload)
            return

        console.print(f"[yellow]{payload['error']}[/yellow]")

    def print_catalog(self, catalog: Catalog, mirror_suffix: str) -> None:
        """Print inferred schemas, one entry per mirrored base table.

        Args:
            catalog: Catalog built for this invocation
            mirror_suffix: Suffix used to name mirror tables
        """
        if not self.pretty:
            self.print_json(
                [
                    {
                        "table": table.name,
                        "mirror": table.mirror_name(mirror_suffix),
                        "columns": [
                            {"name": c.name, "type": c.type.value} for c in table.columns
                        ],
                    }
                    for table in catalog
                ]
            )
            return

        if len(catalog) == 0:
            console.print("[yellow]No mirror tables found.[/yellow]")
            return

        for table in catalog:
            columns_table = Table(
                title=f"{table.name} → {table.mirror_name(mirror_suffix)}",
                show_header=True,
                header_style="bold cyan",
            )
            columns_table.add_column("Column")
            columns_table.add_column("Type")
            for column in table.columns:
                columns_table.add_row(column.name, column.type.value)
            console.print(columns_table)

    def print_error(self, error: Exception) -> None:
        """Print error message.

        Args:
            error: Exception to display
        """
        if not self.pretty:
            if isinstance(error, NLFTSError):
                self.print_json(error.to_dict())
            else:
                self.print_json({"error": str(error)})
            return

        error_text = str(error)
        if isinstance(error, NLFTSError) and error.context:
            context_str = "\n".join(f"{k}: {v}" for k, v in error.context.items())
            error_text = f"{error_text}\n\n{context_str}"

        err_console.print(Panel(error_text, title="[red]Error[/red]", border_style="red"))
