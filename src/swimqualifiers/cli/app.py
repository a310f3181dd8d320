"""Swim Qualifiers CLI application.

Usage:
    swimqualifiers run
    swimqualifiers standards

Inputs and output are configured through settings (environment or .env),
see swimqualifiers.config.
"""

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from swimqualifiers.config import get_settings
from swimqualifiers.errors import ConfigurationError
from swimqualifiers.logging import configure_logging
from swimqualifiers.models import QualifierSummary, Sex, StandardsTable
from swimqualifiers.services.event_parser import format_seconds
from swimqualifiers.services.pipeline import load_standards, run_pipeline

console = Console()
app = typer.Typer(
    name="swimqualifiers",
    help="Count meet results that meet age-group qualifying times",
    no_args_is_help=True,
)


@app.callback()
def main() -> None:
    """Configure logging before any command runs."""
    configure_logging(get_settings())


def _make_summary_table(standards: StandardsTable, summary: QualifierSummary) -> Table:
    table = Table(title="Qualifier Summary")
    table.add_column("Sex", style="cyan")
    table.add_column("Age", justify="right")
    table.add_column("Athletes", justify="right")
    table.add_column("Qualifiers", justify="right", style="green")

    for sex in Sex:
        for age in standards.age_groups(sex):
            table.add_row(
                sex.value,
                age,
                str(summary.total_athlete_count(sex, age)),
                str(summary.unique_qualifier_count(sex, age)),
            )
    return table


def _make_standards_table(sex: Sex, standards: StandardsTable) -> Table:
    ages = standards.age_groups(sex)
    table = Table(title=f"{sex.value} Time Standards")
    table.add_column("Event", style="cyan")
    for age in ages:
        table.add_column(age, justify="right")

    for event in standards.events(sex):
        times = standards.event_standards(sex, event) or {}
        table.add_row(
            event,
            *(format_seconds(times[age]) if age in times else "-" for age in ages),
        )
    return table


@app.command("run")
def run():
    """Count qualifiers in every meet file and write the report workbook."""
    settings = get_settings()

    try:
        with console.status("Counting qualifiers..."):
            result = run_pipeline(settings)
    except ConfigurationError as e:
        console.print(f"[red]Error: {escape(str(e))}[/red]")
        raise typer.Exit(1) from None

    console.print(_make_summary_table(result.standards, result.summary))
    console.print(
        f"Parsed {result.files_parsed} meet files, "
        f"{result.results_extracted} results extracted"
    )
    if result.files_failed:
        console.print(f"[yellow]Skipped {result.files_failed} unreadable meet files[/yellow]")
    console.print(f"[green]Analysis complete! Results saved to {result.output_file}[/green]")


@app.command("standards")
def standards():
    """Show the qualifying times loaded from the standards workbook."""
    settings = get_settings()

    try:
        table = load_standards(settings)
    except ConfigurationError as e:
        console.print(f"[red]Error: {escape(str(e))}[/red]")
        raise typer.Exit(1) from None

    for sex in Sex:
        if not table.events(sex):
            console.print(f"[yellow]No standards for {sex.value}[/yellow]")
            continue
        console.print(_make_standards_table(sex, table))


if __name__ == "__main__":
    app()
