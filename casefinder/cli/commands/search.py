"""Search, recommendation and suggestion CLI commands."""

import click
import msgspec
from rich.console import Console
from rich.table import Table

from casefinder.core.fields import FilterDimension
from casefinder.core.models import ScoredUseCase
from casefinder.search import SortKey


def get_engine(ctx):
    """Get the search engine from context."""
    return ctx.obj.engine


def get_records(ctx):
    """Get the catalog records from context."""
    return ctx.obj.records


@click.command()
@click.argument("query", default="")
@click.option("--surface", "surfaces", multiple=True, help="Filter by Copilot surface")
@click.option("--mode", "modes", multiple=True, help="Filter by mode")
@click.option("--risk", "risk_levels", multiple=True, help="Filter by risk level")
@click.option(
    "--language",
    "languages",
    multiple=True,
    help="Filter by language ('all' also matches language-agnostic entries)",
)
@click.option("--category", "categories", multiple=True, help="Filter by category")
@click.option(
    "--sort",
    "-s",
    "sort_key",
    type=click.Choice([key.value for key in SortKey]),
    default=SortKey.RELEVANCE.value,
    help="Sort order",
)
@click.option("--fuzzy", is_flag=True, help="Tolerate misspellings")
@click.option("--limit", "-n", type=int, default=20, help="Maximum results to show")
@click.option(
    "--format",
    "-f",
    "output_format",
    type=click.Choice(["table", "json"]),
    default="table",
    help="Output format",
)
@click.pass_context
def search(ctx: click.Context, query: str, **kwargs) -> None:
    """Search use cases.

    Matches QUERY against titles, descriptions, categories, tags and
    example prompts. With filters only, lists every matching use case.
    """
    console = ctx.obj.console
    engine = get_engine(ctx)
    records = get_records(ctx)

    filters = {
        FilterDimension.SURFACES.value: kwargs["surfaces"],
        FilterDimension.MODES.value: kwargs["modes"],
        FilterDimension.RISK_LEVELS.value: kwargs["risk_levels"],
        FilterDimension.LANGUAGES.value: kwargs["languages"],
        FilterDimension.CATEGORIES.value: kwargs["categories"],
    }

    if kwargs["fuzzy"]:
        results = engine.fuzzy_search(records, query, filters)
        if kwargs["sort_key"] != SortKey.RELEVANCE.value:
            results = engine.sort(results, kwargs["sort_key"])
    else:
        results = engine.search(records, query, filters, kwargs["sort_key"])

    limit = kwargs["limit"]
    shown = results[:limit] if limit and limit > 0 else results

    if kwargs["output_format"] == "json":
        click.echo(msgspec.json.encode([r.to_dict() for r in shown]).decode())
        return

    _display_results(console, shown, len(results), query)


@click.command()
@click.argument("record_id")
@click.option("--limit", "-n", type=int, default=None, help="Maximum related entries")
@click.pass_context
def related(ctx: click.Context, record_id: str, limit: int | None) -> None:
    """Show use cases related to the one with RECORD_ID."""
    console = ctx.obj.console
    engine = get_engine(ctx)
    records = get_records(ctx)

    record = ctx.obj.find_record(record_id)
    if record is None:
        console.print(f"[red]Use case not found:[/red] {record_id}")
        ctx.exit(1)

    results = engine.related(record, records, limit)
    if not results:
        console.print(f"\n[yellow]No related use cases for '{record.title}'[/yellow]")
        return

    console.print(f"\nRelated to [cyan]{record.title}[/cyan]")
    _display_results_table(console, results)


@click.command()
@click.argument("partial")
@click.pass_context
def suggest(ctx: click.Context, partial: str) -> None:
    """Suggest completions for PARTIAL input."""
    engine = get_engine(ctx)
    records = get_records(ctx)

    for suggestion in engine.suggest(records, partial):
        click.echo(suggestion)


@click.command()
@click.option("--counts", is_flag=True, help="Show how many use cases carry each value")
@click.pass_context
def filters(ctx: click.Context, counts: bool) -> None:
    """List the filter values available in the catalog."""
    console = ctx.obj.console
    engine = get_engine(ctx)
    records = get_records(ctx)

    if counts:
        for dimension, values in engine.count_filter_values(records).items():
            console.print(f"\n[bold]{dimension}:[/bold]")
            if not values:
                console.print("  [dim](none)[/dim]")
            for value in values:
                console.print(f"  {value.value} ({value.count})")
        return

    for dimension, values in engine.extract_filter_options(records).to_dict().items():
        joined = ", ".join(values) if values else "[dim](none)[/dim]"
        console.print(f"[bold]{dimension}:[/bold] {joined}")


def _display_results(
    console: Console, results: list[ScoredUseCase], total: int, query: str
) -> None:
    """Display search results with a count header."""
    if total == 0:
        if query:
            console.print(f"\n[yellow]No results found for '{query}'[/yellow]")
        else:
            console.print("\n[yellow]No results found[/yellow]")
        return

    if total == 1:
        console.print("\nFound [green]1[/green] result")
    else:
        console.print(f"\nFound [green]{total}[/green] results")

    _display_results_table(console, results)


def _display_results_table(console: Console, results: list[ScoredUseCase]) -> None:
    """Display results in table format."""
    table = Table()
    table.add_column("ID", style="cyan")
    table.add_column("Title", overflow="ellipsis", max_width=40)
    table.add_column("Category", overflow="ellipsis", max_width=20)
    table.add_column("Risk", justify="center")
    table.add_column("Score", justify="right")

    for result in results:
        table.add_row(
            result.id,
            result.title,
            result.category or "",
            result.risk_level or "",
            f"{result.score:.0f}",
        )

    console.print(table)
