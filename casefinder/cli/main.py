"""Main CLI entry point and application setup."""

import logging
import sys
from dataclasses import dataclass, field
from pathlib import Path

import click
from click.exceptions import Exit
from rich.console import Console

from casefinder import __version__
from casefinder.catalog import load_catalog
from casefinder.cli.commands import search
from casefinder.cli.config import load_config, search_config_from
from casefinder.core.models import UseCase
from casefinder.exceptions import CatalogError
from casefinder.search import SearchEngine


@dataclass
class Context:
    """CLI context that holds shared resources."""

    engine: SearchEngine
    console: Console
    catalog_path: Path | None = None
    config: dict = field(default_factory=dict)
    debug: bool = False
    _records: list[UseCase] | None = None

    @property
    def records(self) -> list[UseCase]:
        """Catalog records, loaded on first use."""
        if self._records is None:
            if self.catalog_path is None:
                raise CatalogError(
                    "<none>",
                    "no catalog given; use --catalog or set CASEFINDER_CATALOG",
                )
            self._records = load_catalog(self.catalog_path)
        return self._records

    def find_record(self, record_id: str) -> UseCase | None:
        """Find a catalog record by id."""
        for record in self.records:
            if record.id == record_id:
                return record
        return None


def setup_logging(
    verbose: bool = False, quiet: bool = False, debug: bool = False
) -> None:
    """Configure logging based on CLI flags."""
    if quiet:
        level = logging.WARNING
    elif verbose or debug:
        level = logging.DEBUG
    else:
        level = logging.INFO

    logging.basicConfig(
        level=level,
        format="%(levelname)s: %(message)s"
        if not debug
        else "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )


def create_console(no_color: bool = False, width: int | None = None) -> Console:
    """Create Rich console with appropriate settings."""
    return Console(
        no_color=no_color,
        width=width or 120,
        highlight=not no_color,
        color_system=None if no_color else "auto",
    )


class CasefinderGroup(click.Group):
    """Custom group that handles KeyboardInterrupt and application errors."""

    def invoke(self, ctx):
        try:
            return super().invoke(ctx)
        except KeyboardInterrupt:
            console = getattr(ctx.obj, "console", None) if ctx.obj else None
            if console:
                console.print("[yellow]Interrupted[/yellow]")
            ctx.exit(130)
        except (click.ClickException, click.Abort, Exit, SystemExit):
            raise
        except Exception as e:
            debug = getattr(ctx.obj, "debug", False) if ctx.obj else False
            if debug:
                raise
            console = getattr(ctx.obj, "console", None) if ctx.obj else None
            if console:
                console.print(f"[red]Error:[/red] {e}")
            else:
                click.echo(f"Error: {e}", err=True)
            ctx.exit(1)


@click.group(cls=CasefinderGroup)
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose output")
@click.option("--quiet", "-q", is_flag=True, help="Suppress non-error output")
@click.option("--no-color", is_flag=True, help="Disable colored output")
@click.option("--debug", is_flag=True, help="Enable debug mode with full tracebacks")
@click.option(
    "--config",
    "-c",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="Path to configuration file",
)
@click.option(
    "--catalog",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Catalog file (JSON or YAML)",
)
@click.version_option(
    version=__version__,
    prog_name="casefinder",
    message="casefinder version %(version)s",
)
@click.pass_context
def cli(
    ctx: click.Context,
    verbose: bool,
    quiet: bool,
    no_color: bool,
    debug: bool,
    config: Path | None,
    catalog: Path | None,
) -> None:
    """Search a catalog of use cases.

    Find use cases by keyword or fuzzy match, narrow them with filters,
    and discover related entries.
    """
    setup_logging(verbose=verbose, quiet=quiet, debug=debug)
    console = create_console(no_color=no_color)

    try:
        config_data = load_config(config)
        engine = SearchEngine(config=search_config_from(config_data))
    except Exception as e:
        if debug:
            raise
        console.print(f"[red]Error loading configuration:[/red] {e}")
        ctx.exit(1)

    catalog_path = catalog
    if catalog_path is None and config_data.get("catalog"):
        catalog_path = Path(config_data["catalog"])

    ctx.obj = Context(
        engine=engine,
        console=console,
        catalog_path=catalog_path,
        config=config_data,
        debug=debug,
    )


cli.add_command(search.search)
cli.add_command(search.related)
cli.add_command(search.suggest)
cli.add_command(search.filters)


def main() -> None:
    """Main entry point for the CLI application."""
    try:
        cli()
    except KeyboardInterrupt:
        sys.exit(130)


if __name__ == "__main__":
    main()
