"""Console helpers shared by CLI commands."""
from typing import List

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from chartlock_common import ChartlockError, configure_logging, get_settings
from chartlock_common.constants import DEFAULT_EXIT_CODE, EXIT_CODES
from chartlock_schema import HelmState

console = Console()


def success(message: str) -> None:
    console.print(f"[green]✅ {message}[/green]")


def error(message: str) -> None:
    console.print(f"[red]❌ {message}[/red]")


def info(message: str) -> None:
    console.print(f"[blue]ℹ️  {message}[/blue]")


def warning(message: str) -> None:
    console.print(f"[yellow]⚠️  {message}[/yellow]")


def setup_logging(verbose: bool) -> None:
    configure_logging("debug" if verbose else get_settings().log_level)


def exit_code_for(exc: Exception) -> int:
    if isinstance(exc, ChartlockError):
        return EXIT_CODES.get(exc.code, DEFAULT_EXIT_CODE)
    return DEFAULT_EXIT_CODE


def handle_error(exc: Exception, verbose: bool = False) -> None:
    """Print an error and exit with the code assigned to its kind."""
    if isinstance(exc, ChartlockError):
        error(escape(f"[{exc.code}] {exc.message}"))
    else:
        error(escape(str(exc)))
    if verbose:
        console.print_exception()
    raise typer.Exit(exit_code_for(exc))


def releases_table(state: HelmState, changed: List[str]) -> Table:
    """Tabulate releases; rows whose chart is in ``changed`` are highlighted."""
    table = Table(title="Releases")
    table.add_column("Release")
    table.add_column("Chart")
    table.add_column("Version")
    for release in state.releases:
        style = "bold green" if release.chart in changed else None
        table.add_row(release.name or "-", release.chart, release.version or "*", style=style)
    return table
