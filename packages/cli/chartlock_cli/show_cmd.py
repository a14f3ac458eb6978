"""Show command - Print releases with versions pinned from the lock file."""
import typer
from rich.syntax import Syntax

from chartlock_sdk import (
    dump_state,
    get_unresolved_dependencies,
    load_state,
    merge_locked_dependencies,
)
from .utils import console, handle_error, info, releases_table, setup_logging, warning


def show(
    path: str = typer.Argument(
        "helmfile.yaml",
        help="Path to the state file"
    ),
    as_yaml: bool = typer.Option(
        False,
        "--yaml",
        help="Print the merged state document as YAML",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose", "-v",
        help="Show detailed output"
    )
):
    """
    Show the state's releases with locked chart versions applied.

    Examples:
        chartlock show
        chartlock show deploy/helmfile.yaml --yaml
    """
    try:
        setup_logging(verbose)
        state = load_state(path)
        name, unresolved = get_unresolved_dependencies(state)
        merged = merge_locked_dependencies(state)

        if unresolved.is_empty():
            info("No remote chart dependencies found")
        elif merged is state:
            warning(f"No lock file {name}.lock found. Run 'chartlock deps' first.")

        if as_yaml:
            console.print(Syntax(dump_state(merged), "yaml"))
        else:
            locked = [
                new.chart
                for old, new in zip(state.releases, merged.releases)
                if old.version != new.version
            ]
            console.print(releases_table(merged, locked))
    except typer.Exit:
        raise
    except Exception as e:
        handle_error(e, verbose)
