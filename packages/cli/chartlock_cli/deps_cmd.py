"""Deps command - Resolve chart dependencies and write the lock file."""
from typing import Optional

import typer

from chartlock_common import get_settings
from chartlock_sdk import (
    HelmDependencyUpdater,
    get_unresolved_dependencies,
    load_state,
    lock_name_for,
    update_dependencies,
)
from .utils import console, handle_error, info, releases_table, setup_logging, success


def deps(
    path: str = typer.Argument(
        "helmfile.yaml",
        help="Path to the state file"
    ),
    helm_binary: Optional[str] = typer.Option(
        None,
        "--helm",
        help="Helm executable (default: CHARTLOCK_HELM_BINARY or 'helm')",
    ),
    timeout: Optional[float] = typer.Option(
        None,
        "--timeout",
        help="Seconds to wait for helm (default: CHARTLOCK_HELM_TIMEOUT or no limit)",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose", "-v",
        help="Show detailed output"
    )
):
    """
    Resolve remote chart versions and update the lock file.

    Every release whose chart is `<repository>/<chart>` with a matching
    repository entry is resolved with `helm dependency update`. The result is
    written next to the state file as `<state name>.lock`.

    Examples:
        chartlock deps
        chartlock deps deploy/helmfile.yaml --timeout 120
    """
    try:
        setup_logging(verbose)
        settings = get_settings()
        state = load_state(path)
        _, unresolved = get_unresolved_dependencies(state)
        if unresolved.is_empty():
            info("No remote chart dependencies found, nothing to lock")
            return

        info(f"Resolving {len(unresolved)} chart dependencies...")
        updater = HelmDependencyUpdater(
            helm_binary=helm_binary or settings.helm_binary,
            timeout=timeout if timeout is not None else settings.helm_timeout,
        )
        updated = update_dependencies(
            state, updater, workspace_prefix=settings.workspace_prefix
        )

        changed = [
            new.chart
            for old, new in zip(state.releases, updated.releases)
            if old.version != new.version
        ]
        console.print(releases_table(updated, changed))
        success(f"Wrote {lock_name_for(state.file_path)}.lock")
    except KeyboardInterrupt:
        info("\nUpdate cancelled by user")
        raise typer.Exit(130)
    except typer.Exit:
        raise
    except Exception as e:
        handle_error(e, verbose)
