"""chartlock CLI - Main entry point."""
import typer

from chartlock_common import CHARTLOCK_VERSION
from . import deps_cmd, show_cmd

app = typer.Typer(
    name="chartlock",
    help="chartlock CLI - Lock remote chart versions of a state file",
    no_args_is_help=True,
    add_completion=False
)

# Register all commands
app.command()(deps_cmd.deps)
app.command()(show_cmd.show)


@app.command()
def version():
    """Print the chartlock version."""
    typer.echo(f"chartlock {CHARTLOCK_VERSION}")


def main():
    """Entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
