"""
Main CLI entry point.
"""

import typer

from rocket import __version__
from rocket.cli import config, init


def version_callback(value: bool):
    """Callback to display version and exit."""
    if value:
        typer.echo(f"rocket version {__version__}")
        raise typer.Exit()


app = typer.Typer(
    name="rocket",
    help="Rocket - automated software delivery as fast and easy as possible",
    add_completion=False,
)

# Register subcommands
app.add_typer(init.app, name="init")
app.add_typer(config.app, name="config")


@app.callback(invoke_without_command=True)
def entrypoint(
    ctx: typer.Context,
    version: bool = typer.Option(
        False,
        "--version",
        "-v",
        callback=version_callback,
        is_eager=True,
        help="Show version and exit.",
    ),
):
    """
    Rocket - automated software delivery as fast and easy as possible.

    Run 'rocket <command> --help' for help on a specific command.
    """
    if ctx.invoked_subcommand is None:
        typer.echo(ctx.get_help())
        raise typer.Exit()


def main():
    """Main CLI entry point."""
    app()


if __name__ == "__main__":
    main()
