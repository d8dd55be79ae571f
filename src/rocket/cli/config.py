"""
rocket config - Show the resolved configuration.

Resolves .rocket.toml (including environment expansion) and prints the result.
"""

import typer
import yaml
from rich.console import Console
from rich.markup import escape
from rich.syntax import Syntax
from rich.table import Table

from rocket.config.environment import Environment
from rocket.config.loader import get_config
from rocket.config.predefined import PREDEFINED_ENV
from rocket.exceptions import RocketError
from rocket.utils.logging import setup_logging

app = typer.Typer(name="config", help="Show the resolved rocket configuration", invoke_without_command=True)

console = Console()


@app.callback()
def config(
    ctx: typer.Context,
    file: str = typer.Option("", "--file", "-c", help="Configuration file (default: .rocket.toml)"),
    debug: bool = typer.Option(False, "--debug", help="Enable debug logging"),
):
    """
    Resolve the configuration and display it with the predefined variables.
    """
    if ctx.invoked_subcommand is None:
        setup_logging(level="DEBUG" if debug else "INFO")

        environ = Environment()
        try:
            cfg = get_config(file, environ=environ)
        except RocketError as e:
            console.print(f"[red]Error: {escape(e.message)}[/red]")
            raise typer.Exit(1) from None

        content = yaml.safe_dump(cfg.to_dict(), sort_keys=False, allow_unicode=True)
        console.print(Syntax(content, "yaml", theme="monokai"))

        table = Table(title="Predefined variables", show_header=True)
        table.add_column("Name", style="cyan")
        table.add_column("Value", style="green")
        for key in PREDEFINED_ENV:
            table.add_row(key, escape(environ.get(key)) or "-")
        console.print(table)

        providers = cfg.configured_providers()
        console.print(f"[dim]Providers: {', '.join(providers) if providers else 'none'}[/dim]")
