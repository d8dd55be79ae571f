"""
rocket init - Create a default configuration file.
"""

from pathlib import Path

import typer

from rocket.config.locator import DEFAULT_CONFIG_FILE
from rocket.config.schema import default_config

app = typer.Typer(name="init", help="Create a default rocket configuration file", invoke_without_command=True)


def render_default_config() -> str:
    """Return the TOML text written by `rocket init`."""
    config = default_config()
    return f"""# rocket configuration
description = "{config.description}"

# Shell commands run by the script provider.
# script = ["make release"]

# Variables exported before deploying. Values are expanded against the
# environment ($VAR or ${{VAR}}); use $$ for a literal dollar sign.
# Already-set variables are kept, except ROCKET_COMMIT_HASH, ROCKET_LAST_TAG
# and ROCKET_GIT_REPO, which are derived from git and may be overridden here.
[env]
# RELEASE_NAME = "release-$ROCKET_LAST_TAG"

# Uncomment the providers you deploy to.

# [github_releases]
# name = "$ROCKET_LAST_TAG"
# assets = ["dist/*"]

# [docker]
# images = ["$ROCKET_GIT_REPO:$ROCKET_LAST_TAG", "$ROCKET_GIT_REPO:latest"]

# [heroku]
# app = "my-app"
"""


@app.callback()
def init(
    ctx: typer.Context,
    file: Path = typer.Option(Path(DEFAULT_CONFIG_FILE), "--file", "-c", help="Configuration file to create"),
    force: bool = typer.Option(False, "--force", "-f", help="Overwrite an existing file"),
):
    """
    Write a default configuration file.
    """
    if ctx.invoked_subcommand is None:
        if file.exists() and not force:
            typer.echo(f"Error: {file} already exists (use --force to overwrite)", err=True)
            raise typer.Exit(1)

        file.write_text(render_default_config())
        typer.echo(f"Created rocket configuration: {file}")
