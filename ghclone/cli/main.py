"""CLI entrypoint that wires subcommands into a Typer app."""

import typer

from .commands.clone import app as clone_app

app = typer.Typer(add_completion=False, help="Clone every repository of your GitHub account and organizations.")


app.add_typer(clone_app, name="clone", help="Clone all repositories of the selected organizations")
