"""CLI: echo-skill config set-app-id|show|clear"""

import click
from rich.console import Console

from echo_skill import config as skill_config

console = Console()


@click.group()
def config():
    """Configured application id."""


@config.command("set-app-id")
@click.argument("app_id")
def config_set_app_id(app_id: str):
    """Save the application id requests are verified against."""
    cfg = skill_config.load_config()
    skill_config.save_config({**cfg, "application_id": app_id})
    console.print(f"[green]Application id saved to {skill_config.CONFIG_FILE}[/green]")


@config.command("show")
def config_show():
    """Show the application id in effect."""
    app_id = skill_config.resolve_app_id()
    if app_id:
        console.print(f"Application id: {app_id}")
    else:
        console.print("[yellow]No application id configured.[/yellow]")


@config.command("clear")
def config_clear():
    """Remove saved configuration."""
    skill_config.save_config({})
    console.print("[green]Configuration cleared.[/green]")
