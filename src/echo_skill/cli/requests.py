"""CLI: echo-skill inspect|verify"""

import json
from typing import Optional

import click
from rich.console import Console
from rich.table import Table

from echo_skill.config import resolve_app_id

console = Console()


def _read_request(stream):
    from echo_skill.cli.main import _read_request
    return _read_request(stream)


@click.command("inspect")
@click.argument("request_file", type=click.File("r"))
@click.option("--json-output", "--json", is_flag=True)
def inspect_cmd(request_file, json_output):
    """Show the fields a request carries."""
    req = _read_request(request_file)
    summary = {
        "request_type": req.request_type,
        "intent_name": req.intent_name,
        "session_id": req.session_id,
        "user_id": req.user_id,
        "locale": req.locale,
        "slots": {key: slot.value for key, slot in req.all_slots().items()},
    }
    if json_output:
        click.echo(json.dumps(summary, indent=2))
        return

    table = Table(title=f"{req.request_type or 'Unknown request'}")
    table.add_column("Field", style="bold")
    table.add_column("Value")
    for field in ("intent_name", "session_id", "user_id", "locale"):
        table.add_row(field, summary[field])
    for key, value in summary["slots"].items():
        table.add_row(f"slot:{key}", value)
    console.print(table)


@click.command("verify")
@click.argument("request_file", type=click.File("r"))
@click.option("--app-id", default=None, help="Expected application id (defaults to configured one)")
def verify_cmd(request_file, app_id: Optional[str]):
    """Check timestamp freshness and application id."""
    if app_id == "":
        raise click.BadParameter("must not be empty", param_hint="--app-id")
    req = _read_request(request_file)
    ok = True

    if req.verify_timestamp():
        console.print("[green]timestamp: ok[/green]")
    else:
        console.print(f"[red]timestamp: stale or malformed ({req.request.timestamp!r})[/red]")
        ok = False

    expected = resolve_app_id(app_id)
    if expected is None:
        console.print("[yellow]app id: not configured, skipped. Run `echo-skill config set-app-id`.[/yellow]")
    elif req.verify_app_id(expected):
        console.print("[green]app id: ok[/green]")
    else:
        console.print(f"[red]app id: mismatch (expected {expected})[/red]")
        ok = False

    if not ok:
        raise SystemExit(1)
