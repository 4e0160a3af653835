"""CLI: echo-skill say"""

from typing import Optional

import click
from rich.console import Console

from echo_skill.errors import SerializationError
from echo_skill.response import EchoResponse

console = Console()


@click.command("say")
@click.argument("text")
@click.option("--ssml", is_flag=True, help="Treat TEXT as SSML markup")
@click.option("--reprompt", default=None, help="Plain-text reprompt")
@click.option("--card-title", default=None)
@click.option("--card-content", default=None)
@click.option("--keep-open", is_flag=True, help="Leave the session open")
def say_cmd(text: str, ssml: bool, reprompt: Optional[str], card_title: Optional[str],
            card_content: Optional[str], keep_open: bool):
    """Print the response JSON for a spoken reply."""
    resp = EchoResponse()
    if ssml:
        resp.output_speech_ssml(text)
    else:
        resp.output_speech(text)
    if reprompt:
        resp.reprompt(reprompt)
    if card_title or card_content:
        resp.simple_card(card_title or "", card_content or "")
    resp.end_session(not keep_open)

    try:
        click.echo(resp.to_json())
    except SerializationError as e:
        console.print(f"[red]{e}[/red]")
        raise SystemExit(1)
