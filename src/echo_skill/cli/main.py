"""
echo-skill CLI — `echo-skill` command.

Commands:
  echo-skill inspect <file>        Show what a request carries
  echo-skill verify <file>         Timestamp and application id checks
  echo-skill say <text>            Print a built response
  echo-skill config <cmd>          Manage the configured application id

Request files are JSON skill requests; pass `-` to read stdin.
"""

import logging

try:
    import click
    from rich.console import Console
except ImportError:
    raise SystemExit("CLI requires extras: pip install echo-skill[cli]")

from echo_skill import __version__
from echo_skill.errors import RequestParseError
from echo_skill.request import EchoRequest, parse_request

console = Console()


def _read_request(stream) -> EchoRequest:
    try:
        return parse_request(stream.read())
    except RequestParseError as e:
        console.print(f"[red]Invalid request: {e}[/red]")
        raise SystemExit(1)


@click.group()
@click.version_option(__version__)
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging")
def main(verbose: bool):
    """Echo skill CLI — inspect skill requests and build responses."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")


# Register subcommands from separate modules
from echo_skill.cli.requests import inspect_cmd, verify_cmd
from echo_skill.cli.respond import say_cmd
from echo_skill.cli.config import config

main.add_command(inspect_cmd)
main.add_command(verify_cmd)
main.add_command(say_cmd)
main.add_command(config)


if __name__ == "__main__":
    main()
