"""
Steam Companion CLI — `steam-companion` command.

Commands:
  steam-companion auth login       Save the steamLoginSecure session cookie
  steam-companion whoami           Resolve the logged-in steamID64
  steam-companion inventory A C    Fetch an inventory (app id, context id)
"""

import asyncio
import json
import logging
from pathlib import Path

try:
    import click
    from rich.console import Console
    from rich.logging import RichHandler
except ImportError:
    raise SystemExit("CLI requires extras: pip install steam-companion[cli]")

from steam_companion import __version__
from steam_companion.transport.http import DEFAULT_BASE_URL, HttpClient

console = Console()
CONFIG_FILE = Path.home() / ".steam-companion" / "config.json"
SESSION_COOKIE = "steamLoginSecure"


def _load_config() -> dict:
    try:
        return json.loads(CONFIG_FILE.read_text())
    except (FileNotFoundError, json.JSONDecodeError):
        return {}


def _save_config(cfg: dict) -> None:
    CONFIG_FILE.parent.mkdir(parents=True, exist_ok=True)
    CONFIG_FILE.write_text(json.dumps(cfg, indent=2))


def _get_http() -> HttpClient:
    cfg = _load_config()
    if not cfg.get("session_cookie"):
        console.print("[red]Not logged in. Run `steam-companion auth login` first.[/red]")
        raise SystemExit(1)
    return HttpClient(
        base_url=cfg.get("base_url", DEFAULT_BASE_URL),
        cookies={SESSION_COOKIE: cfg["session_cookie"]},
    )


def _run(coro):
    return asyncio.run(coro)


def _setup_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
    )


@click.group()
@click.version_option(__version__)
@click.option("-v", "--verbose", is_flag=True, help="Log protocol steps")
def main(verbose: bool):
    """Steam Companion CLI — inventory access outside the browser."""
    _setup_logging(verbose)


# Register subcommands from separate modules
from steam_companion.cli.auth import auth
from steam_companion.cli.inventory import inventory_cmd, whoami_cmd

main.add_command(auth)
main.add_command(whoami_cmd)
main.add_command(inventory_cmd)


if __name__ == "__main__":
    main()
