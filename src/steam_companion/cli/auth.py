"""CLI: steam-companion auth login|status|logout"""

from typing import Optional

import click
from rich.console import Console

console = Console()


def _load_config() -> dict:
    from steam_companion.cli.main import _load_config
    return _load_config()


def _save_config(cfg: dict) -> None:
    from steam_companion.cli.main import _save_config
    _save_config(cfg)


@click.group()
def auth():
    """Session cookie management."""


@auth.command("login")
@click.option("--base-url", default=None, help="Steam Community base URL")
def auth_login(base_url: Optional[str]):
    """Store the browser's steamLoginSecure cookie."""
    from steam_companion.cli.main import CONFIG_FILE

    cfg = _load_config()
    cookie = click.prompt("steamLoginSecure cookie", hide_input=True).strip()
    update = {"session_cookie": cookie}
    if base_url:
        update["base_url"] = base_url.rstrip("/")
    _save_config({**cfg, **update})
    console.print(f"[green]Session saved to {CONFIG_FILE}[/green]")


@auth.command("status")
def auth_status():
    """Show whether a session cookie is stored."""
    cfg = _load_config()
    if cfg.get("session_cookie"):
        console.print("[green]Session cookie stored.[/green] Run `steam-companion whoami` to check it.")
    else:
        console.print("[yellow]Not logged in. Run `steam-companion auth login`.[/yellow]")


@auth.command("logout")
def auth_logout():
    """Clear the saved session."""
    _save_config({})
    console.print("[green]Logged out.[/green]")
