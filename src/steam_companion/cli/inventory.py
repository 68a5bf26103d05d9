"""CLI: steam-companion whoami | inventory APP_ID CONTEXT_ID"""

import json

import click
from rich.console import Console
from rich.table import Table

from steam_companion.errors import CompanionError
from steam_companion.identity import IdentityResolver
from steam_companion.inventory import InventoryFetcher, get_user_inventory

console = Console()


def _get_http():
    from steam_companion.cli.main import _get_http
    return _get_http()


def _run(coro):
    from steam_companion.cli.main import _run
    return _run(coro)


@click.command("whoami")
def whoami_cmd():
    """Print the steamID64 of the stored session."""

    http = _get_http()

    async def _whoami():
        try:
            return await IdentityResolver(http).resolve()
        finally:
            await http.close()

    try:
        steam_id = _run(_whoami())
    except CompanionError as e:
        raise click.ClickException(str(e))
    if steam_id is None:
        console.print("[yellow]Session is not logged in.[/yellow]")
        raise SystemExit(1)
    click.echo(steam_id)


@click.command("inventory")
@click.argument("app_id")
@click.argument("context_id")
@click.option("--json-output", "--json", is_flag=True)
def inventory_cmd(app_id, context_id, json_output):
    """Fetch the logged-in user's inventory for APP_ID / CONTEXT_ID."""

    http = _get_http()

    async def _fetch():
        try:
            return await get_user_inventory(IdentityResolver(http), InventoryFetcher(http), app_id, context_id)
        finally:
            await http.close()

    try:
        with console.status("Fetching inventory..."):
            inventory = _run(_fetch())
    except CompanionError as e:
        raise click.ClickException(str(e))

    if json_output:
        click.echo(json.dumps(inventory.model_dump(exclude_unset=True), indent=2))
        return

    names = {(d.classid, d.instanceid): d for d in inventory.descriptions}
    table = Table(title=f"Inventory {app_id}/{context_id} ({len(inventory.assets)} items)")
    table.add_column("Asset ID", style="bold")
    table.add_column("Name")
    table.add_column("Amount", justify="right")
    table.add_column("Tradable")
    for asset in inventory.assets:
        desc = names.get((asset.classid, asset.instanceid))
        table.add_row(
            asset.assetid or "",
            (desc.name if desc else None) or "?",
            asset.amount or "",
            "yes" if desc and desc.tradable else "no",
        )
    console.print(table)
    if inventory.more_items:
        console.print("[yellow]More items exist; results are truncated.[/yellow]")
