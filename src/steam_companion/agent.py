"""
BackgroundAgent — wires the components to one BrowserHost and exposes the
entry points the extension host calls into.
"""

import logging
from collections.abc import Iterable
from typing import Any, Optional

import httpx
from pydantic import ValidationError

from steam_companion.dispatcher import CommandDispatcher, execute_command
from steam_companion.host import BrowserHost
from steam_companion.identity import IdentityResolver
from steam_companion.inventory import InventoryFetcher, get_user_inventory
from steam_companion.models.envelope import InboundMessage
from steam_companion.models.inventory import InventoryPage
from steam_companion.permissions import PermissionSyncEngine
from steam_companion.readiness import ReadinessHandshake
from steam_companion.transport.http import DEFAULT_BASE_URL, HttpClient

logger = logging.getLogger(__name__)


class BackgroundAgent:
    def __init__(
        self,
        host: BrowserHost,
        base_url: str = DEFAULT_BASE_URL,
        cookies: Optional[dict[str, str]] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.host = host
        self.http = HttpClient(base_url=base_url, cookies=cookies, transport=transport)
        self.identity = IdentityResolver(self.http)
        self.inventory = InventoryFetcher(self.http)
        self.readiness = ReadinessHandshake(host)
        self.permissions = PermissionSyncEngine(host)
        self.dispatcher = CommandDispatcher(self.identity, self.inventory)

    async def on_message(self, message: dict[str, Any]) -> Optional[dict[str, Any]]:
        """Runtime message listener. Returns the reply, or None for no reply."""
        try:
            inbound = InboundMessage.model_validate(message)
        except ValidationError:
            logger.warning("Ignoring malformed message %r", message)
            return None
        envelope = await self.dispatcher.dispatch(inbound.event, inbound.data)
        return envelope.model_dump() if envelope is not None else None

    async def on_action_clicked(self, tab_id: int) -> dict[str, Any]:
        """Toolbar action: make sure the content script is live in the tab."""
        envelope = await execute_command(lambda: self.readiness.ensure_ready(tab_id))
        return envelope.model_dump()

    async def on_permissions_added(self, origins: Iterable[str]) -> None:
        await self.permissions.on_granted(origins)

    async def on_permissions_removed(self, origins: Iterable[str]) -> None:
        await self.permissions.on_revoked(origins)

    async def request_host_permission(self, tab_url: str) -> bool:
        return await self.permissions.request_host_permission(tab_url)

    async def get_user_inventory(self, app_id: str, context_id: str) -> InventoryPage:
        return await get_user_inventory(self.identity, self.inventory, app_id, context_id)

    async def close(self) -> None:
        await self.http.close()
