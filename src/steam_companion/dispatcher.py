"""
Command dispatcher — routes inbound messages and wraps every outcome in an
envelope.

Unknown events get no reply at all. Known events always get one: any
exception raised while running the command becomes a Failure.
"""

import logging
from typing import Any, Awaitable, Callable, Optional

from steam_companion.identity import IdentityResolver
from steam_companion.inventory import InventoryFetcher, get_user_inventory
from steam_companion.models.envelope import Envelope, Failure, GetInventoryData, Success
from steam_companion.models.events import InboundEvent

logger = logging.getLogger(__name__)

CommandHandler = Callable[[Any], Awaitable[Any]]


async def execute_command(fn: Callable[[], Awaitable[Any]]) -> Envelope:
    try:
        payload = await fn()
    except Exception as e:
        logger.debug("Command failed: %s", e)
        return Failure(error=str(e))
    return Success(payload=payload)


class CommandDispatcher:
    def __init__(self, resolver: IdentityResolver, fetcher: InventoryFetcher):
        self._resolver = resolver
        self._fetcher = fetcher
        self._handlers: dict[str, CommandHandler] = {
            InboundEvent.GET_INVENTORY: self._get_inventory,
        }

    async def _get_inventory(self, data: Any) -> dict[str, Any]:
        params = GetInventoryData.model_validate(data or {})
        inventory = await get_user_inventory(self._resolver, self._fetcher, params.app_id, params.context_id)
        return inventory.model_dump(exclude_unset=True)

    async def dispatch(self, event: str, data: Any = None) -> Optional[Envelope]:
        handler = self._handlers.get(event)
        if handler is None:
            logger.warning("Unknown event %r", event)
            return None
        return await execute_command(lambda: handler(data))
