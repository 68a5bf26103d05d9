"""
Inventory fetcher — two-stage paginated retrieval from the Steam Community
inventory API.

Page 1 asks for a small batch so small inventories come back quickly. If the
service reports more items, exactly one follow-up request asks for a large
batch starting at page 1's cursor. There is never a third request: anything
past FIRST_PAGE_COUNT + NEXT_PAGE_COUNT items is left out, and the merged
result keeps `more_items=True` so callers can tell.
"""

import logging
from typing import Any

from steam_companion.errors import IdentityError, RemoteFetchError, TransportError
from steam_companion.identity import IdentityResolver
from steam_companion.models.inventory import InventoryPage
from steam_companion.transport.http import HttpClient

logger = logging.getLogger(__name__)

FIRST_PAGE_COUNT = 75
NEXT_PAGE_COUNT = 2000
LANGUAGE = "english"


def _parse_page(data: Any) -> InventoryPage:
    # The service answers `null` or a bare object for empty/odd pages.
    return InventoryPage.model_validate(data if isinstance(data, dict) else {})


def merge_pages(first: InventoryPage, second: InventoryPage) -> InventoryPage:
    """Concatenate items in fetch order; pagination state comes from `second`."""
    merged = first.model_dump(exclude_unset=True, exclude={"assets", "descriptions", "last_assetid"})
    merged.update(
        assets=first.assets + second.assets,
        descriptions=first.descriptions + second.descriptions,
        more_items=second.more_items,
    )
    if "last_assetid" in second.model_fields_set:
        merged["last_assetid"] = second.last_assetid
    return InventoryPage.model_validate(merged)


class InventoryFetcher:
    def __init__(self, http: HttpClient):
        self._http = http

    def _headers(self, steam_id: str) -> dict[str, str]:
        return {
            "Referrer": f"{self._http.base_url}/profiles/{steam_id}/inventory/",
            "Accept": "application/json",
        }

    async def _fetch_page(self, path: str, params: dict[str, Any], headers: dict[str, str], what: str) -> InventoryPage:
        try:
            data = await self._http.get_json(path, params=params, headers=headers)
        except RemoteFetchError as e:
            raise RemoteFetchError(e.status, f"Failed to fetch {what}: {e}") from e
        except TransportError as e:
            raise TransportError(f"Failed to fetch {what}: {e}") from e
        return _parse_page(data)

    async def fetch(self, steam_id: str, app_id: str, context_id: str) -> InventoryPage:
        """Fetch and merge at most two pages of a user's inventory."""
        path = f"/inventory/{steam_id}/{app_id}/{context_id}"
        headers = self._headers(steam_id)

        inventory = await self._fetch_page(
            path, {"l": LANGUAGE, "count": FIRST_PAGE_COUNT}, headers, "inventory",
        )
        logger.debug("Fetched %d assets for %s/%s/%s", len(inventory.assets), steam_id, app_id, context_id)
        if not inventory.more_items:
            return inventory

        cursor = inventory.last_assetid
        additional = await self._fetch_page(
            path,
            {"l": LANGUAGE, "count": NEXT_PAGE_COUNT, "start_assetid": cursor},
            headers,
            "additional inventory",
        )
        inventory = merge_pages(inventory, additional)
        if inventory.more_items:
            logger.warning(
                "Inventory %s/%s/%s truncated at %d assets",
                steam_id, app_id, context_id, len(inventory.assets),
            )
        return inventory


async def get_user_inventory(
    resolver: IdentityResolver, fetcher: InventoryFetcher, app_id: str, context_id: str,
) -> InventoryPage:
    """Resolve the logged-in user, then fetch their inventory."""
    steam_id = await resolver.resolve()
    if steam_id is None:
        raise IdentityError()
    return await fetcher.fetch(steam_id, app_id, context_id)
