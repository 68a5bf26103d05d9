"""
Permission sync engine — keeps the registered content script's match list
equal to the set of origins the user has granted.

Each event re-reads the registration right before writing it. There is no
lock: this relies on the host delivering permission events one at a time.
"""

import logging
from collections.abc import Iterable
from typing import Optional

import httpx

from steam_companion.errors import PermissionValidationError
from steam_companion.host import BrowserHost
from steam_companion.models.script import CONTENT_SCRIPT_ID, RegisteredContentScript

logger = logging.getLogger(__name__)


def origin_match_pattern(tab_url: str) -> str:
    """`https://host[:port]/anything` -> `https://host[:port]/*`"""
    try:
        url = httpx.URL(tab_url)
    except httpx.InvalidURL as e:
        raise PermissionValidationError(f"Invalid tab URL: {e}") from e
    if url.scheme != "https":
        raise PermissionValidationError("Host must be secure (https)")
    if not url.host:
        raise PermissionValidationError("Failed to extract host origin")
    # netloc is the IDNA-encoded host, IPv6 brackets kept, default port dropped.
    return f"{url.scheme}://{url.netloc.decode('ascii')}/*"


class PermissionSyncEngine:
    def __init__(self, host: BrowserHost):
        self._host = host

    async def _current(self) -> Optional[RegisteredContentScript]:
        scripts = await self._host.get_registered_content_scripts([CONTENT_SCRIPT_ID])
        return scripts[0] if scripts else None

    async def on_granted(self, origins: Iterable[str]) -> None:
        added = list(dict.fromkeys(origins))
        if not added:
            return
        logger.debug("Permission added for %s", added)

        current = await self._current()
        existing = current.matches if current else []
        script = RegisteredContentScript(matches=list(dict.fromkeys([*existing, *added])))

        if current:
            await self._host.update_content_scripts([script])
        else:
            await self._host.register_content_scripts([script])
        logger.debug("Content script now matches %s", script.matches)

    async def on_revoked(self, origins: Iterable[str]) -> None:
        removed = set(origins)
        if not removed:
            return
        logger.debug("Permission removed for %s", sorted(removed))

        current = await self._current()
        if current is None:
            return
        remaining = [m for m in current.matches if m not in removed]

        if remaining:
            await self._host.update_content_scripts([RegisteredContentScript(matches=remaining)])
            logger.debug("Content script now matches %s", remaining)
        else:
            await self._host.unregister_content_scripts([CONTENT_SCRIPT_ID])
            logger.debug("Content script unregistered; no granted origins left")

    async def request_host_permission(self, tab_url: str) -> bool:
        """Ask the host for access to the tab's origin. Validation happens before any host call."""
        pattern = origin_match_pattern(tab_url)
        logger.debug("Requesting permission for %s", pattern)
        return await self._host.request_permissions([pattern])
