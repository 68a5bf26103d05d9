"""
Identity resolver — who is logged in to the ambient browser session.
"""

import logging
import re
from typing import Optional

from steam_companion.transport.http import HttpClient

logger = logging.getLogger(__name__)

PROFILE_PATH = "/my"
PROFILE_HEADERS = {"Accept": "text/xml, */*;q=0.8"}
STEAM_ID_PATTERN = re.compile(r"<steamID64>(\d{17})</steamID64>")


def parse_steam_id(profile_xml: str) -> Optional[str]:
    """Pull the 17-digit steamID64 out of a profile XML document."""
    match = STEAM_ID_PATTERN.search(profile_xml)
    return match.group(1) if match else None


class IdentityResolver:
    def __init__(self, http: HttpClient):
        self._http = http

    async def resolve(self) -> Optional[str]:
        """Return the session's steamID64, or None when nobody is logged in.

        Never cached: the session can change between calls. Transport
        failures propagate.
        """
        profile_xml = await self._http.get_text(PROFILE_PATH, params={"xml": 1}, headers=PROFILE_HEADERS)
        steam_id = parse_steam_id(profile_xml)
        if steam_id is None:
            logger.debug("No steamID64 in profile document; session is not logged in")
        return steam_id
