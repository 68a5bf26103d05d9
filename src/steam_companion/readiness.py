"""
Readiness handshake — make sure the content script is live in a tab.

    UNKNOWN -> PROBING -> READY
                  |
                  v
              INJECTING -> PROBING   (once)
                  |
                  v
                FAILED  -> InjectionError

A probe that returns None counts as "absent", same as a probe that raises.
Hosts disagree on how a missing listener is signalled and both mean the same
thing here.
"""

import logging
from enum import Enum
from typing import Any

from steam_companion.errors import InjectionError
from steam_companion.host import BrowserHost
from steam_companion.models.events import ContentScriptEvent
from steam_companion.models.script import CONTENT_SCRIPT_FILES

logger = logging.getLogger(__name__)

MAX_INJECTION_ATTEMPTS = 2


class HandshakeState(str, Enum):
    UNKNOWN = "unknown"
    PROBING = "probing"
    INJECTING = "injecting"
    READY = "ready"
    FAILED = "failed"


class ReadinessHandshake:
    def __init__(self, host: BrowserHost):
        self._host = host

    async def _probe(self, tab_id: int) -> bool:
        try:
            response: Any = await self._host.send_message(
                tab_id, {"event": ContentScriptEvent.CONTENT_SCRIPT_CHECK},
            )
        except Exception as e:
            logger.debug("Probe of tab %s failed: %s", tab_id, e)
            return False
        return response is not None

    async def ensure_ready(self, tab_id: int) -> None:
        state = HandshakeState.UNKNOWN
        attempts = 0
        while True:
            if state in (HandshakeState.UNKNOWN, HandshakeState.PROBING):
                state = HandshakeState.PROBING
                ready = await self._probe(tab_id)
                state = HandshakeState.READY if ready else HandshakeState.INJECTING
            elif state is HandshakeState.INJECTING:
                attempts += 1
                logger.debug("Injecting content script into tab %s (attempt %d)", tab_id, attempts)
                await self._host.execute_script(tab_id, list(CONTENT_SCRIPT_FILES))
                if attempts < MAX_INJECTION_ATTEMPTS:
                    state = HandshakeState.PROBING
                else:
                    state = HandshakeState.FAILED
            elif state is HandshakeState.READY:
                return
            else:
                raise InjectionError(tab_id)
