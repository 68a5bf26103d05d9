"""
BrowserHost — the extension host capabilities the agent is allowed to use.

The real implementation binds to the browser's tabs/scripting/permissions
APIs. The agent only ever sees this interface, so tests substitute an
in-memory double.
"""

from typing import Any, Protocol

from steam_companion.models.script import RegisteredContentScript


class BrowserHost(Protocol):
    async def send_message(self, tab_id: int, message: dict[str, Any]) -> Any:
        """Deliver a message to the tab's content script and return its reply.

        Raises when nothing in the tab is listening. Some hosts return None
        instead of raising.
        """
        ...

    async def execute_script(self, tab_id: int, files: list[str]) -> None:
        ...

    async def get_registered_content_scripts(self, ids: list[str]) -> list[RegisteredContentScript]:
        ...

    async def register_content_scripts(self, scripts: list[RegisteredContentScript]) -> None:
        ...

    async def update_content_scripts(self, scripts: list[RegisteredContentScript]) -> None:
        ...

    async def unregister_content_scripts(self, ids: list[str]) -> None:
        ...

    async def request_permissions(self, origins: list[str]) -> bool:
        ...
