"""Shared test doubles: an in-memory BrowserHost and mock Steam endpoints."""

from typing import Any, Optional

import httpx
import pytest

from steam_companion.models.script import RegisteredContentScript
from steam_companion.transport.http import HttpClient

STEAM_ID = "76561198000000001"
PROFILE_XML = f"""<?xml version="1.0" encoding="UTF-8" standalone="yes"?>
<profile>
  <steamID64>{STEAM_ID}</steamID64>
  <steamID><![CDATA[gaben]]></steamID>
</profile>"""


class FakeHost:
    """In-memory BrowserHost.

    `probe_results` is consumed one per probe; the last entry repeats. An
    Exception entry is raised, anything else is returned.
    """

    def __init__(self, probe_results: Optional[list[Any]] = None, grant: bool = True):
        self.probe_results = list(probe_results or [{}])
        self.grant = grant
        self.scripts: dict[str, RegisteredContentScript] = {}
        self.messages: list[tuple[int, dict[str, Any]]] = []
        self.injections: list[tuple[int, list[str]]] = []
        self.permission_requests: list[list[str]] = []
        self.calls: list[str] = []

    async def send_message(self, tab_id: int, message: dict[str, Any]) -> Any:
        self.messages.append((tab_id, message))
        result = self.probe_results.pop(0) if len(self.probe_results) > 1 else self.probe_results[0]
        if isinstance(result, Exception):
            raise result
        return result

    async def execute_script(self, tab_id: int, files: list[str]) -> None:
        self.injections.append((tab_id, files))

    async def get_registered_content_scripts(self, ids: list[str]) -> list[RegisteredContentScript]:
        self.calls.append("get")
        return [self.scripts[i].model_copy(deep=True) for i in ids if i in self.scripts]

    async def register_content_scripts(self, scripts: list[RegisteredContentScript]) -> None:
        self.calls.append("register")
        for s in scripts:
            if s.id in self.scripts:
                raise RuntimeError(f"Duplicate script ID '{s.id}'")
            if not s.matches:
                raise RuntimeError("Script with ID must specify at least one match")
            self.scripts[s.id] = s

    async def update_content_scripts(self, scripts: list[RegisteredContentScript]) -> None:
        self.calls.append("update")
        for s in scripts:
            if s.id not in self.scripts:
                raise RuntimeError(f"Nonexistent script ID '{s.id}'")
            if not s.matches:
                raise RuntimeError("Script with ID must specify at least one match")
            self.scripts[s.id] = s

    async def unregister_content_scripts(self, ids: list[str]) -> None:
        self.calls.append("unregister")
        for i in ids:
            if i not in self.scripts:
                raise RuntimeError(f"Nonexistent script ID '{i}'")
            del self.scripts[i]

    async def request_permissions(self, origins: list[str]) -> bool:
        self.permission_requests.append(origins)
        return self.grant


class SteamStub:
    """Routes /my and /inventory requests to canned responses and records them."""

    def __init__(
        self,
        profile: str = PROFILE_XML,
        pages: Optional[list[Any]] = None,
        status: int = 200,
    ):
        self.profile = profile
        self.pages = list(pages or [])
        self.status = status
        self.requests: list[httpx.Request] = []

    @property
    def inventory_requests(self) -> list[httpx.Request]:
        return [r for r in self.requests if r.url.path.startswith("/inventory/")]

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if request.url.path == "/my":
            return httpx.Response(200, text=self.profile)
        if request.url.path.startswith("/inventory/"):
            if self.status != 200:
                return httpx.Response(self.status)
            return httpx.Response(200, json=self.pages.pop(0))
        return httpx.Response(404)

    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self)

    def http(self) -> HttpClient:
        return HttpClient(transport=self.transport())


def make_page(start: int, n: int, more: bool = False, last: Optional[str] = None) -> dict[str, Any]:
    assets = [
        {"appid": 730, "contextid": "2", "assetid": str(start + i), "classid": str(100 + i),
         "instanceid": "0", "amount": "1"}
        for i in range(n)
    ]
    descriptions = [
        {"appid": 730, "classid": str(100 + i), "instanceid": "0", "name": f"Item {start + i}",
         "market_hash_name": f"Item {start + i}", "tradable": 1, "marketable": 1}
        for i in range(n)
    ]
    page: dict[str, Any] = {
        "assets": assets,
        "descriptions": descriptions,
        "total_inventory_count": 5000,
        "success": 1,
        "rwgrsn": -2,
    }
    if more:
        page["more_items"] = 1
        page["last_assetid"] = last or str(start + n - 1)
    return page


@pytest.fixture
def host() -> FakeHost:
    return FakeHost()

