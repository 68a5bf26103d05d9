"""
HTTP client for the Steam Community site.

Rides on the ambient browser session: authentication is whatever cookies the
caller hands in, nothing more.
"""

from typing import Any, Optional

import httpx

from steam_companion.errors import RemoteFetchError, TransportError

DEFAULT_BASE_URL = "https://steamcommunity.com"
USER_AGENT = "steam-companion/0.1.0"


class HttpClient:
    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        cookies: Optional[dict[str, str]] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
        timeout: float = 30.0,
    ):
        self._base_url = base_url.rstrip("/")
        self._client = httpx.AsyncClient(
            base_url=self._base_url,
            headers={"User-Agent": USER_AGENT, "Accept": "application/json"},
            cookies=cookies,
            follow_redirects=True,
            transport=transport,
            timeout=timeout,
        )

    @property
    def base_url(self) -> str:
        return self._base_url

    async def _get(
        self,
        path: str,
        params: Optional[dict[str, Any]] = None,
        headers: Optional[dict[str, str]] = None,
    ) -> httpx.Response:
        try:
            resp = await self._client.get(path, params=params, headers=headers)
        except httpx.RequestError as e:
            raise TransportError(f"{type(e).__name__}: {e}") from e
        if not resp.is_success:
            raise RemoteFetchError(resp.status_code, f"HTTP {resp.status_code} {resp.reason_phrase}".rstrip())
        return resp

    async def get_text(
        self,
        path: str,
        params: Optional[dict[str, Any]] = None,
        headers: Optional[dict[str, str]] = None,
    ) -> str:
        resp = await self._get(path, params=params, headers=headers)
        return resp.text

    async def get_json(
        self,
        path: str,
        params: Optional[dict[str, Any]] = None,
        headers: Optional[dict[str, str]] = None,
    ) -> Any:
        resp = await self._get(path, params=params, headers=headers)
        if not resp.content:
            return None
        try:
            return resp.json()
        except ValueError as e:
            raise TransportError(f"Invalid JSON from {path}: {e}") from e

    async def close(self) -> None:
        await self._client.aclose()
