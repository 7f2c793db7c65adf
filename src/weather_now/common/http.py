"""Shared async HTTP client."""

from __future__ import annotations

import httpx

from weather_now.config import get_settings


class HttpClient:
    """Async HTTP client that raises on non-success status.

    ``transport`` lets callers swap the network layer (e.g.
    ``httpx.MockTransport`` in tests).
    """

    def __init__(
        self,
        base_url: str = "",
        headers: dict[str, str] | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        settings = get_settings()
        self._client = httpx.AsyncClient(
            base_url=base_url,
            headers=headers or {"User-Agent": settings.user_agent},
            timeout=httpx.Timeout(settings.http_timeout),
            transport=transport,
        )

    async def get(self, url: str, params: dict | None = None) -> httpx.Response:
        resp = await self._client.get(url, params=params)
        resp.raise_for_status()
        return resp

    async def close(self) -> None:
        await self._client.aclose()

    async def __aenter__(self) -> HttpClient:
        return self

    async def __aexit__(self, *args: object) -> None:
        await self.close()
