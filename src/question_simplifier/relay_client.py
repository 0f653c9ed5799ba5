"""
Async client the UI uses to reach the relay service.

It never talks to the oracle directly; all completions come from the relay
via HTTP.
"""

from typing import Optional

import httpx

from .config import settings


class RelayClient:
    def __init__(
        self,
        base_url: Optional[str] = None,
        timeout: float = 60.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self.base_url = base_url or settings.api_base_url
        self.timeout = timeout
        self._transport = transport

    def _client(self) -> httpx.AsyncClient:
        # A client per call keeps this usable across separate event loops.
        return httpx.AsyncClient(
            base_url=self.base_url, timeout=self.timeout, transport=self._transport
        )

    async def _post(self, path: str, prompt: str) -> dict:
        async with self._client() as client:
            resp = await client.post(path, json={"prompt": prompt})
            resp.raise_for_status()
            return resp.json()

    async def simplify(self, prompt: str) -> Optional[str]:
        """Return the simplified restatement, or None when the relay gave none."""
        data = await self._post(settings.simplify_path, prompt)
        return data.get("simplified") or None

    async def generate_title(self, prompt: str) -> str:
        data = await self._post(settings.generate_title_path, prompt)
        return (data.get("title") or "").strip()
