"""httpx client for POST /api/drawing."""

from __future__ import annotations

from typing import Any

import httpx

DRAWING_PATH = "/api/drawing"


class RelayClient:
    def __init__(self, base_url: str, transport: httpx.AsyncBaseTransport | None = None) -> None:
        self.base_url = base_url.rstrip("/")
        self._transport = transport

    async def solve(self, image: str, dict_of_vars: dict[str, Any] | None = None) -> dict[str, Any]:
        """Post one snapshot and return the decoded envelope, whatever the HTTP status."""
        async with httpx.AsyncClient(
            base_url=self.base_url,
            transport=self._transport,
            timeout=None,
        ) as client:
            response = await client.post(
                DRAWING_PATH,
                json={"image": image, "dict_of_vars": dict_of_vars or {}},
            )
        envelope = response.json()
        if not isinstance(envelope, dict):
            raise ValueError(f"relay returned a JSON {type(envelope).__name__}, expected an object")
        return envelope
