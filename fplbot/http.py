from __future__ import annotations

import aiohttp
from typing import Any, Dict
from .config import logger


class FplApiError(RuntimeError):
    """Non-200 response from an upstream JSON endpoint."""

    def __init__(self, url: str, status: int, body: str = ""):
        self.url = url
        self.status = status
        super().__init__(f"HTTP {status} for {url} :: {body[:300]}")


def build_headers() -> Dict[str, str]:
    return {
        "accept": "application/json",
        "user-agent": "fplbot/1.0 (+slack)",
        "pragma": "no-cache",
        "cache-control": "no-cache",
    }


def make_session() -> aiohttp.ClientSession:
    timeout = aiohttp.ClientTimeout(total=25)
    return aiohttp.ClientSession(
        timeout=timeout,
        headers=build_headers(),
        trust_env=True,
    )


async def fetch_json(session: aiohttp.ClientSession, url: str, params: Dict[str, str] | None = None) -> Any:
    logger.debug(f"API request: {url}")
    async with session.get(url, params=params) as r:
        if r.status != 200:
            txt = await r.text()
            logger.error(f"API error for {url}: {r.status}")
            raise FplApiError(url, r.status, txt)
        logger.debug(f"API success: {url}")
        return await r.json(content_type=None)


async def post_json(
    session: aiohttp.ClientSession,
    url: str,
    payload: Dict[str, Any],
    headers: Dict[str, str] | None = None,
) -> tuple[int, Any]:
    """POST a JSON payload and return ``(status, decoded body)``.

    The body is ``None`` when the response is not JSON.
    """
    logger.debug(f"POST {url}")
    async with session.post(url, json=payload, headers=headers) as r:
        try:
            data = await r.json(content_type=None)
        except ValueError:
            data = None
        return r.status, data
