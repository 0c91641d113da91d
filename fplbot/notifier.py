from __future__ import annotations

from typing import Any, Dict

import aiohttp

from .config import SLACK_API_URL, logger
from .http import post_json


class SlackNotifier:
    """Posts messages through Slack's ``chat.postMessage`` with a bot token."""

    def __init__(self, token: str, api_url: str = SLACK_API_URL):
        self._token = token
        self.api_url = api_url.rstrip("/")

    def _headers(self) -> Dict[str, str]:
        return {
            "Accept": "application/json",
            "Content-Type": "application/json;charset=UTF-8",
            "Authorization": f"Bearer {self._token}",
        }

    async def post_message(
        self, session: aiohttp.ClientSession, message: Dict[str, Any]
    ) -> Any:
        """POST a ``{channel, blocks}`` message. Failures are logged, not raised."""
        url = f"{self.api_url}/chat.postMessage"
        channel = message.get("channel")
        status, data = await post_json(session, url, message, headers=self._headers())
        if status != 200:
            logger.warning(f"chat.postMessage failed for channel {channel}: HTTP {status}")
        elif not isinstance(data, dict) or not data.get("ok"):
            error = data.get("error") if isinstance(data, dict) else "invalid response"
            logger.warning(f"chat.postMessage rejected for channel {channel}: {error}")
        else:
            logger.info(f"Posted standings to channel {channel}")
        return data
