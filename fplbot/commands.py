from __future__ import annotations

from typing import Any, Callable, Dict, Optional

import aiohttp

from .api import get_fpl_data
from .config import BASE, LEAGUE_ID, logger
from .events import EventCallback
from .formatting import build_message, build_standings_blocks, paginate_blocks
from .http import make_session
from .notifier import SlackNotifier

STANDINGS_COMMAND = "fplbot, get latest standings"
FPLBOT_COMMANDS = (STANDINGS_COMMAND,)


def match_command(text: Any) -> Optional[str]:
    """Return the bot command ``text`` asks for, if any (exact, case-sensitive)."""
    if not isinstance(text, str):
        return None
    text = text.strip()
    return text if text in FPLBOT_COMMANDS else None


class StandingsHandler:
    """Handles ``event_callback`` bodies: answers the standings command."""

    def __init__(
        self,
        notifier: SlackNotifier,
        league_id: int = LEAGUE_ID,
        api_base: str = BASE,
        session_factory: Callable[[], aiohttp.ClientSession] = make_session,
    ):
        self.notifier = notifier
        self.league_id = league_id
        self.api_base = api_base
        self.session_factory = session_factory

    async def __call__(self, body: Dict[str, Any]) -> None:
        event = EventCallback(body=body)
        command = match_command(event.text)
        if command is None:
            return

        logger.info(f"Command '{command}' from channel {event.channel}")
        async with self.session_factory() as session:
            overall, league_data, entries = await get_fpl_data(session, self.league_id, self.api_base)
            blocks = build_standings_blocks(overall, league_data, entries)
            for page in paginate_blocks(blocks):
                await self.notifier.post_message(session, build_message(event.channel, page))
