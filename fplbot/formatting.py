from __future__ import annotations

from typing import Any, Dict, List

from .api import pick_current_event, standings_results

ARROW_UP = ":arrow_up:"
ARROW_DOWN = ":arrow_down:"


def rank_change_icon(rank: int, last_rank: int) -> str:
    """Arrow for a movement in the league table.

    A smaller rank number is a better position, so ``rank < last_rank`` means
    the entry climbed (up arrow) and ``rank > last_rank`` means it dropped
    (down arrow). ``last_rank == 0`` is the start of the season: no arrow.
    """
    if not last_rank or rank == last_rank:
        return ""
    if rank < last_rank:
        return ARROW_UP
    return ARROW_DOWN


def fmt_number(value: Any) -> str:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return "-"
    return f"{value:,}"


def _mrkdwn(text: str) -> Dict[str, str]:
    return {"type": "mrkdwn", "text": text}


DIVIDER = {"type": "divider"}


def fmt_entry_blocks(row: Dict[str, Any], entry: Dict[str, Any] | None) -> List[Dict[str, Any]]:
    entry = entry or {}
    rank = row.get("rank", 0)
    icon = rank_change_icon(rank, row.get("last_rank", 0))
    rank_text = f"*Rank:* {rank} {icon}".rstrip()
    return [
        {
            "type": "section",
            "fields": [
                _mrkdwn(rank_text),
                _mrkdwn(f"*GW points:* {fmt_number(row.get('event_total'))}"),
                _mrkdwn(f"*Player/Team:* {row.get('player_name', '')} - {row.get('entry_name', '')}"),
                _mrkdwn(f"*Total:* {fmt_number(row.get('total'))}"),
                _mrkdwn(f"*GW rank:* {fmt_number(entry.get('summary_event_rank'))}"),
                _mrkdwn(f"*Overall rank:* {fmt_number(entry.get('summary_overall_rank'))}"),
            ],
        },
        DIVIDER,
    ]


def build_standings_blocks(
    overall: Dict[str, Any],
    league_data: Dict[str, Any],
    entries: List[Dict[str, Any]],
) -> List[Dict[str, Any]]:
    league = league_data.get("league") or {}
    blocks: List[Dict[str, Any]] = [
        {
            "type": "section",
            "text": _mrkdwn(
                f"Here are the latest standings for :headingparrot: *{league.get('name', '')}* :headingparrot:"
            ),
        }
    ]

    current = pick_current_event(overall.get("events", []))
    if current:
        blocks.append(
            {
                "type": "context",
                "elements": [
                    _mrkdwn(f"*{current.get('name', '')}* · {fmt_number(overall.get('total_players'))} players")
                ],
            }
        )
    blocks.append(DIVIDER)

    for i, row in enumerate(standings_results(league_data)):
        entry = entries[i] if i < len(entries) else None
        blocks.extend(fmt_entry_blocks(row, entry))

    return blocks


def build_message(channel: str, blocks: List[Dict[str, Any]]) -> Dict[str, Any]:
    return {"channel": channel, "blocks": blocks}


MAX_BLOCKS = 50


def paginate_blocks(blocks: List[Dict[str, Any]], limit: int = MAX_BLOCKS) -> List[List[Dict[str, Any]]]:
    """Split ``blocks`` into pages Slack accepts in one message.

    A page never ends on a section whose divider would open the next page.
    """
    pages: List[List[Dict[str, Any]]] = []
    start = 0
    while start < len(blocks):
        end = min(start + limit, len(blocks))
        if end < len(blocks) and blocks[end] == DIVIDER and end - start > 1:
            end -= 1
        pages.append(blocks[start:end])
        start = end
    return pages
