from __future__ import annotations

import asyncio
from typing import Any, Dict, Iterable, List, Optional, Tuple

import aiohttp

from .config import BASE, logger
from .http import fetch_json


async def get_overall_stats(session: aiohttp.ClientSession, base: str = BASE) -> Dict[str, Any]:
    return await fetch_json(session, f"{base}/bootstrap-static/")


async def get_league_standings(session: aiohttp.ClientSession, league_id: int, base: str = BASE) -> Dict[str, Any]:
    return await fetch_json(session, f"{base}/leagues-classic/{league_id}/standings/")


async def get_entry(session: aiohttp.ClientSession, entry_id: int, base: str = BASE) -> Dict[str, Any]:
    return await fetch_json(session, f"{base}/entry/{entry_id}/")


async def get_entries(session: aiohttp.ClientSession, entry_ids: Iterable[int], base: str = BASE) -> List[Dict[str, Any]]:
    """Fetch every entry concurrently; results keep the order of ``entry_ids``."""
    return list(await asyncio.gather(*[get_entry(session, entry_id, base) for entry_id in entry_ids]))


def standings_results(league_data: Dict[str, Any]) -> List[Dict[str, Any]]:
    return (league_data.get("standings") or {}).get("results") or []


async def get_fpl_data(
    session: aiohttp.ClientSession, league_id: int, base: str = BASE
) -> Tuple[Dict[str, Any], Dict[str, Any], List[Dict[str, Any]]]:
    """Return ``(overall_stats, league_data, entries)`` for a classic league."""
    overall, league_data = await asyncio.gather(
        get_overall_stats(session, base),
        get_league_standings(session, league_id, base),
    )
    results = standings_results(league_data)
    entries = await get_entries(session, [row["entry"] for row in results], base)
    logger.info(f"Fetched FPL data for league {league_id}: {len(results)} entries")
    return overall, league_data, entries


def pick_current_event(events: List[Dict[str, Any]]) -> Optional[Dict[str, Any]]:
    for event in events or []:
        if event.get("is_current"):
            return event
    return None


async def startup_health_check(session: aiohttp.ClientSession, league_id: int, base: str = BASE) -> bool:
    """Check that the FPL API answers for the configured league."""
    logger.info("🏥 Running FPL API health check...")
    try:
        overall, league_data = await asyncio.gather(
            get_overall_stats(session, base),
            get_league_standings(session, league_id, base),
        )
    except Exception as e:
        logger.error(f"❌ FPL API health check failed: {e}")
        return False

    league = league_data.get("league") or {}
    if not league.get("name"):
        logger.error(f"❌ Invalid standings response for league {league_id}")
        return False

    current = pick_current_event(overall.get("events", []))
    gameweek = current.get("name") if current else "pre-season"
    logger.info(f"✅ League: {league['name']} ({len(standings_results(league_data))} entries)")
    logger.info(f"✅ Current gameweek: {gameweek}, {overall.get('total_players', 0):,} players")
    return True
