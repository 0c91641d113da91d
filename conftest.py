"""Shared fixtures: FPL payloads and fake upstream servers."""

from __future__ import annotations

import asyncio
import sys
from pathlib import Path
from typing import Any, Dict, List

import pytest
from aiohttp import web

sys.path.insert(0, str(Path(__file__).parent))

from fplbot import SignatureVerifier  # noqa: E402

SIGNING_SECRET = "8f742231b10e8888abcd99yyyzzz85a5"
NOW = 1_700_000_000
LEAGUE_ID = 578497


@pytest.fixture
def verifier() -> SignatureVerifier:
    return SignatureVerifier(SIGNING_SECRET, clock=lambda: NOW)


@pytest.fixture
def overall_stats() -> Dict[str, Any]:
    return {
        "events": [
            {"id": 7, "name": "Gameweek 7", "is_current": False},
            {"id": 8, "name": "Gameweek 8", "is_current": True},
            {"id": 9, "name": "Gameweek 9", "is_current": False},
        ],
        "total_players": 10_234_567,
    }


@pytest.fixture
def league_data() -> Dict[str, Any]:
    return {
        "league": {"id": LEAGUE_ID, "name": "Office League"},
        "standings": {
            "has_next": False,
            "page": 1,
            "results": [
                {"entry": 101, "rank": 1, "last_rank": 2, "event_total": 78, "total": 512,
                 "entry_name": "Klopp Kids", "player_name": "Ana Silva"},
                {"entry": 102, "rank": 2, "last_rank": 1, "event_total": 45, "total": 498,
                 "entry_name": "Net Busters", "player_name": "Sam Lee"},
                {"entry": 103, "rank": 3, "last_rank": 3, "event_total": 61, "total": 470,
                 "entry_name": "Xhaka Khan", "player_name": "Jo Park"},
            ],
        },
    }


@pytest.fixture
def entries() -> List[Dict[str, Any]]:
    return [
        {"id": 101, "summary_event_rank": 150_321, "summary_overall_rank": 42_001},
        {"id": 102, "summary_event_rank": 2_500_000, "summary_overall_rank": 60_500},
        {"id": 103, "summary_event_rank": 900_123, "summary_overall_rank": 1_203_456},
    ]


def fake_fpl_app(overall: Dict[str, Any], league: Dict[str, Any], entries: List[Dict[str, Any]],
                 calls: List[str], html_bootstrap: bool = False) -> web.Application:
    """In-process stand-in for fantasy.premierleague.com/api.

    Entry responses are delayed so that later entries finish first.
    """
    by_id = {e["id"]: e for e in entries}

    async def bootstrap(request: web.Request) -> web.Response:
        calls.append("bootstrap-static")
        if html_bootstrap:
            return web.Response(text="<html><body>The game is being updated.</body></html>", content_type="text/html")
        return web.json_response(overall)

    async def standings(request: web.Request) -> web.Response:
        calls.append(f"standings:{request.match_info['league_id']}")
        if int(request.match_info["league_id"]) != league["league"]["id"]:
            return web.json_response({"detail": "Not found."}, status=404)
        return web.json_response(league)

    async def entry(request: web.Request) -> web.Response:
        entry_id = int(request.match_info["entry_id"])
        calls.append(f"entry:{entry_id}")
        if entry_id not in by_id:
            return web.json_response({"detail": "Not found."}, status=404)
        await asyncio.sleep(0.01 * (len(by_id) - list(by_id).index(entry_id)))
        return web.json_response(by_id[entry_id])

    app = web.Application()
    app.router.add_get("/api/bootstrap-static/", bootstrap)
    app.router.add_get("/api/leagues-classic/{league_id}/standings/", standings)
    app.router.add_get("/api/entry/{entry_id}/", entry)
    return app


def fake_slack_app(received: List[Dict[str, Any]], response: Dict[str, Any] | None = None,
                   status: int = 200) -> web.Application:
    """In-process stand-in for slack.com/api."""

    async def post_message(request: web.Request) -> web.Response:
        received.append({"headers": request.headers.copy(), "json": await request.json()})
        return web.json_response(response if response is not None else {"ok": True}, status=status)

    app = web.Application()
    app.router.add_post("/api/chat.postMessage", post_message)
    return app


def server_url(server, path: str = "/api") -> str:
    return f"http://{server.host}:{server.port}{path}"


def big_league(rows: int) -> tuple[Dict[str, Any], List[Dict[str, Any]]]:
    """League data and entries for a league of ``rows`` entries."""
    results = [
        {"entry": 1000 + i, "rank": i + 1, "last_rank": i + 1, "event_total": 50, "total": 900 - i,
         "entry_name": f"Team {i + 1}", "player_name": f"Manager {i + 1}"}
        for i in range(rows)
    ]
    league = {"league": {"id": LEAGUE_ID, "name": "Big League"}, "standings": {"results": results}}
    entries = [{"id": 1000 + i, "summary_event_rank": 1000 + i, "summary_overall_rank": 5000 + i}
               for i in range(rows)]
    return league, entries
