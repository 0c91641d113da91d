#!/usr/bin/env python3
"""
Quick verification script for the FPL API endpoints the bot depends on.
Fetches overall stats, the configured league and one entry, then prints a summary.
"""

import asyncio
import sys

from fplbot import BASE, LEAGUE_ID, make_session, get_entry, startup_health_check
from fplbot.api import get_league_standings, standings_results


async def verify_endpoints() -> bool:
    print("🔍 Verifying FPL API endpoints...")
    print(f"📡 API Base URL: {BASE}")
    print(f"🏆 League: {LEAGUE_ID}\n")

    async with make_session() as session:
        print("1️⃣  Testing bootstrap-static and league standings...")
        if not await startup_health_check(session, LEAGUE_ID):
            print("   ❌ Health check failed\n")
            return False
        print("   ✅ OK\n")

        print("2️⃣  Testing /entry/{id}/ endpoint...")
        league_data = await get_league_standings(session, LEAGUE_ID)
        results = standings_results(league_data)
        if not results:
            print("   ⚠️  League has no entries yet\n")
            return True
        entry = await get_entry(session, results[0]["entry"])
        print(f"   ✅ {entry.get('name')}: overall rank {entry.get('summary_overall_rank')}\n")

    print("🎉 All FPL endpoints responded")
    return True


if __name__ == "__main__":
    sys.exit(0 if asyncio.run(verify_endpoints()) else 1)
