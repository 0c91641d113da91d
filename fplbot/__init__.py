"""FPL Slack bot package.

Modules:
- config: environment and constants
- http: session and request helpers
- auth: Slack request signature verification
- events: inbound Slack event payloads
- api: FPL API surface
- formatting: Slack block building
- notifier: chat.postMessage client
- commands: bot command matching and handling
- app: aiohttp web application and bootstrap

Public facade (re-export) for tests and callers.
"""

from .config import Config, BASE, SLACK_API_URL, LEAGUE_ID
from .http import make_session, fetch_json, post_json, build_headers, FplApiError
from .auth import SignatureVerifier
from .events import (
    UrlVerification,
    EventCallback,
    UnknownEvent,
    parse_event,
)
from .api import (
    get_overall_stats,
    get_league_standings,
    get_entry,
    get_entries,
    get_fpl_data,
    pick_current_event,
    startup_health_check,
)
from .formatting import (
    rank_change_icon,
    fmt_number,
    build_standings_blocks,
    build_message,
    paginate_blocks,
)
from .notifier import SlackNotifier
from .commands import STANDINGS_COMMAND, match_command, StandingsHandler
from .app import create_app, build_app, main

__all__ = [
    # Config / HTTP
    "Config", "BASE", "SLACK_API_URL", "LEAGUE_ID",
    "make_session", "fetch_json", "post_json", "build_headers", "FplApiError",
    # Auth / Events
    "SignatureVerifier", "UrlVerification", "EventCallback", "UnknownEvent", "parse_event",
    # API
    "get_overall_stats", "get_league_standings", "get_entry", "get_entries", "get_fpl_data",
    "pick_current_event", "startup_health_check",
    # Formatting / Notifier / Commands / App
    "rank_change_icon", "fmt_number", "build_standings_blocks", "build_message", "paginate_blocks",
    "SlackNotifier", "STANDINGS_COMMAND", "match_command", "StandingsHandler",
    "create_app", "build_app", "main",
]
