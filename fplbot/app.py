from __future__ import annotations

import asyncio
import json
from typing import Any, Awaitable, Callable, Dict

from aiohttp import hdrs, web

from .auth import SignatureVerifier
from .commands import StandingsHandler
from .config import Config, logger
from .events import EventCallback, UrlVerification, parse_event
from .http import make_session
from .notifier import SlackNotifier

EventHandler = Callable[[Dict[str, Any]], Awaitable[None]]

VERIFIER = web.AppKey("verifier", SignatureVerifier)
EVENT_HANDLER = web.AppKey("event_handler", object)
BACKGROUND_TASKS = web.AppKey("background_tasks", set)

OK = {"status": "OK"}
UNAUTHORIZED = {"status": "Unauthorized"}


def json_response(payload: Dict[str, Any], status: int = 200) -> web.Response:
    return web.Response(
        body=json.dumps(payload).encode("utf-8"),
        status=status,
        headers={hdrs.CONTENT_TYPE: "application/json;charset=UTF-8"},
    )


def is_json_post(request: web.Request) -> bool:
    content_type = request.headers.get(hdrs.CONTENT_TYPE, "")
    return request.method == hdrs.METH_POST and "application/json" in content_type


def _on_task_done(app: web.Application, task: asyncio.Task) -> None:
    app[BACKGROUND_TASKS].discard(task)
    if task.cancelled():
        return
    exc = task.exception()
    if exc is not None:
        logger.error("Slack event handling failed", exc_info=exc)


def spawn(app: web.Application, coro: Awaitable[None]) -> asyncio.Task:
    """Run ``coro`` detached from the response; failures are only logged."""
    task = asyncio.create_task(coro)
    app[BACKGROUND_TASKS].add(task)
    task.add_done_callback(lambda t: _on_task_done(app, t))
    return task


async def drain_background_tasks(app: web.Application) -> None:
    tasks = list(app[BACKGROUND_TASKS])
    if tasks:
        await asyncio.gather(*tasks, return_exceptions=True)


async def slack_events(request: web.Request) -> web.Response:
    if not is_json_post(request):
        return json_response(OK)

    raw = await request.read()
    verifier = request.app[VERIFIER]
    verified = verifier.verify(
        request.headers.get("X-Slack-Request-Timestamp", "0"),
        raw,
        request.headers.get("X-Slack-Signature"),
    )

    try:
        payload = json.loads(raw)
    except ValueError:
        logger.warning("Ignoring request with invalid JSON body")
        return json_response(OK)

    event = parse_event(payload)

    if isinstance(event, UrlVerification):
        if verified:
            logger.info("Answered Slack URL verification challenge")
            return json_response({} if event.challenge is None else {"challenge": event.challenge})
        logger.warning("Rejected unverified URL verification request")
        return json_response(UNAUTHORIZED, 403)

    if isinstance(event, EventCallback):
        # event callbacks are not gated on the signature
        if not verified:
            logger.warning("Processing event_callback without a valid signature")
        spawn(request.app, request.app[EVENT_HANDLER](event.body))
        return json_response(OK)

    logger.debug(f"Ignoring event type: {event.type}")
    return json_response(OK)


def create_app(verifier: SignatureVerifier, event_handler: EventHandler) -> web.Application:
    app = web.Application()
    app[VERIFIER] = verifier
    app[EVENT_HANDLER] = event_handler
    app[BACKGROUND_TASKS] = set()
    app.on_cleanup.append(drain_background_tasks)
    app.router.add_route("*", "/{tail:.*}", slack_events)
    return app


def build_app() -> web.Application:
    """Wire the application from ``Config``."""
    notifier = SlackNotifier(Config.SLACK_BOT_TOKEN, Config.SLACK_API_URL)
    handler = StandingsHandler(
        notifier,
        league_id=Config.FPL_LEAGUE_ID,
        api_base=Config.get_api_base_url(),
        session_factory=make_session,
    )
    return create_app(SignatureVerifier(Config.SLACK_SIGNING_SECRET), handler)


def main():
    try:
        Config.validate_config()
    except ValueError as e:
        raise SystemExit(f"❌ {e}. Check your .env file.")

    logger.info(f"🚀 Starting FPL bot on {Config.HOST}:{Config.PORT} (league {Config.FPL_LEAGUE_ID})")
    web.run_app(build_app(), host=Config.HOST, port=Config.PORT, print=None)
