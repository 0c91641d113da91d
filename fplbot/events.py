"""Inbound Slack Events API payloads.

Every parsed body becomes exactly one of ``UrlVerification``,
``EventCallback`` or ``UnknownEvent``.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Union

URL_VERIFICATION = "url_verification"
EVENT_CALLBACK = "event_callback"


@dataclass(frozen=True)
class UrlVerification:
    challenge: Any = None


@dataclass(frozen=True)
class EventCallback:
    # payload minus "type" and "challenge"
    body: Dict[str, Any] = field(default_factory=dict)

    @property
    def event(self) -> Dict[str, Any]:
        event = self.body.get("event")
        return event if isinstance(event, dict) else {}

    @property
    def text(self) -> Optional[str]:
        text = self.event.get("text")
        return text if isinstance(text, str) else None

    @property
    def channel(self) -> Optional[str]:
        return self.event.get("channel")


@dataclass(frozen=True)
class UnknownEvent:
    type: Any = None
    payload: Any = None


InboundEvent = Union[UrlVerification, EventCallback, UnknownEvent]


def parse_event(payload: Any) -> InboundEvent:
    if not isinstance(payload, dict):
        return UnknownEvent(payload=payload)

    rest = dict(payload)
    event_type = rest.pop("type", None)
    challenge = rest.pop("challenge", None)

    if event_type == URL_VERIFICATION:
        return UrlVerification(challenge=challenge)
    if event_type == EVENT_CALLBACK:
        return EventCallback(body=rest)
    return UnknownEvent(type=event_type, payload=payload)
