"""Events package."""

from onenight.events.game_events import (
    EventType,
    StepEvent,
    NO_ACTION_TAKEN,
)
from onenight.events.event_formatter import EventFormatter
from onenight.events.event_log import GameEventLog

__all__ = [
    "EventType",
    "StepEvent",
    "NO_ACTION_TAKEN",
    "EventFormatter",
    "GameEventLog",
]
