"""Narration events emitted by the step runner."""

from datetime import datetime
from enum import Enum
from typing import Any
from pydantic import BaseModel, Field


class EventType(str, Enum):
    """Kinds of narration events, one or more per step kind."""

    SETUP = "setup"
    PHASE_CHANGE = "phase_change"
    NIGHT_ACTION = "night_action"
    DAY_MESSAGE = "day_message"
    VOTE = "vote"
    RESOLUTION = "resolution"
    GAME_END = "game_end"


# Result text when a decision was dropped or no action applied
NO_ACTION_TAKEN = "No action taken"


class StepEvent(BaseModel):
    """What happened during one step, for the presentation layer to render.

    ``data`` holds fields appropriate to the event type: role, player,
    result text, targets, rationale, prompts, etc.
    """

    timestamp: str = Field(default_factory=lambda: datetime.now().isoformat())
    type: EventType
    step_index: int = 0
    data: dict[str, Any] = Field(default_factory=dict)

    def to_dict(self) -> dict:
        return {"type": self.type.value, "data": self.data}

    def __str__(self) -> str:
        return f"StepEvent({self.type.value}, step={self.step_index})"
