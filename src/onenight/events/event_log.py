"""Chronological narration log for a whole game."""

from datetime import datetime
from typing import Optional
import yaml
from pydantic import BaseModel, Field

from .game_events import EventType, StepEvent
from .event_formatter import EventFormatter


class GameEventLog(BaseModel):
    """
    Chronological narration log of one game.

    Structure:
    - game_id: Session id the events belong to
    - events: Narration events in step order
    - winners: Filled once the game_end event is added
    """

    game_id: str
    created_at: str = Field(default_factory=lambda: datetime.now().isoformat())
    events: list[StepEvent] = Field(default_factory=list)
    winners: list[str] = Field(default_factory=list)
    metadata: dict = Field(default_factory=dict)

    def add_event(self, event: StepEvent) -> None:
        """Append an event, capturing winners from the game_end event."""
        self.events.append(event)
        if event.type == EventType.GAME_END:
            self.winners = list(event.data.get("winners", []))

    def events_of_type(self, event_type: EventType) -> list[StepEvent]:
        return [e for e in self.events if e.type == event_type]

    @property
    def is_complete(self) -> bool:
        return any(e.type == EventType.GAME_END for e in self.events)

    def __str__(self) -> str:
        """Human-readable transcript of the entire game."""
        formatter = EventFormatter()
        lines = [f"Game {self.game_id}"]
        for event in self.events:
            lines.append(formatter.format(event))
        return "\n".join(lines)

    # =========================================================================
    # Serialization
    # =========================================================================

    def to_yaml(self, include_prompts: bool = False) -> str:
        """Serialize the event log to YAML string.

        Args:
            include_prompts: Keep system/user prompts in event data. They are
                             large, so they are dropped by default.
        """
        data = self.model_dump(mode="json")

        if not include_prompts:
            for event in data["events"]:
                event["data"].pop("system_prompt", None)
                event["data"].pop("user_prompt", None)

        return yaml.dump(data, default_flow_style=False, allow_unicode=True, sort_keys=False)

    def save_to_file(self, filepath: str, include_prompts: bool = False) -> None:
        """Serialize the event log to a YAML file."""
        yaml_content = self.to_yaml(include_prompts=include_prompts)
        with open(filepath, "w", encoding="utf-8") as f:
            f.write(yaml_content)

    @classmethod
    def load_from_file(cls, filepath: str) -> "GameEventLog":
        """Load an event log from a YAML file."""
        with open(filepath, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
        return cls.model_validate(data)

    def get_winners(self) -> Optional[list[str]]:
        """Winners if the game finished, None otherwise."""
        return self.winners if self.is_complete else None
