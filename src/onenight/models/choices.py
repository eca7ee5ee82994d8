"""Validated night action selections.

Decision handlers turn oracle answers into these models; the night action
resolver consumes them. A selection only exists once it has been checked
against the players and center positions of the game.
"""

from typing import Optional
from pydantic import BaseModel, ConfigDict, model_validator

from onenight.models.player import CenterPosition


class SeerChoice(BaseModel):
    """Seer looks at one other player's card, or at two center cards."""

    target_id: Optional[str] = None
    center_positions: Optional[list[CenterPosition]] = None

    model_config = ConfigDict(frozen=True)

    @model_validator(mode="after")
    def check_exactly_one_kind(self) -> "SeerChoice":
        if (self.target_id is None) == (self.center_positions is None):
            raise ValueError("Seer must choose either a player or center cards")
        if self.center_positions is not None:
            if len(self.center_positions) != 2 or len(set(self.center_positions)) != 2:
                raise ValueError("Seer must look at exactly two different center cards")
        return self

    @property
    def looks_at_player(self) -> bool:
        return self.target_id is not None


class RobberChoice(BaseModel):
    """Robber swaps cards with one other player."""

    target_id: str

    model_config = ConfigDict(frozen=True)


class TroublemakerChoice(BaseModel):
    """Troublemaker swaps the cards of two other players."""

    first_id: str
    second_id: str

    model_config = ConfigDict(frozen=True)
