"""Player and center card models."""

from enum import Enum
from pydantic import BaseModel, Field

from onenight.models.roles import Role


# Seat names, in deal order
PLAYER_NAMES = ["Alice", "Bob", "Charlie", "Diana", "Eve"]


class Player(BaseModel):
    """A player seat controlled by an agent.

    ``original_role`` is the card dealt at setup and never changes.
    ``current_role`` is the card in front of the player right now; only the
    Robber and Troublemaker can change it.
    """

    id: str
    name: str
    original_role: Role
    current_role: Role
    night_knowledge: list[str] = Field(default_factory=list)


class CenterPosition(str, Enum):
    """Positions of the three undealt cards."""

    LEFT = "left"
    MIDDLE = "middle"
    RIGHT = "right"


class CenterCards(BaseModel):
    """The three cards not dealt to any player."""

    left: Role
    middle: Role
    right: Role

    def card_at(self, position: CenterPosition) -> Role:
        """Get the card at a center position."""
        return getattr(self, CenterPosition(position).value)

    def to_dict(self) -> dict[str, str]:
        return {
            "left": self.left.value,
            "middle": self.middle.value,
            "right": self.right.value,
        }
