"""Game state for a single One Night game."""

from enum import Enum
from typing import Optional
from pydantic import BaseModel, Field

from onenight.models.player import Player, CenterCards
from onenight.models.roles import Role, Team


class GamePhase(str, Enum):
    """Macro phases of the game, in order."""

    SETUP = "setup"
    NIGHT = "night"
    DAY = "day"
    VOTING = "voting"
    END = "end"


class NightActionRecord(BaseModel):
    """Audit entry for a resolved night action. Never read back by game logic."""

    player_id: str
    role: Role
    action: str
    result: str


class DayMessage(BaseModel):
    """One statement made during a discussion round."""

    player_id: str
    player_name: str
    message: str
    round: int


class Vote(BaseModel):
    """A player's single vote."""

    voter_id: str
    target_id: str


class GameState(BaseModel):
    """Represents the full state of one game.

    The state is created once by the factory and then mutated one step at a
    time by the step runner. Logs (night actions, day messages, votes) are
    append-only.
    """

    id: str
    phase: GamePhase = GamePhase.SETUP
    players: list[Player]
    center_cards: CenterCards
    night_actions: list[NightActionRecord] = Field(default_factory=list)
    day_messages: list[DayMessage] = Field(default_factory=list)
    votes: list[Vote] = Field(default_factory=list)
    eliminated_player_id: Optional[str] = None
    winners: list[Team] = Field(default_factory=list)
    current_round: int = 0
    max_rounds: int = 3

    def get_player(self, player_id: str) -> Optional[Player]:
        """Get player by id.

        Args:
            player_id: The player's id

        Returns:
            Player if found, None otherwise
        """
        for player in self.players:
            if player.id == player_id:
                return player
        return None

    def get_player_by_name(self, name: str) -> Optional[Player]:
        """Get player by display name (case-insensitive, surrounding spaces ignored)."""
        wanted = name.strip().lower()
        for player in self.players:
            if player.name.lower() == wanted:
                return player
        return None

    def get_other_players(self, player_id: str) -> list[Player]:
        """All players except the given one, in seat order."""
        return [p for p in self.players if p.id != player_id]

    def get_werewolves(self) -> list[Player]:
        """Players dealt a Werewolf card (by original role)."""
        return [p for p in self.players if p.original_role == Role.WEREWOLF]

    def count_current_role(self, role: Role) -> int:
        """Count players currently holding a role card."""
        return sum(1 for p in self.players if p.current_role == role)

    def get_eliminated_player(self) -> Optional[Player]:
        if self.eliminated_player_id is None:
            return None
        return self.get_player(self.eliminated_player_id)

    def has_voted(self, player_id: str) -> bool:
        return any(v.voter_id == player_id for v in self.votes)
