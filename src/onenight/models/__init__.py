"""Models package."""

from onenight.models.roles import (
    Role,
    Team,
    RoleDefinition,
    ROLE_DEFINITIONS,
    GAME_ROLES,
    describe_role,
    wake_order,
)
from onenight.models.player import (
    PLAYER_NAMES,
    Player,
    CenterPosition,
    CenterCards,
)
from onenight.models.choices import (
    SeerChoice,
    RobberChoice,
    TroublemakerChoice,
)
from onenight.models.game_state import (
    GamePhase,
    NightActionRecord,
    DayMessage,
    Vote,
    GameState,
)

__all__ = [
    "Role",
    "Team",
    "RoleDefinition",
    "ROLE_DEFINITIONS",
    "GAME_ROLES",
    "describe_role",
    "wake_order",
    "PLAYER_NAMES",
    "Player",
    "CenterPosition",
    "CenterCards",
    "GamePhase",
    "NightActionRecord",
    "DayMessage",
    "Vote",
    "GameState",
    "SeerChoice",
    "RobberChoice",
    "TroublemakerChoice",
]
