"""Role catalog for One Night Werewolf."""

from enum import Enum
from typing import Optional
from pydantic import BaseModel, ConfigDict


class Role(str, Enum):
    """Role cards in the game."""

    WEREWOLF = "werewolf"
    SEER = "seer"
    ROBBER = "robber"
    TROUBLEMAKER = "troublemaker"
    TANNER = "tanner"
    VILLAGER = "villager"
    INSOMNIAC = "insomniac"


class Team(str, Enum):
    """Teams for victory conditions."""

    WEREWOLF = "werewolf"
    VILLAGE = "village"
    TANNER = "tanner"


class RoleDefinition(BaseModel):
    """Static metadata for a role card."""

    role: Role
    team: Team
    wake_order: Optional[int] = None  # None = never wakes, lower = earlier
    description: str = ""

    model_config = ConfigDict(frozen=True)


ROLE_DEFINITIONS: dict[Role, RoleDefinition] = {
    Role.WEREWOLF: RoleDefinition(
        role=Role.WEREWOLF,
        team=Team.WEREWOLF,
        wake_order=1,
        description=(
            "You are a Werewolf. At night, all Werewolves open their eyes and look for "
            "other Werewolves. If no one else opens their eyes, the other Werewolf is in "
            "the center. A lone Werewolf may view one center card."
        ),
    ),
    Role.SEER: RoleDefinition(
        role=Role.SEER,
        team=Team.VILLAGE,
        wake_order=2,
        description=(
            "You are the Seer. At night, the Seer may look either at one other player's "
            "card or at two of the center cards, but does not move them."
        ),
    ),
    Role.ROBBER: RoleDefinition(
        role=Role.ROBBER,
        team=Team.VILLAGE,
        wake_order=3,
        description=(
            "You are the Robber. At night, the Robber takes a card from another player, "
            "places the Robber card where the other card was, then looks at the new card. "
            "The Robber joins the team of the card taken but does not perform its night action."
        ),
    ),
    Role.TROUBLEMAKER: RoleDefinition(
        role=Role.TROUBLEMAKER,
        team=Team.VILLAGE,
        wake_order=4,
        description=(
            "You are the Troublemaker. At night, the Troublemaker may switch the cards of "
            "two other players without looking at them. Those players now belong to the "
            "role and team of their new card."
        ),
    ),
    Role.INSOMNIAC: RoleDefinition(
        role=Role.INSOMNIAC,
        team=Team.VILLAGE,
        wake_order=5,
        description=(
            "You are the Insomniac. The Insomniac wakes last and looks at her own card "
            "to see whether it has changed."
        ),
    ),
    Role.VILLAGER: RoleDefinition(
        role=Role.VILLAGER,
        team=Team.VILLAGE,
        wake_order=None,
        description=(
            "You are a Villager. The Villager has no special abilities, but is definitely "
            "not a Werewolf."
        ),
    ),
    Role.TANNER: RoleDefinition(
        role=Role.TANNER,
        team=Team.TANNER,
        wake_order=None,
        description=(
            "You are the Tanner. The Tanner hates his job and wants to die. The Tanner only "
            "wins if he is eliminated, and is on neither the village nor the werewolf team."
        ),
    ),
}


# The 8 cards of a game: 5 dealt to players, 3 to the center
GAME_ROLES: list[Role] = [
    Role.WEREWOLF,
    Role.WEREWOLF,
    Role.SEER,
    Role.ROBBER,
    Role.TROUBLEMAKER,
    Role.TANNER,
    Role.VILLAGER,
    Role.INSOMNIAC,
]


def describe_role(role: Role) -> RoleDefinition:
    """Get the static definition of a role."""
    return ROLE_DEFINITIONS[role]


def wake_order() -> list[Role]:
    """Roles that wake at night, earliest first."""
    waking = [d for d in ROLE_DEFINITIONS.values() if d.wake_order is not None]
    waking.sort(key=lambda d: d.wake_order)
    return [d.role for d in waking]
