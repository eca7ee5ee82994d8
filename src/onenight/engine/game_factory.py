"""Game state factory - deals the cards for a new game."""

import logging
import random
import string
from collections import Counter
from typing import Optional

from onenight.exceptions import ConfigurationError
from onenight.models import (
    GAME_ROLES,
    PLAYER_NAMES,
    CenterCards,
    GameState,
    Player,
    Role,
)

logger = logging.getLogger(__name__)

PLAYER_COUNT = 5
DEFAULT_DISCUSSION_ROUNDS = 3

_ID_ALPHABET = string.ascii_lowercase + string.digits
_ID_LENGTH = 7

# Game ids are drawn independently of the deal generator
_session_rng = random.SystemRandom()

# Fixed pool every game must be dealt from
_EXPECTED_POOL = Counter({
    Role.WEREWOLF: 2,
    Role.SEER: 1,
    Role.ROBBER: 1,
    Role.TROUBLEMAKER: 1,
    Role.TANNER: 1,
    Role.VILLAGER: 1,
    Role.INSOMNIAC: 1,
})


def generate_id(rng: random.Random) -> str:
    """Short random id drawn from the given generator."""
    return "".join(rng.choice(_ID_ALPHABET) for _ in range(_ID_LENGTH))


def check_role_pool(
    roles: list[Role],
    names: list[str],
) -> None:
    """Verify the role pool and seat names can produce a legal deal.

    Raises:
        ConfigurationError: If the pool is not the fixed 8-card set or there
                            are not enough names for the seats.
    """
    if Counter(roles) != _EXPECTED_POOL:
        raise ConfigurationError(
            f"Role pool must be exactly {sorted(r.value for r in _EXPECTED_POOL.elements())}, "
            f"got {sorted(r.value for r in roles)}"
        )
    if len(names) < PLAYER_COUNT:
        raise ConfigurationError(
            f"Need {PLAYER_COUNT} player names, got {len(names)}"
        )


def create_game(
    discussion_rounds: int = DEFAULT_DISCUSSION_ROUNDS,
    rng: Optional[random.Random] = None,
    roles: Optional[list[Role]] = None,
    names: Optional[list[str]] = None,
) -> GameState:
    """Deal a new game.

    Shuffles the 8-card pool, gives the first 5 cards to the players in name
    order and the last 3 to the left, middle and right center positions.

    Args:
        discussion_rounds: Number of discussion rounds during the day.
        rng: random.Random instance for reproducible deals. Player ids are
             drawn from it too; the game id is not.
        roles: Role pool override (must still be the fixed 8-card set).
        names: Seat names override, in deal order.

    Returns:
        A fresh GameState in the SETUP phase.

    Raises:
        ConfigurationError: If the pool, names or round count are invalid.
    """
    rng = rng or random.Random()
    roles = list(GAME_ROLES) if roles is None else list(roles)
    names = list(PLAYER_NAMES) if names is None else list(names)

    check_role_pool(roles, names)
    if discussion_rounds < 1:
        raise ConfigurationError(
            f"discussion_rounds must be >= 1, got {discussion_rounds}"
        )

    rng.shuffle(roles)
    player_roles = roles[:PLAYER_COUNT]
    center_roles = roles[PLAYER_COUNT:]

    players = [
        Player(
            id=generate_id(rng),
            name=names[index],
            original_role=role,
            current_role=role,
        )
        for index, role in enumerate(player_roles)
    ]

    state = GameState(
        id=generate_id(_session_rng),
        players=players,
        center_cards=CenterCards(
            left=center_roles[0],
            middle=center_roles[1],
            right=center_roles[2],
        ),
        max_rounds=discussion_rounds,
    )

    logger.info(
        "Created game %s with %d discussion rounds", state.id, discussion_rounds
    )
    logger.debug(
        "Deal for game %s: %s | center %s",
        state.id,
        {p.name: p.original_role.value for p in players},
        state.center_cards.to_dict(),
    )
    return state
