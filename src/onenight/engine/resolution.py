"""Resolution engine - vote tally, elimination and winners."""

import logging
from typing import Optional

from onenight.models import GamePhase, GameState, Role, Team

logger = logging.getLogger(__name__)


def tally_votes(state: GameState) -> dict[str, int]:
    """Count votes per target id.

    The dict keeps first-vote order: a target appears at the position of
    the first vote cast for them.
    """
    tally: dict[str, int] = {}
    for vote in state.votes:
        tally[vote.target_id] = tally.get(vote.target_id, 0) + 1
    return tally


def find_eliminated(tally: dict[str, int], player_count: int) -> Optional[str]:
    """Pick the eliminated player from a tally.

    Resolution logic:
        - No votes -> no elimination
        - Every player tied at the top (fully dispersed votes) -> no elimination
        - Otherwise the first max-tally target in tally order is eliminated,
          even when other targets share the max
    """
    if not tally:
        return None

    max_votes = max(tally.values())
    leaders = [target for target, count in tally.items() if count == max_votes]

    if len(leaders) == player_count:
        return None
    return leaders[0]


def resolve_votes(state: GameState) -> Optional[str]:
    """Tally votes, set the eliminated player and end the game.

    Returns:
        The eliminated player id, or None.
    """
    tally = tally_votes(state)
    eliminated = find_eliminated(tally, len(state.players))

    state.eliminated_player_id = eliminated
    state.phase = GamePhase.END

    logger.info(
        "Game %s: tally %s, eliminated %s", state.id, tally, eliminated or "no one"
    )
    return eliminated


def determine_winners(state: GameState) -> list[Team]:
    """Compute and set the winning team from the cards held now.

    Victory table (tanner rule first, it overrides everything):
        eliminated is tanner                -> tanner
        no werewolf held, nobody eliminated -> village
        no werewolf held, someone died      -> werewolf
        werewolf held, werewolf eliminated  -> village
        werewolf held, anything else        -> werewolf
    """
    eliminated = state.get_eliminated_player()
    eliminated_role = eliminated.current_role if eliminated else None
    werewolf_count = state.count_current_role(Role.WEREWOLF)

    if eliminated_role == Role.TANNER:
        winners = [Team.TANNER]
    elif werewolf_count == 0:
        winners = [Team.VILLAGE] if eliminated is None else [Team.WEREWOLF]
    elif eliminated_role == Role.WEREWOLF:
        winners = [Team.VILLAGE]
    else:
        winners = [Team.WEREWOLF]

    state.winners = winners
    logger.info("Game %s: winners %s", state.id, [w.value for w in winners])
    return winners
