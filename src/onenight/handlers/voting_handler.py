"""Voting handler for the One Night game.

Every player votes once for another player. Key rules:
- Self-votes are not allowed
- The vote must name a player of this game
- An invalid vote is discarded; the player simply has no vote
"""

import json
import logging

from onenight.handlers.base import (
    DecisionHandler,
    HandlerResult,
    Oracle,
    resolve_other_player,
)
from onenight.models import GameState, Player
from onenight.prompt_levels import (
    build_vote_decision,
    get_system_prompt,
    make_player_context,
)

logger = logging.getLogger(__name__)


class VotingHandler(DecisionHandler):
    """Handler for one player's vote.

    The selection is the target player's id, or None when the oracle named
    an unknown player or the voter themselves.
    """

    async def __call__(self, state: GameState, player: Player, oracle: Oracle) -> HandlerResult:
        other_names = [p.name for p in state.get_other_players(player.id)]
        system = get_system_prompt(player.original_role)
        decision = build_vote_decision(other_names)
        user = decision.to_user_prompt(make_player_context(state, player))

        response = await self._ask_structured(oracle, system, user, decision.schema)
        raw_vote = response.fields.get("vote")
        target = resolve_other_player(state, player, raw_vote)

        if target is None:
            logger.warning("Game %s: discarded vote from %s for %r", state.id, player.name, raw_vote)

        return HandlerResult(
            selection=target.id if target else None,
            system_prompt=system,
            user_prompt=user,
            oracle_response=json.dumps(response.fields),
            rationale=response.rationale,
            debug_info=f"vote={raw_vote!r}",
        )
