"""Robber decision handler."""

import json
import logging

from onenight.handlers.base import (
    DecisionHandler,
    HandlerResult,
    Oracle,
    resolve_other_player,
)
from onenight.models import GameState, Player, RobberChoice
from onenight.prompt_levels import (
    build_robber_decision,
    get_system_prompt,
    make_player_context,
)

logger = logging.getLogger(__name__)


class RobberHandler(DecisionHandler):
    """Handler for the Robber's night choice.

    The Robber must name one other player. An unknown name or the Robber's
    own name drops the action.
    """

    async def __call__(self, state: GameState, player: Player, oracle: Oracle) -> HandlerResult:
        other_names = [p.name for p in state.get_other_players(player.id)]
        system = get_system_prompt(player.original_role)
        decision = build_robber_decision(other_names)
        user = decision.to_user_prompt(make_player_context(state, player, include_day=False))

        response = await self._ask_structured(oracle, system, user, decision.schema)
        target = resolve_other_player(state, player, response.fields.get("target_player"))

        choice = None
        if target is not None:
            choice = RobberChoice(target_id=target.id)
            debug_info = f"target={target.name}"
        else:
            debug_info = f"invalid target_player={response.fields.get('target_player')!r}"
            logger.warning("Game %s: dropped robber choice from %s: %s", state.id, player.name, debug_info)

        return HandlerResult(
            selection=choice,
            system_prompt=system,
            user_prompt=user,
            oracle_response=json.dumps(response.fields),
            rationale=response.rationale,
            debug_info=debug_info,
        )
