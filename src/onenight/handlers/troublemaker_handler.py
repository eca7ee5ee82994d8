"""Troublemaker decision handler."""

import json
import logging

from onenight.handlers.base import (
    DecisionHandler,
    HandlerResult,
    Oracle,
    resolve_other_player,
)
from onenight.models import GameState, Player, TroublemakerChoice
from onenight.prompt_levels import (
    build_troublemaker_decision,
    get_system_prompt,
    make_player_context,
)

logger = logging.getLogger(__name__)


class TroublemakerHandler(DecisionHandler):
    """Handler for the Troublemaker's night choice.

    Special Rules:
    - Both targets must be other players (not the Troublemaker)
    - The two targets must be different players
    Anything else drops the action.
    """

    async def __call__(self, state: GameState, player: Player, oracle: Oracle) -> HandlerResult:
        other_names = [p.name for p in state.get_other_players(player.id)]
        system = get_system_prompt(player.original_role)
        decision = build_troublemaker_decision(other_names)
        user = decision.to_user_prompt(make_player_context(state, player, include_day=False))

        response = await self._ask_structured(oracle, system, user, decision.schema)
        first = resolve_other_player(state, player, response.fields.get("player1"))
        second = resolve_other_player(state, player, response.fields.get("player2"))

        choice = None
        if first is None or second is None:
            debug_info = (
                f"invalid players {response.fields.get('player1')!r}, "
                f"{response.fields.get('player2')!r}"
            )
        elif first.id == second.id:
            debug_info = f"same player picked twice: {first.name}"
        else:
            choice = TroublemakerChoice(first_id=first.id, second_id=second.id)
            debug_info = f"swap={first.name},{second.name}"

        if choice is None:
            logger.warning(
                "Game %s: dropped troublemaker choice from %s: %s", state.id, player.name, debug_info
            )

        return HandlerResult(
            selection=choice,
            system_prompt=system,
            user_prompt=user,
            oracle_response=json.dumps(response.fields),
            rationale=response.rationale,
            debug_info=debug_info,
        )
