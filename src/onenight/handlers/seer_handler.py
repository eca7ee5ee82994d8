"""Seer decision handler.

The Seer chooses between looking at one other player's card and looking at
two of the three center cards. This handler only obtains and validates the
choice; the night action resolver reveals the cards.
"""

import json
import logging
from typing import Any, Optional

from onenight.handlers.base import (
    DecisionHandler,
    HandlerResult,
    Oracle,
    resolve_other_player,
)
from onenight.models import CenterPosition, GameState, Player, SeerChoice
from onenight.prompt_levels import (
    SEER_LOOK_AT_CENTER,
    SEER_LOOK_AT_PLAYER,
    build_seer_decision,
    get_system_prompt,
    make_player_context,
)

logger = logging.getLogger(__name__)


class SeerHandler(DecisionHandler):
    """Handler for the Seer's night choice.

    Responsibilities:
    1. Build prompts listing the other players and center positions
    2. Query the oracle with the seer schema
    3. Parse the answer into a SeerChoice
    4. Drop the choice (selection=None) if it names an unknown player, the
       Seer themselves, or fewer than two distinct center positions

    When more than two center positions are given, the first two distinct
    ones are used.
    """

    async def __call__(self, state: GameState, player: Player, oracle: Oracle) -> HandlerResult:
        other_names = [p.name for p in state.get_other_players(player.id)]
        system = get_system_prompt(player.original_role)
        decision = build_seer_decision(other_names)
        user = decision.to_user_prompt(make_player_context(state, player, include_day=False))

        response = await self._ask_structured(oracle, system, user, decision.schema)
        choice, debug_info = self._parse_choice(state, player, response.fields)

        if choice is None:
            logger.warning("Game %s: dropped seer choice from %s: %s", state.id, player.name, debug_info)

        return HandlerResult(
            selection=choice,
            system_prompt=system,
            user_prompt=user,
            oracle_response=json.dumps(response.fields),
            rationale=response.rationale,
            debug_info=debug_info,
        )

    def _parse_choice(
        self,
        state: GameState,
        player: Player,
        fields: dict[str, Any],
    ) -> tuple[Optional[SeerChoice], str]:
        """Parse oracle fields into a SeerChoice.

        Returns:
            Tuple of (choice or None, debug description)
        """
        action = fields.get("action")

        if action == SEER_LOOK_AT_PLAYER:
            target = resolve_other_player(state, player, fields.get("target_player"))
            if target is None:
                return None, f"invalid target_player={fields.get('target_player')!r}"
            return SeerChoice(target_id=target.id), f"action=look_at_player, target={target.name}"

        if action == SEER_LOOK_AT_CENTER:
            positions = self._parse_positions(fields.get("center_cards"))
            if positions is None:
                return None, f"invalid center_cards={fields.get('center_cards')!r}"
            return (
                SeerChoice(center_positions=positions),
                f"action=look_at_center, positions={[p.value for p in positions]}",
            )

        return None, f"unknown action={action!r}"

    def _parse_positions(self, raw: Any) -> Optional[list[CenterPosition]]:
        if not isinstance(raw, list):
            return None
        positions: list[CenterPosition] = []
        for value in raw:
            try:
                position = CenterPosition(str(value).strip().lower())
            except ValueError:
                return None
            if position not in positions:
                positions.append(position)
        if len(positions) < 2:
            return None
        return positions[:2]
