"""Discussion handler for day rounds.

Each player speaks once per round, in seat order. The statement is free
text. An empty answer is recorded as silence.
"""

import logging

from onenight.handlers.base import DecisionHandler, HandlerResult, Oracle
from onenight.models import GameState, Player
from onenight.prompt_levels import (
    build_discussion_decision,
    get_system_prompt,
    make_player_context,
)

logger = logging.getLogger(__name__)

SILENT_STATEMENT = "(stays silent)"


class DiscussionHandler(DecisionHandler):
    """Handler for one discussion turn.

    Context Filtering (what the speaker sees):
    - Their own name and the other players' names
    - Their own night knowledge and starting role
    - Every statement made so far, in order

    What the speaker does NOT see:
    - Any other player's card or night knowledge
    """

    async def __call__(
        self,
        state: GameState,
        player: Player,
        oracle: Oracle,
        round_number: int,
    ) -> HandlerResult:
        system = get_system_prompt(player.original_role)
        decision = build_discussion_decision(round_number, state.max_rounds)
        user = decision.to_user_prompt(make_player_context(state, player))

        response = await self._ask(oracle, system, user)
        message = response.text.strip()
        if not message:
            logger.warning("Empty statement from %s, recording silence", player.name)
            message = SILENT_STATEMENT

        return HandlerResult(
            selection=message,
            system_prompt=system,
            user_prompt=user,
            oracle_response=response.text,
            rationale=response.rationale,
        )
