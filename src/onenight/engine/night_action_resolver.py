"""Night action resolution - computes what each waking role learns and swaps."""

import logging

from onenight.exceptions import InvalidTargetError
from onenight.models import (
    GameState,
    NightActionRecord,
    Player,
    Role,
    RobberChoice,
    SeerChoice,
    TroublemakerChoice,
)

logger = logging.getLogger(__name__)


class NightActionResolver:
    """Resolves one night action per call, mutating the given state in place.

    Every resolution:
    1. Appends one NightActionRecord to ``state.night_actions``
    2. Appends one knowledge string to the acting player
    3. Returns the result string for narration

    Swaps only touch ``current_role``; ``original_role`` is never modified.
    """

    def resolve_werewolf(self, state: GameState, actor_id: str) -> str:
        """Werewolves look for each other.

        A lone werewolf (the other one is in the center) sees the left
        center card instead.
        """
        actor = self._require_player(state, actor_id)
        werewolves = state.get_werewolves()

        if len(werewolves) == 1:
            result = (
                f"You are the only Werewolf. The left center card is "
                f"{state.center_cards.left.value}."
            )
        else:
            other = next(w for w in werewolves if w.id != actor.id)
            result = f"The other Werewolf is {other.name}."

        self._record(state, actor, Role.WEREWOLF, "Looked for other werewolves", result)
        return result

    def resolve_seer(self, state: GameState, actor_id: str, choice: SeerChoice) -> str:
        """Seer looks at one other player's current card or two center cards."""
        actor = self._require_player(state, actor_id)

        if choice.looks_at_player:
            target = self._require_player(state, choice.target_id)
            if target.id == actor.id:
                raise InvalidTargetError("Seer cannot look at their own card")
            result = f"{target.name}'s card is {target.current_role.value}."
            action = f"Looked at {target.name}'s card"
        else:
            cards = [
                f"{position.value}: {state.center_cards.card_at(position).value}"
                for position in choice.center_positions
            ]
            result = f"Center cards - {', '.join(cards)}."
            action = "Looked at center cards"

        self._record(state, actor, Role.SEER, action, result)
        return result

    def resolve_robber(self, state: GameState, actor_id: str, choice: RobberChoice) -> str:
        """Robber takes another player's card and leaves the Robber card behind.

        The target ends up holding the literal ``robber`` card, not a copy of
        whatever the actor held before.
        """
        actor = self._require_player(state, actor_id)
        target = self._require_player(state, choice.target_id)
        if target.id == actor.id:
            raise InvalidTargetError("Robber cannot rob themselves")

        new_role = target.current_role
        actor.current_role = new_role
        target.current_role = Role.ROBBER

        result = f"You swapped cards with {target.name} and are now the {new_role.value}."
        self._record(state, actor, Role.ROBBER, f"Swapped with {target.name}", result)
        return result

    def resolve_troublemaker(
        self,
        state: GameState,
        actor_id: str,
        choice: TroublemakerChoice,
    ) -> str:
        """Troublemaker swaps two other players' cards without looking."""
        actor = self._require_player(state, actor_id)
        first = self._require_player(state, choice.first_id)
        second = self._require_player(state, choice.second_id)

        if first.id == second.id:
            raise InvalidTargetError("Troublemaker must pick two different players")
        if actor.id in (first.id, second.id):
            raise InvalidTargetError("Troublemaker cannot swap their own card")

        first.current_role, second.current_role = second.current_role, first.current_role

        result = f"You swapped {first.name}'s and {second.name}'s cards."
        self._record(
            state, actor, Role.TROUBLEMAKER, f"Swapped {first.name} and {second.name}", result
        )
        return result

    def resolve_insomniac(self, state: GameState, actor_id: str) -> str:
        """Insomniac looks at her own card at the end of the night."""
        actor = self._require_player(state, actor_id)

        if actor.current_role == actor.original_role:
            result = f"Your card is still {actor.current_role.value}."
        else:
            result = f"Your card is now {actor.current_role.value}!"

        self._record(state, actor, Role.INSOMNIAC, "Looked at own card", result)
        return result

    def _require_player(self, state: GameState, player_id: str) -> Player:
        player = state.get_player(player_id)
        if player is None:
            raise InvalidTargetError(f"Unknown player id {player_id!r}")
        return player

    def _record(
        self,
        state: GameState,
        actor: Player,
        role: Role,
        action: str,
        result: str,
    ) -> None:
        state.night_actions.append(
            NightActionRecord(player_id=actor.id, role=role, action=action, result=result)
        )
        actor.night_knowledge.append(result)
        logger.debug("Game %s: %s (%s) %s", state.id, actor.name, role.value, action)
