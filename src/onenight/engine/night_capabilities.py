"""Capability table for night-waking roles.

Each waking role declares whether it needs a decision from the oracle and
how its action is applied. The step runner looks roles up here instead of
branching on role names.
"""

from dataclasses import dataclass
from typing import Any, Callable, Optional

from onenight.engine.night_action_resolver import NightActionResolver
from onenight.handlers import (
    DecisionHandler,
    RobberHandler,
    SeerHandler,
    TroublemakerHandler,
)
from onenight.models import GameState, Role

# (resolver, state, actor_id, selection) -> result text
ApplyFn = Callable[[NightActionResolver, GameState, str, Any], str]


@dataclass(frozen=True)
class NightCapability:
    """How one role acts at night."""

    role: Role
    apply: ApplyFn
    handler_class: Optional[type[DecisionHandler]] = None

    @property
    def requires_decision(self) -> bool:
        return self.handler_class is not None


NIGHT_CAPABILITIES: dict[Role, NightCapability] = {
    Role.WEREWOLF: NightCapability(
        role=Role.WEREWOLF,
        apply=lambda resolver, state, actor_id, _: resolver.resolve_werewolf(state, actor_id),
    ),
    Role.SEER: NightCapability(
        role=Role.SEER,
        apply=lambda resolver, state, actor_id, choice: resolver.resolve_seer(state, actor_id, choice),
        handler_class=SeerHandler,
    ),
    Role.ROBBER: NightCapability(
        role=Role.ROBBER,
        apply=lambda resolver, state, actor_id, choice: resolver.resolve_robber(state, actor_id, choice),
        handler_class=RobberHandler,
    ),
    Role.TROUBLEMAKER: NightCapability(
        role=Role.TROUBLEMAKER,
        apply=lambda resolver, state, actor_id, choice: resolver.resolve_troublemaker(
            state, actor_id, choice
        ),
        handler_class=TroublemakerHandler,
    ),
    Role.INSOMNIAC: NightCapability(
        role=Role.INSOMNIAC,
        apply=lambda resolver, state, actor_id, _: resolver.resolve_insomniac(state, actor_id),
    ),
}


def get_capability(role: Role) -> Optional[NightCapability]:
    """Capability for a role, or None for roles that never wake."""
    return NIGHT_CAPABILITIES.get(role)
