"""Engine package - game orchestration components."""

from .game_factory import (
    DEFAULT_DISCUSSION_ROUNDS,
    PLAYER_COUNT,
    check_role_pool,
    create_game,
    generate_id,
)
from .night_action_resolver import NightActionResolver
from .recorder import add_day_message, add_vote
from .resolution import determine_winners, find_eliminated, resolve_votes, tally_votes
from .steps import Step, build_steps, describe_step
from .session import Session
from .session_store import InMemorySessionStore, SessionStore
from .night_capabilities import NIGHT_CAPABILITIES, NightCapability, get_capability
from .step_runner import StartResult, StepResult, StepRunner

__all__ = [
    "DEFAULT_DISCUSSION_ROUNDS",
    "PLAYER_COUNT",
    "check_role_pool",
    "create_game",
    "generate_id",
    "NightActionResolver",
    "add_day_message",
    "add_vote",
    "determine_winners",
    "find_eliminated",
    "resolve_votes",
    "tally_votes",
    "Step",
    "build_steps",
    "describe_step",
    "Session",
    "InMemorySessionStore",
    "SessionStore",
    "NIGHT_CAPABILITIES",
    "NightCapability",
    "get_capability",
    "StartResult",
    "StepResult",
    "StepRunner",
]
