"""Decision handlers: oracle queries validated against the game."""

# Re-export common types from base
from onenight.handlers.base import (
    DEFAULT_ORACLE_TIMEOUT,
    DecisionHandler,
    HandlerResult,
    Oracle,
    OracleResponse,
    StructuredResponse,
    resolve_other_player,
)

# Import handlers
from .seer_handler import SeerHandler
from .robber_handler import RobberHandler
from .troublemaker_handler import TroublemakerHandler
from .discussion_handler import DiscussionHandler
from .voting_handler import VotingHandler

__all__ = [
    # Common types from base
    "DEFAULT_ORACLE_TIMEOUT",
    "DecisionHandler",
    "HandlerResult",
    "Oracle",
    "OracleResponse",
    "StructuredResponse",
    "resolve_other_player",
    # Night handlers
    "SeerHandler",
    "RobberHandler",
    "TroublemakerHandler",
    # Day handlers
    "DiscussionHandler",
    "VotingHandler",
]
