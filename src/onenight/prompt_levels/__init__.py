"""Three-Level Prompt System for One Night agents.

Level 1: Static system prompts - rules and starting role, never change.
Level 2: Game state context - what one player may know right now.
Level 3: Decision prompt - the specific question and its answer schema.

Usage:
    from onenight.prompt_levels import (
        get_system_prompt,  # Level 1
        make_player_context,  # Level 2
        build_vote_decision,  # Level 3
    )
"""

from onenight.prompt_levels.level1_system import get_system_prompt
from onenight.prompt_levels.level2_state import (
    format_other_players,
    format_night_knowledge,
    format_role_status,
    format_discussion,
    make_player_context,
)
from onenight.prompt_levels.level3_decision import (
    DecisionPrompt,
    SEER_LOOK_AT_PLAYER,
    SEER_LOOK_AT_CENTER,
    build_seer_decision,
    build_robber_decision,
    build_troublemaker_decision,
    build_discussion_decision,
    build_vote_decision,
)

__all__ = [
    "get_system_prompt",
    "format_other_players",
    "format_night_knowledge",
    "format_role_status",
    "format_discussion",
    "make_player_context",
    "DecisionPrompt",
    "SEER_LOOK_AT_PLAYER",
    "SEER_LOOK_AT_CENTER",
    "build_seer_decision",
    "build_robber_decision",
    "build_troublemaker_decision",
    "build_discussion_decision",
    "build_vote_decision",
]
