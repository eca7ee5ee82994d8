"""Level 2: Game State Context.

What one player is allowed to know right now: who they are, who else is
playing, what they learned at night and what has been said so far. Never
includes another player's card.
"""

from onenight.models import GameState, Player, Role


def format_other_players(state: GameState, player: Player) -> str:
    return ", ".join(p.name for p in state.get_other_players(player.id))


def format_night_knowledge(player: Player) -> str:
    if not player.night_knowledge:
        return "You did not learn anything specific during the night."
    return "WHAT YOU LEARNED AT NIGHT:\n" + "\n".join(player.night_knowledge)


def format_role_status(player: Player) -> str:
    """What the player can infer about their own current card."""
    if player.original_role == Role.INSOMNIAC:
        return (
            "YOUR ROLE STATUS: You are the Insomniac. You checked your card at the end "
            "of the night (see what you learned above)."
        )
    if player.original_role == Role.ROBBER:
        return (
            "YOUR ROLE STATUS: You started as the Robber and swapped cards (see what you "
            "learned above). The Troublemaker acts after you, so your card may have moved again."
        )
    return (
        f"YOUR ROLE STATUS: You started as the {player.original_role.value}. You do NOT "
        "know whether the Robber or Troublemaker swapped your card during the night."
    )


def format_discussion(state: GameState) -> str:
    if not state.day_messages:
        return "No one has spoken yet. You are speaking first."
    lines = [f'{m.player_name}: "{m.message}"' for m in state.day_messages]
    return "DISCUSSION SO FAR:\n" + "\n".join(lines)


def make_player_context(state: GameState, player: Player, include_day: bool = True) -> str:
    """Build the game context block for one player.

    Args:
        state: Current game state
        player: The player the context is for
        include_day: Include night knowledge, role status and discussion
                     (False during the night, before any of it exists)

    Returns:
        Context text to prepend to the decision prompt
    """
    parts = [
        f"You are {player.name}.",
        f"OTHER PLAYERS: {format_other_players(state, player)}",
    ]
    if include_day:
        parts.append(format_night_knowledge(player))
        parts.append(format_role_status(player))
        parts.append(format_discussion(state))
    return "\n\n".join(parts)
