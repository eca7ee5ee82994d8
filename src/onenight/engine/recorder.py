"""Discussion and vote recording.

No decision logic lives here: the statement or vote target comes from the
oracle. The recorder only validates and appends.
"""

from onenight.exceptions import InvalidTargetError
from onenight.models import DayMessage, GamePhase, GameState, Player, Vote


def add_day_message(state: GameState, player_id: str, message: str) -> DayMessage:
    """Append a discussion statement tagged with the current round."""
    player = _require_player(state, player_id)
    day_message = DayMessage(
        player_id=player.id,
        player_name=player.name,
        message=message,
        round=state.current_round,
    )
    state.day_messages.append(day_message)
    return day_message


def add_vote(state: GameState, voter_id: str, target_id: str) -> Vote:
    """Append a vote after validating it.

    Raises:
        InvalidTargetError: If voting is not open, either id is unknown, the
                            voter targets themselves, or already voted.
    """
    if state.phase != GamePhase.VOTING:
        raise InvalidTargetError(
            f"Votes are only accepted during voting (phase is {state.phase.value})"
        )
    voter = _require_player(state, voter_id)
    target = _require_player(state, target_id)
    if voter.id == target.id:
        raise InvalidTargetError(f"{voter.name} cannot vote for themselves")
    if state.has_voted(voter.id):
        raise InvalidTargetError(f"{voter.name} has already voted")

    vote = Vote(voter_id=voter.id, target_id=target.id)
    state.votes.append(vote)
    return vote


def _require_player(state: GameState, player_id: str) -> Player:
    player = state.get_player(player_id)
    if player is None:
        raise InvalidTargetError(f"Unknown player id {player_id!r}")
    return player
