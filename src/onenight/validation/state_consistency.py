"""State Consistency Validators (S.1-S.6).

Rules:
- S.1: Exactly five players with distinct ids
- S.2: Player cards plus center cards are always the dealt role pool
- S.3: Without a Robber or Troublemaker action, every card is untouched
- S.4: Each swap action changes at most two players' cards
- S.5: Votes are unique per voter, never self-votes, and name real players
- S.6: Winners are declared only once the game ends, as distinct teams
"""

from collections import Counter

from onenight.engine.game_factory import PLAYER_COUNT
from onenight.models import GAME_ROLES, GamePhase, GameState, Role

from .types import ValidationSeverity, ValidationViolation

_SWAPPING_ROLES = {Role.ROBBER, Role.TROUBLEMAKER}


def validate_state(state: GameState) -> list[ValidationViolation]:
    """Validate state consistency rules S.1-S.6.

    Args:
        state: Game state at any point of the game

    Returns:
        List of validation violations (empty if valid)
    """
    violations: list[ValidationViolation] = []
    violations.extend(_check_players(state))
    violations.extend(_check_cards(state))
    violations.extend(_check_votes(state))
    violations.extend(_check_winners(state))
    return violations


def _check_players(state: GameState) -> list[ValidationViolation]:
    ids = [p.id for p in state.players]
    if len(ids) == PLAYER_COUNT and len(set(ids)) == PLAYER_COUNT:
        return []
    return [ValidationViolation(
        rule_id="S.1",
        category="Players",
        message=f"Expected {PLAYER_COUNT} players with distinct ids, got {ids}",
        context={"player_ids": ids},
    )]


def _check_cards(state: GameState) -> list[ValidationViolation]:
    violations: list[ValidationViolation] = []

    center = [state.center_cards.left, state.center_cards.middle, state.center_cards.right]
    current = Counter([p.current_role for p in state.players] + center)
    if current != Counter(GAME_ROLES):
        violations.append(ValidationViolation(
            rule_id="S.2",
            category="Cards",
            message="Player and center cards no longer match the role pool",
            context={"cards": {role.value: n for role, n in current.items()}},
        ))

    changed = [p.name for p in state.players if p.current_role != p.original_role]
    swaps = sum(1 for record in state.night_actions if record.role in _SWAPPING_ROLES)

    if changed and swaps == 0:
        violations.append(ValidationViolation(
            rule_id="S.3",
            category="Cards",
            message=f"Cards changed without any swap action: {', '.join(changed)}",
            context={"changed": changed},
        ))
    elif len(changed) > 2 * swaps:
        violations.append(ValidationViolation(
            rule_id="S.4",
            category="Cards",
            message=f"{len(changed)} cards changed by only {swaps} swap action(s)",
            context={"changed": changed, "swaps": swaps},
        ))

    return violations


def _check_votes(state: GameState) -> list[ValidationViolation]:
    violations: list[ValidationViolation] = []
    known = {p.id for p in state.players}
    voters = Counter(v.voter_id for v in state.votes)

    for voter_id, count in voters.items():
        if count > 1:
            violations.append(ValidationViolation(
                rule_id="S.5",
                category="Voting",
                message=f"Player {voter_id} voted {count} times",
                context={"voter_id": voter_id},
            ))

    for vote in state.votes:
        if vote.voter_id == vote.target_id:
            violations.append(ValidationViolation(
                rule_id="S.5",
                category="Voting",
                message=f"Player {vote.voter_id} voted for themselves",
                context={"voter_id": vote.voter_id},
            ))
        if vote.voter_id not in known or vote.target_id not in known:
            violations.append(ValidationViolation(
                rule_id="S.5",
                category="Voting",
                message=f"Vote {vote.voter_id} -> {vote.target_id} names an unknown player",
                context=vote.model_dump(),
            ))

    return violations


def _check_winners(state: GameState) -> list[ValidationViolation]:
    if state.phase != GamePhase.END:
        if state.winners:
            return [ValidationViolation(
                rule_id="S.6",
                category="Victory",
                message=f"Winners declared during {state.phase.value} phase",
                context={"winners": [t.value for t in state.winners]},
            )]
        return []

    if len(set(state.winners)) != len(state.winners):
        return [ValidationViolation(
            rule_id="S.6",
            category="Victory",
            message="Winners contain duplicate teams",
            context={"winners": [t.value for t in state.winners]},
        )]
    if not state.winners:
        return [ValidationViolation(
            rule_id="S.6",
            category="Victory",
            message="Game ended without winners",
            severity=ValidationSeverity.WARNING,
        )]
    return []
