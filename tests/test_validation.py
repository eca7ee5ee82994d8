"""Tests for state invariant validation."""

from onenight.models import (
    CenterCards,
    GamePhase,
    GameState,
    NightActionRecord,
    Player,
    Role,
    Team,
    Vote,
)
from onenight.validation import ValidationSeverity, validate_state


def make_state() -> GameState:
    names = ["Alice", "Bob", "Charlie", "Diana", "Eve"]
    roles = [Role.WEREWOLF, Role.SEER, Role.ROBBER, Role.TROUBLEMAKER, Role.VILLAGER]
    players = [
        Player(id=f"p{i}", name=names[i], original_role=role, current_role=role)
        for i, role in enumerate(roles)
    ]
    return GameState(
        id="game1",
        players=players,
        center_cards=CenterCards(left=Role.WEREWOLF, middle=Role.TANNER, right=Role.INSOMNIAC),
    )


def rule_ids(state: GameState) -> list[str]:
    return [v.rule_id for v in validate_state(state)]


class TestValidateState:
    """Tests for validate_state."""

    def test_fresh_state_is_valid(self):
        assert validate_state(make_state()) == []

    def test_wrong_player_count(self):
        state = make_state()
        state.players.pop()
        assert "S.1" in rule_ids(state)

    def test_card_pool_changed(self):
        state = make_state()
        state.players[4].current_role = Role.SEER
        assert "S.2" in rule_ids(state)

    def test_swap_without_action(self):
        state = make_state()
        state.players[0].current_role, state.players[1].current_role = Role.SEER, Role.WEREWOLF
        assert rule_ids(state) == ["S.3"]

    def test_swap_with_action(self):
        state = make_state()
        state.players[2].current_role, state.players[1].current_role = Role.SEER, Role.ROBBER
        state.night_actions.append(NightActionRecord(
            player_id="p2", role=Role.ROBBER, action="Swapped with Bob", result="...",
        ))
        assert validate_state(state) == []

    def test_too_many_changes_for_swaps(self):
        state = make_state()
        state.players[0].current_role = Role.SEER
        state.players[1].current_role = Role.ROBBER
        state.players[2].current_role = Role.WEREWOLF
        state.night_actions.append(NightActionRecord(
            player_id="p2", role=Role.ROBBER, action="Swapped", result="...",
        ))
        assert "S.4" in rule_ids(state)

    def test_bad_votes(self):
        state = make_state()
        state.votes = [
            Vote(voter_id="p0", target_id="p0"),
            Vote(voter_id="p1", target_id="p2"),
            Vote(voter_id="p1", target_id="p3"),
            Vote(voter_id="p4", target_id="ghost"),
        ]
        assert rule_ids(state).count("S.5") == 3

    def test_winners_before_end(self):
        state = make_state()
        state.winners = [Team.VILLAGE]
        assert rule_ids(state) == ["S.6"]

    def test_end_without_winners_is_warning(self):
        state = make_state()
        state.phase = GamePhase.END
        violations = validate_state(state)
        assert len(violations) == 1
        assert violations[0].severity == ValidationSeverity.WARNING

    def test_violation_str(self):
        state = make_state()
        state.winners = [Team.VILLAGE]
        assert str(validate_state(state)[0]).startswith("[S.6] Victory:")
