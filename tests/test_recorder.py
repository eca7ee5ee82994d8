"""Tests for discussion and vote recording."""

import pytest

from onenight.engine import add_day_message, add_vote
from onenight.exceptions import InvalidTargetError
from onenight.models import CenterCards, GamePhase, GameState, Player, Role


def make_state(phase: GamePhase = GamePhase.VOTING) -> GameState:
    names = ["Alice", "Bob", "Charlie", "Diana", "Eve"]
    roles = [Role.WEREWOLF, Role.SEER, Role.ROBBER, Role.TROUBLEMAKER, Role.VILLAGER]
    players = [
        Player(id=f"p{i}", name=names[i], original_role=role, current_role=role)
        for i, role in enumerate(roles)
    ]
    return GameState(
        id="game1",
        phase=phase,
        players=players,
        center_cards=CenterCards(left=Role.WEREWOLF, middle=Role.TANNER, right=Role.INSOMNIAC),
    )


class TestAddDayMessage:
    """Tests for add_day_message."""

    def test_tags_current_round(self):
        state = make_state(GamePhase.DAY)
        state.current_round = 2
        message = add_day_message(state, "p1", "I am the Seer.")
        assert message.round == 2
        assert message.player_name == "Bob"
        assert state.day_messages == [message]

    def test_messages_keep_order(self):
        state = make_state(GamePhase.DAY)
        state.current_round = 1
        add_day_message(state, "p0", "first")
        add_day_message(state, "p1", "second")
        assert [m.message for m in state.day_messages] == ["first", "second"]

    def test_unknown_player(self):
        state = make_state(GamePhase.DAY)
        with pytest.raises(InvalidTargetError):
            add_day_message(state, "nobody", "hello")


class TestAddVote:
    """Tests for add_vote."""

    def test_records_vote(self):
        state = make_state()
        vote = add_vote(state, "p0", "p1")
        assert vote.voter_id == "p0"
        assert vote.target_id == "p1"
        assert state.votes == [vote]

    def test_self_vote_rejected(self):
        state = make_state()
        with pytest.raises(InvalidTargetError):
            add_vote(state, "p0", "p0")
        assert state.votes == []

    def test_second_vote_rejected(self):
        state = make_state()
        add_vote(state, "p0", "p1")
        with pytest.raises(InvalidTargetError):
            add_vote(state, "p0", "p2")
        assert len(state.votes) == 1

    def test_unknown_target_rejected(self):
        state = make_state()
        with pytest.raises(InvalidTargetError):
            add_vote(state, "p0", "nobody")

    def test_only_during_voting(self):
        state = make_state(GamePhase.DAY)
        with pytest.raises(InvalidTargetError):
            add_vote(state, "p0", "p1")
