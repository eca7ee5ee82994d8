"""Tests for prompt building: what each player is allowed to see."""

from onenight.models import CenterCards, DayMessage, GameState, Player, Role
from onenight.prompt_levels import (
    build_discussion_decision,
    build_seer_decision,
    build_troublemaker_decision,
    get_system_prompt,
    make_player_context,
)


def make_state() -> GameState:
    names = ["Alice", "Bob", "Charlie", "Diana", "Eve"]
    roles = [Role.WEREWOLF, Role.SEER, Role.ROBBER, Role.TROUBLEMAKER, Role.INSOMNIAC]
    players = [
        Player(id=f"p{i}", name=names[i], original_role=role, current_role=role)
        for i, role in enumerate(roles)
    ]
    return GameState(
        id="game1",
        players=players,
        center_cards=CenterCards(left=Role.WEREWOLF, middle=Role.TANNER, right=Role.VILLAGER),
    )


class TestSystemPrompt:
    def test_names_starting_role(self):
        assert "YOUR STARTING ROLE: ROBBER" in get_system_prompt(Role.ROBBER)

    def test_static_per_role(self):
        assert get_system_prompt(Role.SEER) == get_system_prompt(Role.SEER)
        assert get_system_prompt(Role.SEER) != get_system_prompt(Role.TANNER)


class TestPlayerContext:
    def test_own_knowledge_only(self):
        state = make_state()
        state.players[1].night_knowledge.append("Alice's card is werewolf.")
        state.players[0].night_knowledge.append("SECRET WOLF NOTE")

        context = make_player_context(state, state.players[1])
        assert "You are Bob." in context
        assert "Alice's card is werewolf." in context
        assert "SECRET WOLF NOTE" not in context

    def test_night_context_is_minimal(self):
        state = make_state()
        state.players[2].night_knowledge.append("earlier")
        context = make_player_context(state, state.players[2], include_day=False)
        assert "OTHER PLAYERS: Alice, Bob, Diana, Eve" in context
        assert "earlier" not in context

    def test_discussion_in_order(self):
        state = make_state()
        state.day_messages.append(DayMessage(player_id="p0", player_name="Alice", message="one", round=1))
        state.day_messages.append(DayMessage(player_id="p1", player_name="Bob", message="two", round=1))
        context = make_player_context(state, state.players[4])
        assert context.index('Alice: "one"') < context.index('Bob: "two"')

    def test_no_discussion_yet(self):
        context = make_player_context(make_state(), make_state().players[0])
        assert "No one has spoken yet" in context


class TestDecisionPrompts:
    def test_seer_schema_is_strict(self):
        schema = build_seer_decision(["Alice", "Charlie"]).schema
        assert schema["additionalProperties"] is False
        assert set(schema["required"]) == {"action", "target_player", "center_cards"}
        assert schema["properties"]["center_cards"]["items"]["enum"] == ["left", "middle", "right"]

    def test_troublemaker_lists_only_others(self):
        decision = build_troublemaker_decision(["Alice", "Bob"])
        assert decision.schema["properties"]["player1"]["enum"] == ["Alice", "Bob"]

    def test_discussion_is_freeform(self):
        decision = build_discussion_decision(2, 3)
        assert decision.schema is None
        assert "Round 2 of 3" in decision.question
        assert decision.to_user_prompt("CTX").startswith("CTX\n\n")
