"""Tests for the stub and OpenAI oracles."""

import json
from types import SimpleNamespace

import pytest

from onenight.ai import OpenAIOracle, StubOracle, split_reasoning, with_reasoning_field
from onenight.exceptions import OracleError
from onenight.prompt_levels import (
    build_robber_decision,
    build_seer_decision,
    build_troublemaker_decision,
    build_vote_decision,
)

NAMES = ["Alice", "Charlie", "Diana", "Eve"]


# ============================================================================
# Fake OpenAI client
# ============================================================================


class FakeCompletions:
    def __init__(self, content):
        self.content = content
        self.requests: list[dict] = []

    async def create(self, **kwargs):
        self.requests.append(kwargs)
        message = SimpleNamespace(content=self.content)
        return SimpleNamespace(choices=[SimpleNamespace(message=message)], usage=None)


def make_client(content):
    completions = FakeCompletions(content)
    return SimpleNamespace(chat=SimpleNamespace(completions=completions)), completions


# ============================================================================
# StubOracle
# ============================================================================


class TestStubOracle:
    """The stub always answers inside the schema."""

    @pytest.mark.asyncio
    async def test_robber_and_vote_pick_a_name(self):
        oracle = StubOracle(seed=1)
        for decision, key in [(build_robber_decision(NAMES), "target_player"), (build_vote_decision(NAMES), "vote")]:
            response = await oracle.query_structured("s", "u", decision.schema)
            assert response.fields[key] in NAMES

    @pytest.mark.asyncio
    async def test_troublemaker_picks_two_different_players(self):
        oracle = StubOracle(seed=2)
        schema = build_troublemaker_decision(NAMES).schema
        for _ in range(20):
            fields = (await oracle.query_structured("s", "u", schema)).fields
            assert fields["player1"] in NAMES
            assert fields["player2"] in NAMES
            assert fields["player1"] != fields["player2"]

    @pytest.mark.asyncio
    async def test_seer_answer_is_complete(self):
        oracle = StubOracle(seed=3)
        schema = build_seer_decision(NAMES).schema
        for _ in range(20):
            fields = (await oracle.query_structured("s", "u", schema)).fields
            assert fields["action"] in ("look_at_player", "look_at_center")
            assert fields["target_player"] in NAMES
            assert len(set(fields["center_cards"])) == 2

    @pytest.mark.asyncio
    async def test_statement_not_empty(self):
        response = await StubOracle(seed=4).query("s", "u")
        assert response.text.strip()

    @pytest.mark.asyncio
    async def test_seeded_stub_is_reproducible(self):
        schema = build_vote_decision(NAMES).schema
        first, second = StubOracle(seed=9), StubOracle(seed=9)
        for _ in range(5):
            a = await first.query_structured("s", "u", schema)
            b = await second.query_structured("s", "u", schema)
            assert a.fields == b.fields


# ============================================================================
# OpenAIOracle
# ============================================================================


class TestSplitReasoning:
    """Tests for split_reasoning."""

    def test_with_block(self):
        statement, reasoning = split_reasoning(
            "<reasoning>\nBob is lying.\n</reasoning>\nI think Bob is the werewolf."
        )
        assert statement == "I think Bob is the werewolf."
        assert reasoning == "Bob is lying."

    def test_without_block(self):
        assert split_reasoning("  Just talking.  ") == ("Just talking.", None)


class TestWithReasoningField:
    """Tests for with_reasoning_field."""

    def test_injects_required_reasoning_first(self):
        schema = build_vote_decision(NAMES).schema
        extended = with_reasoning_field(schema)
        assert list(extended["properties"])[0] == "reasoning"
        assert extended["required"] == ["reasoning", "vote"]
        assert "reasoning" not in schema["properties"]

    def test_existing_reasoning_kept(self):
        schema = {"type": "object", "properties": {"reasoning": {"type": "string"}}, "required": ["reasoning"]}
        assert with_reasoning_field(schema) is schema


class TestOpenAIOracle:
    """Tests for OpenAIOracle with a fake client."""

    @pytest.mark.asyncio
    async def test_query_splits_reasoning(self):
        client, completions = make_client("<reasoning>Stay quiet.</reasoning>I'm a villager.")
        oracle = OpenAIOracle(model="test-model", client=client)

        response = await oracle.query("system", "user")
        assert response.text == "I'm a villager."
        assert response.rationale == "Stay quiet."

        request = completions.requests[0]
        assert request["model"] == "test-model"
        assert request["messages"][0] == {"role": "system", "content": "system"}
        assert "<reasoning>" in request["messages"][1]["content"]

    @pytest.mark.asyncio
    async def test_structured_pops_reasoning(self):
        client, completions = make_client(json.dumps({"reasoning": "Eve is loud.", "vote": "Eve"}))
        oracle = OpenAIOracle(client=client)

        response = await oracle.query_structured("s", "u", build_vote_decision(NAMES).schema)
        assert response.fields == {"vote": "Eve"}
        assert response.rationale == "Eve is loud."

        response_format = completions.requests[0]["response_format"]
        assert response_format["type"] == "json_schema"
        assert response_format["json_schema"]["strict"] is True
        assert "reasoning" in response_format["json_schema"]["schema"]["properties"]

    @pytest.mark.asyncio
    @pytest.mark.parametrize("content", ["", None, "   "])
    async def test_empty_response(self, content):
        client, _ = make_client(content)
        with pytest.raises(OracleError):
            await OpenAIOracle(client=client).query("s", "u")

    @pytest.mark.asyncio
    @pytest.mark.parametrize("content", ["not json", "[1, 2]"])
    async def test_malformed_json(self, content):
        client, _ = make_client(content)
        with pytest.raises(OracleError):
            await OpenAIOracle(client=client).query_structured("s", "u", build_vote_decision(NAMES).schema)
