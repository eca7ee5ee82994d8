"""Stub oracle for testing and offline play.

Generates valid random answers without calling a model. Useful for:
- Integration tests (full game flow without LLM calls)
- Development testing
- Running the CLI without an API key

Structured answers are read straight off the requested schema: every enum
property gets one of its non-null values, and array properties get two
distinct items. A StubOracle never produces an invalid choice.
"""

import random
from typing import Any, Optional

from onenight.handlers.base import OracleResponse, StructuredResponse

STATEMENTS = [
    "I don't have much to say yet. I'll be watching carefully.",
    "Someone here is hiding a werewolf card, and I intend to find out who.",
    "I'm the Villager, I have nothing to report from the night.",
    "Let's hear every claim before we decide anything.",
    "I think we need more information before making a decision.",
    "Something feels off about the early discussion.",
    "If anyone claims Robber, tell us who you took from.",
    "Let's not jump to conclusions. Stay rational everyone.",
]

RATIONALES = [
    "Keeping my options open.",
    "Picking at random since I have no strong read.",
    "Nothing stands out yet.",
]


class StubOracle:
    """An oracle that answers every query with a valid random choice."""

    def __init__(self, seed: Optional[int] = None):
        """Initialize stub oracle with optional random seed."""
        self._rng = random.Random(seed)
        self.calls = 0

    async def query(self, system_prompt: str, user_prompt: str) -> OracleResponse:
        self.calls += 1
        return OracleResponse(
            text=self._rng.choice(STATEMENTS),
            rationale=self._rng.choice(RATIONALES),
        )

    async def query_structured(
        self,
        system_prompt: str,
        user_prompt: str,
        schema: dict,
    ) -> StructuredResponse:
        self.calls += 1
        fields: dict[str, Any] = {}
        used: set = set()

        for name, prop in schema.get("properties", {}).items():
            value = self._value_for(prop, used)
            fields[name] = value
            if isinstance(value, str):
                used.add(value)

        return StructuredResponse(fields=fields, rationale=self._rng.choice(RATIONALES))

    def _value_for(self, prop: dict, used: set) -> Any:
        types = prop.get("type")
        if not isinstance(types, list):
            types = [types]

        if "array" in types:
            options = [v for v in prop.get("items", {}).get("enum", []) if v is not None]
            return self._rng.sample(options, min(2, len(options)))

        options = [v for v in prop.get("enum", []) if v is not None]
        fresh = [v for v in options if v not in used]
        if fresh:
            return self._rng.choice(fresh)
        if options:
            return self._rng.choice(options)
        if "string" in types:
            return self._rng.choice(STATEMENTS)
        return None
