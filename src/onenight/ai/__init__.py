"""Oracle implementations that make decisions for the players."""

from onenight.ai.openai_oracle import OpenAIOracle, split_reasoning, with_reasoning_field
from onenight.ai.stub_ai import StubOracle

__all__ = [
    "OpenAIOracle",
    "StubOracle",
    "split_reasoning",
    "with_reasoning_field",
]
