"""Oracle backed by the OpenAI chat completions API.

Freeform answers carry their reasoning in a ``<reasoning>`` block ahead of
the statement. Structured answers get a ``reasoning`` field injected into
the requested JSON schema; it is split off and returned as the rationale.
"""

import json
import logging
import os
import re
from typing import Optional

from openai import AsyncOpenAI

from onenight.exceptions import OracleError
from onenight.handlers.base import OracleResponse, StructuredResponse

logger = logging.getLogger(__name__)

DEFAULT_MODEL = "gpt-5"

_REASONING_BLOCK = re.compile(r"<reasoning>(.*?)</reasoning>", re.DOTALL)

REASONING_INSTRUCTION = """

Before your response, think through your strategy step by step in a <reasoning> block. Then provide your actual response.

Format:
<reasoning>
Your strategic thinking here...
</reasoning>

Your actual response here (1-3 sentences)"""

REASONING_PROPERTY = {
    "type": "string",
    "description": (
        "Your private strategic thinking process. Think step by step about the "
        "situation, what you know, what others might know, and what the best move is."
    ),
}


def split_reasoning(content: str) -> tuple[str, Optional[str]]:
    """Separate a ``<reasoning>`` block from the statement that follows it.

    Returns:
        (statement, reasoning). Without a block the whole content is the
        statement and reasoning is None.
    """
    match = _REASONING_BLOCK.search(content)
    if not match:
        return content.strip(), None
    statement = _REASONING_BLOCK.sub("", content, count=1).strip()
    return statement, match.group(1).strip()


def with_reasoning_field(schema: dict) -> dict:
    """Copy of ``schema`` with a required ``reasoning`` string property first."""
    properties = schema.get("properties", {})
    if "reasoning" in properties:
        return schema
    return {
        **schema,
        "properties": {"reasoning": REASONING_PROPERTY, **properties},
        "required": ["reasoning", *schema.get("required", [])],
    }


class OpenAIOracle:
    """Oracle implementation calling an OpenAI chat model."""

    def __init__(
        self,
        api_key: Optional[str] = None,
        model: str = DEFAULT_MODEL,
        temperature: float = 1.0,
        client: Optional[AsyncOpenAI] = None,
    ):
        self.model = model
        self.temperature = temperature
        if client is None:
            client = AsyncOpenAI(api_key=api_key or os.getenv("OPENAI_API_KEY"))
        self.client = client

    async def query(self, system_prompt: str, user_prompt: str) -> OracleResponse:
        content = await self._complete(
            system_prompt,
            user_prompt + REASONING_INSTRUCTION,
        )
        statement, reasoning = split_reasoning(content)
        return OracleResponse(text=statement, rationale=reasoning)

    async def query_structured(
        self,
        system_prompt: str,
        user_prompt: str,
        schema: dict,
    ) -> StructuredResponse:
        content = await self._complete(
            system_prompt,
            user_prompt,
            response_format={
                "type": "json_schema",
                "json_schema": {
                    "name": "response",
                    "strict": True,
                    "schema": with_reasoning_field(schema),
                },
            },
        )
        try:
            fields = json.loads(content)
        except json.JSONDecodeError as e:
            raise OracleError(f"Oracle returned malformed JSON: {e}") from e
        if not isinstance(fields, dict):
            raise OracleError("Oracle returned a non-object JSON value")

        reasoning = fields.pop("reasoning", None)
        return StructuredResponse(fields=fields, rationale=reasoning)

    async def _complete(self, system_prompt: str, user_prompt: str, **extra) -> str:
        response = await self.client.chat.completions.create(
            model=self.model,
            temperature=self.temperature,
            messages=[
                {"role": "system", "content": system_prompt},
                {"role": "user", "content": user_prompt},
            ],
            **extra,
        )
        content = response.choices[0].message.content or ""
        if not content.strip():
            raise OracleError(f"Model {self.model} returned an empty response")
        if response.usage:
            logger.debug(
                "%s used %d prompt / %d completion tokens",
                self.model,
                response.usage.prompt_tokens,
                response.usage.completion_tokens,
            )
        return content
