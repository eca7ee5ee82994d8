"""Shared base types for decision handlers.

This module contains the types every handler uses:
- Oracle Protocol: interface to the external reasoning oracle
- OracleResponse / StructuredResponse: what the oracle returns
- HandlerResult: a validated selection plus the prompts and rationale
- DecisionHandler: deadline-bounded oracle calls
"""

import asyncio
from typing import Any, Optional, Protocol

from pydantic import BaseModel, Field

from onenight.exceptions import GameError, OracleError, OracleTimeoutError
from onenight.models import GameState, Player

DEFAULT_ORACLE_TIMEOUT = 60.0


# ============================================================================
# Oracle Protocol
# ============================================================================


class OracleResponse(BaseModel):
    """Freeform oracle answer."""

    text: str
    rationale: Optional[str] = None


class StructuredResponse(BaseModel):
    """Oracle answer conforming to a requested schema."""

    fields: dict[str, Any] = Field(default_factory=dict)
    rationale: Optional[str] = None


class Oracle(Protocol):
    """The external decision-making capability behind every seat.

    Handlers validate every answer against the game before trusting it.
    """

    async def query(self, system_prompt: str, user_prompt: str) -> OracleResponse:
        """Return free text, used for discussion turns."""
        ...

    async def query_structured(
        self,
        system_prompt: str,
        user_prompt: str,
        schema: dict,
    ) -> StructuredResponse:
        """Return fields matching ``schema``, used for night choices and votes."""
        ...


# ============================================================================
# Shared Handler Result Type
# ============================================================================


class HandlerResult(BaseModel):
    """Output from a decision handler.

    ``selection`` is the validated decision (a night choice model, a target
    player id or a discussion statement). None means the oracle's answer
    failed validation and the action is dropped.
    """

    selection: Optional[Any] = None
    system_prompt: str = ""
    user_prompt: str = ""
    oracle_response: Optional[str] = None
    rationale: Optional[str] = None
    debug_info: Optional[str] = None

    @property
    def accepted(self) -> bool:
        return self.selection is not None


# ============================================================================
# Base Handler
# ============================================================================


class DecisionHandler:
    """Base for handlers that consult the oracle.

    Oracle calls are bounded by ``timeout`` seconds. A timeout or any oracle
    failure raises OracleError so the caller can abort the step without
    committing anything.
    """

    def __init__(self, timeout: float = DEFAULT_ORACLE_TIMEOUT):
        self.timeout = timeout

    async def _ask(self, oracle: Oracle, system_prompt: str, user_prompt: str) -> OracleResponse:
        return await self._bounded(oracle.query(system_prompt, user_prompt))

    async def _ask_structured(
        self,
        oracle: Oracle,
        system_prompt: str,
        user_prompt: str,
        schema: dict,
    ) -> StructuredResponse:
        return await self._bounded(oracle.query_structured(system_prompt, user_prompt, schema))

    async def _bounded(self, call):
        try:
            return await asyncio.wait_for(call, timeout=self.timeout)
        except asyncio.TimeoutError as e:
            raise OracleTimeoutError(self.timeout) from e
        except GameError:
            raise
        except Exception as e:
            raise OracleError(f"Oracle call failed: {e}") from e


def resolve_other_player(state: GameState, actor: Player, name: Any) -> Optional[Player]:
    """Map an oracle-supplied name to another player of the game.

    Returns:
        The named player, or None if the name is not a string, unknown, or
        names the actor.
    """
    if not isinstance(name, str):
        return None
    target = state.get_player_by_name(name)
    if target is None or target.id == actor.id:
        return None
    return target
