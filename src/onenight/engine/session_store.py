"""Session storage keyed by game id.

The store is injected into the step runner. It hands out one asyncio.Lock
per stored session so steps of the same session never run concurrently.
"""

import asyncio
import logging
import time
from typing import Callable, Optional, Protocol

from onenight.engine.session import Session
from onenight.exceptions import SessionNotFoundError
from onenight.models import GameState

logger = logging.getLogger(__name__)

DEFAULT_SESSION_TTL = 3600.0
DEFAULT_COMPLETED_TTL = 300.0


class SessionStore(Protocol):
    """Keyed storage for game sessions."""

    async def get(self, game_id: str) -> Optional[Session]:
        ...

    async def set(self, game_id: str, session: Session) -> None:
        ...

    async def update_state(self, game_id: str, state: GameState) -> None:
        ...

    async def advance_step(self, game_id: str) -> Session:
        """Move the cursor forward by one and mark the session completed when exhausted."""
        ...

    def lock(self, game_id: str) -> asyncio.Lock:
        """Lock serializing step execution for one stored session.

        Raises:
            SessionNotFoundError: No session is stored under ``game_id``.
        """
        ...


class InMemorySessionStore:
    """Process-local session store with TTL eviction.

    Sessions expire ``ttl_seconds`` after their last write. Once completed,
    a session expires ``completed_ttl_seconds`` after its final step.
    Expired sessions are evicted lazily on access.
    """

    def __init__(
        self,
        ttl_seconds: float = DEFAULT_SESSION_TTL,
        completed_ttl_seconds: float = DEFAULT_COMPLETED_TTL,
        clock: Callable[[], float] = time.monotonic,
    ):
        self._ttl = ttl_seconds
        self._completed_ttl = completed_ttl_seconds
        self._clock = clock
        self._sessions: dict[str, Session] = {}
        self._expires_at: dict[str, float] = {}
        self._locks: dict[str, asyncio.Lock] = {}

    async def get(self, game_id: str) -> Optional[Session]:
        self.evict_expired()
        return self._sessions.get(game_id)

    async def set(self, game_id: str, session: Session) -> None:
        self.evict_expired()
        self._sessions[game_id] = session
        self._touch(game_id, session)

    async def update_state(self, game_id: str, state: GameState) -> None:
        session = self._require(game_id)
        session.state = state
        self._touch(game_id, session)

    async def advance_step(self, game_id: str) -> Session:
        session = self._require(game_id)
        session.step_index += 1
        session.completed = session.step_index >= len(session.steps)
        self._touch(game_id, session)
        return session

    def lock(self, game_id: str) -> asyncio.Lock:
        self.evict_expired()
        if game_id not in self._sessions:
            raise SessionNotFoundError(game_id)
        if game_id not in self._locks:
            self._locks[game_id] = asyncio.Lock()
        return self._locks[game_id]

    def evict_expired(self) -> list[str]:
        """Drop every session whose TTL has passed.

        Returns:
            The evicted game ids.
        """
        now = self._clock()
        expired = [gid for gid, deadline in self._expires_at.items() if deadline <= now]
        for game_id in expired:
            self._sessions.pop(game_id, None)
            self._expires_at.pop(game_id, None)
            logger.warning("Evicted expired session %s", game_id)

        # A lock held during eviction is dropped on a later sweep
        stale = [gid for gid, lock in self._locks.items()
                 if gid not in self._sessions and not lock.locked()]
        for game_id in stale:
            del self._locks[game_id]
        return expired

    def __len__(self) -> int:
        return len(self._sessions)

    def __contains__(self, game_id: str) -> bool:
        return game_id in self._sessions

    def _require(self, game_id: str) -> Session:
        session = self._sessions.get(game_id)
        if session is None:
            raise SessionNotFoundError(game_id)
        return session

    def _touch(self, game_id: str, session: Session) -> None:
        ttl = self._completed_ttl if session.completed else self._ttl
        self._expires_at[game_id] = self._clock() + ttl
