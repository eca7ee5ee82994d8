"""Tests for the in-memory session store."""

import asyncio
import random

import pytest

from onenight.engine import InMemorySessionStore, Session, build_steps, create_game
from onenight.exceptions import SessionNotFoundError


class FakeClock:
    """Manually advanced monotonic clock."""

    def __init__(self):
        self.now = 0.0

    def __call__(self) -> float:
        return self.now


def make_session(seed: int = 1) -> Session:
    state = create_game(discussion_rounds=1, rng=random.Random(seed))
    return Session(state=state, steps=build_steps(state))


class TestInMemorySessionStore:
    """Tests for get/set/update/advance."""

    @pytest.mark.asyncio
    async def test_get_missing(self):
        store = InMemorySessionStore()
        assert await store.get("nope") is None

    @pytest.mark.asyncio
    async def test_set_and_get(self):
        store = InMemorySessionStore()
        session = make_session()
        await store.set("g1", session)
        assert await store.get("g1") is session
        assert "g1" in store
        assert len(store) == 1

    @pytest.mark.asyncio
    async def test_update_state(self):
        store = InMemorySessionStore()
        session = make_session()
        await store.set("g1", session)

        new_state = session.state.model_copy(deep=True)
        new_state.current_round = 1
        await store.update_state("g1", new_state)
        assert (await store.get("g1")).state.current_round == 1

    @pytest.mark.asyncio
    async def test_advance_step_marks_completed(self):
        store = InMemorySessionStore()
        session = make_session()
        await store.set("g1", session)

        for _ in range(len(session.steps) - 1):
            advanced = await store.advance_step("g1")
            assert not advanced.completed
        advanced = await store.advance_step("g1")
        assert advanced.completed
        assert advanced.current_step is None

    @pytest.mark.asyncio
    async def test_missing_session_errors(self):
        store = InMemorySessionStore()
        with pytest.raises(SessionNotFoundError):
            await store.advance_step("nope")
        with pytest.raises(SessionNotFoundError):
            await store.update_state("nope", make_session().state)


class TestEviction:
    """Tests for TTL eviction."""

    @pytest.mark.asyncio
    async def test_idle_session_expires(self):
        clock = FakeClock()
        store = InMemorySessionStore(ttl_seconds=100, clock=clock)
        await store.set("g1", make_session())

        clock.now = 99
        assert await store.get("g1") is not None
        clock.now = 200
        assert await store.get("g1") is None
        assert "g1" not in store

    @pytest.mark.asyncio
    async def test_writes_refresh_ttl(self):
        clock = FakeClock()
        store = InMemorySessionStore(ttl_seconds=100, clock=clock)
        await store.set("g1", make_session())

        clock.now = 90
        await store.advance_step("g1")
        clock.now = 150
        assert await store.get("g1") is not None

    @pytest.mark.asyncio
    async def test_completed_session_uses_shorter_ttl(self):
        clock = FakeClock()
        store = InMemorySessionStore(ttl_seconds=1000, completed_ttl_seconds=10, clock=clock)
        session = make_session()
        await store.set("g1", session)
        for _ in range(len(session.steps)):
            await store.advance_step("g1")

        clock.now = 11
        assert await store.get("g1") is None

    @pytest.mark.asyncio
    async def test_evict_expired_returns_ids(self):
        clock = FakeClock()
        store = InMemorySessionStore(ttl_seconds=10, clock=clock)
        await store.set("g1", make_session(1))
        clock.now = 5
        await store.set("g2", make_session(2))

        clock.now = 12
        assert store.evict_expired() == ["g1"]
        assert len(store) == 1


class TestLock:
    """Tests for per-session locks."""

    @pytest.mark.asyncio
    async def test_same_lock_per_game(self):
        store = InMemorySessionStore()
        await store.set("g1", make_session(1))
        await store.set("g2", make_session(2))
        assert store.lock("g1") is store.lock("g1")
        assert store.lock("g1") is not store.lock("g2")

    def test_unknown_game_has_no_lock(self):
        store = InMemorySessionStore()
        for i in range(20):
            with pytest.raises(SessionNotFoundError):
                store.lock(f"missing-{i}")
        assert store._locks == {}

    @pytest.mark.asyncio
    async def test_expired_session_drops_lock(self):
        clock = FakeClock()
        store = InMemorySessionStore(ttl_seconds=10, clock=clock)
        await store.set("g1", make_session(1))
        store.lock("g1")

        clock.now = 11
        with pytest.raises(SessionNotFoundError):
            store.lock("g1")
        assert store._locks == {}

    @pytest.mark.asyncio
    async def test_lock_serializes(self):
        store = InMemorySessionStore()
        await store.set("g1", make_session(1))
        order: list[str] = []

        async def worker(name: str):
            async with store.lock("g1"):
                order.append(f"{name}-start")
                await asyncio.sleep(0.01)
                order.append(f"{name}-end")

        await asyncio.gather(worker("a"), worker("b"))
        assert order in (
            ["a-start", "a-end", "b-start", "b-end"],
            ["b-start", "b-end", "a-start", "a-end"],
        )
