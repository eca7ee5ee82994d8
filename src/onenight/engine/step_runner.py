"""StepRunner - drives a game one step at a time.

Each call to ``execute_step`` runs exactly one step of the session's fixed
step list:

    1. Load the session under its per-game lock
    2. Work on a deep copy of the game state
    3. Consult the oracle if the step needs a decision (the only await)
    4. Commit the state, advance the cursor, describe the next step

If anything fails before the commit (oracle error, timeout, invalid
target), the stored session is untouched and the same step can be retried.
"""

import logging
import random
from typing import Optional, assert_never

from pydantic import BaseModel

from onenight.config import Settings, settings as default_settings
from onenight.engine.game_factory import create_game
from onenight.engine.night_action_resolver import NightActionResolver
from onenight.engine.night_capabilities import NIGHT_CAPABILITIES, get_capability
from onenight.engine.recorder import add_day_message, add_vote
from onenight.engine.resolution import determine_winners, resolve_votes, tally_votes
from onenight.engine.session import Session
from onenight.engine.session_store import SessionStore
from onenight.engine.steps import (
    DayDiscussionStep,
    DayRoundStartStep,
    DayStartStep,
    GameEndStep,
    NightActionStep,
    NightStartStep,
    ResolutionStep,
    SetupStep,
    Step,
    VoteStep,
    VotingStartStep,
    build_steps,
    describe_step,
)
from onenight.events import NO_ACTION_TAKEN, EventType, StepEvent
from onenight.exceptions import (
    ConfigurationError,
    SessionCompletedError,
    SessionNotFoundError,
)
from onenight.handlers import (
    DecisionHandler,
    DiscussionHandler,
    HandlerResult,
    Oracle,
    VotingHandler,
)
from onenight.models import GamePhase, GameState, Role

logger = logging.getLogger(__name__)


class StartResult(BaseModel):
    """Returned when a game is created."""

    game_id: str
    total_steps: int
    next_step_description: str


class StepResult(BaseModel):
    """Returned after each executed step."""

    event: StepEvent
    completed: bool
    next_step_description: Optional[str] = None
    current_step: int
    total_steps: int


class StepRunner:
    """Main game controller - executes one step per call.

    Game Flow:
        setup -> night (wake order) -> day (rounds x players) -> votes
        -> resolution -> game end

    The session store and oracle are injected; the runner keeps no game
    state of its own.
    """

    def __init__(
        self,
        store: SessionStore,
        oracle: Oracle,
        settings: Optional[Settings] = None,
    ):
        """Initialize the StepRunner.

        Args:
            store: Session store holding every game's session.
            oracle: Reasoning oracle consulted for decisions.
            settings: Runtime settings. Defaults to the environment settings.
        """
        self._store = store
        self._oracle = oracle
        self._settings = settings or default_settings
        self._resolver = NightActionResolver()

        timeout = self._settings.oracle_timeout_seconds
        self._night_handlers: dict[Role, DecisionHandler] = {
            role: capability.handler_class(timeout=timeout)
            for role, capability in NIGHT_CAPABILITIES.items()
            if capability.requires_decision
        }
        self._discussion_handler = DiscussionHandler(timeout=timeout)
        self._voting_handler = VotingHandler(timeout=timeout)

    # =========================================================================
    # Public API
    # =========================================================================

    async def start_game(
        self,
        discussion_rounds: Optional[int] = None,
        rng: Optional[random.Random] = None,
    ) -> StartResult:
        """Deal a new game, build its steps and store the session.

        Args:
            discussion_rounds: Day rounds; defaults to the configured value.
            rng: Optional random.Random for a reproducible deal.
        """
        if discussion_rounds is None:
            discussion_rounds = self._settings.discussion_rounds

        state = create_game(discussion_rounds, rng=rng)
        steps = build_steps(state)
        session = Session(state=state, steps=steps)
        await self._store.set(state.id, session)

        logger.info("Started game %s with %d steps", state.id, len(steps))
        return StartResult(
            game_id=state.id,
            total_steps=len(steps),
            next_step_description=describe_step(steps[0], state),
        )

    async def execute_step(self, game_id: str) -> StepResult:
        """Run the next step of a game.

        Raises:
            SessionNotFoundError: Unknown or expired game id.
            SessionCompletedError: The game already ran its last step.
            OracleError: The oracle failed or timed out; nothing was committed.
        """
        async with self._store.lock(game_id):
            session = await self._require_session(game_id)
            step_index = session.step_index
            step = session.steps[step_index]
            logger.debug("Game %s: step %d %s", game_id, step_index, step.kind)

            working = session.state.model_copy(deep=True)
            event = await self._dispatch(step, working)
            event.step_index = step_index

            await self._store.update_state(game_id, working)
            session = await self._store.advance_step(game_id)

            next_description = None
            if not session.completed:
                next_description = describe_step(session.steps[session.step_index], working)

            return StepResult(
                event=event,
                completed=session.completed,
                next_step_description=next_description,
                current_step=session.step_index,
                total_steps=len(session.steps),
            )

    async def describe_next(self, game_id: str) -> Optional[str]:
        """Description of the step that would run next, or None once completed."""
        session = await self._store.get(game_id)
        if session is None:
            raise SessionNotFoundError(game_id)
        step = session.current_step
        if step is None:
            return None
        return describe_step(step, session.state)

    async def get_session(self, game_id: str) -> Session:
        session = await self._store.get(game_id)
        if session is None:
            raise SessionNotFoundError(game_id)
        return session

    # =========================================================================
    # Dispatch
    # =========================================================================

    async def _require_session(self, game_id: str) -> Session:
        session = await self._store.get(game_id)
        if session is None:
            raise SessionNotFoundError(game_id)
        if session.completed:
            raise SessionCompletedError(game_id)
        return session

    async def _dispatch(self, step: Step, state: GameState) -> StepEvent:
        """Route a step to its handler. Mutates ``state`` in place."""
        if isinstance(step, SetupStep):
            return self._run_setup(state)
        elif isinstance(step, NightStartStep):
            return self._change_phase(state, GamePhase.NIGHT)
        elif isinstance(step, NightActionStep):
            return await self._run_night_action(step, state)
        elif isinstance(step, DayStartStep):
            return self._change_phase(state, GamePhase.DAY)
        elif isinstance(step, DayRoundStartStep):
            return self._run_round_start(step, state)
        elif isinstance(step, DayDiscussionStep):
            return await self._run_discussion(step, state)
        elif isinstance(step, VotingStartStep):
            return self._change_phase(state, GamePhase.VOTING)
        elif isinstance(step, VoteStep):
            return await self._run_vote(step, state)
        elif isinstance(step, ResolutionStep):
            return self._run_resolution(state)
        elif isinstance(step, GameEndStep):
            return self._run_game_end(state)
        assert_never(step)

    def _run_setup(self, state: GameState) -> StepEvent:
        return StepEvent(
            type=EventType.SETUP,
            data={
                "players": [
                    {"name": p.name, "original_role": p.original_role.value}
                    for p in state.players
                ],
                "center_cards": state.center_cards.to_dict(),
            },
        )

    def _change_phase(self, state: GameState, phase: GamePhase) -> StepEvent:
        state.phase = phase
        logger.info("Game %s: phase %s", state.id, phase.value)
        return StepEvent(type=EventType.PHASE_CHANGE, data={"phase": phase.value})

    async def _run_night_action(self, step: NightActionStep, state: GameState) -> StepEvent:
        player = state.players[step.player_index]
        capability = get_capability(step.role)
        if capability is None:
            raise ConfigurationError(f"Role {step.role.value} has no night action")

        data: dict = {"player": player.name, "role": step.role.value}
        selection = None

        if capability.requires_decision:
            handler = self._night_handlers[step.role]
            handler_result = await handler(state, player, self._oracle)
            data.update(self._decision_fields(handler_result))
            if not handler_result.accepted:
                data["result"] = NO_ACTION_TAKEN
                data["action_taken"] = False
                return StepEvent(type=EventType.NIGHT_ACTION, data=data)
            selection = handler_result.selection

        data["result"] = capability.apply(self._resolver, state, player.id, selection)
        data["action_taken"] = True
        return StepEvent(type=EventType.NIGHT_ACTION, data=data)

    def _run_round_start(self, step: DayRoundStartStep, state: GameState) -> StepEvent:
        state.current_round += 1
        return StepEvent(
            type=EventType.PHASE_CHANGE,
            data={"phase": GamePhase.DAY.value, "round": step.round},
        )

    async def _run_discussion(self, step: DayDiscussionStep, state: GameState) -> StepEvent:
        player = state.players[step.player_index]
        handler_result = await self._discussion_handler(state, player, self._oracle, step.round)
        add_day_message(state, player.id, handler_result.selection)

        data = {
            "player": player.name,
            "message": handler_result.selection,
            "round": step.round,
        }
        data.update(self._decision_fields(handler_result))
        return StepEvent(type=EventType.DAY_MESSAGE, data=data)

    async def _run_vote(self, step: VoteStep, state: GameState) -> StepEvent:
        player = state.players[step.player_index]
        handler_result = await self._voting_handler(state, player, self._oracle)

        target_name = None
        if handler_result.accepted:
            add_vote(state, player.id, handler_result.selection)
            target_name = state.get_player(handler_result.selection).name

        data = {
            "voter": player.name,
            "target": target_name,
            "accepted": handler_result.accepted,
        }
        data.update(self._decision_fields(handler_result))
        return StepEvent(type=EventType.VOTE, data=data)

    def _run_resolution(self, state: GameState) -> StepEvent:
        tally = tally_votes(state)
        resolve_votes(state)
        determine_winners(state)

        eliminated = state.get_eliminated_player()
        names = {p.id: p.name for p in state.players}
        return StepEvent(
            type=EventType.RESOLUTION,
            data={
                "eliminated": eliminated.name if eliminated else "No one",
                "eliminated_role": eliminated.current_role.value if eliminated else None,
                "votes": [
                    {"voter": names[v.voter_id], "target": names[v.target_id]}
                    for v in state.votes
                ],
                "tally": {names[target]: count for target, count in tally.items()},
            },
        )

    def _run_game_end(self, state: GameState) -> StepEvent:
        return StepEvent(
            type=EventType.GAME_END,
            data={
                "winners": [team.value for team in state.winners],
                "final_roles": [
                    {
                        "name": p.name,
                        "original_role": p.original_role.value,
                        "current_role": p.current_role.value,
                    }
                    for p in state.players
                ],
                "center_cards": state.center_cards.to_dict(),
            },
        )

    def _decision_fields(self, result: HandlerResult) -> dict:
        return {
            "system_prompt": result.system_prompt,
            "user_prompt": result.user_prompt,
            "oracle_response": result.oracle_response,
            "rationale": result.rationale,
        }
