"""Step sequencer - the ordered list of every step of a game.

The list is built once when the game starts and never regenerated:

    setup
    night_start
    night_action (one per player, by role in wake order)
    day_start
    day_round_start + day_discussion x players   (per discussion round)
    voting_start
    vote x players
    resolution
    game_end
"""

from typing import Annotated, Literal, Union, assert_never
from pydantic import BaseModel, ConfigDict, Field

from onenight.models import GameState, Role, wake_order


class _StepBase(BaseModel):
    model_config = ConfigDict(frozen=True)


class SetupStep(_StepBase):
    kind: Literal["setup"] = "setup"


class NightStartStep(_StepBase):
    kind: Literal["night_start"] = "night_start"


class NightActionStep(_StepBase):
    kind: Literal["night_action"] = "night_action"
    role: Role
    player_index: int


class DayStartStep(_StepBase):
    kind: Literal["day_start"] = "day_start"


class DayRoundStartStep(_StepBase):
    kind: Literal["day_round_start"] = "day_round_start"
    round: int


class DayDiscussionStep(_StepBase):
    kind: Literal["day_discussion"] = "day_discussion"
    round: int
    player_index: int


class VotingStartStep(_StepBase):
    kind: Literal["voting_start"] = "voting_start"


class VoteStep(_StepBase):
    kind: Literal["vote"] = "vote"
    player_index: int


class ResolutionStep(_StepBase):
    kind: Literal["resolution"] = "resolution"


class GameEndStep(_StepBase):
    kind: Literal["game_end"] = "game_end"


Step = Annotated[
    Union[
        SetupStep,
        NightStartStep,
        NightActionStep,
        DayStartStep,
        DayRoundStartStep,
        DayDiscussionStep,
        VotingStartStep,
        VoteStep,
        ResolutionStep,
        GameEndStep,
    ],
    Field(discriminator="kind"),
]


def build_steps(state: GameState) -> list[Step]:
    """Enumerate every step of the game, in execution order.

    Night actions are keyed on ``original_role``: a player robbed into a
    waking role does not wake for it.
    """
    steps: list[Step] = [SetupStep(), NightStartStep()]

    for role in wake_order():
        for index, player in enumerate(state.players):
            if player.original_role == role:
                steps.append(NightActionStep(role=role, player_index=index))

    steps.append(DayStartStep())

    for round_number in range(1, state.max_rounds + 1):
        steps.append(DayRoundStartStep(round=round_number))
        for index in range(len(state.players)):
            steps.append(DayDiscussionStep(round=round_number, player_index=index))

    steps.append(VotingStartStep())
    for index in range(len(state.players)):
        steps.append(VoteStep(player_index=index))

    steps.append(ResolutionStep())
    steps.append(GameEndStep())
    return steps


def describe_step(step: Step, state: GameState) -> str:
    """Human-readable description of what a step will do."""
    if isinstance(step, SetupStep):
        return "Show game setup"
    elif isinstance(step, NightStartStep):
        return "Begin night phase"
    elif isinstance(step, NightActionStep):
        player = state.players[step.player_index]
        return f"{player.name} ({step.role.value}) performs night action"
    elif isinstance(step, DayStartStep):
        return "Begin day phase"
    elif isinstance(step, DayRoundStartStep):
        return f"Start discussion round {step.round}"
    elif isinstance(step, DayDiscussionStep):
        return f"{state.players[step.player_index].name} speaks"
    elif isinstance(step, VotingStartStep):
        return "Begin voting phase"
    elif isinstance(step, VoteStep):
        return f"{state.players[step.player_index].name} votes"
    elif isinstance(step, ResolutionStep):
        return "Resolve votes and determine outcome"
    elif isinstance(step, GameEndStep):
        return "Show final results"
    assert_never(step)
