"""Session - a game state paired with its step cursor."""

from typing import Optional
from pydantic import BaseModel

from onenight.engine.steps import Step
from onenight.models import GameState


class Session(BaseModel):
    """The unit kept in the session store.

    ``steps`` is fixed at creation; only ``step_index`` moves, and
    ``completed`` is true exactly when the cursor has passed the last step.
    """

    state: GameState
    steps: list[Step]
    step_index: int = 0
    completed: bool = False

    @property
    def total_steps(self) -> int:
        return len(self.steps)

    @property
    def current_step(self) -> Optional[Step]:
        """The step that will run next, or None once completed."""
        if self.step_index >= len(self.steps):
            return None
        return self.steps[self.step_index]
