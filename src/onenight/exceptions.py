"""Exceptions raised by the One Night engine.

Every error carries a ``retryable`` flag so the boundary layer can tell a
transient oracle failure (retry the same step) from a terminal condition
(unknown session, finished game, bad input).
"""


class GameError(Exception):
    """Base class for all engine errors."""

    retryable: bool = False

    def __init__(self, message: str = ""):
        self.message = message or self.__class__.__name__
        super().__init__(self.message)

    def to_dict(self) -> dict:
        """Machine-readable form for the boundary layer."""
        return {
            "error": self.__class__.__name__,
            "message": self.message,
            "retryable": self.retryable,
        }


# ============================================================================
# Validation errors (detected before any mutation)
# ============================================================================


class ValidationError(GameError):
    """Request or selection is invalid for the current game."""


class SessionNotFoundError(ValidationError):
    """No session is stored under the given game id."""

    def __init__(self, game_id: str):
        self.game_id = game_id
        super().__init__(f"Game {game_id!r} not found")


class SessionCompletedError(ValidationError):
    """The session has already executed its last step."""

    def __init__(self, game_id: str):
        self.game_id = game_id
        super().__init__(f"Game {game_id!r} already completed")


class InvalidTargetError(ValidationError):
    """A target selection breaks the game rules (self target, duplicate, unknown)."""


# ============================================================================
# Oracle errors (retryable, nothing committed)
# ============================================================================


class OracleError(GameError):
    """The reasoning oracle failed or returned an unusable answer."""

    retryable = True


class OracleTimeoutError(OracleError):
    """The reasoning oracle did not answer before the deadline."""

    def __init__(self, timeout: float):
        self.timeout = timeout
        super().__init__(f"Oracle did not respond within {timeout:g}s")


# ============================================================================
# Configuration errors
# ============================================================================


class ConfigurationError(GameError):
    """The game cannot be set up with the given configuration."""
