"""
Exceptions raised by the pet engine.
"""


class PetEngineError(Exception):
    """Base class for pet engine errors."""


class InvalidStateError(PetEngineError, RuntimeError):
    """Raised when an action is attempted after the game has ended."""
    def __init__(self, message: str = "The game is over. Reset to play again."):
        super().__init__(message)


class InvalidArgumentError(PetEngineError, ValueError):
    """Raised when a behavior is asked to apply something that is not a PetAction."""
    def __init__(self, action):
        super().__init__(f"Unknown action: {action!r}")
        self.action = action
