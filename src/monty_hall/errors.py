class PreconditionViolation(ValueError):
    """Raised when a game or a door number handed to the game functions is malformed."""
