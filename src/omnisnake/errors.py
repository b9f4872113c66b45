class InvalidStateError(RuntimeError):
    """Raised when a terminated session is advanced again."""
