"""
Random source exceptions.

EntropyError is the only runtime failure of the package: every error a
generator raises originates in a random source.
"""


class EntropyError(Exception):
    """Raised when the random source cannot produce the requested bytes."""

    def __init__(self, requested: int, reason: str):
        self.requested = requested
        self.reason = reason
        super().__init__(f"Failed to read {requested} random bytes: {reason}")
