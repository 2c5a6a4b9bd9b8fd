"""Custom exceptions for the boundary scanner."""


class InvalidCountError(ValueError):
    """Exception raised when a motion is requested with a repeat count below 1."""

    def __init__(self, count: object):
        self.count = count
        super().__init__(f"Invalid repeat count: {count!r} (must be an integer >= 1)")
