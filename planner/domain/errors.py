"""Errors raised by the overlap layout engine"""


class ValidationError(ValueError):
    """Input item cannot be laid out (malformed time, duplicate id)."""

    def __init__(self, message: str, item_id: str | None = None):
        super().__init__(message)
        self.item_id = item_id


class InvariantViolation(AssertionError):
    """Column assignment could not place an interval within the peak concurrency."""

    def __init__(self, message: str, item_id: str | None = None):
        super().__init__(message)
        self.item_id = item_id
