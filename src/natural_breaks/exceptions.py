"""Exceptions raised by natural_breaks."""


class InvalidInput(ValueError):
    """Raised when data or a break count violates a classifier precondition."""
