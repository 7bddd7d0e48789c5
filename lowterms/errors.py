"""Exceptions raised by :mod:`lowterms`."""


class InvalidArgument(ValueError):
    """Raised when an argument violates a documented precondition."""
