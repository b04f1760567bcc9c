"""
Model errors — raised synchronously at the offending call.

Every failure is an argument-validation error. Callers treat these as
programmer errors, never as transient conditions.
"""


class ModelError(Exception):
    """Base class for all model errors."""


class InvalidArgumentError(ModelError, ValueError):
    """Raised when an operation is called with an invalid argument.

    The message is user-facing and exact; tests and callers match on it.
    """
