"""
Error taxonomy for the review engine.

All errors are raised synchronously, before any result is built.
"""


class TensorError(ValueError):
    """Base class for every engine error."""


class InvalidParameter(TensorError):
    """Parameter vector has the wrong length, a non-finite value, or a degenerate decay."""


class InvalidInput(TensorError):
    """A memory state, signal or runtime value is non-finite or out of its domain."""


class InvalidGrade(TensorError):
    """Grade is not one of Again/Hard/Good/Easy (1..4)."""
