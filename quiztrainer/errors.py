"""
Errors raised by the quiz store and the quiz sessions.
"""


class QuizError(Exception):
    """Base class for recoverable quiz trainer errors."""


class MissingParameter(QuizError):
    """A command needed an id and none was given."""

    def __init__(self, message: str = "Missing id parameter."):
        super().__init__(message)


class NotFound(QuizError, LookupError):
    """An id was given but does not resolve to a stored quiz."""

    def __init__(self, message: str = "The value of the id parameter is not valid."):
        super().__init__(message)
