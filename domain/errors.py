"""Failures raised by analysis clients."""

DEFAULT_ANALYSIS_ERROR_MESSAGE = "Error while analysing the context. Please try again."


class AnalysisError(Exception):
    """Base class for analysis failures.

    ``user_message`` is safe to show to the user; the underlying cause is kept
    on ``__cause__`` for logging only.
    """

    def __init__(self, user_message: str = DEFAULT_ANALYSIS_ERROR_MESSAGE) -> None:
        super().__init__(user_message)
        self.user_message = user_message


class TransportError(AnalysisError):
    """The request to the completion provider did not produce a body."""


class MalformedResponseError(AnalysisError):
    """The provider answered with something that is not the expected JSON object."""


__all__ = [
    "AnalysisError",
    "TransportError",
    "MalformedResponseError",
    "DEFAULT_ANALYSIS_ERROR_MESSAGE",
]
