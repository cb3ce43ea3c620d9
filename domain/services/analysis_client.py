from abc import ABC, abstractmethod

from domain.entities import AnalysisResult


class AnalysisClient(ABC):
    """Interface for services that turn a free-text context into a deliverable."""

    @abstractmethod
    def analyze(self, context: str) -> AnalysisResult:
        """Analyze ``context`` in a single attempt.

        Raises:
            AnalysisError: on any transport or parsing failure.
        """
        raise NotImplementedError
