from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any, Dict, List, Mapping, Optional, Tuple

# Keys of the JSON object returned by the completion provider
REASONING_KEY = "reasoning"
DELIVERABLE_TYPE_KEY = "deliverableType"
GENERATED_CONTENT_KEY = "generatedContent"
JUSTIFICATION_KEY = "justification"

RESULT_KEYS = (
    REASONING_KEY,
    DELIVERABLE_TYPE_KEY,
    GENERATED_CONTENT_KEY,
    JUSTIFICATION_KEY,
)

DEFAULT_HISTORY_LIMIT = 10


class ViewState(Enum):
    """Visual state of a session as seen by the UI."""

    IDLE = "idle"
    LOADING = "loading"
    RESULT = "result"
    ERROR = "error"


@dataclass(frozen=True)
class AnalysisResult:
    """Structured output of a single context analysis."""

    reasoning: Tuple[str, ...]
    deliverable_type: str
    generated_content: str
    justification: str

    @classmethod
    def from_payload(cls, payload: Mapping[str, Any]) -> "AnalysisResult":
        """Build a result from the provider's JSON object.

        Fields are read as-is; a missing key raises ``KeyError`` and a
        ``reasoning`` given as a single string raises ``TypeError``.
        """
        reasoning = payload[REASONING_KEY]
        if isinstance(reasoning, str):
            raise TypeError("reasoning must be a list of steps, not a string")
        return cls(
            reasoning=tuple(reasoning),
            deliverable_type=payload[DELIVERABLE_TYPE_KEY],
            generated_content=payload[GENERATED_CONTENT_KEY],
            justification=payload[JUSTIFICATION_KEY],
        )

    def to_payload(self) -> Dict[str, Any]:
        return {
            REASONING_KEY: list(self.reasoning),
            DELIVERABLE_TYPE_KEY: self.deliverable_type,
            GENERATED_CONTENT_KEY: self.generated_content,
            JUSTIFICATION_KEY: self.justification,
        }


@dataclass(frozen=True)
class HistoryItem(AnalysisResult):
    """An analysis result captured together with the context that produced it."""

    id: str = ""
    context: str = ""
    timestamp: datetime = field(default_factory=datetime.now)

    @classmethod
    def capture(
        cls,
        result: AnalysisResult,
        item_id: str,
        context: str,
        timestamp: datetime,
    ) -> "HistoryItem":
        return cls(
            reasoning=result.reasoning,
            deliverable_type=result.deliverable_type,
            generated_content=result.generated_content,
            justification=result.justification,
            id=item_id,
            context=context,
            timestamp=timestamp,
        )

    @property
    def result(self) -> AnalysisResult:
        """The plain analysis fields, without history metadata."""
        return AnalysisResult(
            reasoning=self.reasoning,
            deliverable_type=self.deliverable_type,
            generated_content=self.generated_content,
            justification=self.justification,
        )


@dataclass
class SessionState:
    """Transient state of one interactive session."""

    input_text: str = ""
    busy: bool = False
    current_result: Optional[AnalysisResult] = None
    current_error: Optional[str] = None
    history: List[HistoryItem] = field(default_factory=list)
    history_limit: int = DEFAULT_HISTORY_LIMIT

    @property
    def view_state(self) -> ViewState:
        if self.busy:
            return ViewState.LOADING
        if self.current_error:
            return ViewState.ERROR
        if self.current_result is not None:
            return ViewState.RESULT
        return ViewState.IDLE

    def push_history(self, item: HistoryItem) -> None:
        """Prepend ``item`` and drop entries beyond ``history_limit``."""
        self.history = [item, *self.history][: self.history_limit]


__all__ = [
    "AnalysisResult",
    "HistoryItem",
    "SessionState",
    "ViewState",
    "RESULT_KEYS",
    "DEFAULT_HISTORY_LIMIT",
]
