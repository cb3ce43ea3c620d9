"""Controller owning the state of one interactive analysis session."""
import uuid
from datetime import datetime
from typing import Callable, Optional

from domain.entities import DEFAULT_HISTORY_LIMIT, HistoryItem, SessionState
from domain.errors import AnalysisError
from domain.services import AnalysisClient, Clipboard
from infrastructure.logging import get_logger
from tracing import trace_session_operation

logger = get_logger(__name__)

UNEXPECTED_ERROR_MESSAGE = "An unexpected error occurred."


def _new_history_id() -> str:
    return uuid.uuid4().hex[:8]


class SessionController:
    """Application-level API for a single analysis session.

    Every state change goes through one of the public methods; the UI only
    reads :attr:`state`.
    """

    def __init__(
        self,
        client: AnalysisClient,
        clipboard: Optional[Clipboard] = None,
        history_limit: int = DEFAULT_HISTORY_LIMIT,
        id_factory: Callable[[], str] = _new_history_id,
        clock: Callable[[], datetime] = datetime.now,
    ) -> None:
        self._client = client
        self._clipboard = clipboard
        self._id_factory = id_factory
        self._clock = clock
        self.state = SessionState(history_limit=history_limit)

    def set_input(self, text: str) -> None:
        """Replace the pending input text."""
        self.state.input_text = text

    def submit(self) -> bool:
        """Analyze the pending input.

        Returns ``False`` without touching the state when a request is already
        in flight or the input is blank.
        """
        state = self.state
        if state.busy or not (state.input_text or "").strip():
            return False

        context = state.input_text
        state.busy = True
        state.current_error = None
        state.current_result = None

        try:
            with trace_session_operation("session_submit", context_length=len(context)):
                result = self._client.analyze(context)
        except AnalysisError as e:
            logger.warning(f"Analysis failed ({type(e).__name__}): {e.__cause__ or e}")
            state.current_error = e.user_message or UNEXPECTED_ERROR_MESSAGE
        except Exception:
            logger.error("Unexpected failure during analysis", exc_info=True)
            state.current_error = UNEXPECTED_ERROR_MESSAGE
        else:
            state.current_result = result
            item = HistoryItem.capture(
                result,
                item_id=self._id_factory(),
                context=context,
                timestamp=self._clock(),
            )
            state.push_history(item)
            state.input_text = ""
            logger.info(
                f"Stored analysis {item.id} ({item.deliverable_type}); "
                f"history size {len(state.history)}"
            )
        finally:
            state.busy = False

        return True

    def load_from_history(self, item: HistoryItem) -> None:
        """Show a previously computed result again without re-analyzing it."""
        self.state.current_result = item.result
        self.state.input_text = item.context

    def clear_history(self) -> None:
        """Forget every stored analysis."""
        self.state.history = []
        logger.info("History cleared")

    def find_history_item(self, ref: str) -> Optional[HistoryItem]:
        """Look up a history entry by 1-based position or by id."""
        ref = ref.strip()
        if ref.isdigit():
            index = int(ref) - 1
            if 0 <= index < len(self.state.history):
                return self.state.history[index]
            return None
        for item in self.state.history:
            if item.id == ref:
                return item
        return None

    def copy_result_content(self) -> bool:
        """Copy the current deliverable to the clipboard, if there is one."""
        result = self.state.current_result
        if result is None or self._clipboard is None:
            return False
        try:
            return self._clipboard.copy_text(result.generated_content)
        except Exception:
            logger.warning("Clipboard copy failed", exc_info=True)
            return False
