import os
import sys
from datetime import datetime, timedelta
from itertools import count
from unittest.mock import Mock

import pytest

sys.path.append(os.path.dirname(os.path.dirname(__file__)))

from application.controllers import SessionController
from application.controllers.session_controller import UNEXPECTED_ERROR_MESSAGE
from domain.entities import AnalysisResult, ViewState
from domain.errors import (
    DEFAULT_ANALYSIS_ERROR_MESSAGE,
    MalformedResponseError,
    TransportError,
)
from domain.services import AnalysisClient, Clipboard


def make_result(label: str = "Commit Message") -> AnalysisResult:
    return AnalysisResult(
        reasoning=(f"Detected {label}",),
        deliverable_type=label,
        generated_content=f"content for {label}",
        justification="because",
    )


class FakeClient(AnalysisClient):
    """Returns canned results and records every context it receives."""

    def __init__(self, outcomes=None):
        self.calls = []
        self._outcomes = list(outcomes or [])

    def analyze(self, context: str) -> AnalysisResult:
        self.calls.append(context)
        outcome = self._outcomes.pop(0) if self._outcomes else make_result(context)
        if isinstance(outcome, Exception):
            raise outcome
        return outcome


@pytest.fixture
def clock():
    start = datetime(2024, 5, 1, 9, 30)
    ticks = count()
    return lambda: start + timedelta(minutes=next(ticks))


@pytest.fixture
def ids():
    ticks = count(1)
    return lambda: f"id{next(ticks)}"


def make_controller(client, clock, ids, clipboard=None, history_limit=10):
    return SessionController(
        client=client,
        clipboard=clipboard,
        history_limit=history_limit,
        id_factory=ids,
        clock=clock,
    )


def test_scenario_a_successful_submission(clock, ids):
    expected = AnalysisResult(
        reasoning=("Detected bugfix context", "Chose commit message format"),
        deliverable_type="Commit Message",
        generated_content="fix(auth): handle null pointer in login validation",
        justification="Concise format fits small fixes",
    )
    client = FakeClient([expected])
    controller = make_controller(client, clock, ids)

    controller.set_input("Fixed a null pointer bug in login flow")
    assert controller.submit() is True

    state = controller.state
    assert client.calls == ["Fixed a null pointer bug in login flow"]
    assert state.current_result == expected
    assert state.current_error is None
    assert state.busy is False
    assert state.input_text == ""
    assert state.view_state is ViewState.RESULT
    assert len(state.history) == 1
    item = state.history[0]
    assert item.context == "Fixed a null pointer bug in login flow"
    assert item.id == "id1"
    assert item.timestamp == datetime(2024, 5, 1, 9, 30)
    assert item.result == expected


def test_submit_sends_exact_text_including_whitespace(clock, ids):
    client = FakeClient()
    controller = make_controller(client, clock, ids)

    controller.set_input("  padded context \n")
    controller.submit()

    assert client.calls == ["  padded context \n"]
    assert controller.state.history[0].context == "  padded context \n"


def test_scenario_b_transport_failure_keeps_input(clock, ids):
    client = FakeClient([make_result("first"), TransportError()])
    controller = make_controller(client, clock, ids)
    controller.set_input("first")
    controller.submit()
    history_before = list(controller.state.history)

    controller.set_input("second attempt")
    assert controller.submit() is True

    state = controller.state
    assert state.current_error == DEFAULT_ANALYSIS_ERROR_MESSAGE
    assert state.current_result is None
    assert state.history == history_before
    assert state.input_text == "second attempt"
    assert state.busy is False
    assert state.view_state is ViewState.ERROR


def test_error_message_does_not_leak_raw_cause(clock, ids):
    error = MalformedResponseError()
    error.__cause__ = ValueError("Expecting value: line 1 column 1 (char 0)")
    controller = make_controller(FakeClient([error]), clock, ids)

    controller.set_input("something")
    controller.submit()

    assert "Expecting value" not in controller.state.current_error
    assert controller.state.current_error == DEFAULT_ANALYSIS_ERROR_MESSAGE


def test_unexpected_exception_becomes_generic_error(clock, ids, caplog):
    controller = make_controller(FakeClient([RuntimeError("boom")]), clock, ids)

    controller.set_input("something")
    controller.submit()

    assert controller.state.current_error == UNEXPECTED_ERROR_MESSAGE
    assert controller.state.busy is False
    assert "Unexpected failure during analysis" in caplog.text


def test_empty_user_message_falls_back_to_generic_text(clock, ids):
    controller = make_controller(FakeClient([TransportError("")]), clock, ids)

    controller.set_input("something")
    controller.submit()

    assert controller.state.current_error == UNEXPECTED_ERROR_MESSAGE


@pytest.mark.parametrize("text", ["", "   ", "\n\t", None])
def test_blank_input_is_ignored(clock, ids, text):
    client = FakeClient()
    controller = make_controller(client, clock, ids)
    controller.state.input_text = text
    controller.state.current_error = "previous error"

    assert controller.submit() is False

    assert client.calls == []
    assert controller.state.current_error == "previous error"
    assert controller.state.input_text == text
    assert controller.state.busy is False


def test_submit_while_busy_is_a_no_op(clock, ids):
    client = FakeClient()
    controller = make_controller(client, clock, ids)
    controller.set_input("queued")
    controller.state.busy = True
    controller.state.current_result = make_result("previous")

    assert controller.submit() is False

    assert client.calls == []
    assert controller.state.busy is True
    assert controller.state.current_result == make_result("previous")
    assert controller.state.input_text == "queued"
    assert controller.state.history == []


def test_reentrant_submit_during_analysis_is_dropped(clock, ids):
    controller = None
    nested_outcomes = []

    class ReentrantClient(AnalysisClient):
        def __init__(self):
            self.calls = 0

        def analyze(self, context):
            self.calls += 1
            assert controller.state.view_state is ViewState.LOADING
            nested_outcomes.append(controller.submit())
            return make_result(context)

    client = ReentrantClient()
    controller = make_controller(client, clock, ids)
    controller.set_input("only once")

    assert controller.submit() is True
    assert client.calls == 1
    assert nested_outcomes == [False]
    assert len(controller.state.history) == 1


def test_submit_clears_previous_result_and_error_when_starting(clock, ids):
    seen = {}

    class InspectingClient(AnalysisClient):
        def analyze(self, context):
            seen["result"] = controller.state.current_result
            seen["error"] = controller.state.current_error
            seen["busy"] = controller.state.busy
            return make_result(context)

    controller = make_controller(InspectingClient(), clock, ids)
    controller.state.current_result = make_result("old")
    controller.state.current_error = "old error"
    controller.set_input("new")

    controller.submit()

    assert seen == {"result": None, "error": None, "busy": True}


def test_failure_after_success_clears_previous_result(clock, ids):
    controller = make_controller(
        FakeClient([make_result("ok"), TransportError()]), clock, ids
    )
    controller.set_input("first")
    controller.submit()

    controller.set_input("second")
    controller.submit()

    assert controller.state.current_result is None
    assert controller.state.current_error


def test_scenario_c_history_is_capped_most_recent_first(clock, ids):
    client = FakeClient()
    controller = make_controller(client, clock, ids)

    for n in range(1, 12):
        controller.set_input(f"context {n}")
        controller.submit()

    history = controller.state.history
    assert len(history) == 10
    assert history[0].context == "context 11"
    assert history[9].context == "context 2"
    assert all(item.context != "context 1" for item in history)


def test_history_limit_is_configurable(clock, ids):
    controller = make_controller(FakeClient(), clock, ids, history_limit=3)

    for n in range(5):
        controller.set_input(f"c{n}")
        controller.submit()

    assert [item.context for item in controller.state.history] == ["c4", "c3", "c2"]


def test_history_ids_are_unique(clock):
    controller = SessionController(client=FakeClient(), clock=clock)

    for n in range(10):
        controller.set_input(f"c{n}")
        controller.submit()

    ids = [item.id for item in controller.state.history]
    assert len(set(ids)) == len(ids)


def test_load_from_history_is_idempotent_and_offline(clock, ids):
    client = FakeClient()
    controller = make_controller(client, clock, ids)
    for text in ("alpha", "beta"):
        controller.set_input(text)
        controller.submit()
    controller.state.current_error = "kept"
    calls_before = list(client.calls)
    history_before = list(controller.state.history)
    older = controller.state.history[1]

    controller.load_from_history(older)
    first = (controller.state.current_result, controller.state.input_text)
    controller.load_from_history(older)
    second = (controller.state.current_result, controller.state.input_text)

    assert first == second
    assert first == (older.result, "alpha")
    assert client.calls == calls_before
    assert controller.state.history == history_before
    assert controller.state.current_error == "kept"
    assert controller.state.busy is False


def test_clear_history_leaves_other_state_alone(clock, ids):
    controller = make_controller(FakeClient(), clock, ids)
    controller.set_input("one")
    controller.submit()
    controller.set_input("draft")
    result = controller.state.current_result

    controller.clear_history()

    assert controller.state.history == []
    assert controller.state.current_result == result
    assert controller.state.input_text == "draft"
    assert controller.state.current_error is None


def test_find_history_item_by_position_and_id(clock, ids):
    controller = make_controller(FakeClient(), clock, ids)
    for text in ("a", "b"):
        controller.set_input(text)
        controller.submit()

    assert controller.find_history_item("1").context == "b"
    assert controller.find_history_item(" 2 ").context == "a"
    assert controller.find_history_item("id1").context == "a"
    assert controller.find_history_item("3") is None
    assert controller.find_history_item("0") is None
    assert controller.find_history_item("nope") is None


def test_copy_result_content_uses_clipboard(clock, ids):
    clipboard = Mock(spec=Clipboard)
    clipboard.copy_text.return_value = True
    controller = make_controller(FakeClient(), clock, ids, clipboard=clipboard)
    controller.set_input("copy me")
    controller.submit()

    assert controller.copy_result_content() is True
    clipboard.copy_text.assert_called_once_with("content for copy me")


def test_copy_without_result_or_clipboard(clock, ids):
    clipboard = Mock(spec=Clipboard)
    controller = make_controller(FakeClient(), clock, ids, clipboard=clipboard)

    assert controller.copy_result_content() is False
    clipboard.copy_text.assert_not_called()

    bare = make_controller(FakeClient(), clock, ids)
    bare.state.current_result = make_result()
    assert bare.copy_result_content() is False


def test_copy_failure_is_reported_not_raised(clock, ids):
    clipboard = Mock(spec=Clipboard)
    clipboard.copy_text.side_effect = OSError("no display")
    controller = make_controller(FakeClient(), clock, ids, clipboard=clipboard)
    controller.state.current_result = make_result()

    assert controller.copy_result_content() is False
