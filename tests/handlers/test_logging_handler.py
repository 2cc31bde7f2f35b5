"""Tests for the logging decorator handler."""

import io

import pytest

from fallible.errors import HandlerError, SearchError
from fallible.handlers import Err, LoggingHandler, Ok


def test_signal_logs_then_returns_inner_outcome(result_handler):
    sink = io.StringIO()
    handler = LoggingHandler(sink, result_handler)

    outcome = handler.signal(SearchError.IS_EMPTY)

    assert outcome == result_handler.signal(SearchError.IS_EMPTY)
    assert outcome == Err(SearchError.IS_EMPTY)
    assert sink.getvalue() == "Error: is empty\n"


def test_n_signals_append_n_lines_in_order(result_handler):
    sink = io.StringIO()
    handler = LoggingHandler(sink, result_handler)

    for _ in range(3):
        handler.signal(SearchError.IS_EMPTY)

    assert sink.getvalue().splitlines() == ["Error: is empty"] * 3


def test_logs_before_inner_raises(raising_handler):
    sink = io.StringIO()
    handler = LoggingHandler(sink, raising_handler)

    with pytest.raises(HandlerError, match="^is empty$"):
        handler.signal(SearchError.IS_EMPTY)

    assert sink.getvalue() == "Error: is empty\n"


def test_message_and_ok_do_not_log(result_handler):
    sink = io.StringIO()
    handler = LoggingHandler(sink, result_handler)

    assert handler.message(SearchError.IS_EMPTY) == "is empty"
    assert handler.ok(5) == Ok(5)
    assert sink.getvalue() == ""


def test_open_truncates_and_closes(tmp_path, result_handler):
    path = tmp_path / "log.txt"
    path.write_text("stale line\n")

    with LoggingHandler.open(path, result_handler) as handler:
        handler.signal(SearchError.IS_EMPTY)
        # flushed per call
        assert path.read_text() == "Error: is empty\n"

    assert handler.sink.closed
    assert path.read_text() == "Error: is empty\n"


def test_close_is_idempotent(tmp_path, result_handler):
    handler = LoggingHandler.open(tmp_path / "log.txt", result_handler)
    handler.close()
    handler.close()
    assert handler.sink.closed
