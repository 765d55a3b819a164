import logging

from pycombinate.Char import digits, string
from pycombinate.Combinators import parser_trace, parser_traced, sequence_of
from pycombinate.Parser import set_debug, is_debug


def test_debug_flag_toggles():
    assert is_debug() is False
    set_debug(True)
    assert is_debug() is True
    set_debug(False)
    assert is_debug() is False


def test_no_log_when_debug_off(caplog):
    with caplog.at_level(logging.DEBUG, logger="pycombinate"):
        sequence_of([parser_trace("start"), digits()]).run("12")
    assert caplog.records == []


def test_run_logs_terminal_state(caplog, debug_logging):
    with caplog.at_level(logging.DEBUG, logger="pycombinate"):
        digits().named("number").run("12")
        string("x").named("x").run("y")
    messages = [r.getMessage() for r in caplog.records]
    assert "number matched '12', cursor = 2" in messages
    assert any(m.startswith("x failed: Parse error at index 0") for m in messages)


def test_parser_trace_logs_position(caplog, debug_logging):
    p = sequence_of([string("ab"), parser_trace("after ab"), digits()])
    with caplog.at_level(logging.DEBUG, logger="pycombinate"):
        state = p.run("ab12")
    assert state.result == ["ab", "ab", "12"]
    assert 'after ab: "12" at index 2' in [r.getMessage() for r in caplog.records]


def test_parser_traced_logs_failure(caplog, debug_logging):
    p = parser_traced("number", digits())
    with caplog.at_level(logging.DEBUG, logger="pycombinate"):
        state = p.run("abc")
    assert state.is_error
    messages = [r.getMessage() for r in caplog.records]
    assert 'number: "abc" at index 0' in messages
    assert any(m.startswith("number failed:") for m in messages)


def test_run_logs_start(caplog, debug_logging):
    with caplog.at_level(logging.DEBUG, logger="pycombinate"):
        digits().named("number").run("12")
    messages = [r.getMessage() for r in caplog.records]
    assert messages[0] == "number start: 2 characters of input"
    assert messages[-1] == "number matched '12', cursor = 2"
