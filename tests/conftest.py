# tests/conftest.py
import pytest

from pycombinate.Parser import State, set_debug


def assert_state_eq(s1: State, s2: State):
    """
    Field-by-field comparison of two terminal states.
    """
    assert s1.input == s2.input
    assert s1.cursor == s2.cursor, f"Cursor mismatch: {s1.cursor} != {s2.cursor}"
    assert s1.is_error == s2.is_error, "Outcome mismatch: error vs success"
    if s1.is_error:
        assert s1.error == s2.error
    else:
        assert s1.result == s2.result


@pytest.fixture
def initial_state():
    def _make(input_data, cursor=0):
        return State(input_data, cursor)

    return _make


@pytest.fixture
def debug_logging():
    set_debug(True)
    yield
    set_debug(False)
