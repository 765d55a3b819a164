import re
from typing import Any, Pattern, Union

from .Parser import ErrorKind, Parser, State

# Characters of actual input quoted in a mismatch message
PREVIEW = 10


# Parses a literal
def string(s: str) -> Parser[str]:
    """Parses the exact string s and returns it. Case-sensitive, no whitespace skipping."""
    def parse(state: State[Any]) -> State[str]:
        if state.is_error:
            return state
        text, index = state.input, state.cursor
        if index >= len(text):
            return state.fail(
                ErrorKind.END_OF_INPUT,
                f"str: Attempted to match {s!r}, but received unexpected end of input",
            )
        if text.startswith(s, index):
            return state.advance(index + len(s), s)
        return state.fail(
            ErrorKind.LITERAL_MISMATCH,
            f"str: Attempted to match {s!r}, but received {text[index:index + PREVIEW]!r}",
        )
    return Parser(parse, f"string({s!r})")


# Core function: longest match of a pattern anchored at the cursor
def regex(pattern: Union[str, Pattern[str]], name: str = "regex") -> Parser[str]:
    """Matches `pattern` at the cursor and returns the matched text.

    The pattern is anchored: a match further along the input does not count.
    A match must consume at least one character: patterns that match the
    empty string are rejected here, and an empty match found while parsing
    (say via a lookahead) fails as a class mismatch. Matching is already
    anchored at the cursor; `^` in a pattern only matches at index 0.
    """
    compiled = re.compile(pattern)
    if compiled.match("") is not None:
        raise ValueError(f"{name}: pattern {compiled.pattern!r} matches the empty string")

    def parse(state: State[Any]) -> State[str]:
        if state.is_error:
            return state
        if state.at_end():
            return state.fail(ErrorKind.END_OF_INPUT, f"{name}: Received unexpected end of input")
        match = compiled.match(state.input, state.cursor)
        if match is None or match.end() == state.cursor:
            return state.fail(ErrorKind.CLASS_MISMATCH, f"{name}: Unable to match {name} at index {state.cursor}")
        return state.advance(match.end(), match.group(0))
    return Parser(parse, name)


def letters() -> Parser[str]:
    """Parses a run of ASCII letters and returns it."""
    return regex(r"[A-Za-z]+", "letters")


def digits() -> Parser[str]:
    """Parses a run of ASCII digits and returns it."""
    return regex(r"[0-9]+", "digits")
