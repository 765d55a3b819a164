from typing import Any, Callable, List, Optional, Tuple

from .Parser import ErrorKind, ParseError, Parser, State, T


def run_parser(parser: Parser[T], input_str: str) -> Tuple[Optional[T], Optional[ParseError]]:
    """Run `parser` on `input_str` and return `(value, error)`; exactly one is set."""
    state = parser.run(input_str)
    if state.is_error:
        return None, state.error
    return state.result, None


def pure(value: T) -> Parser[T]:
    """Return a parser that succeeds with a value without consuming input."""
    def parse(state: State[Any]) -> State[T]:
        if state.is_error:
            return state
        return state.with_result(value)
    return Parser(parse, f"pure({value!r})")


def fail(msg: str) -> Parser[Any]:
    """A parser that always fails with a message."""
    def parse(state: State[Any]) -> State[Any]:
        if state.is_error:
            return state
        return state.fail(ErrorKind.MESSAGE, msg)
    return Parser(parse, "fail")


def eof() -> Parser[None]:
    """Succeeds with None only when the whole input has been consumed."""
    def parse(state: State[Any]) -> State[None]:
        if state.is_error:
            return state
        if state.at_end():
            return state.with_result(None)
        return state.fail(
            ErrorKind.MESSAGE,
            f"eof: Expected end of input, but received {state.input[state.cursor:state.cursor + 10]!r}",
        )
    return Parser(parse, "eof")


def lazy(thunk: Callable[[], Parser[T]]) -> Parser[T]:
    """Defer building a parser until it is applied.

    The thunk is called on every application, so a rule may refer to
    itself or to rules defined later. Left recursion (a rule reaching
    itself before consuming input) does not terminate. Each level of
    nesting costs a few Python frames, so very deep input is bounded by
    the interpreter recursion limit and raises RecursionError out of `run`.
    """
    if isinstance(thunk, Parser) or not callable(thunk):
        raise TypeError(f"lazy() expects a callable returning a Parser, got {thunk!r}")

    def parse(state: State[Any]) -> State[T]:
        parser = thunk()
        if not isinstance(parser, Parser):
            raise TypeError(f"lazy thunk returned {parser!r}, not a Parser")
        return parser.apply_fn(state)
    return Parser(parse, "lazy")


def _collect(p: Parser[T], state: State[Any]) -> Tuple[List[T], State[Any]]:
    # Apply p until it fails; return the results and the last good state.
    results: List[T] = []
    current = state
    while True:
        attempt = p.apply_fn(current)
        if attempt.is_error:
            return results, current
        results.append(attempt.result)  # type: ignore[arg-type]
        if attempt.cursor == current.cursor:
            # p succeeded without consuming input; it would repeat forever
            return results, attempt
        current = attempt


def many(p: Parser[T]) -> Parser[List[T]]:
    """Parse zero or more occurrences of `p`. Never fails."""
    if not isinstance(p, Parser):
        raise TypeError(f"many() expects a Parser, got {p!r}")

    def parse(state: State[Any]) -> State[List[T]]:
        if state.is_error:
            return state
        results, last = _collect(p, state)
        return last.with_result(results)
    return Parser(parse, f"many({p.name})")


def many1(p: Parser[T]) -> Parser[List[T]]:
    """Parse one or more occurrences of `p`."""
    if not isinstance(p, Parser):
        raise TypeError(f"many1() expects a Parser, got {p!r}")

    def parse(state: State[Any]) -> State[List[T]]:
        if state.is_error:
            return state
        results, last = _collect(p, state)
        if not results:
            return state.fail(
                ErrorKind.REPETITION_EMPTY,
                f"many1: Unable to match any input using parser @ index {state.cursor}",
            )
        return last.with_result(results)
    return Parser(parse, f"many1({p.name})")
