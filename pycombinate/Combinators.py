from typing import Any, Callable, List, Sequence

from .Parser import ErrorKind, Parser, State, T, is_debug, log


# 1. sequence_of: Runs parsers one after another, collecting every result
def sequence_of(parsers: Sequence[Parser[Any]]) -> Parser[List[Any]]:
    """
    Applies each parser in order, threading the state through.
    The result is the list of sub-results, index-aligned with `parsers`.
    Stops at the first failure and returns that failed state as is.
    """
    parsers = list(parsers)

    def parse(state: State[Any]) -> State[List[Any]]:
        if state.is_error:
            return state
        results: List[Any] = []
        next_state = state
        for p in parsers:
            next_state = p.apply_fn(next_state)
            if next_state.is_error:
                return next_state
            results.append(next_state.result)
        return next_state.with_result(results)
    return Parser(parse, "sequence_of")


# 2. choice: Tries parsers in order until one succeeds
def choice(parsers: Sequence[Parser[T]]) -> Parser[T]:
    """
    Tries every parser against the same starting state and returns the first
    success. Fails at the starting cursor if no parser matches.
    """
    parsers = list(parsers)

    def parse(state: State[Any]) -> State[T]:
        if state.is_error:
            return state
        for p in parsers:
            next_state = p.apply_fn(state)
            if not next_state.is_error:
                return next_state
        return state.fail(
            ErrorKind.ALTERNATIVES_EXHAUSTED,
            f"choice: Unable to match with any parser at index {state.cursor}",
        )
    return Parser(parse, "choice")


def _sep_collect(sep: Parser[Any], value: Parser[T], state: State[Any]):
    results: List[T] = []
    next_state = state
    while True:
        start = next_state.cursor
        value_state = value.apply_fn(next_state)
        if value_state.is_error:
            break
        results.append(value_state.result)  # type: ignore[arg-type]
        next_state = value_state

        sep_state = sep.apply_fn(next_state)
        if sep_state.is_error or sep_state.cursor == start:
            # stop on a failed separator, or when a round consumed nothing
            break
        next_state = sep_state
    return results, next_state


# 3. sep_by: Parses zero or more values separated by a separator
def sep_by(sep: Parser[Any]) -> Callable[[Parser[T]], Parser[List[T]]]:
    """
    `sep_by(sep)(value)` parses `value (sep value)*` and returns the values.
    A separator is kept consumed even when no value follows it.
    Never fails.
    """
    def with_value(value: Parser[T]) -> Parser[List[T]]:
        def parse(state: State[Any]) -> State[List[T]]:
            if state.is_error:
                return state
            results, next_state = _sep_collect(sep, value, state)
            return next_state.with_result(results)
        return Parser(parse, f"sep_by({value.name})")
    return with_value


# 4. sep_by1: Parses one or more values separated by a separator
def sep_by1(sep: Parser[Any]) -> Callable[[Parser[T]], Parser[List[T]]]:
    """
    Like `sep_by`, but fails at the starting cursor when no value matches.
    """
    def with_value(value: Parser[T]) -> Parser[List[T]]:
        def parse(state: State[Any]) -> State[List[T]]:
            if state.is_error:
                return state
            results, next_state = _sep_collect(sep, value, state)
            if not results:
                return state.fail(
                    ErrorKind.REPETITION_EMPTY,
                    f"sep_by1: Unable to capture any results at index {state.cursor}",
                )
            return next_state.with_result(results)
        return Parser(parse, f"sep_by1({value.name})")
    return with_value


# 5. between: Parses an opening parser, a main parser, and a closing parser
def between(left: Parser[Any], right: Parser[Any]) -> Callable[[Parser[T]], Parser[T]]:
    """
    `between(left, right)(content)` returns the result of `content` only.
    """
    def with_content(content: Parser[T]) -> Parser[T]:
        return sequence_of([left, content, right]).map(lambda results: results[1]).named(
            f"between({content.name})"
        )
    return with_content


def _log_position(label_str: str, state: State[Any]) -> None:
    upcoming = state.input[state.cursor:state.cursor + 30]
    more = '...' if len(state.input) - state.cursor > 30 else ''
    log.debug('%s: "%s%s" at index %d', label_str, upcoming, more, state.cursor)


# 6. parser_trace: Logs the current position without consuming input
def parser_trace(label_str: str) -> Parser[Any]:
    """
    Debugging parser. Logs the upcoming input when debug logging is on and
    returns the state untouched, previous result included.
    """
    def parse(state: State[Any]) -> State[Any]:
        if is_debug() and not state.is_error:
            _log_position(label_str, state)
        return state
    return Parser(parse, f"trace({label_str})")


# 7. parser_traced: Logs entry into `p`, and its failure
def parser_traced(label_str: str, p: Parser[T]) -> Parser[T]:
    def parse(state: State[Any]) -> State[T]:
        if state.is_error:
            return state
        if is_debug():
            _log_position(label_str, state)
        next_state = p.apply_fn(state)
        if is_debug() and next_state.is_error:
            log.debug("%s failed: %s", label_str, next_state.error)
        return next_state
    return Parser(parse, f"traced({label_str})")
