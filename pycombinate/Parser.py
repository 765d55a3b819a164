import logging
from dataclasses import dataclass, replace
from enum import Enum, auto
from typing import Any, Callable, Generic, Optional, TypeVar, Union

T = TypeVar('T')  # Generic type for parser results
U = TypeVar('U')

log = logging.getLogger("pycombinate")

# Read at run time by Parser.run and the trace parsers.
debug = False


def set_debug(enabled: bool = True) -> None:
    """Turn the debug-level parsing log on or off.

    The library never configures handlers; enable them yourself:

        import logging
        logging.basicConfig(level=logging.DEBUG)
        pycombinate.set_debug()
    """
    global debug
    debug = enabled


def is_debug() -> bool:
    return debug


class ErrorKind(Enum):
    END_OF_INPUT = auto()
    LITERAL_MISMATCH = auto()
    CLASS_MISMATCH = auto()
    ALTERNATIVES_EXHAUSTED = auto()
    REPETITION_EMPTY = auto()
    MESSAGE = auto()


@dataclass(frozen=True)
class ParseError:
    """A parse failure: what went wrong and the index where it was detected."""
    kind: ErrorKind
    message: str
    position: int

    def __str__(self) -> str:
        return f"Parse error at index {self.position}: {self.message}"


@dataclass(frozen=True)
class State(Generic[T]):
    """Immutable snapshot of parsing progress.

    `result` is only meaningful while `is_error` is False.
    """
    input: str
    cursor: int = 0
    result: Optional[T] = None
    is_error: bool = False
    error: Optional[ParseError] = None

    @classmethod
    def initial(cls, text: str) -> 'State[Any]':
        return cls(text)

    def at_end(self) -> bool:
        return self.cursor >= len(self.input)

    def advance(self, cursor: int, result: Any) -> 'State[Any]':
        return replace(self, cursor=cursor, result=result)

    def with_result(self, result: Any) -> 'State[Any]':
        return replace(self, result=result)

    def with_error(self, error: ParseError) -> 'State[Any]':
        return replace(self, is_error=True, error=error)

    def fail(self, kind: ErrorKind, message: str) -> 'State[Any]':
        """Fail at the current cursor."""
        return self.with_error(ParseError(kind, message, self.cursor))


class ParseFailure(Exception):
    """Raised by `Parser.parse` when the parser ends in an error state."""

    def __init__(self, state: State[Any], error: ParseError):
        super().__init__(str(error))
        self.state = state
        self.error = error


StateFn = Callable[[State[Any]], State[Any]]


class Parser(Generic[T]):
    """A parser: a pure function from one `State` to the next.

    Parsers hold no mutable state, so one value can be shared between
    grammars and run any number of times, from any number of threads.
    """

    def __init__(self, apply_fn: StateFn, name: Optional[str] = None):
        self.apply_fn = apply_fn
        self.name = name or getattr(apply_fn, "__name__", "parser")

    def __call__(self, state: State[Any]) -> State[T]:
        return self.apply_fn(state)

    def apply(self, state: State[Any]) -> State[T]:
        return self.apply_fn(state)

    def __repr__(self) -> str:
        return f"<Parser {self.name}>"

    def named(self, name: str) -> 'Parser[T]':
        """Give the parser a name, used in the debug log."""
        return Parser(self.apply_fn, name)

    def run(self, text: str) -> State[T]:
        """Parse `text` from index 0 and return the terminal state.

        Failures are reported through `State.is_error` and `State.error`;
        nothing is raised.
        """
        initial: State[Any] = State.initial(text)
        if debug:
            log.debug("%s start: %d characters of input", self.name, len(text))
        state: State[T] = self.apply_fn(initial)
        if debug:
            if state.is_error:
                log.debug("%s failed: %s", self.name, state.error)
            else:
                log.debug("%s matched %r, cursor = %d", self.name, state.result, state.cursor)
        return state

    def parse(self, text: str) -> T:
        """Like `run`, but return the result or raise `ParseFailure`."""
        state = self.run(text)
        if state.error is not None:
            raise ParseFailure(state, state.error)
        return state.result  # type: ignore[return-value]

    # Functor map
    def map(self, fn: Callable[[T], U]) -> 'Parser[U]':
        def parse(state: State[Any]) -> State[U]:
            next_state = self.apply_fn(state)
            if next_state.is_error:
                return next_state
            return next_state.with_result(fn(next_state.result))
        return Parser(parse, self.name)

    # Monadic bind (>>=)
    def chain(self, fn: Callable[[T], 'Parser[U]']) -> 'Parser[U]':
        # fn picks the next parser from the value just parsed; it is only
        # called after a success.
        def parse(state: State[Any]) -> State[U]:
            next_state = self.apply_fn(state)
            if next_state.is_error:
                return next_state
            next_parser = fn(next_state.result)
            return next_parser.apply_fn(next_state)
        return Parser(parse, self.name)

    bind = chain

    def __rshift__(self, fn: Callable[[T], 'Parser[U]']) -> 'Parser[U]':
        return self.chain(fn)

    def error_map(self, fn: Callable[[ParseError, int], Union[str, ParseError]]) -> 'Parser[T]':
        """Rewrite the error of a failed run; successes pass through.

        `fn` receives the error and the cursor at failure and returns either
        a new message (kind and position are kept) or a whole `ParseError`.
        """
        def parse(state: State[Any]) -> State[T]:
            next_state = self.apply_fn(state)
            error = next_state.error
            if error is None:
                return next_state
            mapped = fn(error, next_state.cursor)
            if not isinstance(mapped, ParseError):
                mapped = replace(error, message=mapped)
            return next_state.with_error(mapped)
        return Parser(parse, self.name)

    # Label (<?>)
    def label(self, msg: str) -> 'Parser[T]':
        return self.error_map(lambda err, _: f"expecting {msg}: {err.message}")

    # Alternative (<|>)
    def __or__(self, other: 'Parser[Any]') -> 'Parser[Any]':
        from .Combinators import choice
        return choice([self, other])
