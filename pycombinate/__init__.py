# Core
from .Parser import Parser, State, ParseError, ParseFailure, ErrorKind, set_debug, is_debug
from .Prim import run_parser, pure, fail, eof, lazy, many, many1

# Text matchers
from .Char import string, regex, letters, digits

# Combinators
from .Combinators import (
    sequence_of, choice, sep_by, sep_by1, between,
    parser_trace, parser_traced
)
