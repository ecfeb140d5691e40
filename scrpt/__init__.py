from .compile import (
    TARGETS,
    CompileError,
    LexError,
    ParseError,
    compile,
    emit,
    parse,
    parse_and_emit,
    tokenize)

__version__ = "0.1.0"
