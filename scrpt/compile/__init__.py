import logging
from types import MappingProxyType
from .lex import Lexer, Token, tokenize
from .parse import Parser
from .emit import CEmitter
from .error import (
    CompileError,
    LexError,
    ParseError,
    UnexpectedTokenError,
    ExpectedTokenError,
    RedeclaredError,
    UndeclaredError)

logger = logging.getLogger(__name__)

TARGETS = MappingProxyType({
    "c": CEmitter,
})


def check_target(target):
    if target not in TARGETS:
        raise ValueError(f"Unsupported target {target!r}")


def emitter_for(target, filename="<stdin>"):
    check_target(target)
    return TARGETS[target](filename)


def parse(tokens, filename="<stdin>", text=""):
    return Parser(filename, text).parse(tokens)


def emit(statements, filename="<stdin>", target="c"):
    return emitter_for(target, filename).emit(statements)


def parse_and_emit(tokens, filename="<stdin>", text="", target="c"):
    emitter = emitter_for(target, filename)
    return emitter.emit(parse(tokens, filename, text))


def compile(text, filename="<stdin>", target="c"):
    check_target(target)
    logger.debug("compiling %s for target %s", filename, target)
    tokens = tokenize(text, filename)
    return parse_and_emit(tokens, filename, text, target)
