import logging
import typing
import sly
from .error import Error, LexError

logger = logging.getLogger(__name__)

INT64_MAX = 2**63 - 1


class Token(typing.NamedTuple):
    type: str
    value: typing.Union[int, str]
    raw: str
    lineno: int
    index: int

    def __repr__(self):
        return f"{self.type}({self.raw!r})"


class Lexer(Error, sly.Lexer):
    """Splits source text into tokens without ever giving up.

    Whitespace is kept, one token per character, and anything that can not
    start a token comes out as an ``INVALID`` token holding the offending
    text. Callers decide what to do with those.
    """

    tokens = {
        ASSIGN,
        DIVIDE,
        ELSE,
        EQ,
        GE,
        GT,
        IF,
        INPUT,
        INVALID,
        LBRACE,
        LE,
        LET,
        LT,
        MINUS,
        NAME,
        NE,
        NUMBER,
        PLUS,
        PRINT,
        RBRACE,
        SEMI,
        STRING,
        TIMES,
        WHILE,
        WHITESPACE,
    }

    # two character operators first
    EQ = r'=='
    NE = r'!='
    LE = r'<='
    GE = r'>='
    ASSIGN = r'='
    LT = r'<'
    GT = r'>'

    PLUS = r'\+'
    MINUS = r'-'
    TIMES = r'\*'
    DIVIDE = r'/'
    LBRACE = r'{'
    RBRACE = r'}'
    SEMI = r';'

    NAME = r'[a-zA-Z][a-zA-Z0-9]*'
    NAME['let'] = LET
    NAME['if'] = IF
    NAME['else'] = ELSE
    NAME['while'] = WHILE
    NAME['print'] = PRINT
    NAME['input'] = INPUT

    STRING = r'"[^"\r\n]*"'

    # a string cut short by a line break or the end of input
    @_(r'"[^"\r\n]*[\r\n]?')
    def INVALID(self, t):
        if t.value.endswith('\n'):
            self.lineno += 1
        return t

    @_(r'[0-9]+')
    def NUMBER(self, t):
        if int(t.value) > INT64_MAX:
            t.type = 'INVALID'
        return t

    @_(r'[ \t\r\n]')
    def WHITESPACE(self, t):
        if t.value == '\n':
            self.lineno += 1
        return t

    def __init__(self, filename="<stdin>"):
        super().__init__()
        self.filename = filename
        self.text = ""

    def error(self, t):
        t.type = 'INVALID'
        t.value = t.value[0]
        self.index += 1
        return t

    def tokenize(self, text, lineno=1, index=0):
        """Yield every token of ``text``, finishing with an ``EOF`` token."""
        self.text = text
        for t in super().tokenize(text, lineno, index):
            value = int(t.value) if t.type == 'NUMBER' else t.value
            yield Token(t.type, value, t.value, t.lineno, t.index)
        yield Token('EOF', '', '', self.lineno, len(text))


def tokenize(text, filename="<stdin>"):
    lexer = Lexer(filename)
    tokens = list(lexer.tokenize(text))
    invalid = [t for t in tokens if t.type == 'INVALID']
    logger.debug("%s: %d tokens, %d invalid", filename, len(tokens), len(invalid))
    if invalid:
        raise LexError(
            "Invalid token{} {}".format(
                "s" if len(invalid) > 1 else "",
                ", ".join(repr(t.raw) for t in invalid)),
            lexer.location(invalid[0]),
            invalid)
    return tokens
