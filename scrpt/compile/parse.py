import logging
from types import MappingProxyType
from .lex import Token
from .error import (
    Error,
    ExpectedTokenError,
    RedeclaredError,
    UndeclaredError,
    UnexpectedTokenError)
from .ast import (
    AddOp,
    Assign,
    Comparison,
    Expression,
    ExpressionTail,
    Identifier,
    If,
    Input,
    Let,
    MulOp,
    Number,
    Print,
    RelOp,
    Sign,
    String,
    Term,
    TermTail,
    Unary,
    While)

logger = logging.getLogger(__name__)

RELOPS = MappingProxyType({
    'GT': RelOp.GT,
    'GE': RelOp.GE,
    'LT': RelOp.LT,
    'LE': RelOp.LE,
    'EQ': RelOp.EQ,
    'NE': RelOp.NE,
})

ADDOPS = MappingProxyType({'PLUS': AddOp.ADD, 'MINUS': AddOp.SUB})
MULOPS = MappingProxyType({'TIMES': MulOp.MUL, 'DIVIDE': MulOp.DIV})
SIGNS = MappingProxyType({'PLUS': Sign.POS, 'MINUS': Sign.NEG})


class Parser(Error):
    """Recursive descent parser for the statement language.

    Declarations are checked while parsing: ``let`` and ``input`` add a name
    to ``self.declared``, every other use of a name must find it there. The
    first problem raises a :class:`ParseError` and parsing stops.

        program    ::= {statement}
        statement  ::= "print" (expression | string) ";"
                     | "if" comparison "{" {statement} "}"
                     | "while" comparison "{" {statement} "}"
                     | "let" ident "=" expression ";"
                     | "input" ident ";"
                     | ident "=" expression ";"
        comparison ::= expression relop expression
        expression ::= term [("+" | "-") expression]
        term       ::= unary [("*" | "/") term]
        unary      ::= ["+" | "-"] primary
        primary    ::= number | ident
    """

    def __init__(self, filename="<stdin>", text=""):
        self.filename = filename
        self.text = text
        self.declared = set()
        self.tokens = []
        self.pos = 0

    def parse(self, tokens):
        self.tokens = [t for t in tokens if t.type != 'WHITESPACE']
        if not self.tokens or self.tokens[-1].type != 'EOF':
            lineno = self.tokens[-1].lineno if self.tokens else 1
            self.tokens.append(Token('EOF', '', '', lineno, len(self.text)))
        self.pos = 0
        self.declared = set()
        body = []
        while not self.at('EOF'):
            body.append(self.statement())
        logger.debug("%s: %d statements", self.filename, len(body))
        return body

    @property
    def current(self):
        return self.tokens[self.pos]

    def at(self, *types):
        return self.current.type in types

    def advance(self):
        t = self.current
        self.pos += 1
        return t

    def expect(self, type):
        if not self.at(type):
            t = self.current
            self.error(
                t, f"Expected {type}, got {t.type} {t.raw!r}",
                ExpectedTokenError, type)
        return self.advance()

    def declare(self, keyword, identifier):
        if identifier.s in self.declared:
            self.error(
                keyword, f"Identifier {identifier.s} is already declared",
                RedeclaredError)
        self.declared.add(identifier.s)

    def statement(self):
        t = self.current

        if self.at('PRINT'):
            self.advance()
            if self.at('STRING'):
                s = self.advance()
                value = String(s, s=s.raw[1:-1])
            else:
                value = self.expression()
            self.expect('SEMI')
            return Print(t, value=value)

        if self.at('IF', 'WHILE'):
            self.advance()
            test = self.comparison()
            body = self.block()
            if t.type == 'IF':
                return If(t, test=test, body=body)
            return While(t, test=test, body=body)

        if self.at('LET'):
            self.advance()
            target = self.identifier()
            self.declare(t, target)
            self.expect('ASSIGN')
            value = self.expression()
            self.expect('SEMI')
            return Let(t, target=target, value=value)

        if self.at('INPUT'):
            self.advance()
            target = self.identifier()
            self.declare(t, target)
            self.expect('SEMI')
            return Input(t, target=target)

        if self.at('NAME'):
            target = self.reference()
            self.expect('ASSIGN')
            value = self.expression()
            self.expect('SEMI')
            return Assign(t, target=target, value=value)

        self.error(
            t, f"Unknown statement starting with {t.type} {t.raw!r}",
            UnexpectedTokenError)

    def block(self):
        self.expect('LBRACE')
        body = []
        while not self.at('RBRACE', 'EOF'):
            body.append(self.statement())
        self.expect('RBRACE')
        return body

    def comparison(self):
        left = self.expression()
        t = self.current
        if t.type not in RELOPS:
            self.error(
                t, f"Expected comparison operator, got {t.type} {t.raw!r}",
                UnexpectedTokenError)
        self.advance()
        right = self.expression()
        return Comparison(t, op=RELOPS[t.type], left=left, right=right)

    def expression(self):
        left = self.term()
        tail = None
        t = self.current
        op = self.operator(ADDOPS)
        if op is not None:
            tail = ExpressionTail(t, op=op, right=self.expression())
        return Expression(left, left=left, tail=tail)

    def term(self):
        left = self.unary()
        tail = None
        t = self.current
        op = self.operator(MULOPS)
        if op is not None:
            tail = TermTail(t, op=op, right=self.term())
        return Term(left, left=left, tail=tail)

    def unary(self):
        t = self.current
        sign = self.operator(SIGNS)
        return Unary(t, sign=sign, value=self.primary())

    def primary(self):
        if self.at('NUMBER'):
            t = self.advance()
            return Number(t, n=t.value)
        if self.at('NAME'):
            return self.reference()
        t = self.current
        self.error(
            t, f"Expected identifier or number, got {t.type} {t.raw!r}",
            ExpectedTokenError, 'NAME')

    def operator(self, table):
        if self.current.type in table:
            return table[self.advance().type]
        return None

    def identifier(self):
        t = self.expect('NAME')
        return Identifier(t, s=t.raw)

    def reference(self):
        t = self.current
        identifier = self.identifier()
        if identifier.s not in self.declared:
            self.error(
                t, f"Identifier {identifier.s} is never declared",
                UndeclaredError)
        return identifier
