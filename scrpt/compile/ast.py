import enum
import typing


class RelOp(enum.Enum):
    GT = '>'
    GE = '>='
    LT = '<'
    LE = '<='
    EQ = '=='
    NE = '!='

class AddOp(enum.Enum):
    ADD = '+'
    SUB = '-'

class MulOp(enum.Enum):
    MUL = '*'
    DIV = '/'

class Sign(enum.Enum):
    POS = '+'
    NEG = '-'


class Node:

    def __init__(self, *args, **kwargs):
        if args:
            t = args[0]
            kwargs.setdefault('lineno', t.lineno)
            kwargs.setdefault('index', t.index)
        self.__dict__.update(kwargs)

    def __setattr__(self, name, value):
        raise AttributeError(f"{self.__class__.__name__} is immutable")

    def fields(self):
        return list(getattr(type(self), '__annotations__', {}))

    def __eq__(self, other):
        if type(self) is not type(other):
            return NotImplemented
        return all(
            getattr(self, key, None) == getattr(other, key, None)
            for key in self.fields())

    def __hash__(self):
        return hash((type(self),) + tuple(
            tuple(v) if isinstance(v, list) else v
            for v in (getattr(self, key, None) for key in self.fields())))

    def __str__(self):
        return "<{} {}>".format(
            self.__class__.__name__,
            ", ".join(
                f"{key}={getattr(self, key)}"
                for key in self.fields()
                if hasattr(self, key))
        )

    __repr__ = __str__


class Identifier(Node):
    s: str

class Number(Node):
    n: int

class String(Node):
    s: str

Primary = typing.Union[Number, Identifier]

class Unary(Node):
    sign: typing.Optional[Sign]
    value: Primary

class Term(Node):
    left: Unary
    tail: typing.Optional['TermTail']

class TermTail(Node):
    op: MulOp
    right: Term

class Expression(Node):
    left: Term
    tail: typing.Optional['ExpressionTail']

class ExpressionTail(Node):
    op: AddOp
    right: Expression

class Comparison(Node):
    op: RelOp
    left: Expression
    right: Expression


class Statement(Node):
    pass

class Print(Statement):
    value: typing.Union[String, Expression]

class If(Statement):
    test: Comparison
    body: typing.List[Statement]

class While(Statement):
    test: Comparison
    body: typing.List[Statement]

class Let(Statement):
    target: Identifier
    value: Expression

class Input(Statement):
    target: Identifier

class Assign(Statement):
    target: Identifier
    value: Expression
