class CompileError(SyntaxError):
    pass


class LexError(CompileError):

    def __init__(self, msg, details, tokens=()):
        super().__init__(msg, details)
        self.tokens = tuple(tokens)


class ParseError(CompileError):

    def __init__(self, msg, details, token=None, expected=None):
        super().__init__(msg, details)
        self.token = token
        self.expected = expected
        self.reason = msg


class UnexpectedTokenError(ParseError):
    pass

class ExpectedTokenError(ParseError):
    pass

class RedeclaredError(ParseError):
    pass

class UndeclaredError(ParseError):
    pass


class Error:

    def line_of(self, t):
        last_cr = self.text.rfind('\n', 0, t.index)
        next_cr = self.text.find('\n', t.index)
        if next_cr < 0:
            next_cr = None
        return self.text[last_cr+1: next_cr]

    def col_offset(self, t):
        last_cr = self.text.rfind('\n', 0, t.index)
        return t.index - last_cr

    def location(self, t):
        return (
            self.filename,
            t.lineno,
            self.col_offset(t),
            self.line_of(t))

    def error(self, t, msg, cls=ParseError, expected=None):
        raise cls(msg, self.location(t), token=t, expected=expected)
