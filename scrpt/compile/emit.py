import logging
from .visit import Visitor
from .writer import Writer
from . import ast

logger = logging.getLogger(__name__)


class CEmitter(Visitor):
    """Renders a checked statement list as a C program.

    Every variable is a ``float`` declared once at the top of ``main``; a
    ``let`` or ``input`` only assigns it.
    Arithmetic is written back out flat, in the order the parser nested it.
    """

    @_(list)
    def visit(self, node, out):
        for subnode in node:
            self.visit(subnode, out)

    @_(ast.Print)
    def visit(self, node, out):
        if isinstance(node.value, ast.String):
            text = node.value.s.replace('\\', '\\\\').replace('%', '%%')
            out.line(f'printf("{text}\\n");')
        else:
            out.line(f'printf("%.2f\\n", (float)({self.expr(node.value)}));')

    @_(ast.If)
    def visit(self, node, out):
        out.line(f"if({self.expr(node.test)}){{")
        with out.indent():
            self.visit(node.body, out)
        out.line("}")

    @_(ast.While)
    def visit(self, node, out):
        out.line(f"while({self.expr(node.test)}){{")
        with out.indent():
            self.visit(node.body, out)
        out.line("}")

    @_(ast.Let, ast.Assign)
    def visit(self, node, out):
        out.line(f"{node.target.s} = {self.expr(node.value)};")

    @_(ast.Input)
    def visit(self, node, out):
        name = node.target.s
        out.line(f'if(1 != scanf("%f", &{name})) {{')
        with out.indent():
            out.line(f"{name} = 0;")
            out.line('scanf("%*s");')
        out.line("}")

    @_(list)
    def declared(self, node):
        for subnode in node:
            yield from self.declared(subnode)

    @_(ast.If, ast.While)
    def declared(self, node):
        yield from self.declared(node.body)

    @_(ast.Let, ast.Input)
    def declared(self, node):
        yield node.target.s

    @_(ast.Print, ast.Assign)
    def declared(self, node):
        if False:
            yield

    @_(ast.Comparison)
    def expr(self, node):
        return f"{self.expr(node.left)} {node.op.value} {self.expr(node.right)}"

    @_(ast.Expression, ast.Term)
    def expr(self, node):
        if node.tail is None:
            return self.expr(node.left)
        return f"{self.expr(node.left)} {node.tail.op.value} {self.expr(node.tail.right)}"

    @_(ast.Unary)
    def expr(self, node):
        if node.sign is None:
            return self.expr(node.value)
        return node.sign.value + self.expr(node.value)

    @_(ast.Number)
    def expr(self, node):
        return f"{node.n}.0"

    @_(ast.Identifier)
    def expr(self, node):
        return node.s

    def emit(self, statements):
        out = Writer()
        out.line("#include <stdio.h>")
        out.line("int main(void){")
        with out.indent():
            for name in dict.fromkeys(self.declared(statements)):
                out.line(f"float {name};")
            self.visit(statements, out)
            out.line("return 0;")
        out.line("}")
        text = out.build()
        logger.debug("%s: emitted %d lines of C", self.filename, len(out.lines))
        return text
