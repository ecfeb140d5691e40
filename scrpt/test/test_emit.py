import unittest
from .. import compile, emit, parse, parse_and_emit, tokenize, TARGETS
from ..compile.emit import CEmitter
from ..compile.writer import Writer


def program(*lines):
    return "".join(
        line + "\n"
        for line in ("#include <stdio.h>", "int main(void){")
        + tuple("    " + line if line else line for line in lines)
        + ("    return 0;", "}"))


class TestCase(unittest.TestCase):

    def assertEmits(self, source, *lines):
        with self.subTest(source):
            self.assertEqual(compile(source), program(*lines))


class BoilerplateTest(TestCase):

    def test_empty(self):
        self.assertEqual(
            compile(""),
            "#include <stdio.h>\nint main(void){\n    return 0;\n}\n")

    def test_targets(self):
        self.assertEqual(sorted(TARGETS), ["c"])
        self.assertIs(TARGETS["c"], CEmitter)
        with self.assertRaises(TypeError):
            TARGETS["js"] = CEmitter

    def test_unsupported_target(self):
        with self.assertRaises(ValueError):
            compile("print 1;", target="js")
        with self.assertRaises(ValueError):
            emit([], target="py")

    def test_target_checked_before_lexing(self):
        with self.assertRaises(ValueError):
            compile("print !;", target="js")


class StatementTest(TestCase):

    def test_print_string(self):
        self.assertEmits('print "Hello World";', 'printf("Hello World\\n");')
        self.assertEmits('print "100%";', 'printf("100%%\\n");')

    def test_print_backslash(self):
        self.assertEmits('print "a\\x";', 'printf("a\\\\x\\n");')
        self.assertEmits('print "C:\\";', 'printf("C:\\\\\\n");')

    def test_print_expression(self):
        self.assertEmits(
            "print 1 + 2;",
            'printf("%.2f\\n", (float)(1.0 + 2.0));')

    def test_float_literals(self):
        self.assertEmits(
            "print 7 / 2;",
            'printf("%.2f\\n", (float)(7.0 / 2.0));')

    def test_let(self):
        self.assertEmits(
            "let x = 1 + 2 * 3;",
            "float x;",
            "x = 1.0 + 2.0 * 3.0;")

    def test_assign(self):
        self.assertEmits(
            "let x = 1; x = x / 2 - 1;",
            "float x;",
            "x = 1.0;",
            "x = x / 2.0 - 1.0;")

    def test_unary(self):
        self.assertEmits(
            "let x = -1; x = x - -x * +2;",
            "float x;",
            "x = -1.0;",
            "x = x - -x * +2.0;")

    def test_input(self):
        self.assertEmits(
            "input n;",
            "float n;",
            'if(1 != scanf("%f", &n)) {',
            "    n = 0;",
            '    scanf("%*s");',
            "}")

    def test_declarations_hoisted(self):
        self.assertEmits(
            "let b = 1; input a; let c = a;",
            "float b;",
            "float a;",
            "float c;",
            "b = 1.0;",
            'if(1 != scanf("%f", &a)) {',
            "    a = 0;",
            '    scanf("%*s");',
            "}",
            "c = a;")

    def test_declared_inside_block_used_after(self):
        self.assertEmits(
            "if 1 > 0 { let x = 1; } x = 2; print x;",
            "float x;",
            "if(1.0 > 0.0){",
            "    x = 1.0;",
            "}",
            "x = 2.0;",
            'printf("%.2f\\n", (float)(x));')

    def test_if(self):
        self.assertEmits(
            'if 3 > 4 { print "hi"; }',
            "if(3.0 > 4.0){",
            '    printf("hi\\n");',
            "}")

    def test_while(self):
        self.assertEmits(
            "let i = 0; while i != 3 { i = i + 1; }",
            "float i;",
            "i = 0.0;",
            "while(i != 3.0){",
            "    i = i + 1.0;",
            "}")

    def test_empty_block(self):
        self.assertEmits("while 1 <= 0 {}", "while(1.0 <= 0.0){", "}")

    def test_nested(self):
        self.assertEmits(
            "input a; while a >= 1 { if a == 2 { input b; } a = a - 1; }",
            "float a;",
            "float b;",
            'if(1 != scanf("%f", &a)) {',
            "    a = 0;",
            '    scanf("%*s");',
            "}",
            "while(a >= 1.0){",
            "    if(a == 2.0){",
            '        if(1 != scanf("%f", &b)) {',
            "            b = 0;",
            '            scanf("%*s");',
            "        }",
            "    }",
            "    a = a - 1.0;",
            "}")


class PipelineTest(TestCase):

    def test_stages(self):
        text = "let x = 5; print x * x;"
        tokens = tokenize(text)
        statements = parse(tokens, text=text)
        self.assertEqual(emit(statements), parse_and_emit(tokens, text=text))
        self.assertEqual(emit(statements), compile(text))

    def test_same_tree_same_text(self):
        text = "input a; if a < 0 { a = -a; } print a;"
        self.assertEqual(compile(text), compile(text))


class WriterTest(unittest.TestCase):

    def test_indent(self):
        out = Writer()
        out.line("a")
        with out.indent():
            out.line("b")
            with out.indent():
                out.line("c")
            out.line()
        out.line("d")
        self.assertEqual(out.depth, 0)
        self.assertEqual(out.build(), "a\n    b\n        c\n\nd\n")
