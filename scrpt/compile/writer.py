from contextlib import contextmanager


class Writer:
    """Line buffer that tracks the current indentation depth."""

    INDENT = "    "

    def __init__(self):
        self.lines = []
        self.depth = 0

    def line(self, text=""):
        self.lines.append(self.INDENT * self.depth + text if text else "")

    @contextmanager
    def indent(self):
        self.depth += 1
        try:
            yield self
        finally:
            self.depth -= 1

    def build(self):
        return "".join(line + "\n" for line in self.lines)
