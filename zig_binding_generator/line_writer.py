"""
Indented line writer shared by the code generators
"""

from .constants import LINE_ENDINGS


class LineWriter:
    """Accumulates output lines and tracks block nesting

    A block opened with `one_line=True` keeps everything written inside it
    on the line that opened it.
    """

    def __init__(self, indentation: str = "    ", line_ending: str = "lf"):
        if line_ending not in LINE_ENDINGS:
            raise ValueError(f"Invalid line ending '{line_ending}'. Must be one of: {', '.join(LINE_ENDINGS)}")
        self.indentation = indentation
        self.line_ending = LINE_ENDINGS[line_ending]
        self.lines = []
        self._blocks = []  # one_line flag per open block

    @property
    def depth(self) -> int:
        return len(self._blocks)

    def _indent(self) -> str:
        return self.indentation * sum(1 for one_line in self._blocks if not one_line)

    def _append_to_current(self, text: str):
        if self.lines:
            self.lines[-1] = f"{self.lines[-1]} {text}" if self.lines[-1] else text
        else:
            self.lines.append(text)

    def write_line(self, text: str) -> "LineWriter":
        """Write a line at the current indentation"""
        if self._blocks and self._blocks[-1]:
            self._append_to_current(text)
        else:
            # Multi-line text such as user includes keeps its own layout
            for line in text.split("\n"):
                self.lines.append(f"{self._indent()}{line}" if line else "")
        return self

    def write_blank_line(self) -> "LineWriter":
        self.lines.append("")
        return self

    def write_comment(self, comment: str, prefix: str = "//") -> "LineWriter":
        """Write each line of a comment with the given comment prefix"""
        for line in comment.split("\n"):
            self.write_line(f"{prefix} {line}".rstrip())
        return self

    def push_block(self, one_line: bool = False, opening: str = "{") -> "LineWriter":
        """Open a block on the current line"""
        self._append_to_current(opening)
        self._blocks.append(one_line)
        return self

    def pop_block(self, closing: str = "}", comment: str | None = None) -> "LineWriter":
        """Close the innermost block, optionally followed by a trailing comment"""
        if not self._blocks:
            raise RuntimeError(f"Cannot close '{closing}': no open block")
        one_line = self._blocks.pop()

        if one_line:
            self._append_to_current(closing)
        else:
            self.lines.append(f"{self._indent()}{closing}")

        if comment:
            self.lines[-1] += f" // {comment}"
        return self

    def getvalue(self) -> str:
        """Return the accumulated text with a trailing line ending"""
        return self.line_ending.join(self.lines) + self.line_ending
