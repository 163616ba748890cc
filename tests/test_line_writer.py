"""
Unit tests for LineWriter
"""

import pytest

from zig_binding_generator.line_writer import LineWriter


class TestLineWriter:
    """Test line emission and block nesting"""

    def test_multi_line_block(self):
        writer = LineWriter("  ")
        writer.write_line("fn a() void").push_block().write_line("x;").pop_block()
        assert writer.lines == ["fn a() void {", "  x;", "}"]

    def test_one_line_block(self):
        writer = LineWriter()
        writer.write_line("fn a() void").push_block(one_line=True).write_line("x;").pop_block(comment="meta")
        assert writer.lines == ["fn a() void { x; } // meta"]

    def test_nested_indentation(self):
        writer = LineWriter("    ")
        (writer.write_line("outer").push_block()
            .write_line("inner").push_block()
            .write_line("body;")
            .pop_block()
            .pop_block("};"))
        assert writer.lines == ["outer {", "    inner {", "        body;", "    }", "};"]
        assert writer.depth == 0

    def test_closing_delimiter_is_per_call(self):
        writer = LineWriter()
        writer.write_line("a").push_block().pop_block("};")
        writer.write_line("b").push_block().pop_block()
        assert writer.lines == ["a {", "};", "b {", "}"]

    def test_pop_without_push_raises(self):
        writer = LineWriter()
        with pytest.raises(RuntimeError):
            writer.pop_block()

    def test_comment_prefix(self):
        writer = LineWriter()
        writer.write_comment("first\n\nsecond", "///")
        assert writer.lines == ["/// first", "///", "/// second"]

    def test_default_comment_prefix(self):
        writer = LineWriter()
        writer.write_comment("note")
        assert writer.lines == ["// note"]

    def test_multi_line_text_indented(self):
        writer = LineWriter("  ")
        writer.write_line("s").push_block().write_line("a;\n\nb;")
        assert writer.lines == ["s {", "  a;", "", "  b;"]

    def test_crlf_line_endings(self):
        writer = LineWriter(line_ending="crlf")
        writer.write_line("a").write_line("b")
        assert writer.getvalue() == "a\r\nb\r\n"

    def test_invalid_line_ending(self):
        with pytest.raises(ValueError):
            LineWriter(line_ending="cr")
