"""
Classifier tests - line normalization and prefix precedence

Validates that every line maps to exactly one LineKind, that longer
prefixes win over the shorter ones they contain, and that the remainder
is returned untrimmed.
"""

import pytest

from comet.lib.classifier import line_classify, line_normalize, line_isBlank, PREFIX_TABLE
from comet.models.lines import LineKind


class TestNormalize:
    """Test trailing whitespace handling"""

    def test_strips_newline(self):
        """Trailing newline removed"""
        assert line_normalize("$ int x\n") == "$ int x"

    def test_strips_trailing_whitespace(self):
        """Trailing spaces, tabs and CRLF removed"""
        assert line_normalize("/ x = 1 \t\r\n") == "/ x = 1"

    def test_keeps_leading_whitespace(self):
        """Leading whitespace is left for the classifier"""
        assert line_normalize("    | note\n") == "    | note"

    def test_blank_detection(self):
        """Empty and whitespace-only lines are blank"""
        assert line_isBlank("")
        assert line_isBlank("   \t")
        assert not line_isBlank("  x")


class TestSinglePrefixes:
    """Test each single-character prefix"""

    def test_directive(self):
        line = line_classify("+include stdio")
        assert line.kind == LineKind.DIRECTIVE
        assert line.remainder == "include stdio"

    def test_comment(self):
        line = line_classify("| hello")
        assert line.kind == LineKind.COMMENT
        assert line.remainder == " hello"

    def test_function_open(self):
        line = line_classify("@ int main(void)")
        assert line.kind == LineKind.FUNCTION_OPEN
        assert line.remainder == " int main(void)"

    def test_var_decl(self):
        line = line_classify("$ int x = 0")
        assert line.kind == LineKind.VAR_DECL
        assert line.remainder == " int x = 0"

    def test_command(self):
        line = line_classify("/ if(x > 0)")
        assert line.kind == LineKind.COMMAND
        assert line.remainder == " if(x > 0)"

    def test_block_end(self):
        line = line_classify("\\")
        assert line.kind == LineKind.BLOCK_END
        assert line.remainder == ""


class TestPrefixPrecedence:
    """Test that overlapping slash prefixes resolve longest first"""

    def test_triple_slash_is_not_case_label(self):
        """/// must never be read as // followed by a label"""
        line = line_classify('/// writeLine("Hi");')
        assert line.kind == LineKind.TRIPLE_SLASH_COMMAND
        assert line.remainder == ' writeLine("Hi");'

    def test_double_slash_is_not_two_commands(self):
        """// must never be read as / followed by a / command"""
        line = line_classify("// case 1")
        assert line.kind == LineKind.CASE_LABEL
        assert line.remainder == " case 1"

    def test_four_slashes_is_triple_slash(self):
        """Extra slashes stay in the remainder"""
        line = line_classify("////x")
        assert line.kind == LineKind.TRIPLE_SLASH_COMMAND
        assert line.remainder == "/x"

    def test_table_order(self):
        """Longer slash prefixes appear before shorter ones"""
        prefixes = [prefix for prefix, _ in PREFIX_TABLE]
        assert prefixes.index("///") < prefixes.index("//") < prefixes.index("/")


class TestBlankAndPassthrough:
    """Test lines that carry no prefix"""

    def test_empty_line_is_blank(self):
        line = line_classify("")
        assert line.kind == LineKind.BLANK
        assert line.remainder == ""

    def test_whitespace_line_is_blank(self):
        line = line_classify("   \t  ")
        assert line.kind == LineKind.BLANK
        assert line.remainder == ""

    def test_unknown_prefix_is_passthrough(self):
        """%foo is not one of the recognized prefixes"""
        line = line_classify("%foo")
        assert line.kind == LineKind.PASSTHROUGH
        assert line.remainder == "%foo"

    def test_raw_c_is_passthrough(self):
        line = line_classify("return 0;")
        assert line.kind == LineKind.PASSTHROUGH
        assert line.remainder == "return 0;"

    def test_indented_prefix_is_recognized(self):
        """Leading whitespace does not hide a prefix"""
        line = line_classify("    /// read x;")
        assert line.kind == LineKind.TRIPLE_SLASH_COMMAND
        assert line.remainder == " read x;"


class TestTotality:
    """Classification never raises and always returns a LineKind"""

    def test_assorted_lines(self):
        samples = [
            "", " ", "+", "|", "@", "$", "/", "//", "///", "\\", "\\\\",
            "%foo", "#include <x.h>", "{", "}", "\x00", "é", "+ + +",
            "/\\", "\\/", "$$", "@@@", "   |", "\t//", "x // y",
        ]
        for sample in samples:
            line = line_classify(sample)
            assert isinstance(line.kind, LineKind)
            assert isinstance(line.remainder, str)

    def test_prefix_in_middle_is_passthrough(self):
        """Only the start of the line is inspected"""
        assert line_classify("x // y").kind == LineKind.PASSTHROUGH
