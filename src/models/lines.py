"""
Source line models

Type-safe structures for the line classification stage.
"""

from enum import Enum
from dataclasses import dataclass


class LineKind(Enum):
    """
    The closed set of StarC line shapes

    Every input line maps to exactly one kind. The value is the prefix that
    selects it (empty for kinds that are not prefix-selected).
    """
    BLANK = ""
    TRIPLE_SLASH_COMMAND = "///"   # /// writeLine("Hi");
    CASE_LABEL = "//"              # // case 1
    DIRECTIVE = "+"                # +include stdio
    COMMENT = "|"                  # | free text
    FUNCTION_OPEN = "@"            # @ int main(void)
    VAR_DECL = "$"                 # $ int x = 0
    COMMAND = "/"                  # / if(x > 0)
    BLOCK_END = "\\"               # \
    PASSTHROUGH = None             # anything else


@dataclass
class SourceLine:
    """
    One physical input line

    Attributes:
        text: Raw line text as read from the input stream
        line_number: 1-based position in the input (for warnings)
    """
    text: str
    line_number: int


@dataclass
class ClassifiedLine:
    """
    Result of classifying a normalized line

    Returned by line_classify(). The remainder is the text after the
    matched prefix, left-untrimmed; emitters trim as they need to.

    Attributes:
        kind: The LineKind selected by prefix precedence
        remainder: Text following the prefix (whole left-trimmed line
                   for PASSTHROUGH, empty for BLANK)

    Example:
        For the line "/ if(x > 0)":
        ClassifiedLine(kind=LineKind.COMMAND, remainder=" if(x > 0)")
    """
    kind: LineKind
    remainder: str
