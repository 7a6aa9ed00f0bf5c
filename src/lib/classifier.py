"""
Line normalizer and prefix classifier for StarC source

StarC is line oriented: the first characters of a line (after leading
whitespace) select how the line is translated. Classification is an
ordered table lookup, so longer prefixes that share characters with
shorter ones must come first:

    ///  command body          (before //)
    //   case / default label  (before /)
    +    preprocessor directive
    |    comment
    @    function header
    $    variable declaration
    /    command or block opener
    \\    block end

Anything else is passed through untouched.

Example:
    >>> line_classify("/// writeLine(\\"Hi\\");")
    ClassifiedLine(kind=<LineKind.TRIPLE_SLASH_COMMAND: '///'>, remainder=' writeLine("Hi");')
"""

from typing import List, Tuple

from ..models.lines import LineKind, ClassifiedLine


# Order is precedence: first match wins
PREFIX_TABLE: List[Tuple[str, LineKind]] = [
    ("///", LineKind.TRIPLE_SLASH_COMMAND),
    ("//", LineKind.CASE_LABEL),
    ("+", LineKind.DIRECTIVE),
    ("|", LineKind.COMMENT),
    ("@", LineKind.FUNCTION_OPEN),
    ("$", LineKind.VAR_DECL),
    ("/", LineKind.COMMAND),
    ("\\", LineKind.BLOCK_END),
]


def line_normalize(raw: str) -> str:
    """Strip the trailing newline and any trailing whitespace"""
    return raw.rstrip()


def line_isBlank(line: str) -> bool:
    """True when the line holds nothing but whitespace"""
    return not line.strip()


def line_classify(line: str) -> ClassifiedLine:
    """
    Determine the kind of a normalized line

    Total: every string classifies to exactly one LineKind and nothing is
    raised. Leading whitespace is ignored when testing prefixes.

    Args:
        line: Input line, already right-trimmed by line_normalize()

    Returns:
        ClassifiedLine with the kind and the text following the prefix.
        PASSTHROUGH lines carry the whole left-trimmed line as remainder.
    """
    if line_isBlank(line):
        return ClassifiedLine(kind=LineKind.BLANK, remainder="")

    stripped = line.lstrip()
    for prefix, kind in PREFIX_TABLE:
        if stripped.startswith(prefix):
            return ClassifiedLine(kind=kind, remainder=stripped[len(prefix):])

    return ClassifiedLine(kind=LineKind.PASSTHROUGH, remainder=stripped)
