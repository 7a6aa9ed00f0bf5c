"""
Custom Pygments lexer for StarC syntax highlighting

Provides syntax highlighting for StarC source listings and a helper that
renders either StarC or the generated C for the terminal.

Token types:
- Comment.Preproc: + directives
- Comment.Single: | comments
- Name.Function: @ function headers
- Keyword.Type: $ declarations
- Keyword: control-flow openers and labels
- Name.Builtin: writeLine / write / read
- Punctuation: line prefixes and block ends
"""

from pygments import highlight
from pygments.lexer import RegexLexer, bygroups
from pygments.lexers import CLexer
from pygments.formatters import TerminalFormatter
from pygments.token import (
    Text,
    Whitespace,
    Punctuation,
    Name,
    String,
    Keyword,
    Comment,
)


class StarCLexer(RegexLexer):
    """
    Lexer for StarC source

    Every rule is anchored at the start of a line, mirroring the prefix
    precedence used by the classifier (/// before // before /).

    Example:
        / if(x > 0)
        /// writeLine("positive");
        \\
    """

    name = 'StarC'
    aliases = ['starc', 'rc']
    filenames = ['*.rc', '*.sc']

    tokens = {
        'root': [
            (r'\n', Whitespace),

            # | comment
            (r'^([ \t]*)(\|)(.*)', bygroups(Whitespace, Punctuation, Comment.Single)),

            # +include / +define
            (r'^([ \t]*)(\+)(.*)', bygroups(Whitespace, Punctuation, Comment.Preproc)),

            # @ function header
            (r'^([ \t]*)(@)(.*)', bygroups(Whitespace, Punctuation, Name.Function)),

            # $ declaration: type keyword then the rest
            (r'^([ \t]*)(\$)([ \t]*)(\w+)(.*)',
             bygroups(Whitespace, Punctuation, Whitespace, Keyword.Type, Text)),

            # /// and / commands
            (r'^([ \t]*)(///|/(?!/))([ \t]*)', bygroups(Whitespace, Punctuation, Whitespace), 'command'),

            # // labels
            (r'^([ \t]*)(//)(.*)', bygroups(Whitespace, Punctuation, Keyword)),

            # \ block end
            (r'^([ \t]*)(\\)(.*)', bygroups(Whitespace, Punctuation, Comment.Single)),

            # Everything else is passed through
            (r'.+', Text),
        ],

        'command': [
            (r'\n', Whitespace, '#pop'),
            (r'\b(writeLine|write|read)\b', Name.Builtin),
            (r'\b(if|for|while|switch)\b', Keyword),
            (r'"(\\\\|\\"|[^"])*"', String),
            (r'[^"\n]+?(?=\b(?:writeLine|write|read|if|for|while|switch)\b|"|\n|$)', Text),
            (r'.', Text),
        ],
    }


def listing_render(text: str, language: str = "starc") -> str:
    """
    Highlight StarC or C text for terminal display

    Args:
        text: Source text to render
        language: "starc"/"source" for StarC, "c"/"target" for C

    Returns:
        Text with ANSI colour escapes
    """
    if language in ("starc", "source"):
        lexer = StarCLexer()
    else:
        lexer = CLexer()
    return highlight(text, lexer, TerminalFormatter())


def get_lexer() -> StarCLexer:
    """
    Get the StarCLexer instance

    Returns:
        StarCLexer instance ready for use with Pygments
    """
    return StarCLexer()
