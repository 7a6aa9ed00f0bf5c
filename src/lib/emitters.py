"""
Emitter implementations for comet

Each emitter turns the remainder of one classified StarC line into zero or
more lines of C. Emitters are total: input they cannot translate becomes a
diagnostic comment in the output rather than an exception. Uses EmitterSpec
for metadata and lookup.
"""

import re
from typing import Callable, Dict, List, Optional

from ..config import appsettings, AppSettings
from ..models.emit import EmitContext, Emission, EmitterSpec, ScopeChange
from ..models.lines import LineKind


# if(...), for (...), while(...), switch (...)
CONTROL_OPENER = re.compile(r'^(if|for|while|switch)[\s(]')

STRING_KEYWORD = "string "
STRING_CTYPE = "char *"


def statement_terminate(text: str) -> str:
    """Append ';' unless the text already ends with one"""
    return text if text.endswith(";") else text + ";"


def stringLiteral_end(text: str) -> int:
    """
    Find the closing quote of a string literal starting at text[0]

    Backslash escapes are skipped, so "a\\"b" closes at the last quote.

    Returns:
        Index of the closing '"', or -1 if the literal is unterminated
    """
    pos = 1
    while pos < len(text):
        if text[pos] == '\\':
            pos += 2
            continue
        if text[pos] == '"':
            return pos
        pos += 1
    return -1


def callArgs_extract(text: str) -> Optional[str]:
    """
    Extract the argument text of a call like ``writeLine("x", y);``

    Args run from the first '(' to the last ')'. A missing ')' is
    tolerated and the args run to end of line.

    Returns:
        Argument text, or None when there is no '(' at all
    """
    open_pos = text.find("(")
    if open_pos == -1:
        return None
    body = text[:-1].rstrip() if text.endswith(";") else text
    close_pos = body.rfind(")")
    if close_pos > open_pos:
        return body[open_pos + 1:close_pos]
    return body[open_pos + 1:]


def printfArgs_make(args: str, newline: bool) -> Optional[str]:
    r"""
    Build printf() arguments from write/writeLine arguments

    The first argument must be a string literal; it becomes the format
    string, with "\n" inserted before its closing quote for writeLine.
    The type of a bare expression is unknown, so no format is guessed.

    Returns:
        printf() argument text, or None when the first argument is not
        a string literal

    Example:
        >>> printfArgs_make('"Hi"', newline=True)
        '"Hi\\n"'
        >>> printfArgs_make('"x=%d", x', newline=True)
        '"x=%d\\n", x'
        >>> printfArgs_make('x', newline=True) is None
        True
    """
    eol = "\\n" if newline else ""
    args = args.strip()
    if not args:
        return f'"{eol}"'
    if args.startswith('"'):
        end = stringLiteral_end(args)
        if end == -1:
            # Unterminated literal: leave it for the C compiler to report
            return args
        return args[:end] + eol + args[end:]
    return None


class EmitterRegistry:
    """
    Registry of emitter specifications and handlers

    Maps each LineKind to the EmitterSpec that translates it. Every kind
    has exactly one emitter; the drive loop looks them up by kind.
    """

    def __init__(self, settings: Optional[AppSettings] = None) -> None:
        """Initialize the registry and register all built-in emitters"""
        self.settings = settings or appsettings
        self.specs: Dict[LineKind, EmitterSpec] = {}
        self.layoutEmitters_register()
        self.preprocessorEmitters_register()
        self.declarationEmitters_register()
        self.statementEmitters_register()

    def register(self, spec: EmitterSpec) -> None:
        """Register an emitter specification"""
        self.specs[spec.kind] = spec

    def get(self, kind: LineKind) -> Callable[[str, EmitContext], Emission]:
        """
        Get the emitter handler for a line kind

        Raises:
            KeyError: If no emitter is registered for the kind
        """
        return self.specs[kind].handler

    def spec_get(self, kind: LineKind) -> Optional[EmitterSpec]:
        """Get full emitter specification for a kind"""
        return self.specs.get(kind)

    def line_make(self, context: EmitContext, text: str) -> str:
        """Indent text for the context's depth"""
        return f"{self.settings.indent_make(context.depth)}{text}"

    def diagnostic_make(self, context: EmitContext, message: str) -> Emission:
        """Emission holding a single diagnostic comment"""
        return Emission(lines=[self.line_make(context, f"// {message}")], diagnostic=True)

    def layoutEmitters_register(self) -> None:
        """Register blank, comment and passthrough emitters"""

        def blank_handler(remainder: str, context: EmitContext) -> Emission:
            """Blank line stays a blank line"""
            return Emission(lines=[""])

        def comment_handler(remainder: str, context: EmitContext) -> Emission:
            """| text -> // text"""
            return Emission(lines=[self.line_make(context, f"//{remainder}")])

        def passthrough_handler(remainder: str, context: EmitContext) -> Emission:
            """Unknown lines are copied as-is at the current depth"""
            return Emission(lines=[self.line_make(context, remainder)])

        self.register(EmitterSpec(
            kind=LineKind.BLANK,
            description="Blank line, preserved as an empty output line",
            handler=blank_handler,
        ))
        self.register(EmitterSpec(
            kind=LineKind.COMMENT,
            description="Line comment",
            handler=comment_handler,
            examples=["| read two numbers"],
        ))
        self.register(EmitterSpec(
            kind=LineKind.PASSTHROUGH,
            description="Raw C, copied verbatim",
            handler=passthrough_handler,
            examples=["return 0;", "%foo"],
        ))

    def preprocessorEmitters_register(self) -> None:
        """Register the + directive emitter"""

        def include_emit(text: str, context: EmitContext) -> Emission:
            """include NAME -> #include <NAME.h> or #include NAME"""
            tokens = text[len("include"):].split()
            name = tokens[0] if tokens else ""
            if name.endswith(";"):
                name = name[:-1]
            if not name:
                return self.diagnostic_make(context, f"malformed include directive: {text}")
            if any(marker in name for marker in '.<"'):
                return Emission(lines=[f"#include {name}"])
            return Emission(lines=[f"#include <{name}.h>"])

        def define_emit(text: str, context: EmitContext) -> Emission:
            """define NAME VALUE -> #define NAME VALUE"""
            body = text[len("define"):].lstrip()
            if not body:
                return self.diagnostic_make(context, f"malformed define directive: {text}")
            return Emission(lines=[f"#define {body}"])

        def directive_handler(remainder: str, context: EmitContext) -> Emission:
            """Dispatch +include / +define, flag anything else"""
            text = remainder.lstrip()
            if text.startswith("include"):
                return include_emit(text, context)
            if text.startswith("define"):
                return define_emit(text, context)
            return self.diagnostic_make(context, f"unrecognized + directive: {text}")

        self.register(EmitterSpec(
            kind=LineKind.DIRECTIVE,
            description="Preprocessor include/define",
            handler=directive_handler,
            examples=["+include stdio", '+include "local.h"', "+define MAX 10"],
        ))

    def declarationEmitters_register(self) -> None:
        """Register function header and variable declaration emitters"""

        def function_handler(remainder: str, context: EmitContext) -> Emission:
            """@ int main(void) -> int main(void) {"""
            signature = remainder.strip()
            text = f"{signature} {{" if signature else "{"
            return Emission(lines=[self.line_make(context, text)], scope=ScopeChange.OPEN)

        def variable_handler(remainder: str, context: EmitContext) -> Emission:
            """$ string s = "x" -> char *s = "x";"""
            text = remainder.lstrip()
            # Tolerate a doubled prefix: "$ $ int x"
            if text.startswith("$ "):
                text = text[2:].lstrip()
            if not text:
                return self.diagnostic_make(context, "empty variable declaration")
            if text.startswith(STRING_KEYWORD):
                text = STRING_CTYPE + text[len(STRING_KEYWORD):]
            return Emission(lines=[self.line_make(context, statement_terminate(text))])

        self.register(EmitterSpec(
            kind=LineKind.FUNCTION_OPEN,
            description="Function header, opens a block",
            handler=function_handler,
            examples=["@ int main(void)"],
        ))
        self.register(EmitterSpec(
            kind=LineKind.VAR_DECL,
            description="Variable declaration, 'string' maps to 'char *'",
            handler=variable_handler,
            examples=["$ int x = 0", '$ string name = "x";'],
        ))

    def statementEmitters_register(self) -> None:
        """Register command, label and block-end emitters"""

        def label_handler(remainder: str, context: EmitContext) -> Emission:
            """// case 1 -> case 1:"""
            text = remainder.strip()
            if not text:
                return self.diagnostic_make(context, "empty label")
            if text == "default" or re.match(r'^default[\s:;]', text):
                text = "default"
            if not text.endswith(":"):
                text += ":"
            return Emission(lines=[self.line_make(context, text)])

        def blockEnd_handler(remainder: str, context: EmitContext) -> Emission:
            """\\ -> } one level out"""
            return Emission(
                lines=[self.line_make(context.outer(), "}")],
                scope=ScopeChange.CLOSE,
            )

        self.register(EmitterSpec(
            kind=LineKind.COMMAND,
            description="Command or control-flow opener",
            handler=self.command_emit,
            examples=["/ if(x > 0)", "/ x = x + 1"],
        ))
        self.register(EmitterSpec(
            kind=LineKind.TRIPLE_SLASH_COMMAND,
            description="Command inside a block body",
            handler=self.command_emit,
            examples=['/// writeLine("Hi");', "/// read x;"],
        ))
        self.register(EmitterSpec(
            kind=LineKind.CASE_LABEL,
            description="switch label",
            handler=label_handler,
            examples=["// case 1", "// default"],
        ))
        self.register(EmitterSpec(
            kind=LineKind.BLOCK_END,
            description="Closes the innermost block",
            handler=blockEnd_handler,
            examples=["\\"],
        ))

    def command_emit(self, remainder: str, context: EmitContext) -> Emission:
        """
        Translate a / or /// command

        Dispatch order:
            1. writeLine(...)  -> printf("...\\n");
            2. write(...)      -> printf("...");
            3. read NAME       -> scanf("%d", &NAME);
            4. if/for/while/switch header -> header {   (tagged OPEN)
            5. anything else   -> statement with ';'

        The emitter never changes depth itself; the OPEN tag tells the
        drive loop to.
        """
        text = remainder.strip()

        for keyword, newline in (("writeLine", True), ("write", False)):
            if text.startswith(keyword + "(") or text.startswith(keyword + " "):
                args = callArgs_extract(text)
                if args is None:
                    return self.diagnostic_make(context, f"unrecognized {keyword} usage: {text}")
                printf_args = printfArgs_make(args, newline)
                if printf_args is None:
                    return self.diagnostic_make(context, f"{keyword} needs a string literal format: {text}")
                return Emission(lines=[self.line_make(context, f"printf({printf_args});")])

        if text.startswith("read "):
            name = text[len("read "):].strip()
            if name.endswith(";"):
                name = name[:-1].rstrip()
            if not name:
                return self.diagnostic_make(context, f"missing read target: {text}")
            return Emission(lines=[self.line_make(context, f'scanf("%d", &{name});')])

        if CONTROL_OPENER.match(text):
            return Emission(lines=[self.line_make(context, f"{text} {{")], scope=ScopeChange.OPEN)

        if not text:
            return Emission(lines=[""])
        return Emission(lines=[self.line_make(context, statement_terminate(text))])

    def kinds_list(self) -> List[LineKind]:
        """All kinds with a registered emitter"""
        return list(self.specs)
