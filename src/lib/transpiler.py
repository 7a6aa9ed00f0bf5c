"""
Transpiler for StarC source to C

Single forward pass over the input lines: each line is normalized,
classified, and handed to its emitter. Nesting depth lives in an immutable
EmitContext that is replaced after every line according to the emitter's
ScopeChange tag, so a block opener raises depth exactly once no matter
which emitter produced it.
"""

from typing import Iterable, Iterator, List, Optional, TextIO

from ..config import appsettings, AppSettings
from ..models.emit import EmitContext, ScopeChange
from ..models.lines import SourceLine
from ..models.results import TranspileResult, TranspileWarning
from .classifier import line_normalize, line_classify
from .emitters import EmitterRegistry
from .log import LOG, WARN


class Transpiler:
    """
    Drives StarC lines through classification and emission

    Responsibilities:
    - Read input lines in order
    - Route each line to its emitter
    - Track nesting depth from emitter scope tags
    - Record unmatched block-ends and unclosed blocks as warnings
    - Write generated lines in emission order
    """

    def __init__(
        self,
        settings: Optional[AppSettings] = None,
        registry: Optional[EmitterRegistry] = None,
    ) -> None:
        """
        Initialize transpiler

        Args:
            settings: Emission settings (defaults to the global appsettings)
            registry: Emitter registry (defaults to the built-in emitters)
        """
        self.settings = settings or appsettings
        self.registry = registry or EmitterRegistry(self.settings)
        self.result = TranspileResult()

    def header_lines(self) -> List[str]:
        """Lines written before any generated code"""
        if not self.settings.header_emit:
            return []
        return [self.settings.header_text, ""]

    def line_transpile(self, source: SourceLine, context: EmitContext) -> EmitContext:
        """
        Translate one source line and return the context for the next

        Generated lines are appended to self.result.lines.

        Args:
            source: The input line and its line number
            context: Nesting state before this line

        Returns:
            Nesting state after this line
        """
        classified = line_classify(line_normalize(source.text))
        emission = self.registry.get(classified.kind)(classified.remainder, context)

        LOG(
            f"{source.line_number:>4} {classified.kind.name:<20} depth={context.depth}",
            level=3,
        )

        if emission.diagnostic:
            self.result.diagnostics += 1
            LOG(f"Line {source.line_number}: {emission.lines[0].strip()}", level=2)

        if emission.scope is ScopeChange.CLOSE and context.depth == 0:
            warning = TranspileWarning(source.line_number, "unmatched block end")
            self.result.warnings.append(warning)
            WARN(str(warning))

        self.result.lines.extend(emission.lines)
        return context.scope_apply(emission.scope)

    def lines_transpile(self, lines: Iterable[str]) -> Iterator[str]:
        """
        Transpile an iterable of StarC lines, yielding C lines as produced

        Statistics and warnings accumulate in self.result, which is
        complete once the generator is exhausted.

        Args:
            lines: Raw input lines (trailing newlines allowed)

        Yields:
            Generated C lines without trailing newlines
        """
        self.result = TranspileResult()
        context = EmitContext()

        for line in self.header_lines():
            self.result.lines.append(line)
            yield line

        for line_number, text in enumerate(lines, start=1):
            emitted_from = len(self.result.lines)
            context = self.line_transpile(SourceLine(text=text, line_number=line_number), context)
            self.result.line_count = line_number
            yield from self.result.lines[emitted_from:]

        self.result.depth = context.depth
        if context.depth > 0:
            warning = TranspileWarning(0, f"{context.depth} unclosed block(s) at end of input")
            self.result.warnings.append(warning)
            WARN(str(warning))

        LOG(
            f"Transpiled {self.result.line_count} lines, "
            f"{len(self.result.warnings)} warning(s), "
            f"{self.result.diagnostics} diagnostic(s)",
            level=2,
        )

    def stream_transpile(self, instream: TextIO, outstream: TextIO) -> TranspileResult:
        """
        Transpile from an open text stream into another

        Each generated line is written as soon as it is emitted.

        Returns:
            TranspileResult for the run
        """
        for line in self.lines_transpile(instream):
            outstream.write(line + "\n")
        return self.result

    def transpile(self, source: str) -> TranspileResult:
        """
        Transpile StarC source held in a string

        Args:
            source: Complete StarC program text

        Returns:
            TranspileResult; result.text is the generated C

        Example:
            >>> result = Transpiler().transpile('@ int main(void)\\n/// writeLine("Hi");\\n\\\\\\n')
            >>> result.lines[2:]
            ['int main(void) {', '    printf("Hi\\\\n");', '}']
        """
        for _ in self.lines_transpile(source.splitlines()):
            pass
        return self.result
