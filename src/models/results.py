"""
Result models for the transpile and build stages
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import List


@dataclass
class TranspileWarning:
    """
    Non-fatal problem found while transpiling

    Attributes:
        line_number: 1-based input line (0 for end-of-input warnings)
        message: Human-readable description
    """
    line_number: int
    message: str

    def __str__(self) -> str:
        if self.line_number:
            return f"line {self.line_number}: {self.message}"
        return self.message


@dataclass
class TranspileResult:
    """
    Outcome of one drive-loop run

    Attributes:
        lines: Generated C text, one entry per output line, in order
        depth: Nesting depth after the last input line (0 when balanced)
        warnings: Unmatched block-ends, unclosed blocks
        diagnostics: Number of diagnostic comments emitted
        line_count: Number of input lines processed
    """
    lines: List[str] = field(default_factory=list)
    depth: int = 0
    warnings: List[TranspileWarning] = field(default_factory=list)
    diagnostics: int = 0
    line_count: int = 0

    @property
    def text(self) -> str:
        """Generated C as a single newline-terminated string"""
        return "".join(f"{line}\n" for line in self.lines)


@dataclass
class BuildResult:
    """
    Outcome of the external build step

    Attributes:
        status: True when the compiler exited with 0
        returncode: Compiler exit status
        executable: Path of the artifact the compiler was asked to produce
        command: argv used to invoke the compiler
    """
    status: bool
    returncode: int
    executable: Path
    command: List[str] = field(default_factory=list)
