"""
Emission models

Defines the immutable emit context threaded through the drive loop, the
result type every emitter returns, and the emitter metadata used by the
registry.
"""

from enum import Enum
from dataclasses import dataclass, field, replace
from typing import Callable, List

from .lines import LineKind


class ScopeChange(Enum):
    """
    Effect of an emission on nesting depth

    The drive loop updates depth from this tag alone; emitters never
    touch the depth themselves.
    """
    NONE = 0
    OPEN = 1     # emitted a '{'
    CLOSE = -1   # emitted a '}'


@dataclass(frozen=True)
class EmitContext:
    """
    Nesting state carried from one line to the next

    Frozen: every transition returns a new context.

    Attributes:
        depth: Current nesting level, never negative
    """
    depth: int = 0

    def inner(self) -> "EmitContext":
        """Context one level deeper"""
        return replace(self, depth=self.depth + 1)

    def outer(self) -> "EmitContext":
        """Context one level shallower, clamped at zero"""
        return replace(self, depth=max(self.depth - 1, 0))

    def scope_apply(self, change: ScopeChange) -> "EmitContext":
        """Return the context that follows an emission tagged with change"""
        if change is ScopeChange.OPEN:
            return self.inner()
        if change is ScopeChange.CLOSE:
            return self.outer()
        return self


@dataclass
class Emission:
    """
    Output of one emitter call

    Attributes:
        lines: Generated C lines, already indented, without newlines
        scope: Depth effect the drive loop must apply after this emission
        diagnostic: True when the input could not be translated and the
                    output is a diagnostic comment instead
    """
    lines: List[str] = field(default_factory=list)
    scope: ScopeChange = ScopeChange.NONE
    diagnostic: bool = False


@dataclass
class EmitterSpec:
    """
    Specification for a line emitter

    Attributes:
        kind: LineKind this emitter handles
        description: Human-readable description
        handler: Emission function (remainder, context) -> Emission
        examples: Example StarC lines
    """
    kind: LineKind
    description: str
    handler: Callable[[str, EmitContext], Emission]
    examples: List[str] = field(default_factory=list)
