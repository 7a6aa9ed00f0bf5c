"""
Models package for comet

Contains data structures and type definitions for the transpile pipeline.
"""

from .state import ProgramState, ExitCode, pipeline
from .lines import LineKind, SourceLine, ClassifiedLine
from .emit import EmitContext, Emission, EmitterSpec, ScopeChange
from .results import TranspileResult, TranspileWarning, BuildResult

__all__ = [
    "ProgramState",
    "ExitCode",
    "pipeline",
    "LineKind",
    "SourceLine",
    "ClassifiedLine",
    "EmitContext",
    "Emission",
    "EmitterSpec",
    "ScopeChange",
    "TranspileResult",
    "TranspileWarning",
    "BuildResult",
]
