"""
comet - StarC to C transpiler

Translates prefix-tagged StarC source into C and optionally builds it.
"""

__version__ = "1.0.0"

from .transpiler import Transpiler
from .builder import Builder
from .emitters import EmitterRegistry
from .classifier import line_classify, line_normalize
from .log import LOG, WARN, state_connectToLogger

__all__ = [
    "Transpiler",
    "Builder",
    "EmitterRegistry",
    "line_classify",
    "line_normalize",
    "LOG",
    "WARN",
    "state_connectToLogger",
    "__version__",
]
