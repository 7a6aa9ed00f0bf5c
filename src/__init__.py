"""
comet - StarC to C transpiler

COMET: Compiler for Optimized Mapping to Executable Target. Translates
line-oriented, prefix-tagged StarC source into standard C.
"""

__version__ = "1.0.0"

from .lib import Transpiler, Builder, EmitterRegistry, LOG, WARN, state_connectToLogger

__all__ = ["Transpiler", "Builder", "EmitterRegistry", "LOG", "WARN", "state_connectToLogger", "__version__"]
