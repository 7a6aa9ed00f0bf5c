"""
Exception hierarchy for comet

Only whole-run failures are exceptions. Problems with individual source
lines never raise; they degrade to diagnostic comments in the output.
"""

from pathlib import Path
from typing import Union


class CometError(Exception):
    """Base class for fatal comet errors"""
    pass


class InputOpenError(CometError):
    """Raised when the StarC source cannot be opened for reading"""

    def __init__(self, path: Union[str, Path], reason: str):
        self.path = Path(path)
        self.reason = reason
        super().__init__(f"Cannot open input '{self.path}': {reason}")


class OutputOpenError(CometError):
    """Raised when the generated C file cannot be opened for writing"""

    def __init__(self, path: Union[str, Path], reason: str):
        self.path = Path(path)
        self.reason = reason
        super().__init__(f"Cannot open output '{self.path}': {reason}")


class BuildError(CometError):
    """Raised when the C compiler cannot be started at all"""
    pass
