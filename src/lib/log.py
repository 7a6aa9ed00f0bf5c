"""
Loguru output for comet, gated by the run's verbosity.

The CLI connects its ProgramState once; library code then calls LOG() or
WARN() without passing the state around. Outside a CLI run (tests, direct
Transpiler use) no state is connected: LOG() stays silent and WARN() still
reports, so unmatched block ends are never lost.

    state_connectToLogger(state)
    LOG("Transpiling source...")               # default verbosity
    LOG("line 12 COMMAND depth=1", level=3)    # shown with -vv
    WARN("line 40: unmatched block end")
"""

from loguru import logger
from typing import Any, Optional
from contextvars import ContextVar
import sys

_program_state: ContextVar[Optional[Any]] = ContextVar('program_state', default=None)

logger_format = (
    "<green>{time:HH:mm:ss}</green> │ "
    "<level>{level: <7}</level> │ "
    "<cyan>{function: <20}</cyan> @ "
    "<cyan>{line: <4}</cyan> ║ "
    "<level>{message}</level>"
)

logger.remove()
logger.add(sys.stderr, format=logger_format, level="DEBUG")


def state_connectToLogger(state: Any) -> None:
    """Make state.verbosity the threshold for LOG() in this context"""
    _program_state.set(state)


def verbosity_get() -> Optional[int]:
    """Verbosity of the connected state, or None when nothing is connected"""
    state = _program_state.get()
    if state is None:
        return None
    return getattr(state, 'verbosity', 1)


def LOG(message: str, level: int = 1, **kwargs: Any) -> None:
    """
    Debug-level progress message.

    Args:
        message: Text to log (not brace-formatted unless kwargs are given)
        level: 1 = default run, 2 = -v, 3 = -vv per-line trace
    """
    verbosity = verbosity_get()
    if verbosity is not None and verbosity >= level:
        logger.opt(depth=1).debug(message, **kwargs)


def WARN(message: str, **kwargs: Any) -> None:
    """Warning about the source being transpiled; silenced only at verbosity 0"""
    verbosity = verbosity_get()
    if verbosity is None or verbosity >= 1:
        logger.opt(depth=1).warning(message, **kwargs)
