"""
Program state model and pipeline helper

Defines ProgramState dataclass for the functional pipeline pattern, the
ExitCode contract of the CLI, and the pipeline() helper for composing
transformation stages.
"""

from enum import IntEnum
from pathlib import Path
from argparse import Namespace
from typing import Optional, Type, TypeVar, Callable
from dataclasses import dataclass, field

from .results import TranspileResult, BuildResult


PS = TypeVar("PS", bound="ProgramState")


class ExitCode(IntEnum):
    """Process exit status for each run outcome"""
    OK = 0
    USAGE = 1
    INPUT_OPEN = 2
    OUTPUT_OPEN = 3
    BUILD_FAILED = 4


@dataclass
class ProgramState:
    """
    Central state container for the transpile pipeline (state bus pattern).

    This dataclass carries all program state through the functional pipeline,
    with each stage adding new fields as the run progresses.

    Pipeline stages and their state additions:
        - Initial: inputFile, outputFile, verbosity, build, listing
        - env_check: inputSourceFile, cOutputFile, envOK
        - source_transpile: transpileResult
        - target_build: buildResult
        - results_report: exitCode

    Attributes:
        inputFile: StarC source path as given on the command line
        outputFile: Generated C path as given on the command line
        verbosity: Logging verbosity level (1-3)
        build: Run the C compiler after transpiling
        listing: Optional listing to print ("source" or "target")
        envOK: Environment validation passed
        inputSourceFile: Resolved path to the StarC source
        cOutputFile: Resolved path to the generated C file
        transpileResult: Drive-loop result (lines, depth, warnings)
        buildResult: Compiler result, None when the build was skipped
        exitCode: Final process exit status
    """

    # CLI arguments
    inputFile: str = field(default="")
    outputFile: str = field(default="")
    verbosity: int = field(default=1)
    build: bool = field(default=True)
    listing: Optional[str] = field(default=None)

    # Pipeline state
    envOK: bool = field(default=False)
    inputSourceFile: Path = field(default=Path("/"))
    cOutputFile: Path = field(default=Path("/"))
    transpileResult: Optional[TranspileResult] = field(default=None)
    buildResult: Optional[BuildResult] = field(default=None)
    exitCode: ExitCode = field(default=ExitCode.OK)

    @classmethod
    def state_createFromNamespace(
        cls: Type["ProgramState"], options: Namespace
    ) -> "ProgramState":
        """
        Create ProgramState from an argparse Namespace.

        Only attributes that name a ProgramState field are used; anything
        else on the namespace is ignored.

        Args:
            options: Parsed CLI arguments (inputFile, outputFile, etc.)

        Returns:
            ProgramState instance with all CLI options as attributes
        """
        import dataclasses
        valid_fields = {f.name for f in dataclasses.fields(cls)}
        filtered_options = {k: v for k, v in vars(options).items() if k in valid_fields}
        return cls(**filtered_options)

    def copy(self: PS) -> PS:
        """
        Creates a shallow copy of the ProgramState instance.

        Returns:
            A new ProgramState instance.
        """
        return type(self)(**self.__dict__)


def pipeline(
    initial_state: ProgramState, *stages: Callable[[ProgramState], ProgramState]
) -> ProgramState:
    """
    Execute a functional pipeline of state transformations.

    Each stage is a function (ProgramState) -> ProgramState that receives
    the output of the previous stage and returns a new state.

    Args:
        initial_state: Starting ProgramState
        *stages: Variable number of stage functions to execute in order

    Returns:
        Final ProgramState after all transformations

    Example:
        final_state = pipeline(
            initial_state,
            env_check,
            source_transpile,
            target_build,
            results_report
        )
    """
    from functools import reduce
    return reduce(lambda state, stage: stage(state), stages, initial_state)
