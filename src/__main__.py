#!/usr/bin/env python3
"""
comet - StarC to C transpiler

COMET: Compiler for Optimized Mapping to Executable Target.

Translates a line-oriented, prefix-tagged StarC source file into standard
C, then hands the result to the C compiler.

Philosophy:
    - Line-first: every StarC line is translated on its own, in order
    - Prefix-tagged: the first characters of a line select its translation
    - Lenient: lines that cannot be translated become C comments, never errors
    - Raw C welcome: unrecognized lines pass straight through

Usage:
    comet input.rc output.c

Examples:
    # Transpile and build (produces output.c.out, or output.c.exe on Windows)
    comet hello.rc hello.c

    # Transpile only, and show the generated C
    comet hello.rc hello.c --no-build --listing target

    # Verbose output
    comet hello.rc hello.c -vv

Exit codes:
    0  success
    1  usage error
    2  input file cannot be opened
    3  output file cannot be opened
    4  build step failed
"""

import sys
from pathlib import Path
from argparse import ArgumentParser, Namespace, ArgumentDefaultsHelpFormatter
from typing import List, NoReturn, Optional

from .config import appsettings
from .lib import Transpiler, Builder, __version__, LOG, state_connectToLogger
from .lib.errors import BuildError, InputOpenError, OutputOpenError
from .lib.lexer import listing_render
from .models import ProgramState, ExitCode, TranspileResult, pipeline


DISPLAY_TITLE = r"""
   ___ ___  _ __ ___   ___| |_
  / __/ _ \| '_ ` _ \ / _ \ __|
 | (_| (_) | | | | | |  __/ |_
  \___\___/|_| |_| |_|\___|\__|

  StarC to C transpiler
"""


class CometArgumentParser(ArgumentParser):
    """ArgumentParser that reports usage errors with ExitCode.USAGE"""

    def error(self, message: str) -> NoReturn:
        self.print_usage(sys.stderr)
        self.exit(ExitCode.USAGE, f"{self.prog}: error: {message}\n")


# Define CLI arguments
parser = CometArgumentParser(
    prog="comet",
    description="comet - StarC to C transpiler",
    formatter_class=ArgumentDefaultsHelpFormatter,
)

parser.add_argument("inputFile", type=str, help="Input StarC source file")

parser.add_argument("outputFile", type=str, help="Output C file to generate")

parser.add_argument(
    "--no-build",
    dest="build",
    action="store_false",
    default=appsettings.build_enabled,
    help="Only transpile; do not invoke the C compiler",
)

parser.add_argument(
    "--listing",
    choices=["source", "target"],
    default=None,
    help="Print a highlighted listing of the StarC source or the generated C",
)

parser.add_argument(
    "-v",
    "--verbosity",
    action="count",
    default=1,
    help="Increase output verbosity (can be repeated: -v, -vv)",
)

parser.add_argument("-V", "--version", action="version", version=f"%(prog)s {__version__}")


def env_check(inputstate: ProgramState) -> ProgramState:
    """
    Validate environment and resolve file paths.

    Args:
        inputstate: Initial program state with CLI options

    Returns:
        ProgramState with added fields:
            - inputSourceFile: Resolved path to the StarC source
            - cOutputFile: Resolved path to the generated C file
            - envOK: True if environment is valid

    Exits:
        ExitCode.INPUT_OPEN if the input is missing or not a file
        ExitCode.OUTPUT_OPEN if the output directory does not exist
    """

    state = inputstate.copy()

    if state.verbosity >= 3:
        LOG(DISPLAY_TITLE, level=3)

    LOG("Checking environment...", level=2)

    input_file = Path(state.inputFile)
    if not input_file.is_file():
        print(f"Error: Input file not found: {input_file}", file=sys.stderr)
        state.envOK = False
        sys.exit(ExitCode.INPUT_OPEN)
    state.inputSourceFile = input_file
    LOG(f"Input file: {input_file}", level=2)

    output_file = Path(state.outputFile)
    if not output_file.parent.is_dir():
        print(f"Error: Output directory not found: {output_file.parent}", file=sys.stderr)
        state.envOK = False
        sys.exit(ExitCode.OUTPUT_OPEN)
    state.cOutputFile = output_file
    LOG(f"Output file: {output_file}", level=2)

    state.envOK = True
    return state


def source_transpile(inputstate: ProgramState) -> ProgramState:
    """
    Transpile the StarC source into the C output file.

    Both streams are opened here and closed before returning, so the
    generated file is complete before any build step runs.

    Args:
        inputstate: Program state with inputSourceFile and cOutputFile set

    Returns:
        ProgramState with added field:
            - transpileResult: TranspileResult of the run

    Exits:
        ExitCode.INPUT_OPEN / ExitCode.OUTPUT_OPEN if a stream cannot be opened
    """

    state = inputstate.copy()

    LOG("Transpiling source...", level=1)

    try:
        state.transpileResult = file_transpile(state.inputSourceFile, state.cOutputFile)
    except InputOpenError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(ExitCode.INPUT_OPEN)
    except OutputOpenError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(ExitCode.OUTPUT_OPEN)

    LOG(f"Wrote {len(state.transpileResult.lines)} lines to {state.cOutputFile}", level=2)

    if state.listing == "source":
        print(listing_render(state.inputSourceFile.read_text(encoding="utf-8", errors="surrogateescape"), "source"))
    elif state.listing == "target":
        print(listing_render(state.transpileResult.text, "target"))

    return state


def file_transpile(input_file: Path, output_file: Path) -> TranspileResult:
    """
    Open the input and output files and run the transpiler between them.

    Raises:
        InputOpenError: If the input cannot be opened for reading
        OutputOpenError: If the output cannot be opened for writing
    """
    try:
        instream = open(input_file, "r", encoding="utf-8", errors="surrogateescape")
    except OSError as e:
        raise InputOpenError(input_file, e.strerror or str(e)) from e

    with instream:
        try:
            outstream = open(output_file, "w", encoding="utf-8", errors="surrogateescape")
        except OSError as e:
            raise OutputOpenError(output_file, e.strerror or str(e)) from e
        with outstream:
            return Transpiler().stream_transpile(instream, outstream)


def target_build(inputstate: ProgramState) -> ProgramState:
    """
    Compile the generated C file with the configured C compiler.

    Skipped when --no-build is given or COMET_BUILD_ENABLED=false.

    Args:
        inputstate: Program state with cOutputFile written

    Returns:
        ProgramState with added field:
            - buildResult: BuildResult, or None if the build was skipped

    Exits:
        ExitCode.BUILD_FAILED if the compiler cannot run or reports failure
    """

    state = inputstate.copy()

    if not state.build:
        LOG("Build step skipped", level=2)
        return state

    LOG("Building executable...", level=1)

    try:
        state.buildResult = Builder().build(state.cOutputFile)
    except BuildError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(ExitCode.BUILD_FAILED)

    if not state.buildResult.status:
        print(
            f"Error: {appsettings.compiler} compilation failed with code "
            f"{state.buildResult.returncode}",
            file=sys.stderr,
        )
        sys.exit(ExitCode.BUILD_FAILED)

    return state


def results_report(inputstate: ProgramState) -> ProgramState:
    """
    Display transpile and build results to the user.

    Args:
        inputstate: Program state with transpileResult populated

    Returns:
        ProgramState with exitCode set (terminal pipeline stage)
    """
    state: ProgramState = inputstate.copy()
    result = state.transpileResult

    if result is not None:
        LOG(f"  Output: {state.cOutputFile}", level=1)
        LOG(f"  Lines:  {result.line_count} in, {len(result.lines)} out", level=1)
        if result.diagnostics:
            LOG(f"  {result.diagnostics} line(s) could not be translated; see // comments", level=1)
        for warning in result.warnings:
            LOG(f"  warning: {warning}", level=2)

    if state.buildResult is not None:
        print(f"Compiled executable: {state.buildResult.executable}")

    state.exitCode = ExitCode.OK
    return state


def main(argv: Optional[List[str]] = None) -> int:
    """
    Main entry point - transpile StarC source to C and build it.

    Orchestrates the full pipeline:
        1. env_check: Validate paths
        2. source_transpile: StarC -> C
        3. target_build: C -> executable
        4. results_report: Display results to user

    Args:
        argv: Command-line arguments (defaults to sys.argv[1:])

    Returns:
        Process exit status (failures exit directly via sys.exit)
    """
    options: Namespace = parser.parse_args(argv)

    state: ProgramState = ProgramState.state_createFromNamespace(options=options)

    # Connect state to logger for entire pipeline
    state_connectToLogger(state)

    final_state = pipeline(state, env_check, source_transpile, target_build, results_report)
    return int(final_state.exitCode)


if __name__ == "__main__":
    sys.exit(main())
