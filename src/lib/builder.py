"""
Build step: compile generated C into an executable

Thin wrapper around the external C compiler. The generated file must be
complete and closed before build() is called; a failed build leaves it
untouched.
"""

import subprocess
from pathlib import Path
from typing import List, Optional, Union

from ..config import appsettings, AppSettings
from ..models.results import BuildResult
from .errors import BuildError
from .log import LOG


class Builder:
    """
    Invokes the configured C compiler on a generated source file

    The compiler command is ``<compiler> <flags...> <source> -o <executable>``.
    """

    def __init__(self, settings: Optional[AppSettings] = None) -> None:
        self.settings = settings or appsettings

    def command_build(self, source: Path, executable: Path) -> List[str]:
        """argv for compiling source into executable"""
        return [
            self.settings.compiler,
            *self.settings.compilerFlags_split(),
            str(source),
            "-o",
            str(executable),
        ]

    def build(self, source: Union[str, Path]) -> BuildResult:
        """
        Compile a generated C file

        Args:
            source: Path of the generated C file

        Returns:
            BuildResult with status, compiler return code and artifact path

        Raises:
            BuildError: If the compiler executable cannot be started
        """
        source = Path(source)
        executable = self.settings.executable_pathMake(source)
        command = self.command_build(source, executable)
        LOG(f"Running: {' '.join(command)}", level=2)

        try:
            completed = subprocess.run(command, check=False)
        except OSError as e:
            raise BuildError(f"Cannot run compiler '{self.settings.compiler}': {e}") from e

        result = BuildResult(
            status=completed.returncode == 0,
            returncode=completed.returncode,
            executable=executable,
            command=command,
        )
        LOG(f"Compiler exited with {completed.returncode}", level=2)
        return result
