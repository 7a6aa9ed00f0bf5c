"""
Application settings and configuration

Uses pydantic-settings for type-safe configuration via environment variables.
All settings use COMET_ prefix (e.g., COMET_INDENT_WIDTH=2).

Settings can also be loaded from a .env file in the project root.
"""

import os
import shlex
from pathlib import Path
from typing import List, Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class AppSettings(BaseSettings):
    """
    Application configuration via environment variables.

    Environment variables use COMET_ prefix.

    Examples:
        COMET_INDENT_WIDTH=2
        COMET_COMPILER=clang
        COMET_COMPILER_FLAGS="-O2 -Wall"
        COMET_BUILD_ENABLED=false
    """

    model_config = SettingsConfigDict(
        env_prefix="COMET_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Emission configuration
    indent_width: int = Field(
        default=4,
        ge=0,
        description="Number of spaces emitted per nesting level",
    )

    header_emit: bool = Field(
        default=True,
        description="Write a header comment at the top of generated C",
    )

    header_text: str = Field(
        default="/* Transpiled C produced by comet */",
        description="Header comment written before the generated code",
    )

    # Build configuration
    build_enabled: bool = Field(
        default=True,
        description="Invoke the C compiler after transpiling",
    )

    compiler: str = Field(
        default="gcc",
        description="C compiler executable used by the build step",
    )

    compiler_flags: str = Field(
        default="",
        description="Extra compiler flags, split with shell rules",
    )

    executable_suffix: Optional[str] = Field(
        default=None,
        description="Suffix appended to the output path for the executable (platform default if unset)",
    )

    def indent_make(self, depth: int) -> str:
        """
        Generate the leading whitespace for a nesting depth.

        Args:
            depth: Non-negative nesting level

        Returns:
            Indentation string (empty for depth <= 0)

        Example:
            >>> settings = AppSettings()
            >>> settings.indent_make(2)
            '        '
        """
        return " " * (self.indent_width * max(depth, 0))

    def executable_pathMake(self, output: Path) -> Path:
        """
        Derive the executable path from the generated C file path.

        The suffix is appended to the full output name, so ``prog.c``
        becomes ``prog.c.out`` (``prog.c.exe`` on Windows).
        """
        suffix = self.executable_suffix
        if suffix is None:
            suffix = ".exe" if os.name == "nt" else ".out"
        return output.with_name(output.name + suffix)

    def compilerFlags_split(self) -> List[str]:
        """Split compiler_flags into an argv list"""
        return shlex.split(self.compiler_flags)


# Singleton instance - import this in your code
appsettings = AppSettings()
