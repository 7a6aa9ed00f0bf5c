"""
Settings tests - environment overrides and helper methods
"""

import os
from pathlib import Path

from comet.config import AppSettings


class TestAppSettings:
    """Test COMET_ configuration"""

    def test_defaults(self):
        settings = AppSettings(_env_file=None)
        assert settings.indent_width == 4
        assert settings.compiler == "gcc"
        assert settings.header_emit is True

    def test_environment_override(self, monkeypatch):
        monkeypatch.setenv("COMET_INDENT_WIDTH", "2")
        monkeypatch.setenv("COMET_COMPILER", "clang")
        settings = AppSettings(_env_file=None)
        assert settings.indent_width == 2
        assert settings.compiler == "clang"

    def test_indent_make(self):
        settings = AppSettings(indent_width=3)
        assert settings.indent_make(0) == ""
        assert settings.indent_make(2) == "      "
        assert settings.indent_make(-1) == ""

    def test_executable_suffix_explicit(self):
        settings = AppSettings(executable_suffix=".bin")
        assert settings.executable_pathMake(Path("a/prog.c")) == Path("a/prog.c.bin")

    def test_executable_suffix_platform_default(self):
        settings = AppSettings(executable_suffix=None)
        expected = ".exe" if os.name == "nt" else ".out"
        assert settings.executable_pathMake(Path("prog.c")).name == "prog.c" + expected

    def test_compiler_flags_split(self):
        settings = AppSettings(compiler_flags='-O2 -DNAME="a b"')
        assert settings.compilerFlags_split() == ["-O2", "-DNAME=a b"]
