"""Common shape of assembler diagnostics and their text rendering."""

from __future__ import annotations

import abc
from enum import Enum

from byteemu.tokens import TokenInfo

_RED = "31"
_GREEN = "32"
_BLUE = "34"


class AssemblerStage(Enum):
    """The stage of assembly that reported an error."""

    IMPORTS = "Import Error"
    LEXER = "Lexer Error"
    PREPROCESSOR = "Preprocessor Error"
    COMPILER = "Compiler Error"

    def __str__(self) -> str:
        return self.value


class AssemblerError(Exception, metaclass=abc.ABCMeta):
    """An error found while assembling, tied to a token in the source."""

    @abc.abstractmethod
    def stage(self) -> AssemblerStage:
        """The stage that found the error."""

    @abc.abstractmethod
    def info(self) -> TokenInfo:
        """Where in the source the error is."""

    @abc.abstractmethod
    def message(self) -> str:
        """A one-line description of the error."""

    @abc.abstractmethod
    def fix(self) -> str | None:
        """A suggested fix, if there is one."""

    def __str__(self) -> str:
        return format_assembler_error(self, False)


def _paint(text: str, code: str, color: bool) -> str:
    return f"\x1b[{code}m{text}\x1b[0m" if color else text


def format_assembler_error(error: AssemblerError, color: bool = True) -> str:
    """Render an error as a multi-line report pointing at the offending token."""
    info = error.info()
    line_num_str = str(info.line_num)
    prefix = " " * (len(line_num_str) + 1) + _paint("|", _BLUE, color)

    lines = [
        f"{_paint(str(error.stage()), _RED, color)}: {error.message()}",
        f"{prefix} {_paint(f'-> Line: {info.line_num}', _RED, color)}",
        prefix,
        f"{_paint(line_num_str + ' |', _BLUE, color)} {info.line}",
    ]

    index = info.line.find(info.token)
    if index >= 0:
        spot = " " * index + "^" * len(info.token) + f'"{info.token}"'
        lines.append(f"{prefix} {_paint(spot, _RED, color)}")
    lines.append(prefix)

    fix = error.fix()
    if fix is not None:
        lines.append(f"{prefix} {_paint(f'Fix: {fix}', _GREEN, color)}")
    lines.append(repr(info))

    return "\n".join(lines) + "\n"