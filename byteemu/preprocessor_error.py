"""Errors reported while replacing defines and expanding macros."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from enum import Enum
from typing import Any

from byteemu.assembler_error import AssemblerError, AssemblerStage
from byteemu.levenshtein import distance_no_case
from byteemu.tokens import TokenInfo


class PreprocessorErrorKind(Enum):
    """What went wrong; the value is the message template."""

    EXPECTED_DEFINE_LABEL = "Expected @define label"
    EXPECTED_DEFINE_VALUE = "Expected @define value"
    DUPLICATE_DEFINITIONS_FOUND = "Duplicate definitions found"
    UNABLE_TO_FIND_DEFINITION = "Unable to find definition"
    EXPECTED_UNDEFINE_LABEL = "Expected @undefine label"
    EXPECTED_UNDEFINE_VALUE = "Expected @undefine value"
    UNABLE_TO_FIND_DEFINITION_TO_REMOVE = "Unable to find @define to ,remove"

    EXPECTED_MACRO_DEFINITION_MNEMONIC = "Expected macro definition"
    DUPLICATE_MACRO_DEFINITIONS = "Found duplicate macro definitions"
    MISSING_MACRO_END_KEYWORD = "Missing end keyword in macro"
    UNABLE_TO_FIND_MACRO_DEFINITION = "Unable to find macro definition"
    UNABLE_TO_FIND_MACRO_PARAMETER = "Unable to find macro parameter"
    INFINITE_RECURSION_MACRO = "Cannot call a macro from in itself"
    INCORRECT_NUMBER_OF_OPERANDS = (
        "Incorrect number of operands found, expected {expected} but found {found}"
    )
    INCORRECT_MACRO_OPERANDS = "Incorrect operand found, expected {expected} but found {found}"
    NESTED_MACROS = "Cannot have nested macros"


@dataclass(frozen=True)
class PreprocessorErrorType:
    """An error kind with the details some kinds carry."""

    kind: PreprocessorErrorKind
    closest: tuple[str, ...] = ()
    expected: Any = None
    found: Any = None

    def __str__(self) -> str:
        return self.kind.value.format(expected=self.expected, found=self.found)


def unable_to_find_macro_definition(search: str, definitions: Iterable[Any]) -> PreprocessorErrorType:
    """Build a missing-macro error naming the defined labels closest to ``search``."""
    closest: list[str] = []
    smallest = 1000.0
    for definition in definitions:
        dist = distance_no_case(definition.label, search)
        if dist == smallest and definition.label not in closest:
            closest.append(definition.label)
        elif dist < smallest:
            smallest = dist
            closest = [definition.label]
    return PreprocessorErrorType(
        PreprocessorErrorKind.UNABLE_TO_FIND_MACRO_DEFINITION, closest=tuple(closest)
    )


class PreprocessorError(AssemblerError):
    """A preprocessor error tied to the token where it was found."""

    def __init__(self, info: TokenInfo, error: PreprocessorErrorType) -> None:
        super().__init__(str(error))
        self._info = info
        self.error = error

    def stage(self) -> AssemblerStage:
        return AssemblerStage.PREPROCESSOR

    def info(self) -> TokenInfo:
        return self._info

    def message(self) -> str:
        return str(self.error)

    def fix(self) -> str | None:
        if (
            self.error.kind is PreprocessorErrorKind.UNABLE_TO_FIND_MACRO_DEFINITION
            and self.error.closest
        ):
            return f"Did you mean ({','.join(self.error.closest)})"
        return None