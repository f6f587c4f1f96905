"""Collecting macro definitions out of a token stream."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field

from byteemu.preprocessor_error import (
    PreprocessorError,
    PreprocessorErrorKind,
    PreprocessorErrorType,
)
from byteemu.tokens import Token, TokenInfo, TokenType


@dataclass(eq=False)
class MacroDefinition:
    """A named macro with its parameter tokens and body tokens."""

    label: str
    info: TokenInfo
    parameters: list[Token] = field(default_factory=list)
    value: list[Token] = field(default_factory=list)

    def __eq__(self, other: object) -> bool:
        """Two macros are the same when label and parameter names match."""
        if not isinstance(other, MacroDefinition):
            return NotImplemented
        return self.label == other.label and [p.token for p in self.parameters] == [
            p.token for p in other.parameters
        ]

    __hash__ = None  # type: ignore[assignment]


def _error(info: TokenInfo, kind: PreprocessorErrorKind) -> PreprocessorError:
    return PreprocessorError(info, PreprocessorErrorType(kind))


def create_macro_definition(token: Token, tokens: Iterable[Token]) -> MacroDefinition:
    """Read one macro body following the ``token`` that opened it, up to its end keyword.

    Consumes from ``tokens``; raises PreprocessorError if the definition is malformed.
    """
    it = iter(tokens)
    name = next(it, None)
    if name is None or name.kind is not TokenType.MACRO_DEFINITION_MNEMONIC:
        raise _error(token.token_info, PreprocessorErrorKind.EXPECTED_MACRO_DEFINITION_MNEMONIC)

    definition = MacroDefinition(name.token, name.token_info)
    for current in it:
        if current.kind is TokenType.MACRO_KEYWORD:
            raise _error(current.token_info, PreprocessorErrorKind.NESTED_MACROS)
        if current.kind is TokenType.MACRO_DEFINITION_PARAMETER:
            definition.parameters.append(current)
        elif current.kind is TokenType.END_KEYWORD:
            return definition
        else:
            definition.value.append(current)
    raise _error(token.token_info, PreprocessorErrorKind.MISSING_MACRO_END_KEYWORD)


def create_macro_list(
    tokens: Iterable[Token],
) -> tuple[list[MacroDefinition], list[Token], list[PreprocessorError]]:
    """Split out macro definitions, returning them, the remaining tokens and any errors."""
    macros: list[MacroDefinition] = []
    remaining: list[Token] = []
    errors: list[PreprocessorError] = []

    it = iter(tokens)
    for token in it:
        if token.kind is not TokenType.MACRO_KEYWORD:
            remaining.append(token)
            continue
        try:
            definition = create_macro_definition(token, it)
        except PreprocessorError as err:
            errors.append(err)
            continue
        if definition in macros:
            errors.append(
                _error(definition.info, PreprocessorErrorKind.DUPLICATE_DEFINITIONS_FOUND)
            )
        else:
            macros.append(definition)

    return macros, remaining, errors