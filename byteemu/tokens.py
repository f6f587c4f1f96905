"""Tokens produced by the assembler's lexer and the source location they came from."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto


@dataclass
class TokenInfo:
    """Where a token came from: its source line, text, line number and lexer class."""

    line: str
    token: str
    line_num: int
    lexer_classification: str
    is_address: bool = False


class TokenType(Enum):
    """Kind of a lexed token."""

    EOF = auto()
    SINGLE_CHAR = auto()
    COMMENT = auto()

    INCLUDE_KEYWORD = auto()
    STD_IMPORT_PATH = auto()

    MNEMONIC = auto()
    MACRO_MNEMONIC = auto()
    REGISTER = auto()
    LABEL = auto()
    LABEL_DEFINITION = auto()

    DEFINE_DEFINITION_LABEL = auto()
    DEFINE_KEYWORD = auto()
    UNDEFINE_KEYWORD = auto()

    MACRO_DEFINITION_PARAMETER = auto()
    MACRO_KEYWORD = auto()
    MACRO_DEFINITION_MNEMONIC = auto()
    END_KEYWORD = auto()

    WORD_DATA_DEFINE_KEYWORD = auto()
    DOUBLE_WORD_DATA_DEFINE_KEYWORD = auto()
    STRING_DATA_DEFINE_KEYWORD = auto()
    SPACE_DATA_DEFINE_KEYWORD = auto()

    MACRO_PARAMETER = auto()
    EXPRESSION = auto()
    STRING = auto()
    HEX = auto()
    BINARY = auto()
    CHARACTER = auto()
    DECIMAL = auto()

    DOUBLE_REGISTER = auto()

    def __str__(self) -> str:
        return self.name


INSTRUCTION_OPERANDS: tuple[TokenType, ...] = (
    TokenType.LABEL,
    TokenType.EXPRESSION,
    TokenType.STRING,
    TokenType.HEX,
    TokenType.BINARY,
    TokenType.CHARACTER,
    TokenType.DECIMAL,
    TokenType.REGISTER,
    TokenType.DOUBLE_REGISTER,
)

LITERALS: tuple[TokenType, ...] = (
    TokenType.LABEL,
    TokenType.EXPRESSION,
    TokenType.STRING,
    TokenType.HEX,
    TokenType.BINARY,
    TokenType.CHARACTER,
    TokenType.DECIMAL,
    TokenType.DOUBLE_REGISTER,
)

DATA_DEFINITIONS: tuple[TokenType, ...] = (
    TokenType.SPACE_DATA_DEFINE_KEYWORD,
    TokenType.WORD_DATA_DEFINE_KEYWORD,
    TokenType.DOUBLE_WORD_DATA_DEFINE_KEYWORD,
    TokenType.STRING_DATA_DEFINE_KEYWORD,
)


@dataclass
class Token:
    """A lexed token with its kind and source information."""

    token: str
    kind: TokenType
    token_info: TokenInfo
    is_addr: bool = False

    @classmethod
    def address(cls, token: str, kind: TokenType, info: TokenInfo) -> Token:
        """Create a token that stands for an address operand."""
        return cls(token, kind, info, is_addr=True)

    def __str__(self) -> str:
        return repr(self)