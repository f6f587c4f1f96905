"""Instruction set of the 8-bit machine: opcodes, mnemonics and operand counts."""

from __future__ import annotations

from enum import IntEnum


class InvalidInstructionError(ValueError):
    """Raised when a mnemonic or opcode does not name an instruction."""


class Instruction(IntEnum):
    """The sixteen instructions, valued by their 4-bit opcode."""

    MOV = 0x0
    LDR = 0x1
    STR = 0x2
    PUSH = 0x3
    POP = 0x4
    LDA = 0x5
    JNZ = 0x6
    LSL = 0x7
    SUB = 0x8
    ADD = 0x9
    ADC = 0xA
    AND = 0xB
    ORR = 0xC
    NOR = 0xD
    CMP = 0xE
    SBB = 0xF

    @classmethod
    def from_mnemonic(cls, name: str) -> Instruction:
        """Look up an instruction by its mnemonic, ignoring case."""
        try:
            return cls[name.upper()]
        except KeyError:
            raise InvalidInstructionError(f"Invalid instruction: {name}") from None

    @classmethod
    def from_opcode(cls, opcode: int) -> Instruction:
        """Look up an instruction by its 4-bit opcode."""
        try:
            return cls(opcode)
        except ValueError:
            raise InvalidInstructionError(f"Invalid Instruction: {opcode}") from None

    def mnemonic(self) -> str:
        """The lower-case assembly mnemonic."""
        return MNEMONIC_LIST[self.value]

    def __str__(self) -> str:
        return self.name


MNEMONIC_LIST: tuple[str, ...] = (
    "mov", "ldr", "str", "push", "pop", "lda", "jnz", "lsl",
    "sub", "add", "adc", "and", "orr", "nor", "cmp", "sbb",
)

_SINGLE_OPERAND = frozenset(
    {Instruction.PUSH, Instruction.POP, Instruction.LDA, Instruction.JNZ}
)


def operand_count(mnemonic: str) -> int:
    """Number of operands the instruction named by ``mnemonic`` takes."""
    instruction = Instruction.from_mnemonic(mnemonic)
    return 1 if instruction in _SINGLE_OPERAND else 2