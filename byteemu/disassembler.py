"""Turns encoded machine instructions back into assembly text."""

from __future__ import annotations

from collections.abc import Callable, Sequence

from byteemu.instruction import Instruction

_REGISTER_NAMES = ("a", "b", "c", "d", "l", "h", "z", "f")
_LITERAL_BIT = 0b0000_1000
_REGISTER_MASK = 0b0000_0111


class _InvalidOperand(Exception):
    """An operand byte names no register."""


def _register(index: int) -> str:
    if not 0 <= index < len(_REGISTER_NAMES):
        raise _InvalidOperand(index)
    return _REGISTER_NAMES[index]


def _is_literal(byte: int) -> bool:
    return bool(byte & _LITERAL_BIT)


def _register_pair(byte: int) -> str:
    return _register(byte >> 3) + _register(byte & _REGISTER_MASK)


def _word(high: int, low: int) -> int:
    return (high << 8) | low


def _reg_both(b0: int, b1: int, b2: int) -> tuple[str, int]:
    reg = _register(b0 & _REGISTER_MASK)
    other = str(b1) if _is_literal(b0) else _register(b1)
    return f"{reg}, {other}", 2


def _reg(b0: int, b1: int, b2: int) -> tuple[str, int]:
    return _register(b0 & _REGISTER_MASK), 1


def _reg_addr(b0: int, b1: int, b2: int) -> tuple[str, int]:
    reg = _register(b0 & _REGISTER_MASK)
    if _is_literal(b0):
        return f"{reg}, [{_word(b1, b2)}]", 3
    return f"{reg}, [{_register_pair(b1)}]", 2


def _addr(b0: int, b1: int, b2: int) -> tuple[str, int]:
    if _is_literal(b0):
        return f"[{_word(b1, b2)}]", 3
    return f"[{_register_pair(b1)}]", 2


def _both(b0: int, b1: int, b2: int) -> tuple[str, int]:
    if _is_literal(b0):
        return str(b1), 2
    return _register(b0 & _REGISTER_MASK), 1


_OPERAND_FORMS: dict[Instruction, Callable[[int, int, int], tuple[str, int]]] = {
    **dict.fromkeys(
        (
            Instruction.MOV,
            Instruction.ADD,
            Instruction.ADC,
            Instruction.AND,
            Instruction.SUB,
            Instruction.SBB,
            Instruction.ORR,
            Instruction.NOR,
            Instruction.CMP,
            Instruction.LSL,
        ),
        _reg_both,
    ),
    Instruction.POP: _reg,
    Instruction.PUSH: _both,
    Instruction.JNZ: _both,
    Instruction.LDR: _reg_addr,
    Instruction.STR: _reg_addr,
    Instruction.LDA: _addr,
}


def disassemble_instruction_length(inst: Sequence[int]) -> tuple[str, int]:
    """Disassemble a three-byte window, returning the text and the instruction length."""
    b0, b1, b2 = inst
    instruction = Instruction.from_opcode(b0 >> 4)
    try:
        operands, length = _OPERAND_FORMS[instruction](b0, b1, b2)
    except _InvalidOperand:
        operands, length = "Invalid", 1
    return f"{instruction.mnemonic()} {operands}", length


def disassemble_instruction(inst: Sequence[int]) -> str:
    """Disassemble a three-byte window into assembly text."""
    return disassemble_instruction_length(inst)[0]