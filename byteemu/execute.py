"""Semantics of each instruction on a machine's registers and memory.

Every ``execute_*`` function returns the length in bytes of the instruction it ran.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Protocol

from byteemu.instruction import Instruction
from byteemu.memory import Memory
from byteemu.registers import Registers

_LITERAL_BIT = 0b0000_1000
_REGISTER_MASK = 0b0000_0111


class Machine(Protocol):
    registers: Registers
    memory: Memory


def parse_mnemonic(inst: Sequence[int]) -> Instruction:
    """The instruction named by the high nibble of the first byte."""
    return Instruction.from_opcode(inst[0] >> 4)


def first_register(byte: int) -> int:
    return byte & _REGISTER_MASK


def is_literal(byte: int) -> bool:
    return (byte & _LITERAL_BIT) == _LITERAL_BIT


def _operand(emu: Machine, inst: Sequence[int]) -> int:
    """The second operand: a literal byte or the register it names."""
    return inst[1] if is_literal(inst[0]) else emu.registers[inst[1]]


def _address(emu: Machine, inst: Sequence[int]) -> tuple[int, int]:
    """The 16-bit address operand and the instruction length."""
    if is_literal(inst[0]):
        return (inst[1] << 8) | inst[2], 3
    return emu.registers.pair(inst[1] >> 3, inst[1] & _REGISTER_MASK), 2


def _negate(value: int, less: int = 0) -> int:
    return ((value ^ 0xFF) + 1 - less) & 0xFF


def execute_mov(emu: Machine, inst: Sequence[int]) -> int:
    emu.registers[first_register(inst[0])] = _operand(emu, inst)
    return 2


def execute_pop(emu: Machine, inst: Sequence[int]) -> int:
    emu.memory.decrement_stack()
    emu.registers[first_register(inst[0])] = emu.memory[emu.memory.stack]
    return 1


def execute_push(emu: Machine, inst: Sequence[int]) -> int:
    if is_literal(inst[0]):
        value, length = inst[1], 2
    else:
        value, length = emu.registers[first_register(inst[0])], 1
    emu.memory[emu.memory.stack] = value
    emu.memory.increment_stack()
    return length


def execute_ldr(emu: Machine, inst: Sequence[int]) -> int:
    address, length = _address(emu, inst)
    emu.registers[first_register(inst[0])] = emu.memory[address]
    return length


def execute_str(emu: Machine, inst: Sequence[int]) -> int:
    address, length = _address(emu, inst)
    emu.memory[address] = emu.registers[first_register(inst[0])]
    return length


def execute_jnz(emu: Machine, inst: Sequence[int]) -> int:
    """Jump to h:l when the operand is non-zero.

    The program counter is set so that adding this instruction's length lands on h:l.
    """
    if is_literal(inst[0]):
        value, length = inst[1], 2
    else:
        value, length = emu.registers[first_register(inst[0])], 1
    if value != 0:
        emu.memory.pc = (emu.registers.hl - length) & 0xFFFF
    return length


def execute_add(emu: Machine, inst: Sequence[int]) -> int:
    reg = first_register(inst[0])
    value = _operand(emu, inst)
    before = emu.registers[reg]
    emu.registers[reg] = (before + value) & 0xFF
    emu.registers.update_carry_borrow_overflow(before, value, 0, True)
    return 2


def execute_adc(emu: Machine, inst: Sequence[int]) -> int:
    reg = first_register(inst[0])
    value = _operand(emu, inst)
    carry = int(emu.registers.carry)
    before = emu.registers[reg]
    emu.registers[reg] = (before + ((value + carry) & 0xFF)) & 0xFF
    emu.registers.update_carry_borrow_overflow(before, value, carry, True)
    return 2


def execute_sub(emu: Machine, inst: Sequence[int]) -> int:
    reg = first_register(inst[0])
    value = _operand(emu, inst)
    before = emu.registers[reg]
    emu.registers[reg] = (before + _negate(value)) & 0xFF
    emu.registers.update_carry_borrow_overflow(before, value, 0, False)
    return 2


def execute_sbb(emu: Machine, inst: Sequence[int]) -> int:
    reg = first_register(inst[0])
    value = _operand(emu, inst)
    borrow = int(emu.registers.borrow)
    before = emu.registers[reg]
    emu.registers[reg] = (before + _negate(value, borrow)) & 0xFF
    emu.registers.update_carry_borrow_overflow(before, value, borrow, False)
    return 2


def execute_lsl(emu: Machine, inst: Sequence[int]) -> int:
    """Shift left; a shift of eight or more bits is an error."""
    reg = first_register(inst[0])
    value = _operand(emu, inst)
    if value >= 8:
        raise OverflowError(f"attempt to shift left by {value}")
    emu.registers[reg] = (emu.registers[reg] << value) & 0xFF
    return 2


def execute_and(emu: Machine, inst: Sequence[int]) -> int:
    reg = first_register(inst[0])
    emu.registers[reg] = emu.registers[reg] & _operand(emu, inst)
    return 2


def execute_orr(emu: Machine, inst: Sequence[int]) -> int:
    reg = first_register(inst[0])
    emu.registers[reg] = emu.registers[reg] | _operand(emu, inst)
    return 2


def execute_nor(emu: Machine, inst: Sequence[int]) -> int:
    reg = first_register(inst[0])
    emu.registers[reg] = ~(emu.registers[reg] | _operand(emu, inst)) & 0xFF
    return 2


def execute_cmp(emu: Machine, inst: Sequence[int]) -> int:
    """Set zero and less from the register minus the operand; the register is kept."""
    other = _operand(emu, inst)
    value = emu.registers[first_register(inst[0])]
    emu.registers.update_zero_less((value + _negate(other)) & 0xFF)
    return 2


def execute_lda(emu: Machine, inst: Sequence[int]) -> int:
    """Load an address into h:l."""
    address, length = _address(emu, inst)
    emu.registers.h = address >> 8
    emu.registers.l = address & 0xFF
    return length