from dataclasses import dataclass, field

import pytest

from byteemu import execute
from byteemu.instruction import Instruction
from byteemu.memory import Memory
from byteemu.registers import Registers

LIT = 0b1000
A, B, C, D, L, H = 0, 1, 2, 3, 4, 5


@dataclass
class Machine:
    registers: Registers = field(default_factory=Registers)
    memory: Memory = field(default_factory=Memory)


def op(instruction, reg=0, literal=False, b1=0, b2=0):
    return ((instruction << 4) | (LIT if literal else 0) | reg, b1, b2)


def test_parse_mnemonic_and_fields():
    inst = op(Instruction.ADD, reg=C, literal=True)
    assert execute.parse_mnemonic(inst) is Instruction.ADD
    assert execute.first_register(inst[0]) == C
    assert execute.is_literal(inst[0])
    assert not execute.is_literal(op(Instruction.ADD)[0])


def test_mov_literal_and_register():
    emu = Machine()
    assert execute.execute_mov(emu, op(Instruction.MOV, C, True, 42)) == 2
    assert emu.registers.c == 42
    execute.execute_mov(emu, op(Instruction.MOV, A, False, C))
    assert emu.registers.a == 42


def test_mov_from_invalid_register_raises():
    emu = Machine()
    with pytest.raises(IndexError):
        execute.execute_mov(emu, op(Instruction.MOV, A, False, 9))


def test_push_pop_round_trip():
    emu = Machine()
    start = emu.memory.stack
    assert execute.execute_push(emu, op(Instruction.PUSH, 0, True, 7)) == 2
    assert emu.memory.stack == start + 1
    assert emu.memory[start] == 7
    assert execute.execute_pop(emu, op(Instruction.POP, B)) == 1
    assert emu.registers.b == 7
    assert emu.memory.stack == start


def test_push_register_is_one_byte():
    emu = Machine()
    emu.registers.d = 99
    assert execute.execute_push(emu, op(Instruction.PUSH, D)) == 1
    execute.execute_pop(emu, op(Instruction.POP, A))
    assert emu.registers.a == 99


def test_str_ldr_literal_address():
    emu = Machine()
    emu.registers.a = 31
    assert execute.execute_str(emu, op(Instruction.STR, A, True, 0x12, 0x34)) == 3
    assert emu.memory[0x1234] == 31
    assert execute.execute_ldr(emu, op(Instruction.LDR, B, True, 0x12, 0x34)) == 3
    assert emu.registers.b == 31


def test_str_ldr_register_pair_address():
    emu = Machine()
    emu.registers.c = 0x12
    emu.registers.d = 0x34
    emu.registers.a = 5
    pair = (C << 3) | D
    assert execute.execute_str(emu, op(Instruction.STR, A, False, pair)) == 2
    assert emu.memory[emu.registers.pair(C, D)] == 5
    assert execute.execute_ldr(emu, op(Instruction.LDR, B, False, pair)) == 2
    assert emu.registers.b == 5


def test_jnz_taken_lands_on_hl():
    emu = Machine()
    emu.registers.h = 0x01
    emu.registers.l = 0x00
    length = execute.execute_jnz(emu, op(Instruction.JNZ, 0, True, 1))
    assert length == 2
    assert emu.memory.pc + length == emu.registers.hl


def test_jnz_to_zero_wraps():
    emu = Machine()
    emu.registers.a = 1
    length = execute.execute_jnz(emu, op(Instruction.JNZ, A))
    assert length == 1
    assert (emu.memory.pc + length) & 0xFFFF == 0


def test_jnz_not_taken():
    emu = Machine()
    emu.memory.pc = 10
    emu.registers.h = 1
    execute.execute_jnz(emu, op(Instruction.JNZ, A))
    assert emu.memory.pc == 10


def test_add_wraps_and_sets_carry():
    emu = Machine()
    emu.registers.a = 200
    assert execute.execute_add(emu, op(Instruction.ADD, A, True, 100)) == 2
    assert emu.registers.a == 44
    assert emu.registers.carry


def test_add_then_sub_restores():
    emu = Machine()
    emu.registers.a = 17
    emu.registers.b = 250
    execute.execute_add(emu, op(Instruction.ADD, A, False, B))
    execute.execute_sub(emu, op(Instruction.SUB, A, False, B))
    assert emu.registers.a == 17


def test_sub_borrow():
    emu = Machine()
    emu.registers.a = 1
    execute.execute_sub(emu, op(Instruction.SUB, A, True, 2))
    assert emu.registers.borrow
    emu.registers.a = 5
    execute.execute_sub(emu, op(Instruction.SUB, A, True, 5))
    assert emu.registers.a == 0
    assert not emu.registers.borrow


def test_adc_adds_carry():
    with_carry, plain = Machine(), Machine()
    with_carry.registers.a = plain.registers.a = 40
    with_carry.registers.carry = True
    execute.execute_adc(with_carry, op(Instruction.ADC, A, True, 9))
    execute.execute_add(plain, op(Instruction.ADD, A, True, 10))
    assert with_carry.registers.a == plain.registers.a


def test_sbb_subtracts_borrow():
    with_borrow, plain = Machine(), Machine()
    with_borrow.registers.a = plain.registers.a = 10
    with_borrow.registers.borrow = True
    execute.execute_sbb(with_borrow, op(Instruction.SBB, A, True, 3))
    execute.execute_sub(plain, op(Instruction.SUB, A, True, 4))
    assert with_borrow.registers.a == plain.registers.a


def test_lsl_by_one_doubles():
    shifted, added = Machine(), Machine()
    shifted.registers.a = added.registers.a = 0x41
    execute.execute_lsl(shifted, op(Instruction.LSL, A, True, 1))
    execute.execute_add(added, op(Instruction.ADD, A, False, A))
    assert shifted.registers.a == added.registers.a


def test_lsl_too_far_raises():
    emu = Machine()
    with pytest.raises(OverflowError):
        execute.execute_lsl(emu, op(Instruction.LSL, A, True, 8))


def test_logic_ops():
    emu = Machine()
    emu.registers.a = 0x5A
    execute.execute_orr(emu, op(Instruction.ORR, A, True, 0))
    assert emu.registers.a == 0x5A
    execute.execute_nor(emu, op(Instruction.NOR, A, True, 0))
    execute.execute_nor(emu, op(Instruction.NOR, A, True, 0))
    assert emu.registers.a == 0x5A
    execute.execute_and(emu, op(Instruction.AND, A, True, 0))
    assert emu.registers.a == 0


def test_cmp_sets_flags_and_keeps_register():
    emu = Machine()
    emu.registers.a = 9
    assert execute.execute_cmp(emu, op(Instruction.CMP, A, True, 9)) == 2
    assert emu.registers.zero
    assert not emu.registers.less
    assert emu.registers.a == 9
    execute.execute_cmp(emu, op(Instruction.CMP, A, True, 10))
    assert emu.registers.less
    assert not emu.registers.zero


def test_lda_literal_and_register():
    emu = Machine()
    assert execute.execute_lda(emu, op(Instruction.LDA, 0, True, 0x12, 0x34)) == 3
    assert (emu.registers.h, emu.registers.l) == (0x12, 0x34)
    emu.registers.a = 3
    emu.registers.b = 4
    assert execute.execute_lda(emu, op(Instruction.LDA, 0, False, (A << 3) | B)) == 2
    assert (emu.registers.h, emu.registers.l) == (3, 4)