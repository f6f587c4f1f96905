"""The machine: memory, registers and the fetch-execute loop."""

from __future__ import annotations

import time
from collections.abc import Callable, Sequence
from dataclasses import dataclass, field
from pathlib import Path

from byteemu import execute
from byteemu.disassembler import disassemble_instruction
from byteemu.instruction import Instruction
from byteemu.memory import Memory
from byteemu.registers import Registers

_EXECUTORS: dict[Instruction, Callable[[execute.Machine, Sequence[int]], int]] = {
    Instruction.MOV: execute.execute_mov,
    Instruction.LDR: execute.execute_ldr,
    Instruction.STR: execute.execute_str,
    Instruction.JNZ: execute.execute_jnz,
    Instruction.ADD: execute.execute_add,
    Instruction.ADC: execute.execute_adc,
    Instruction.SUB: execute.execute_sub,
    Instruction.SBB: execute.execute_sbb,
    Instruction.LSL: execute.execute_lsl,
    Instruction.AND: execute.execute_and,
    Instruction.ORR: execute.execute_orr,
    Instruction.NOR: execute.execute_nor,
    Instruction.CMP: execute.execute_cmp,
    Instruction.LDA: execute.execute_lda,
    Instruction.POP: execute.execute_pop,
    Instruction.PUSH: execute.execute_push,
}


@dataclass
class Emulator:
    """Runs programs; ``speed`` is a pause in microseconds after each instruction."""

    speed: int = 0
    memory: Memory = field(default_factory=Memory)
    registers: Registers = field(default_factory=Registers)

    def execute_instruction(self, inst: Sequence[int]) -> int:
        """Run one encoded instruction and return its length in bytes."""
        instruction = execute.parse_mnemonic(inst)
        return _EXECUTORS[instruction](self, inst)

    def format_state(self, inst: Sequence[int]) -> str:
        """One trace line: program counter, instruction, registers and stack pointer."""
        text = disassemble_instruction(inst)
        return f"{self.memory.pc:4} {text:17} {self.registers} {self.memory.stack}"

    def print_regs(self, inst: Sequence[int]) -> None:
        print(self.format_state(inst))

    def cycle(self, print_reg: bool = False) -> None:
        """Fetch, optionally trace, and execute the instruction at the program counter."""
        inst = self.memory.load_instruction()
        if print_reg:
            self.print_regs(inst)
        length = self.execute_instruction(inst)
        self.memory.pc = self.memory.pc + length
        if self.speed:
            time.sleep(self.speed / 1_000_000)

    def start(self, print_reg: bool = False) -> None:
        """Run until the halt flag is set."""
        while not self.memory.is_halted():
            self.cycle(print_reg)
        if print_reg:
            print(f"XX {'HAL':17} {self.registers}")

    def load_binary_bytes(self, data: bytes) -> None:
        """Copy a program into memory starting at address 0."""
        if len(data) > Memory.SIZE:
            raise ValueError(f"binary of {len(data)} bytes does not fit in memory")
        for address, byte in enumerate(data):
            self.memory[address] = byte

    def load_binary(self, filename: str | Path) -> None:
        """Load a program from a file; raises OSError if it cannot be read."""
        self.load_binary_bytes(Path(filename).read_bytes())

    def clean_memory(self) -> None:
        self.memory = Memory()

    def clean_registers(self) -> None:
        self.registers = Registers()

    def clean(self) -> None:
        """Reset memory and registers to their power-on state."""
        self.clean_memory()
        self.clean_registers()