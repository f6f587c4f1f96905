"""The 64 KiB address space with a banked window and memory-mapped registers."""

from __future__ import annotations


class Memory:
    """Main memory plus 256 switchable banks mapped over 0x8000-0xBFFF."""

    MEM_BANK_LOW = 0x8000
    MEM_BANK_HIGH = 0xBFFF
    MEM_BANK_ADDR = 0xFFFA

    STACK_LOW = 0xFC00
    STACK_HIGH = 0xFEFF
    SPH = 0xFFFC
    SPL = 0xFFFD
    PCH = 0xFFFE
    PCL = 0xFFFF

    ADDITIONAL_FLAG = 0xFFF9

    SIZE = 0x10000
    BANK_COUNT = 256
    BANK_SIZE = 16385

    def __init__(self) -> None:
        self.memory = bytearray(self.SIZE)
        self.banks = [bytearray(self.BANK_SIZE) for _ in range(self.BANK_COUNT)]
        self.memory[self.SPH] = 0xFC
        self.memory[self.SPL] = 0x00

    def _locate(self, address: int) -> tuple[bytearray, int]:
        if not 0 <= address < self.SIZE:
            raise IndexError(f"address out of range: {address}")
        if self.MEM_BANK_LOW <= address <= self.MEM_BANK_HIGH:
            bank = self.membank
            if bank != 0:
                return self.banks[bank], address - self.MEM_BANK_LOW
        return self.memory, address

    def __getitem__(self, address: int) -> int:
        store, offset = self._locate(address)
        return store[offset]

    def __setitem__(self, address: int, value: int) -> None:
        store, offset = self._locate(address)
        store[offset] = value

    def graphics_bank(self) -> bytearray:
        """The bank that holds video memory."""
        return self.banks[1]

    @property
    def stack(self) -> int:
        """The stack pointer."""
        return (self[self.SPH] << 8) | self[self.SPL]

    def _set_stack(self, value: int) -> None:
        value &= 0xFFFF
        self[self.SPL] = value & 0xFF
        self[self.SPH] = value >> 8

    def is_halted(self) -> bool:
        return bool(self[self.ADDITIONAL_FLAG] & 1)

    def decrement_stack(self) -> None:
        self._set_stack(self.stack - 1)

    def increment_stack(self) -> None:
        self._set_stack(self.stack + 1)

    @property
    def membank(self) -> int:
        """The number of the bank mapped into the banked window; 0 means none."""
        return self.memory[self.MEM_BANK_ADDR]

    @membank.setter
    def membank(self, value: int) -> None:
        self.memory[self.MEM_BANK_ADDR] = value

    @property
    def pc(self) -> int:
        """The program counter."""
        return (self.memory[self.PCH] << 8) | self.memory[self.PCL]

    @pc.setter
    def pc(self, value: int) -> None:
        value &= 0xFFFF
        self.memory[self.PCH] = value >> 8
        self.memory[self.PCL] = value & 0xFF

    def load_instruction(self) -> tuple[int, int, int]:
        """The three bytes starting at the program counter."""
        address = self.pc
        return self[address], self[address + 1], self[address + 2]