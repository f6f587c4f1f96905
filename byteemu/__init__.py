"""Emulator, disassembler and assembler front-end support types for a small 8-bit CPU."""

__version__ = "0.1.0"