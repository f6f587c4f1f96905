# byteemu

An emulator and a disassembler for a small 8-bit CPU. The package also holds
the building blocks of an assembler front end for the same instruction set:
tokens, collection of macro definitions, preprocessor errors and the way they
are reported.

## The machine

- There are eight 8-bit registers, `a b c d l h z f`, numbered 0 to 7 in that
  order. `h:l` is the 16-bit pair that `jnz` jumps to and that `lda` loads.
  `f` holds the flags: overflow (bit 3), borrow (bit 4), carry (bit 5),
  zero (bit 6) and less (bit 7).
- The address space is 64 KiB. Addresses `0x8000`–`0xBFFF` form a window onto
  one of 256 banks, chosen by the byte at `0xFFFA`. A value of 0 means no bank
  and leaves main memory in the window. Bank 1 holds video memory.
- The stack pointer is at `0xFFFC`/`0xFFFD` and starts at `0xFC00`. The program
  counter is at `0xFFFE`/`0xFFFF`.
- Setting bit 0 of `0xFFF9` halts the machine.
- The sixteen instructions are `mov ldr str push pop lda jnz lsl sub add adc
  and orr nor cmp sbb`. Each is 1 to 3 bytes long. The opcode is the high
  nibble of the first byte, bit 3 marks a literal operand, and bits 0–2 name
  the first register.

## Installation

```
pip install .
```

## Running a program

```
byteemu program.bin [speed] [-p]
```

The binary is read from `bin/<name>` and loaded at address 0. It then runs
until the halt flag is set. `speed` is a pause in microseconds after each
instruction and defaults to 1. With `-p`, a trace line is printed before every
instruction, giving the program counter, the disassembled instruction, all
registers and flags, and the stack pointer. A final `XX HAL` line follows when
the program stops. The command exits with status 1 when the file cannot be
read or the speed is not a whole number.

## Disassembling a binary

```
byteemu-disassemble program.bin
```

This also reads from `bin/<name>`. For each instruction it prints the address
in hex and in decimal, the decoded text, and the instruction's bytes in binary.
The listing ends with a line reading `End`.

## Use from Python

```python
from byteemu.emulator import Emulator
from byteemu.disassembler import disassemble_instruction

emu = Emulator()
emu.load_binary_bytes(bytes([0x08, 0x2A]))   # mov a, 42
emu.cycle(False)
print(emu.registers.a)                        # 42

print(disassemble_instruction(bytes([0x08, 0x2A, 0x00])))  # "mov a, 42"
```

`Emulator` also offers `execute_instruction`, `start`, `load_binary`,
`format_state` and `clean`. The modules are:

- `byteemu.instruction`: the `Instruction` enum, `operand_count`, and
  `InvalidInstructionError`.
- `byteemu.registers` and `byteemu.memory`: the register file and the banked
  address space.
- `byteemu.execute`: what each instruction does. Each `execute_*` function
  returns the instruction's length. Shifting left by 8 or more raises
  `OverflowError`.
- `byteemu.disassembler` and `byteemu.disassemble_file`:
  `disassemble_instruction`, `disassemble_instruction_length`,
  `listing_lines`, `disassemble_bin` and `disassemble_file`.
- `byteemu.levenshtein`: an edit distance in which case changes and
  neighbouring QWERTY keys cost less. It is used to suggest the nearest macro
  name.
- `byteemu.tokens`: `Token`, `TokenType` and `TokenInfo`.
- `byteemu.macro_definition`: `create_macro_list`, which takes the
  `MacroDefinition`s out of a token stream.
- `byteemu.preprocessor_error` and `byteemu.assembler_error`: preprocessor
  errors and `format_assembler_error`, which renders a report that points at
  the offending token.
- `byteemu.progress_bar`: a one-line text progress bar.
- `byteemu.controller`: packs `ControllerButtons` into the controller byte.
- `byteemu.double_buffer`: `DoubleBuffer`, where one side writes and the other
  reads.

## What it does not do

- There is no assembler. The package cannot turn assembly source into a
  binary: it has no lexer, no `@define` replacement, no macro expansion and no
  code generation. Programs must already be assembled.
- There is no graphical display. If `-g` is given to `byteemu`, it prints a
  notice and runs the program without a window. Nothing draws video memory or
  reads the keyboard into the controller byte.

## Tests

```
pip install .[test]
pytest
```