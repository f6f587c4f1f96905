"""Listing of a whole binary as addresses, assembly text and raw bits."""

from __future__ import annotations

import sys
from collections.abc import Iterator, Sequence
from pathlib import Path
from typing import TextIO

from byteemu.disassembler import disassemble_instruction_length


def listing_lines(data: bytes) -> Iterator[str]:
    """Yield one listing line per instruction found in ``data``."""
    index = 0
    while index < len(data):
        window = (bytes(data[index:index + 3]) + b"\0\0\0")[:3]
        text, length = disassemble_instruction_length(window)
        bits = "".join(f"{byte:08b} " for byte in window[:length])
        yield f"0x{index:<4x} {index:>4} {text:<20} {bits}"
        index += length


def disassemble_bin(data: bytes, out: TextIO | None = None) -> None:
    """Write the listing of ``data`` followed by an ``End`` line."""
    out = out if out is not None else sys.stdout
    for line in listing_lines(data):
        print(line, file=out)
    print("End", file=out)


def disassemble_file(filename: str | Path, out: TextIO | None = None) -> None:
    """Read a binary file and write its listing; raises OSError if it cannot be read."""
    disassemble_bin(Path(filename).read_bytes(), out)


def main(argv: Sequence[str] | None = None) -> int:
    """Disassemble ``bin/<name>`` where name is the first argument."""
    args = list(sys.argv[1:] if argv is None else argv)
    if not args:
        print("please supply input file", file=sys.stderr)
        return 1
    try:
        disassemble_file(f"bin/{args[0]}")
    except OSError as err:
        print(f"unable to disassemble file: {err}")
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())