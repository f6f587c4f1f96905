"""Command line entry point: load ``bin/<file>`` and run it."""

from __future__ import annotations

import re
import sys
from collections.abc import Sequence

from byteemu.emulator import Emulator

_SPEED = re.compile(r"\+?[0-9]+")


def main(argv: Sequence[str] | None = None) -> int:
    """Run a binary. Arguments: file [speed-in-microseconds] [-p] [-g]."""
    args = list(sys.argv[1:] if argv is None else argv)
    if not args:
        print("Please specifiy an input file")
        return 1

    speed_text = args[1] if len(args) > 1 else "1"
    if not _SPEED.fullmatch(speed_text):
        print("Unable to parse speed")
        return 1
    speed = int(speed_text)

    print("Creating Emulator")
    print_regs = "-p" in args
    emu = Emulator(speed=speed)

    filename = f"bin/{args[0]}"
    try:
        emu.load_binary(filename)
    except OSError:
        print(f"Unable to open file {filename}")
        print(f"Unable to load file: {args[0]}")
        return 1

    if "-g" in args:
        print("No display is available, running without a window", file=sys.stderr)
    emu.start(print_regs)

    print("Finished")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())