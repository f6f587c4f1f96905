"""Controller buttons and the byte they are packed into."""

from __future__ import annotations

from dataclasses import astuple, dataclass


@dataclass(frozen=True)
class ControllerButtons:
    """Which buttons are held down."""

    a: bool = False
    b: bool = False
    select: bool = False
    start: bool = False
    up: bool = False
    down: bool = False
    left: bool = False
    right: bool = False


def buttons_to_byte(buttons: ControllerButtons) -> int:
    """Pack the buttons into one byte, ``a`` in bit 0 through ``right`` in bit 7."""
    return sum(1 << bit for bit, pressed in enumerate(astuple(buttons)) if pressed)


@dataclass(frozen=True)
class Controller:
    """The controller state as the machine sees it."""

    byte: int = 0

    @classmethod
    def from_buttons(cls, buttons: ControllerButtons) -> Controller:
        return cls(buttons_to_byte(buttons))