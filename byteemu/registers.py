"""The eight 8-bit registers and the flag bits kept in register ``f``."""

from __future__ import annotations

from dataclasses import dataclass

_NAMES = ("a", "b", "c", "d", "l", "h", "z", "f")

_OVERFLOW_BIT = 3
_BORROW_BIT = 4
_CARRY_BIT = 5
_ZERO_BIT = 6
_LESS_BIT = 7


@dataclass
class Registers:
    """Register file, indexable by register number: a b c d l h z f."""

    a: int = 0
    b: int = 0
    c: int = 0
    d: int = 0
    l: int = 0  # noqa: E741
    h: int = 0
    z: int = 0
    f: int = 0

    @staticmethod
    def _name(index: int) -> str:
        if not 0 <= index < len(_NAMES):
            raise IndexError(f"Invalid register index {index}")
        return _NAMES[index]

    def __getitem__(self, index: int) -> int:
        return getattr(self, self._name(index))

    def __setitem__(self, index: int, value: int) -> None:
        if not 0 <= value <= 0xFF:
            raise ValueError(f"register value out of range: {value}")
        setattr(self, self._name(index), value)

    def pair(self, first: int, second: int) -> int:
        """The 16-bit value with register ``first`` high and ``second`` low."""
        return (self[first] << 8) | self[second]

    @property
    def hl(self) -> int:
        """The 16-bit value of the h:l pair."""
        return (self.h << 8) | self.l

    def update_zero_less(self, value: int) -> None:
        """Set zero and less from a result byte read as signed."""
        self.zero = value == 0
        self.less = value >= 0x80

    def update_carry_borrow_overflow(
        self, value1: int, value2: int, carry: int, is_add: bool
    ) -> None:
        """Set carry/borrow and overflow for ``value1 +/- (value2, carry)``."""
        value1_sign = value1 >> 7
        value2_sign = value2 >> 7
        if is_add:
            total = value1 + value2 + carry
            self.carry = total > 0xFF
            total_sign = (total >> 7) & 0xFF
            self.overflow = value1_sign == value2_sign and value1_sign != total_sign
        else:
            self.borrow = value1 < ((value2 + carry) & 0xFF)
            neg = ((value2 ^ 0xFF) + 1 - carry) & 0xFF
            total = (value1 + neg) & 0xFF
            total_sign = total >> 7
            self.overflow = value1_sign != value2_sign and value1_sign != total_sign

    def set_flag(self, bit: int, value: bool) -> None:
        """Set or clear one bit of register ``f``."""
        mask = 1 << bit
        self.f = (self.f | mask) if value else (self.f & ~mask & 0xFF)

    def _flag(self, bit: int) -> bool:
        return bool(self.f & (1 << bit))

    @property
    def overflow(self) -> bool:
        return self._flag(_OVERFLOW_BIT)

    @overflow.setter
    def overflow(self, value: bool) -> None:
        self.set_flag(_OVERFLOW_BIT, value)

    @property
    def carry(self) -> bool:
        return self._flag(_CARRY_BIT)

    @carry.setter
    def carry(self, value: bool) -> None:
        self.set_flag(_CARRY_BIT, value)

    @property
    def borrow(self) -> bool:
        return self._flag(_BORROW_BIT)

    @borrow.setter
    def borrow(self, value: bool) -> None:
        self.set_flag(_BORROW_BIT, value)

    @property
    def zero(self) -> bool:
        return self._flag(_ZERO_BIT)

    @zero.setter
    def zero(self, value: bool) -> None:
        self.set_flag(_ZERO_BIT, value)

    @property
    def less(self) -> bool:
        return self._flag(_LESS_BIT)

    @less.setter
    def less(self, value: bool) -> None:
        self.set_flag(_LESS_BIT, value)

    def __str__(self) -> str:
        return (
            f"a: {self.a:<4}  b: {self.b:<4}  c: {self.c:<4}  d: {self.d:<4}  "
            f"h: {self.h:<4}  l: {self.l:<4}  z: {self.z:<4}  f: {self.f:<4}  "
            f"le: {int(self.less)}  ze: {int(self.zero)}  c: {int(self.carry)}  "
            f"b: {int(self.borrow)}  ov: {int(self.overflow)}  "
            f"ab: {self.pair(0, 1):<6}  cd: {self.pair(2, 3):<6} hl: {self.pair(5, 4):<6}"
        )