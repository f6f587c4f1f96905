"""A one-line text progress bar."""

from __future__ import annotations


class ProgressBar:
    """Tracks progress out of ``total`` and renders it ``width`` cells wide."""

    def __init__(self, total: int, width: int) -> None:
        self.total = total
        self.current = 0
        self.width = width

    def advance(self) -> None:
        self.current += 1

    def advance_by(self, value: int) -> None:
        self.current += value

    def set_current(self, value: int) -> None:
        """Move the bar on by ``value``."""
        self.current += value

    def _filled(self) -> int:
        if self.total == 0:
            return self.width if self.current > 0 else 0
        return max(0, int(self.current / self.total * self.width))

    def display(self) -> str:
        return self.display_extra("", "")

    def display_extra(self, after: str, before: str) -> str:
        """Render the bar with ``before`` ahead of it and ``after`` behind the count."""
        full = self._filled()
        cells = "".join("#" if i < full else " " for i in range(self.width))
        return f" {before}[{cells}] {self.current}/{self.total}{after}\r"

    def __str__(self) -> str:
        return self.display()