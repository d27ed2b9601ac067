"""Shared types for flip-flop simulation."""
from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum

Bits = str

INVALID = "X"


class FlipFlopKind(IntEnum):
    """Supported flip-flop variants. Values match the menu numbers."""

    RS = 1
    D = 2
    JK = 3
    T = 4

    @property
    def labels(self) -> tuple[str, ...]:
        """Per-bit input names, in the order they appear in an input string."""
        return _LABELS[self]

    @property
    def inputs_per_bit(self) -> int:
        return len(_LABELS[self])

    @property
    def title(self) -> str:
        return f"{self.name} Flip-Flop"


_LABELS: dict[FlipFlopKind, tuple[str, ...]] = {
    FlipFlopKind.RS: ("R", "S"),
    FlipFlopKind.D: ("D",),
    FlipFlopKind.JK: ("J", "K"),
    FlipFlopKind.T: ("T",),
}


@dataclass(frozen=True, slots=True)
class Row:
    """One line of a state-transition table.

    Strings are most-significant bit first. ``inputs`` holds
    ``inputs_per_bit`` characters per state bit.
    """

    present_state: Bits
    inputs: Bits
    next_state: Bits


class InvalidInputError(ValueError):
    """Raised when a bit string has the wrong length or alphabet."""

    def __init__(self, value: str, expected_length: int, message: str) -> None:
        self.value = value
        self.expected_length = expected_length
        super().__init__(message)
