"""Simulator configuration dataclass."""
from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class SimulatorConfig:
    """Immutable settings shared by the simulator, renderer and CLI.

    Attributes:
        min_width: Smallest accepted number of state bits.
        max_width: Largest accepted number of state bits.
        state_col_width: Character width of the present/next state columns.
        input_col_width: Character width of the flip-flop inputs column.
        invalid_marker: Symbol written for the forbidden RS input.
        done_keyword: Word that ends row entry (case-insensitive).
    """

    min_width: int = 1
    max_width: int = 3
    state_col_width: int = 20
    input_col_width: int = 30
    invalid_marker: str = "X"
    done_keyword: str = "done"

    def __post_init__(self) -> None:
        if not 1 <= self.min_width <= self.max_width:
            raise ValueError(
                f"width bounds must satisfy 1 <= min_width <= max_width, "
                f"got {self.min_width}..{self.max_width}"
            )
        if self.state_col_width < 1 or self.input_col_width < 1:
            raise ValueError("column widths must be positive")
        if len(self.invalid_marker) != 1 or self.invalid_marker in "01":
            raise ValueError(
                f"invalid_marker must be one character other than 0 or 1, "
                f"got {self.invalid_marker!r}"
            )
