"""Simulator - clocked register that records a state-transition table."""
from __future__ import annotations

import logging
from typing import Callable, Iterable

from flipflop.config import SimulatorConfig
from flipflop.table import TransitionTable
from flipflop.transitions import input_width, next_state, validate_bits
from flipflop.types import Bits, FlipFlopKind, Row

logger = logging.getLogger(__name__)

StepHook = Callable[["Simulator", Row], None]


class Simulator:
    """A ``width``-bit register of one flip-flop kind.

    Each ``step()`` is one clock edge: the row's inputs are applied to the
    present state, the resulting ``Row`` is appended to the table and the
    next state becomes the present state. The register starts at all zeros.
    """

    def __init__(
        self,
        kind: FlipFlopKind,
        width: int,
        config: SimulatorConfig | None = None,
    ) -> None:
        self._config = config or SimulatorConfig()
        if not self._config.min_width <= width <= self._config.max_width:
            raise ValueError(
                f"width must be between {self._config.min_width} and "
                f"{self._config.max_width}, got {width}"
            )
        self._kind = FlipFlopKind(kind)
        self._width = width
        self._table = TransitionTable(self._kind, width)
        self._state: Bits = "0" * width
        self._step_number = 0
        self._step_hooks: list[StepHook] = []
        logger.info(f"New {self._kind.title} simulation with {width} bit(s)")

    @property
    def kind(self) -> FlipFlopKind:
        return self._kind

    @property
    def width(self) -> int:
        return self._width

    @property
    def state(self) -> Bits:
        return self._state

    @property
    def table(self) -> TransitionTable:
        return self._table

    @property
    def step_number(self) -> int:
        return self._step_number

    @property
    def input_width(self) -> int:
        return input_width(self._kind, self._width)

    def on_step(self, hook: StepHook) -> None:
        self._step_hooks.append(hook)

    def validate(self, inputs: str) -> None:
        """Raise ``InvalidInputError`` if ``inputs`` does not fit this register."""
        validate_bits(inputs, self.input_width)

    def step(self, inputs: Bits) -> Row:
        self.validate(inputs)
        nxt = next_state(
            self._kind, self._state, inputs, self._width,
            invalid=self._config.invalid_marker,
        )
        row = Row(present_state=self._state, inputs=inputs, next_state=nxt)
        self._table.append(row)
        self._step_number += 1
        self._state = nxt
        logger.debug(
            f"step {self._step_number}: {row.present_state} --{inputs}--> {nxt}"
        )
        for hook in self._step_hooks:
            hook(self, row)
        return row

    def run(self, rows: Iterable[Bits]) -> list[Row]:
        return [self.step(inputs) for inputs in rows]

    def reset(self) -> None:
        self._table.clear()
        self._state = "0" * self._width
        self._step_number = 0
        logger.info(f"{self._kind.title} simulation reset")
