"""flipflop - RS, D, JK and T flip-flop state-transition simulator."""
from __future__ import annotations

from flipflop.config import SimulatorConfig
from flipflop.render import render_table
from flipflop.simulator import Simulator
from flipflop.table import TransitionTable
from flipflop.transitions import next_bit, next_state, validate_bits
from flipflop.types import INVALID, FlipFlopKind, InvalidInputError, Row

__all__ = [
    "Simulator",
    "SimulatorConfig",
    "TransitionTable",
    "FlipFlopKind",
    "Row",
    "INVALID",
    "InvalidInputError",
    "next_bit",
    "next_state",
    "validate_bits",
    "render_table",
]
