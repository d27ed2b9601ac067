"""Interactive console driver for the flip-flop simulator.

Menu:
  1-4   Pick RS / D / JK / T flip-flop
  5     Exit
Then enter the number of bits (0 goes back to the menu) and one input
string per clock edge. Type ``done`` to finish the table.

Run: flipflop-sim   (or python -m flipflop)
"""
from __future__ import annotations

import argparse
import logging
from typing import Callable, Sequence

from flipflop.config import SimulatorConfig
from flipflop.render import render_table
from flipflop.simulator import Simulator
from flipflop.types import FlipFlopKind, InvalidInputError

logger = logging.getLogger(__name__)

EXIT_CHOICE = 5
BACK_CHOICE = 0


class FlipFlopCLI:
    """Menu loop over injectable ``read`` / ``write`` callables.

    ``read(prompt)`` behaves like ``input()`` and may raise ``EOFError``;
    ``write(text)`` behaves like ``print()``.
    """

    def __init__(
        self,
        config: SimulatorConfig | None = None,
        read: Callable[[str], str] | None = None,
        write: Callable[[str], None] | None = None,
    ) -> None:
        self._config = config or SimulatorConfig()
        self._read = read or input
        self._write = write or print

    def choose_kind(self) -> FlipFlopKind | None:
        """Show the menu. Returns None when the user picks Exit."""
        self._write("\n--- Flip-Flop Simulator ---")
        for kind in FlipFlopKind:
            self._write(f"{kind.value}. {kind.title}")
        self._write(f"{EXIT_CHOICE}. Exit")
        prompt = "Select flip-flop type: "
        while True:
            raw = self._read(prompt).strip()
            try:
                choice = int(raw)
            except ValueError:
                choice = None
            if choice is not None and 1 <= choice <= EXIT_CHOICE:
                return None if choice == EXIT_CHOICE else FlipFlopKind(choice)
            logger.debug(f"Rejected menu choice {raw!r}")
            prompt = f"Invalid input. Please enter a number from 1 to {EXIT_CHOICE}: "

    def choose_width(self) -> int:
        """Ask for the register width. Returns 0 to go back to the menu."""
        lo, hi = self._config.min_width, self._config.max_width
        while True:
            raw = self._read(
                f"Enter the number of variables ({lo} to {hi}) {BACK_CHOICE} to exit: "
            ).strip()
            try:
                n = int(raw)
            except ValueError:
                self._write(f"Invalid input. Please enter a valid integer from {lo} to {hi}: ")
                continue
            if n == BACK_CHOICE or lo <= n <= hi:
                return n
            self._write(f"Invalid input. Please enter a number from {lo} to {hi}: ")

    def read_row(self, sim: Simulator) -> str | None:
        """Read one valid input string for ``sim``. Returns None on ``done``."""
        k = sim.input_width
        prompt = (
            f"Flip-flop input for state {sim.state} ({k} bits) "
            f"(or type {self._config.done_keyword} to exit): "
        )
        while True:
            raw = self._read(prompt).strip()
            if raw.lower() == self._config.done_keyword.lower():
                return None
            try:
                sim.validate(raw)
            except InvalidInputError as e:
                logger.debug(str(e))
                self._write(
                    f"Invalid input. Please enter exactly {k} bits (0 or 1). Try again."
                )
                continue
            return raw

    def run_session(self, sim: Simulator) -> None:
        """Collect rows until ``done``, printing the table after each one."""
        self._write(
            f"Enter flip-flop inputs. Type '{self._config.done_keyword}' to finish input."
        )
        while True:
            inputs = self.read_row(sim)
            if inputs is None:
                break
            sim.step(inputs)
            self._write("\nCurrent State Table:")
            self._write(render_table(sim.table, self._config))
            self._write("")
        self._write(render_table(sim.table, self._config))

    def run(self) -> int:
        """Main menu loop. Returns the process exit code."""
        try:
            while True:
                kind = self.choose_kind()
                if kind is None:
                    break
                width = self.choose_width()
                if width == BACK_CHOICE:
                    self._write("Going back to menu.")
                    continue
                self.run_session(Simulator(kind, width, self._config))
        except (EOFError, KeyboardInterrupt):
            logger.info("Input closed, leaving simulator")
        self._write("Exiting program. Goodbye!")
        return 0


def _positive_int(value: str) -> int:
    n = int(value)
    if n < 1:
        raise argparse.ArgumentTypeError(f"must be a positive integer, got {value}")
    return n


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    defaults = SimulatorConfig()
    p = argparse.ArgumentParser(
        description="Flip-flop simulator - build RS/D/JK/T state-transition tables")
    p.add_argument("--log-level", default="WARNING",
                   choices=["DEBUG", "INFO", "WARNING", "ERROR"],
                   help="Logging level (default: WARNING)")
    p.add_argument("--state-width", type=_positive_int, default=defaults.state_col_width,
                   help=f"State column width (default: {defaults.state_col_width})")
    p.add_argument("--input-width", type=_positive_int, default=defaults.input_col_width,
                   help=f"Inputs column width (default: {defaults.input_col_width})")
    return p.parse_args(argv)


def main(argv: Sequence[str] | None = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(
        level=args.log_level,
        format="%(levelname)s %(name)s: %(message)s",
    )
    config = SimulatorConfig(
        state_col_width=args.state_width,
        input_col_width=args.input_width,
    )
    return FlipFlopCLI(config).run()
