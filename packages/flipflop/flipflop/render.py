"""Plain-text rendering of a TransitionTable."""
from __future__ import annotations

from flipflop.config import SimulatorConfig
from flipflop.table import TransitionTable
from flipflop.types import FlipFlopKind

_TITLES = (" Present State", " Next State", " Flip-flop Inputs")


def state_labels(width: int) -> list[str]:
    """State variable names, most-significant bit first."""
    return [f"A{i}" for i in range(width - 1, -1, -1)]


def input_labels(kind: FlipFlopKind, width: int) -> list[str]:
    """Input variable names, most-significant bit first (``J1 K1 J0 K0``)."""
    kind = FlipFlopKind(kind)
    return [
        f"{label}{i}"
        for i in range(width - 1, -1, -1)
        for label in kind.labels
    ]


def _labels_cell(labels: list[str]) -> str:
    return "".join(f"{label} " for label in labels)


def _bits_cell(bits: str) -> str:
    return "".join(f" {b} " for b in bits)


def render_table(
    table: TransitionTable, config: SimulatorConfig | None = None,
) -> str:
    """Format ``table`` as a boxed, fixed-width text table.

    Layout: separator, column titles, separator, variable sub-headers,
    separator, one line per row, separator. Cells wider than their column
    are not truncated.
    """
    cfg = config or SimulatorConfig()
    widths = (cfg.state_col_width, cfg.state_col_width, cfg.input_col_width)

    def line(cells: tuple[str, str, str]) -> str:
        return "|" + "|".join(
            f"{cell:<{w}}" for cell, w in zip(cells, widths)
        ) + "|"

    sep = "+" + "+".join("-" * w for w in widths) + "+"
    states = _labels_cell(state_labels(table.width))
    out = [
        sep,
        line(_TITLES),
        sep,
        line((states, states, _labels_cell(input_labels(table.kind, table.width)))),
        sep,
    ]
    for row in table:
        out.append(line((
            _bits_cell(row.present_state),
            _bits_cell(row.next_state),
            _bits_cell(row.inputs),
        )))
    out.append(sep)
    return "\n".join(out)
