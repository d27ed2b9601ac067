"""TransitionTable - append-only rows for one simulation session."""
from __future__ import annotations

from typing import Iterator

from flipflop.types import FlipFlopKind, Row


class TransitionTable:
    """Ordered rows of a single register's state-transition table.

    The table is bound to one kind and width. It does not check that each
    row's present state matches the previous row's next state; the
    ``Simulator`` keeps that chain when it drives the table.
    """

    def __init__(self, kind: FlipFlopKind, width: int) -> None:
        self._kind = FlipFlopKind(kind)
        self._width = width
        self._rows: list[Row] = []

    @property
    def kind(self) -> FlipFlopKind:
        return self._kind

    @property
    def width(self) -> int:
        return self._width

    @property
    def rows(self) -> tuple[Row, ...]:
        return tuple(self._rows)

    def append(self, row: Row) -> None:
        self._rows.append(row)

    def clear(self) -> None:
        self._rows.clear()

    def __len__(self) -> int:
        return len(self._rows)

    def __iter__(self) -> Iterator[Row]:
        return iter(self._rows)

    def __getitem__(self, index: int) -> Row:
        return self._rows[index]
