"""Tests for the text table renderer."""
import pytest
from flipflop.config import SimulatorConfig
from flipflop.render import input_labels, render_table, state_labels
from flipflop.table import TransitionTable
from flipflop.types import FlipFlopKind, Row

SEP = "+" + "-" * 20 + "+" + "-" * 20 + "+" + "-" * 30 + "+"


def _line(a: str, b: str, c: str) -> str:
    return f"|{a.ljust(20)}|{b.ljust(20)}|{c.ljust(30)}|"


class TestLabels:
    def test_state_labels_msb_first(self):
        assert state_labels(3) == ["A2", "A1", "A0"]

    @pytest.mark.parametrize("kind,expected", [
        (FlipFlopKind.RS, ["R1", "S1", "R0", "S0"]),
        (FlipFlopKind.D, ["D1", "D0"]),
        (FlipFlopKind.JK, ["J1", "K1", "J0", "K0"]),
        (FlipFlopKind.T, ["T1", "T0"]),
    ])
    def test_input_labels_msb_first(self, kind, expected):
        assert input_labels(kind, 2) == expected


class TestRenderTable:
    def test_empty_table_has_headers_only(self):
        table = TransitionTable(FlipFlopKind.T, 1)
        lines = render_table(table).splitlines()
        assert lines == [
            SEP,
            _line(" Present State", " Next State", " Flip-flop Inputs"),
            SEP,
            _line("A0 ", "A0 ", "T0 "),
            SEP,
            SEP,
        ]

    def test_rows_are_centred_bits(self):
        table = TransitionTable(FlipFlopKind.JK, 2)
        table.append(Row(present_state="00", inputs="1011", next_state="11"))
        lines = render_table(table).splitlines()
        assert lines[3] == _line("A1 A0 ", "A1 A0 ", "J1 K1 J0 K0 ")
        assert lines[5] == _line(" 0  0 ", " 1  1 ", " 1  0  1  1 ")
        assert lines[-1] == SEP

    def test_invalid_marker_rendered(self):
        table = TransitionTable(FlipFlopKind.RS, 1)
        table.append(Row("0", "11", "X"))
        assert _line(" 0 ", " X ", " 1  1 ") in render_table(table).splitlines()

    def test_all_lines_same_length(self):
        table = TransitionTable(FlipFlopKind.RS, 3)
        table.append(Row("000", "100110", "1X0"))
        table.append(Row("1X0", "000000", "1X0"))
        lengths = {len(line) for line in render_table(table).splitlines()}
        assert lengths == {1 + 20 + 1 + 20 + 1 + 30 + 1}

    def test_custom_column_widths(self):
        cfg = SimulatorConfig(state_col_width=16, input_col_width=22)
        table = TransitionTable(FlipFlopKind.D, 1)
        lines = render_table(table, cfg).splitlines()
        assert lines[0] == "+" + "-" * 16 + "+" + "-" * 16 + "+" + "-" * 22 + "+"
