"""Next-state rules for RS, D, JK and T flip-flops.

Each rule maps the current bit ``q`` and that bit's input group to the next
bit. A multi-bit register applies the rule independently per bit, pairing
state bit ``i`` with input characters ``[i * k, (i + 1) * k)`` where ``k`` is
the kind's inputs per bit.

A state bit may hold the invalid marker after an RS ``11`` input. Rules that
read ``q`` (hold, toggle, XOR) keep the marker; rules that force a value
(set, reset, D) clear it.
"""
from __future__ import annotations

from typing import Callable

from flipflop.types import INVALID, Bits, FlipFlopKind, InvalidInputError

_Rule = Callable[[str, str, str], str]

_BINARY = frozenset("01")


def _hold_reset_set(q: str, a: str, b: str, on_both: str) -> str:
    if a == "0" and b == "0":
        return q
    if a == "0" and b == "1":
        return "0"
    if a == "1" and b == "0":
        return "1"
    return on_both


def _toggle(q: str, invalid: str) -> str:
    if q == invalid:
        return invalid
    return "1" if q == "0" else "0"


def _rs(q: str, group: str, invalid: str) -> str:
    return _hold_reset_set(q, group[0], group[1], invalid)


def _d(q: str, group: str, invalid: str) -> str:
    return group


def _jk(q: str, group: str, invalid: str) -> str:
    return _hold_reset_set(q, group[0], group[1], _toggle(q, invalid))


def _t(q: str, group: str, invalid: str) -> str:
    if group == "0":
        return q
    return _toggle(q, invalid)


_RULES: dict[FlipFlopKind, _Rule] = {
    FlipFlopKind.RS: _rs,
    FlipFlopKind.D: _d,
    FlipFlopKind.JK: _jk,
    FlipFlopKind.T: _t,
}


def input_width(kind: FlipFlopKind, width: int) -> int:
    """Number of input characters a row needs for a ``width``-bit register."""
    return kind.inputs_per_bit * width


def validate_bits(bits: str, length: int) -> None:
    """Raise ``InvalidInputError`` unless ``bits`` is ``length`` chars of 0/1."""
    if len(bits) != length:
        raise InvalidInputError(
            bits, length,
            f"Expected exactly {length} bits, got {len(bits)}: {bits!r}",
        )
    if not set(bits) <= _BINARY:
        raise InvalidInputError(
            bits, length,
            f"Bits must be 0 or 1, got {bits!r}",
        )


def split_inputs(kind: FlipFlopKind, inputs: Bits) -> list[str]:
    """Split an input string into one group per state bit, MSB first."""
    k = kind.inputs_per_bit
    return [inputs[i:i + k] for i in range(0, len(inputs), k)]


def next_bit(
    kind: FlipFlopKind, q: str, group: str, invalid: str = INVALID,
) -> str:
    """Apply ``kind``'s rule to a single bit.

    Raises ``InvalidInputError`` if ``group`` is not ``kind.inputs_per_bit``
    binary characters, and ``ValueError`` if ``q`` is not a state symbol.
    """
    kind = FlipFlopKind(kind)
    if q not in _BINARY | {invalid}:
        raise ValueError(f"Bit {q!r} is not a state symbol")
    validate_bits(group, kind.inputs_per_bit)
    return _RULES[kind](q, group, invalid)


def next_state(
    kind: FlipFlopKind,
    present: Bits,
    inputs: Bits,
    width: int,
    invalid: str = INVALID,
) -> Bits:
    """Return the register state after one clock edge.

    Raises ``InvalidInputError`` if ``inputs`` is not exactly
    ``input_width(kind, width)`` binary characters, and ``ValueError`` if
    ``present`` does not hold ``width`` state symbols.
    """
    kind = FlipFlopKind(kind)
    if len(present) != width or not set(present) <= _BINARY | {invalid}:
        raise ValueError(
            f"Present state {present!r} is not a {width}-bit state"
        )
    validate_bits(inputs, input_width(kind, width))
    rule = _RULES[kind]
    groups = split_inputs(kind, inputs)
    return "".join(
        rule(q, group, invalid) for q, group in zip(present, groups)
    )
