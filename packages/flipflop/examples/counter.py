"""2-bit counter built from T flip-flops.

Demonstrates:
- Creating a Simulator for a multi-bit register
- Driving it one clock edge at a time with step()
- Watching each transition through an on_step hook
- Rendering the accumulated table

The low bit toggles on every edge; the high bit toggles only when the
low bit is 1, so the register counts 00 -> 01 -> 10 -> 11 -> 00.

Run: python -m examples.counter
"""

from flipflop import FlipFlopKind, Row, Simulator, render_table


def print_edge(sim: Simulator, row: Row) -> None:
    print(f"  edge {sim.step_number}  |  {row.present_state} -> {row.next_state}")


def main() -> None:
    print("=== 2-bit T counter ===\n")

    sim = Simulator(FlipFlopKind.T, width=2)
    sim.on_step(print_edge)

    for _ in range(4):
        # T1 = Q0, T0 = 1
        low = sim.state[1]
        sim.step(low + "1")

    print()
    print(render_table(sim.table))
    print(f"\nDone. Register is back at {sim.state}.")


if __name__ == "__main__":
    main()
