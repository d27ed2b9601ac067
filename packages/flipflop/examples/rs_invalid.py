"""RS flip-flop forbidden input.

Demonstrates:
- The invalid marker produced by R=S=1
- Hold keeps the marker; set and reset clear it

Run: python -m examples.rs_invalid
"""

from flipflop import FlipFlopKind, Simulator, render_table


def main() -> None:
    print("=== RS forbidden state ===\n")

    sim = Simulator(FlipFlopKind.RS, width=1)
    # set, forbidden, hold, reset
    sim.run(["10", "11", "00", "01"])

    print(render_table(sim.table))


if __name__ == "__main__":
    main()
