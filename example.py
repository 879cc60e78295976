#!/usr/bin/env python3
"""
Example usage of the boardlife package.
"""

import os
import tempfile

from boardlife import Simulation, SimulationConfig
from boardlife.core.board import format_board


def main():
    """Run a glider across a small board file and show each generation."""
    with tempfile.TemporaryDirectory() as workdir:
        path = os.path.join(workdir, "board")
        with open(path, "w") as f:
            f.write("-#------\n--#-----\n###-----\n" + "--------\n" * 5)

        config = SimulationConfig(size=8, generations=0, board_path=path, delay=0)
        with Simulation(config) as simulation:
            simulation.load()
            print("Initial state:")
            print(format_board(simulation.store.current))

            for _ in range(8):
                simulation.engine.step()
                simulation.persist()
                print(f"Generation {simulation.generation}:")
                with open(path) as f:
                    print(f.read())


if __name__ == "__main__":
    main()
