"""Tests for the Simulation context."""

from unittest.mock import patch

import pytest
from boardlife.core.errors import BoardFileError
from boardlife.core.simulation import Simulation, SimulationConfig

BLINKER_ROW = "-----\n-----\n-###-\n-----\n-----\n"
BLINKER_COLUMN = "-----\n--#--\n--#--\n--#--\n-----\n"


class TestSimulationConfig:
    """Test cases for SimulationConfig."""

    def test_defaults(self):
        """Test default configuration values."""
        config = SimulationConfig(size=10, generations=5)
        assert config.board_path == "board"
        assert config.delay == 0.75
        assert config.validate() == []

    def test_validate(self):
        """Test invalid values are reported."""
        config = SimulationConfig(size=0, generations=-1, delay=-0.5)
        errors = config.validate()

        assert "Size must be positive" in errors
        assert "Generations must be non-negative" in errors
        assert "Delay must be non-negative" in errors

    def test_invalid_config_rejected(self):
        """Test Simulation refuses an invalid configuration."""
        with pytest.raises(ValueError):
            Simulation(SimulationConfig(size=-1, generations=1))


class TestSimulation:
    """Test cases for Simulation."""

    def test_run_blinker(self, tmp_path):
        """Test running an odd number of generations leaves the blinker rotated."""
        path = tmp_path / "board"
        path.write_text(BLINKER_ROW)

        config = SimulationConfig(size=5, generations=3, board_path=str(path), delay=0)
        with Simulation(config) as simulation:
            assert simulation.run() == 3
            assert simulation.generation == 3
            assert simulation.population == 3

        assert path.read_text() == BLINKER_COLUMN

    def test_persists_every_generation(self, tmp_path):
        """Test the board is written after each generation and once at the end."""
        path = tmp_path / "board"
        path.write_text(BLINKER_ROW)

        sleeps = []
        config = SimulationConfig(size=5, generations=4, board_path=str(path), delay=0.1)
        simulation = Simulation(config, sleep=sleeps.append)

        with patch.object(simulation, "persist", wraps=simulation.persist) as persist:
            simulation.run()

        assert persist.call_count == 5
        assert sleeps == [0.1] * 4
        assert path.read_text() == BLINKER_ROW
        simulation.close()

    def test_zero_generations_rewrites_board(self, tmp_path):
        """Test a run with no generations still writes the final state."""
        path = tmp_path / "board"
        path.write_text("#-\r\n-#\r\n")

        config = SimulationConfig(size=2, generations=0, board_path=str(path), delay=0)
        with Simulation(config) as simulation:
            simulation.run()

        assert path.read_text() == "#-\n-#\n"

    def test_missing_board(self, tmp_path):
        """Test a missing board file aborts before any generation runs."""
        path = tmp_path / "board"
        config = SimulationConfig(size=5, generations=2, board_path=str(path), delay=0)

        with Simulation(config) as simulation:
            with pytest.raises(BoardFileError):
                simulation.run()
            assert simulation.generation == 0

        assert not path.exists()

    def test_close_releases_grids(self, tmp_path):
        """Test leaving the context destroys the store."""
        config = SimulationConfig(size=3, generations=1, board_path=str(tmp_path / "board"))
        with Simulation(config) as simulation:
            store = simulation.store

        assert store.destroyed
