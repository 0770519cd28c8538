"""Smoke tests for the demo script."""

import logging

import pytest

from demo import distance_table, main, path_demo, settings_from_args
from generators import GenerationSettings, generate


class TestSettingsFromArgs:
    """Tests for positional argument parsing."""

    def test_defaults(self) -> None:
        """No arguments gives the default settings."""
        assert settings_from_args([]) == GenerationSettings(6, 8, "sidewinder", 2024)

    def test_all_arguments(self) -> None:
        """Rows, cols, algorithm and seed are read in order."""
        assert settings_from_args(["3", "4", "binary_tree", "7"]) == GenerationSettings(3, 4, "binary_tree", 7)

    def test_bad_number(self) -> None:
        """Non-numeric sizes are rejected."""
        with pytest.raises(ValueError):
            settings_from_args(["three"])


class TestOutput:
    """Tests for the printed summaries."""

    def test_distance_table(self, capsys: pytest.CaptureFixture[str]) -> None:
        """The table has a header, link count and one line per row."""
        settings = GenerationSettings(3, 4, "binary_tree", 5)
        distance_table(generate(settings), settings)
        out = capsys.readouterr().out
        assert "binary_tree 3x4 (seed 5)" in out
        assert "Links: 11" in out

    def test_path_demo(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Both paths are reported."""
        path_demo(generate(GenerationSettings(4, 4, "sidewinder", 1)))
        out = capsys.readouterr().out
        assert "Shortest path Cell(0, 0) -> Cell(3, 3)" in out
        assert "Longest path" in out


class TestMain:
    """Tests for the command-line entry point."""

    def test_success(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Valid arguments print both summaries and return 0."""
        assert main(["3", "3", "binary_tree", "2"]) == 0
        out = capsys.readouterr().out
        assert "binary_tree 3x3 (seed 2)" in out
        assert "Longest path" in out

    def test_carves_once(self, caplog: pytest.LogCaptureFixture) -> None:
        """One run carves one maze, so the summary is logged once."""
        with caplog.at_level(logging.INFO, logger="generators"):
            main(["3", "4", "sidewinder", "9"])
        carved = [r for r in caplog.records if r.name == "generators" and "carved" in r.getMessage()]
        assert len(carved) == 1

    def test_bad_size(self, capsys: pytest.CaptureFixture[str]) -> None:
        """A zero-sized grid is reported, not raised."""
        assert main(["0", "3"]) == 2
        assert "Invalid grid dimensions" in capsys.readouterr().out

    def test_unknown_algorithm(self, capsys: pytest.CaptureFixture[str]) -> None:
        """An unknown algorithm name is reported, not raised."""
        assert main(["3", "3", "prims"]) == 2
        assert "Unknown algorithm: 'prims'" in capsys.readouterr().out

    def test_non_numeric_size(self, capsys: pytest.CaptureFixture[str]) -> None:
        """A non-numeric size is reported, not raised."""
        assert main(["three"]) == 2
        assert "three" in capsys.readouterr().out
