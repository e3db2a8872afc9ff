"""Tests for the dicepool CLI commands."""

import logging
from unittest.mock import patch

from pydantic import ValidationError
from typer.testing import CliRunner

from dicepool import __version__
from dicepool.cli.main import app


runner = CliRunner()


class TestRollCommand:
    """Tests for 'dicepool roll'."""

    @patch("dicepool.dice.faces.random.randint")
    def test_prints_total(self, mock_randint):
        """Should print the total of each notation."""
        mock_randint.side_effect = [2, 3, 4]
        result = runner.invoke(app, ["roll", "3d6"])

        assert result.exit_code == 0
        assert "3d6: 9" in result.output

    @patch("dicepool.dice.faces.random.randint")
    def test_complex_prints_each_die(self, mock_randint):
        """Should print every cast die with --complex."""
        mock_randint.side_effect = [2, 3, 4]
        result = runner.invoke(app, ["roll", "--complex", "3d6"])

        assert result.exit_code == 0
        assert "3d6: 2 3 4" in result.output

    @patch("dicepool.dice.faces.random.randint")
    def test_short_complex_flag(self, mock_randint):
        """Should accept -c for --complex."""
        mock_randint.side_effect = [1, 20]
        result = runner.invoke(app, ["roll", "-c", "2d20"])

        assert result.exit_code == 0
        assert "2d20: 1 20" in result.output

    @patch("dicepool.dice.faces.random.randint")
    def test_multiple_notations_in_order(self, mock_randint):
        """Should roll each notation in the order given."""
        mock_randint.side_effect = [4, 1, 1]
        result = runner.invoke(app, ["roll", "1d4", "2d6"])

        assert result.exit_code == 0
        lines = result.output.splitlines()
        assert lines == ["1d4: 4", "2d6: 2"]

    def test_bad_notation_continues(self):
        """Should report bad notation and keep rolling the rest."""
        result = runner.invoke(app, ["roll", "3-6", "1d1"])

        assert result.exit_code == 1
        assert "3-6: missing 'd' separator" in result.output
        assert "1d1: 1" in result.output

    def test_all_good_exits_zero(self):
        """Should exit 0 when every notation rolls."""
        result = runner.invoke(app, ["roll", "1d6", "2d8"])
        assert result.exit_code == 0

    def test_zero_faces_reported(self):
        """Should report zero-faced dice as a failure."""
        result = runner.invoke(app, ["roll", "2d0"])

        assert result.exit_code == 1
        assert "2d0: a die needs at least one face" in result.output

    def test_face_type_option(self):
        """Should parse faces in the chosen face type."""
        result = runner.invoke(app, ["roll", "--face-type", "u8", "1d256"])

        assert result.exit_code == 1
        assert "does not fit in u8" in result.output

    @patch("dicepool.dice.faces.random.randint")
    def test_face_type_overflow_reported(self, mock_randint):
        """Should report totals that overflow the face type."""
        mock_randint.return_value = 200
        result = runner.invoke(app, ["roll", "-t", "u8", "2d200"])

        assert result.exit_code == 1
        assert "overflows u8" in result.output

    def test_unknown_face_type(self):
        """Should reject unknown face types as a usage error."""
        result = runner.invoke(app, ["roll", "--face-type", "f32", "1d6"])
        assert result.exit_code == 2

    def test_default_face_type_from_env(self, monkeypatch):
        """Should fall back to DICEPOOL_DEFAULT_FACE_TYPE."""
        from dicepool.config import get_settings

        monkeypatch.setenv("DICEPOOL_DEFAULT_FACE_TYPE", "u8")
        get_settings.cache_clear()
        result = runner.invoke(app, ["roll", "1d300"])

        assert result.exit_code == 1
        assert "does not fit in u8" in result.output

    def test_seed_repeats_rolls(self):
        """Should roll identically for the same seed."""
        first = runner.invoke(app, ["roll", "--seed", "7", "-c", "10d100"])
        second = runner.invoke(app, ["roll", "--seed", "7", "-c", "10d100"])

        assert first.exit_code == 0
        assert first.output == second.output

    def test_requires_dice(self):
        """Should require at least one notation."""
        result = runner.invoke(app, ["roll"])
        assert result.exit_code == 2

    def test_plus_count_rolls(self):
        """Should accept a leading plus sign on the count."""
        result = runner.invoke(app, ["roll", "+3d1"])

        assert result.exit_code == 0
        assert "+3d1: 3" in result.output

    def test_rejected_notation_logged_at_debug(self, caplog):
        """Should log rejected notation at DEBUG, leaving stderr to report it."""
        caplog.set_level(logging.DEBUG, logger="dicepool.cli.main")
        result = runner.invoke(app, ["roll", "3-6"])

        assert result.exit_code == 1
        records = [r for r in caplog.records if "Could not roll" in r.getMessage()]
        assert len(records) == 1
        assert records[0].levelno == logging.DEBUG
        assert result.output.count("missing 'd' separator") == 1


class TestInvalidSettings:
    """Tests for bad DICEPOOL_ environment variables."""

    def test_bad_default_face_type(self, monkeypatch):
        """Should exit 2 with a short message for an unknown default face type."""
        from dicepool.config import get_settings

        monkeypatch.setenv("DICEPOOL_DEFAULT_FACE_TYPE", "zz")
        get_settings.cache_clear()
        result = runner.invoke(app, ["roll", "1d6"])

        assert result.exit_code == 2
        assert "invalid configuration: DICEPOOL_DEFAULT_FACE_TYPE" in result.output
        assert "unknown face type 'zz'" in result.output
        assert "Traceback" not in result.output
        assert not isinstance(result.exception, ValidationError)

    def test_bad_log_level(self, monkeypatch):
        """Should exit 2 with a short message for an unknown log level."""
        from dicepool.config import get_settings

        monkeypatch.setenv("DICEPOOL_LOG_LEVEL", "loud")
        get_settings.cache_clear()
        result = runner.invoke(app, ["version"])

        assert result.exit_code == 2
        assert "invalid configuration: DICEPOOL_LOG_LEVEL" in result.output
        assert len(result.output.strip().splitlines()) == 1


class TestVersionCommand:
    """Tests for 'dicepool version'."""

    def test_prints_version(self):
        """Should print the package version."""
        result = runner.invoke(app, ["version"])

        assert result.exit_code == 0
        assert __version__ in result.output
