"""Tests for CLI commands."""

import logging

from click.testing import CliRunner
import pytest

from cp_toolkit.cli import main


@pytest.fixture
def runner():
    """Create a CLI runner."""
    return CliRunner()


def test_main_help(runner):
    """Test main help command."""
    result = runner.invoke(main, ["--help"])
    assert result.exit_code == 0
    assert "Competitive Programming Toolkit" in result.output


def test_version(runner):
    """Test version command."""
    result = runner.invoke(main, ["--version"])
    assert result.exit_code == 0
    assert "0.1.0" in result.output


def test_dsu_help(runner):
    """Test dsu help command."""
    result = runner.invoke(main, ["dsu", "--help"])
    assert result.exit_code == 0
    assert "Disjoint Set Union" in result.output


def test_missing_config(runner, tmp_path):
    """Test --config with nonexistent file fails."""
    result = runner.invoke(main, ["--config", str(tmp_path / "missing.json"), "dsu", "--help"])
    assert result.exit_code != 0


class TestVerboseLogging:
    """Tests for --verbose and the verbose config setting."""

    @pytest.fixture(autouse=True)
    def reset_package_logger(self):
        """Restore the package logger level after each test."""
        package_logger = logging.getLogger("cp_toolkit")
        level = package_logger.level
        yield
        package_logger.setLevel(level)

    @pytest.fixture
    def query_file(self, tmp_path):
        """Create sample query file."""
        path = tmp_path / "queries.txt"
        path.write_text("2 2\n0 0 1\n1 0 1\n")
        return path

    @staticmethod
    def _query_debug_records(caplog):
        return [
            r
            for r in caplog.records
            if r.name == "cp_toolkit.core.queries" and r.levelno == logging.DEBUG
        ]

    def test_verbose_flag_enables_debug(self, runner, query_file, caplog):
        """Test -v emits debug records from the query runner."""
        result = runner.invoke(main, ["-v", "dsu", "query", str(query_file)])

        assert result.exit_code == 0
        assert self._query_debug_records(caplog)

    def test_verbose_from_config(self, runner, query_file, tmp_path, caplog):
        """Test verbose: true in the config file enables debug logging."""
        config_path = tmp_path / "config.json"
        config_path.write_text('{"output": {"verbose": true}}')

        result = runner.invoke(
            main, ["--config", str(config_path), "dsu", "query", str(query_file)]
        )

        assert result.exit_code == 0
        assert self._query_debug_records(caplog)

    def test_quiet_by_default(self, runner, query_file, tmp_path, caplog):
        """Test no debug records without -v or a verbose config."""
        config_path = tmp_path / "config.json"
        config_path.write_text("{}")

        result = runner.invoke(
            main, ["--config", str(config_path), "dsu", "query", str(query_file)]
        )

        assert result.exit_code == 0
        assert not self._query_debug_records(caplog)
