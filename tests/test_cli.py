"""Tests for the command-line interface."""

import json
import logging

import pytest

from prime_explorer.cli import build_parser, main


@pytest.fixture(autouse=True)
def reset_logger():
    """Close handlers main() attaches so they do not leak into other tests."""
    yield
    logger = logging.getLogger("prime_explorer")
    for handler in list(logger.handlers):
        handler.close()
        logger.removeHandler(handler)


class TestPrimesCommand:
    """Tests for the primes command."""

    def test_by_count(self, capsys):
        assert main(["primes", "--count", "5"]) == 0
        assert capsys.readouterr().out.strip() == "2 3 5 7 11"

    def test_by_limit_json(self, capsys):
        assert main(["primes", "--limit", "10", "--json"]) == 0
        assert json.loads(capsys.readouterr().out) == [2, 3, 5, 7]

    def test_config_file_and_override(self, tmp_path, capsys):
        path = tmp_path / "config.json"
        path.write_text(json.dumps({"count": 3}))
        assert main(["--config", str(path), "primes", "--json"]) == 0
        assert json.loads(capsys.readouterr().out) == [2, 3, 5]

        assert main(["--config", str(path), "primes", "-n", "4", "--json"]) == 0
        assert json.loads(capsys.readouterr().out) == [2, 3, 5, 7]

    def test_limit_error_exit_code(self, capsys):
        assert main(["primes", "--count", "100", "--max-limit", "100"]) == 1
        assert "Cannot generate 100 primes" in capsys.readouterr().err

    def test_limit_above_max_limit(self, capsys):
        """A bound past --max-limit is refused instead of sieved."""
        assert main(["primes", "--limit", "1000", "--max-limit", "100", "--json"]) == 1
        captured = capsys.readouterr()
        assert captured.out == ""
        assert "limit must be <= max_limit=100" in captured.err

    def test_limit_at_max_limit(self, capsys):
        assert main(["primes", "--limit", "100", "--max-limit", "100", "--json"]) == 0
        assert json.loads(capsys.readouterr().out)[-1] == 97

    def test_count_and_limit_exclusive(self):
        with pytest.raises(SystemExit):
            build_parser().parse_args(["primes", "--count", "5", "--limit", "10"])

    def test_missing_config_file(self, tmp_path, capsys):
        assert main(["--config", str(tmp_path / "missing.json"), "primes"]) == 1


class TestDerivedCommands:
    """Tests for gaps, factor, isprime and residues commands."""

    def test_gaps(self, capsys):
        assert main(["gaps", "-n", "5", "--json"]) == 0
        assert json.loads(capsys.readouterr().out) == [1, 2, 2, 4]

    def test_gap_histogram(self, capsys):
        assert main(["gaps", "-n", "10", "--histogram", "--json"]) == 0
        assert json.loads(capsys.readouterr().out) == {"1": 1, "2": 4, "4": 3, "6": 1}

    def test_gap_records(self, capsys):
        assert main(["gaps", "-n", "10", "--records", "--json"]) == 0
        assert json.loads(capsys.readouterr().out) == [[2, 1], [3, 2], [7, 4], [23, 6]]

    def test_factor(self, capsys):
        assert main(["factor", "60", "17", "1"]) == 0
        lines = capsys.readouterr().out.splitlines()
        assert lines == ["60 = 2 x 2 x 3 x 5", "17 = 17", "1 = -"]

    def test_isprime_json(self, capsys):
        assert main(["isprime", "2", "1", "97", "100", "--json"]) == 0
        assert json.loads(capsys.readouterr().out) == {
            "2": True, "1": False, "97": True, "100": False,
        }

    def test_residues(self, capsys):
        assert main(["residues", "-n", "100", "-m", "6", "--json"]) == 0
        data = json.loads(capsys.readouterr().out)
        assert data["modulus"] == 6
        assert sum(data["counts"]) == 100
        assert data["coprime"] == [1, 5]

    def test_invalid_modulus(self, capsys):
        assert main(["residues", "-n", "10", "-m", "1"]) == 1
        assert "modulus" in capsys.readouterr().err


class TestExportCommand:
    """Tests for the export command."""

    def test_export(self, tmp_path):
        output = tmp_path / "data.json"
        assert main(["export", "-n", "25", "-m", "10", "-o", str(output)]) == 0
        data = json.loads(output.read_text())
        assert data["count"] == 25
        assert data["primes"][-1] == 97
        assert len(data["residue_counts"]) == 10

    def test_log_file(self, tmp_path):
        log_path = tmp_path / "logs" / "run.log"
        output = tmp_path / "data.json"
        assert main(["--log-file", str(log_path), "export", "-n", "5", "-o", str(output)]) == 0
        assert "Saved to" in log_path.read_text()


class TestParser:
    """Tests for argument parsing."""

    def test_no_command(self, capsys):
        assert main([]) == 1

    def test_histogram_and_records_exclusive(self):
        with pytest.raises(SystemExit):
            build_parser().parse_args(["gaps", "--histogram", "--records"])
