"""Tests for the command-line interface."""

import pytest

from superperm.cli import main


class TestCreateCommand:
    def test_prints_sequence(self, capsys):
        assert main(["create", "3"]) == 0
        out = capsys.readouterr().out.splitlines()
        assert out == ["1 2 3 1 2 1 3 2 1", "length: 9"]

    def test_strategy_option(self, capsys):
        assert main(["create", "2", "--strategy", "naive"]) == 0
        assert capsys.readouterr().out.splitlines()[0] == "1 2 1"

    def test_negative_n_reports_error(self, capsys):
        assert main(["create", "-1"]) == 2
        assert "non-negative" in capsys.readouterr().err


class TestCheckCommand:
    def test_valid(self, capsys):
        assert main(["check", "3", "1", "2", "3", "1", "2", "1", "3", "2", "1"]) == 0
        assert capsys.readouterr().out.strip() == "valid"

    def test_invalid(self, capsys):
        assert main(["check", "3", "1", "2", "3", "2"]) == 1
        assert capsys.readouterr().out.strip() == "invalid"

    def test_unknown_strategy_rejected_by_parser(self):
        with pytest.raises(SystemExit):
            main(["check", "3", "1", "--strategy", "genetic"])


class TestBenchCommand:
    def test_prints_table(self, capsys):
        assert main(["bench", "3", "--repeats", "1", "--strategy", "indexed"]) == 0
        out = capsys.readouterr().out
        assert "create_time_s" in out
        assert "indexed" in out
        assert "naive" not in out
