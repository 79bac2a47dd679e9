"""Integration tests for the tcycle CLI."""

import json

import pytest
from click.testing import CliRunner

from template_cycle import __version__
from template_cycle.cli.main import cli


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture
def config_file(tmp_path):
    path = tmp_path / "cycles.json"
    path.write_text(json.dumps({
        "meta": {"name": "Site"},
        "cycles": {"rowclass": ["normalrow", "alternaterow"], "stripe": ["on"]},
    }))
    return path


class TestTake:
    def test_take_cycles(self, runner):
        result = runner.invoke(cli, ["take", "odd", "even", "-n", "3"])
        assert result.exit_code == 0, result.output
        assert result.output.count("odd") == 2
        assert result.output.count("even") == 1

    def test_take_with_reset(self, runner):
        result = runner.invoke(cli, ["take", "a1", "b2", "c3", "-n", "4", "--reset-every", "2"])
        assert result.exit_code == 0, result.output
        assert "reset" in result.output
        assert "c3" not in result.output

    def test_take_no_values(self, runner):
        result = runner.invoke(cli, ["take", "-n", "2"])
        assert result.exit_code == 0, result.output
        assert "Cycle of 0 values" in result.output

    def test_take_reports_value_count(self, runner):
        result = runner.invoke(cli, ["take", "a", "b", "c", "-n", "1"])
        assert result.exit_code == 0, result.output
        assert "Cycle of 3 values" in result.output

    def test_take_rejects_negative_count(self, runner):
        result = runner.invoke(cli, ["take", "a", "-n", "-1"])
        assert result.exit_code != 0


class TestConfigCommands:
    def test_check_ok(self, runner, config_file):
        result = runner.invoke(cli, ["config", "check", str(config_file)])
        assert result.exit_code == 0, result.output
        assert "OK" in result.output
        assert "stripe" in result.output

    def test_check_errors(self, runner, tmp_path):
        path = tmp_path / "bad.json"
        path.write_text(json.dumps({"cycles": {"rowclass": "normalrow"}}))

        result = runner.invoke(cli, ["config", "check", str(path)])
        assert result.exit_code == 1
        assert "ERROR" in result.output

    def test_check_invalid_json(self, runner, tmp_path):
        path = tmp_path / "bad.json"
        path.write_text("{oops")

        result = runner.invoke(cli, ["config", "check", str(path)])
        assert result.exit_code != 0
        assert "not valid JSON" in result.output

    def test_show(self, runner, config_file):
        result = runner.invoke(cli, ["config", "show", str(config_file)])
        assert result.exit_code == 0, result.output
        assert "Site" in result.output
        assert "alternaterow" in result.output

    def test_check_cycles_not_mapping(self, runner, tmp_path):
        path = tmp_path / "list.json"
        path.write_text(json.dumps({"cycles": ["a", "b"]}))

        result = runner.invoke(cli, ["config", "check", str(path)])
        assert result.exit_code == 1, result.output
        assert result.exception is None or isinstance(result.exception, SystemExit)
        assert "ERROR" in result.output
        assert "mapping" in result.output

    def test_check_unknown_meta_key(self, runner, tmp_path):
        path = tmp_path / "meta.json"
        path.write_text(json.dumps({"meta": {"name": "Site", "author": "me"}, "cycles": {}}))

        result = runner.invoke(cli, ["config", "check", str(path)])
        assert result.exit_code == 1, result.output
        assert isinstance(result.exception, SystemExit)
        assert "Unknown meta keys: author" in result.output

    def test_show_cycles_not_mapping(self, runner, tmp_path):
        path = tmp_path / "list.json"
        path.write_text(json.dumps({"cycles": ["a", "b"]}))

        result = runner.invoke(cli, ["config", "show", str(path)])
        assert result.exit_code == 1
        assert isinstance(result.exception, SystemExit)
        assert "must be a mapping" in result.output


class TestMisc:
    def test_plugins(self, runner):
        result = runner.invoke(cli, ["plugins"])
        assert result.exit_code == 0, result.output
        assert "Cycle" in result.output
        assert "builtin" in result.output

    def test_version(self, runner):
        result = runner.invoke(cli, ["--version"])
        assert result.exit_code == 0
        assert __version__ in result.output
