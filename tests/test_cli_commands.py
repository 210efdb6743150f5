"""Tests for CLI commands using Typer's CliRunner."""

from sqlshim import __version__
from sqlshim.core.namespace import shared_namespace
from sqlshim.main import app
from typer.testing import CliRunner

runner = CliRunner()


def test_version():
    result = runner.invoke(app, ["--version"])
    assert result.exit_code == 0
    assert __version__ in result.stdout


def test_check_default_capability():
    result = runner.invoke(app, ["check"])
    assert result.exit_code == 0
    assert "OK: SQL -> sqlite3" in result.stdout
    # check resolves into a private namespace
    assert "SQL" not in shared_namespace


def test_check_attribute_target(env_config):
    result = runner.invoke(app, ["check", "ENGINE"])
    assert result.exit_code == 0
    assert "OK: ENGINE -> fake_engine.Engine" in result.stdout


def test_check_missing_capability(env_config):
    result = runner.invoke(app, ["check", "MISSING"])
    assert result.exit_code == 1
    assert "OK:" not in result.stdout


def test_check_undeclared_capability():
    result = runner.invoke(app, ["check", "GRAPH"])
    assert result.exit_code == 1


def test_check_with_explicit_config(write_config):
    path = write_config({"capabilities": {"SQL": {"module": "fake_engine"}}})
    result = runner.invoke(app, ["check", "--config", str(path)])
    assert result.exit_code == 0
    assert "OK: SQL -> fake_engine" in result.stdout


def test_check_with_broken_config(tmp_path):
    result = runner.invoke(app, ["check", "--config", str(tmp_path / "nope.yaml")])
    assert result.exit_code == 1


def test_config_show():
    result = runner.invoke(app, ["config", "show"])
    assert result.exit_code == 0
    assert "capabilities" in result.stdout
    assert "sqlite3" in result.stdout
    assert "default_capability: SQL" in result.stdout


def test_check_verbose_logs_acquisition(tmp_path):
    log_path = tmp_path / "check.log"
    result = runner.invoke(app, ["check", "-v", "--log-file", str(log_path)])
    assert result.exit_code == 0
    assert "Acquired capability 'SQL' from 'sqlite3'" in log_path.read_text()


def test_config_show_key():
    result = runner.invoke(app, ["config", "show", "--key", "capabilities.SQL.module"])
    assert result.exit_code == 0
    assert result.stdout.strip() == "sqlite3"

    result = runner.invoke(app, ["config", "show", "-k", "capabilities"])
    assert result.exit_code == 0
    assert "module: sqlite3" in result.stdout


def test_config_show_unknown_key():
    result = runner.invoke(app, ["config", "show", "--key", "capabilities.NOPE"])
    assert result.exit_code == 1
