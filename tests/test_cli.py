"""Test suite for the ChainSync CLI."""

import json
from pathlib import Path
from typing import List
from unittest.mock import patch

import pytest
from typer.testing import CliRunner

from chainsync import ChainSync, __version__
from chainsync.cli import app


@pytest.fixture
def runner() -> CliRunner:
    """Create a CLI test runner."""
    return CliRunner()


@pytest.fixture
def test_config(tmp_path: Path) -> Path:
    """Create a test config file."""
    config_path = tmp_path / "test_chainsync.toml"
    config_path.write_text("[chainsync]\nverbose = true\nmaxRetries = 5\n")
    return config_path


def _json_lines(output: str) -> List[dict]:
    """Parse one JSON object per non-empty line."""
    return [json.loads(line) for line in output.splitlines() if line.strip()]


def test_version(runner: CliRunner) -> None:
    result = runner.invoke(app, ["--version"])

    assert result.exit_code == 0
    assert f"ChainSync v{__version__}" in result.stdout


def test_run_json(runner: CliRunner) -> None:
    """Test sequential runs print one JSON result per line."""
    result = runner.invoke(app, ["run", "--json", "--runs", "3"])

    assert result.exit_code == 0
    records = _json_lines(result.stdout)
    assert [record["data"]["processed"] for record in records] == [1, 2, 3]
    assert all(
        record["message"] == "Processing completed successfully" for record in records
    )


def test_run_concurrent(runner: CliRunner) -> None:
    result = runner.invoke(app, ["run", "--json", "-n", "4", "--concurrent"])

    assert result.exit_code == 0
    records = _json_lines(result.stdout)
    assert sorted(record["data"]["processed"] for record in records) == [1, 2, 3, 4]


def test_run_table(runner: CliRunner) -> None:
    result = runner.invoke(app, ["run"])

    assert result.exit_code == 0
    assert "ChainSync Results" in result.stdout


def test_run_verbose_logs(runner: CliRunner) -> None:
    """Test --verbose notices go to stderr and stdout keeps only results."""
    result = runner.invoke(app, ["run", "--json", "--verbose"])

    assert result.exit_code == 0
    records = _json_lines(result.stdout)
    assert len(records) == 1
    assert records[0]["success"] is True
    events = [record.get("event", "") for record in _json_lines(result.stderr)]
    assert "Initializing ChainSync processor..." in events
    assert any(event.startswith("Processing completed in") for event in events)


def test_run_quiet_overrides_config(runner: CliRunner, test_config: Path) -> None:
    result = runner.invoke(
        app, ["run", "--json", "--quiet", "--config", str(test_config)]
    )

    assert result.exit_code == 0
    assert "Initializing ChainSync processor..." not in result.stdout


def test_run_failure_exit_code(runner: CliRunner) -> None:
    """Test a failed run is reported and exits non-zero."""
    with patch.object(ChainSync, "_delay", side_effect=RuntimeError("boom")):
        result = runner.invoke(app, ["run", "--json"])

    assert result.exit_code == 1
    records = _json_lines(result.stdout)
    assert len(records) == 1
    assert records[0]["success"] is False
    assert records[0]["message"] == "boom"
    assert records[0]["data"] is None
    warnings = _json_lines(result.stderr)
    assert warnings[-1]["event"] == "Some runs failed"
    assert warnings[-1]["failed"] == 1


def test_run_missing_config(runner: CliRunner, tmp_path: Path) -> None:
    result = runner.invoke(app, ["run", "--config", str(tmp_path / "missing.toml")])

    assert result.exit_code == 2


def test_run_invalid_log_level(runner: CliRunner) -> None:
    result = runner.invoke(app, ["run", "--log-level", "LOUD"])

    assert result.exit_code == 2


def test_run_rejects_zero_runs(runner: CliRunner) -> None:
    result = runner.invoke(app, ["run", "--runs", "0"])

    assert result.exit_code == 2


def test_show_config(runner: CliRunner, test_config: Path) -> None:
    """Test the effective configuration is printed as JSON."""
    result = runner.invoke(app, ["config", "--config", str(test_config)])

    assert result.exit_code == 0
    assert json.loads(result.stdout) == {
        "verbose": True,
        "timeout": 30000,
        "max_retries": 5,
    }


def test_show_config_env_override(
    runner: CliRunner, monkeypatch: pytest.MonkeyPatch
) -> None:
    monkeypatch.setenv("CHAINSYNC_TIMEOUT_MS", "250")

    result = runner.invoke(app, ["config"])

    assert result.exit_code == 0
    assert json.loads(result.stdout)["timeout"] == 250
