"""Smoke tests for the Observatory CLI.

**Feature: ledger-observatory**
"""

from pathlib import Path

from click.testing import CliRunner

from observatory.cli.main import cli


def _invoke(temp_dir: Path, *args: str):
    runner = CliRunner()
    return runner.invoke(cli, ["--config", str(temp_dir / "config.toml"), *args])


class TestSimulateCommand:
    def test_simulate_runs(self, temp_dir: Path):
        result = _invoke(temp_dir, "simulate", "--seconds", "30", "--seed", "1")

        assert result.exit_code == 0, result.output
        assert "Simulated 30s" in result.output
        assert "Live Blocks" in result.output

    def test_negative_seconds_rejected(self, temp_dir: Path):
        result = _invoke(temp_dir, "simulate", "--seconds", "-1")
        assert result.exit_code != 0


class TestWatchCommand:
    def test_refresh_must_be_positive(self, temp_dir: Path):
        result = _invoke(temp_dir, "watch", "--refresh", "0")

        assert result.exit_code == 2
        assert "--refresh" in result.output


class TestCommandListing:
    def test_help_lists_lazy_commands(self, temp_dir: Path):
        result = _invoke(temp_dir, "--help")

        assert result.exit_code == 0, result.output
        for name in ("simulate", "watch", "wallet", "config"):
            assert name in result.output


class TestWalletCommands:
    def test_demo(self, temp_dir: Path):
        result = _invoke(temp_dir, "wallet", "demo", "--seed", "3", "--drips", "2")

        assert result.exit_code == 0, result.output
        assert "Transfer executed" in result.output
        assert "Faucet busy" in result.output

    def test_link(self, temp_dir: Path):
        result = _invoke(temp_dir, "wallet", "link", "--address", "0xEXTERNAL")
        assert result.exit_code == 0, result.output

    def test_link_declined(self, temp_dir: Path):
        result = _invoke(temp_dir, "wallet", "link", "--address", "0xEXTERNAL", "--decline")
        assert result.exit_code == 1


class TestConfigCommands:
    def test_init_then_show(self, temp_dir: Path):
        result = _invoke(temp_dir, "config", "init")
        assert result.exit_code == 0, result.output
        assert (temp_dir / "config.toml").exists()

        result = _invoke(temp_dir, "config", "show")
        assert result.exit_code == 0, result.output
        assert "block_period" in result.output

    def test_init_refuses_overwrite(self, temp_dir: Path):
        _invoke(temp_dir, "config", "init")
        result = _invoke(temp_dir, "config", "init")
        assert result.exit_code == 1

    def test_broken_config_exits(self, temp_dir: Path):
        (temp_dir / "config.toml").write_text("[timers]\nblock_period = -3\n")
        result = _invoke(temp_dir, "simulate")
        assert result.exit_code == 1
