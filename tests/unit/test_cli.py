"""Tests for devcheck.cli."""

from __future__ import annotations

import os
import runpy
import subprocess
import sys
from pathlib import Path
from unittest.mock import patch

import pytest

from devcheck.cli import main
from devcheck.config.service import ConfigService, get_config_service
from devcheck.diagnostics.results import CheckReport, CheckResult

PROJECT_ROOT = Path(__file__).resolve().parents[2]


class TestMain:
    @pytest.mark.unit
    @patch("devcheck.cli.run_environment_check")
    def test_exit_zero_when_nothing_fails(self, mock_run, check_config, capsys):
        report = CheckReport()
        report.add(CheckResult.passed("Network Access", "ok"))
        report.add(CheckResult.warning("Gemini API Key", "short"))
        mock_run.return_value = report
        with patch("devcheck.cli.get_check_config", return_value=check_config):
            assert main() == 0
        out = capsys.readouterr().out
        assert "ENVIRONMENT CHECK - Geekout Vegas 2026" in out
        assert "1 warning(s)" in out

    @pytest.mark.unit
    @patch("devcheck.cli.run_environment_check")
    def test_exit_one_on_failure(self, mock_run, check_config, capsys):
        report = CheckReport()
        report.add(CheckResult.failed("Playwright Browser", "Browser failed"))
        mock_run.return_value = report
        with patch("devcheck.cli.get_check_config", return_value=check_config):
            assert main() == 1
        assert "1 CHECK(S) FAILED" in capsys.readouterr().out

    @pytest.mark.unit
    @patch("devcheck.cli.get_check_config", side_effect=ValueError("YAML parsing error in check_config.yaml"))
    def test_invalid_config_exits_one(self, mock_config, capsys):
        assert main() == 1
        assert "YAML parsing error" in capsys.readouterr().out

    @pytest.mark.integration
    def test_end_to_end_with_fake_environment(self, healthy_env, check_config, capsys):
        with patch("devcheck.cli.get_check_config", return_value=check_config), \
                patch("devcheck.diagnostics.system_check.SystemEnvironment", return_value=healthy_env):
            assert main() == 0
        out = capsys.readouterr().out
        assert "ALL CHECKS PASSED! (7/7)" in out

    @pytest.mark.unit
    @patch("devcheck.cli.run_environment_check")
    def test_broken_config_file_exits_one(self, mock_run, temp_dir, capsys):
        broken = temp_dir / "check_config.yaml"
        broken.write_text("general: [unclosed\n", encoding="utf-8")
        ConfigService.reset()
        try:
            with patch("devcheck.config.config_loader.DEFAULT_CONFIG_PATH", broken):
                # First load happens during logger setup, which tolerates the error
                with pytest.raises(ValueError):
                    get_config_service().get_check_config()
                assert main() == 1
        finally:
            ConfigService.reset()
        assert "YAML parsing error" in capsys.readouterr().out
        mock_run.assert_not_called()

    @pytest.mark.unit
    @patch("devcheck.cli.get_check_config", side_effect=ValueError("'api_keys' must be a mapping, got NoneType"))
    def test_config_error_reported_once(self, mock_config, capsys):
        with patch("devcheck.cli.logger") as mock_logger:
            assert main() == 1
        mock_logger.error.assert_not_called()
        mock_logger.warning.assert_not_called()
        mock_logger.info.assert_called_once()
        out = capsys.readouterr().out
        assert out.count("'api_keys' must be a mapping") == 1


class TestEntryScript:
    @pytest.mark.unit
    def test_script_adds_project_root_to_path(self, monkeypatch):
        script = PROJECT_ROOT / "main" / "check_environment.py"
        stripped = [p for p in sys.path if Path(p or ".").resolve() != PROJECT_ROOT]
        monkeypatch.setattr(sys, "path", stripped)
        namespace = runpy.run_path(str(script), run_name="check_environment")
        assert sys.path[0] == str(PROJECT_ROOT)
        assert namespace["main"] is main

    @pytest.mark.integration
    def test_script_imports_from_other_directory(self, temp_dir):
        script = PROJECT_ROOT / "main" / "check_environment.py"
        env = {k: v for k, v in os.environ.items() if k != "PYTHONPATH"}
        completed = subprocess.run(
            [sys.executable, "-c", f"import runpy; runpy.run_path({str(script)!r}, run_name='check_environment')"],
            cwd=temp_dir,
            env=env,
            capture_output=True,
            text=True,
            timeout=60,
        )
        assert completed.returncode == 0, completed.stderr
