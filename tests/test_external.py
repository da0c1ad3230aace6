"""Tests for external cleaner invocation."""

import subprocess
from unittest.mock import MagicMock, patch

from mac_cleanup.external import has_command, run_command


class TestHasCommand:
    @patch("mac_cleanup.external.shutil.which", return_value="/usr/local/bin/brew")
    def test_present(self, _mock_which):
        assert has_command("brew")

    @patch("mac_cleanup.external.shutil.which", return_value=None)
    def test_absent(self, _mock_which):
        assert not has_command("brew")


class TestRunCommand:
    @patch("mac_cleanup.external.subprocess.run")
    def test_success(self, mock_run):
        mock_run.return_value = MagicMock(returncode=0, stderr="")
        assert run_command(["npm", "cache", "clean", "--force"])
        assert mock_run.call_args.args[0] == ["npm", "cache", "clean", "--force"]
        assert mock_run.call_args.kwargs["capture_output"] is True

    @patch("mac_cleanup.external.subprocess.run")
    def test_sudo_prefix(self, mock_run):
        mock_run.return_value = MagicMock(returncode=0, stderr="")
        run_command(["purge"], sudo=True)
        assert mock_run.call_args.args[0] == ["sudo", "-n", "purge"]

    @patch("mac_cleanup.external.subprocess.run")
    def test_non_zero_exit_swallowed(self, mock_run):
        mock_run.return_value = MagicMock(returncode=1, stderr="Command failed")
        assert run_command(["docker", "system", "prune", "-af"]) is False

    @patch("mac_cleanup.external.subprocess.run")
    def test_timeout_swallowed(self, mock_run):
        mock_run.side_effect = subprocess.TimeoutExpired("brew", 600)
        assert run_command(["brew", "cleanup", "-s"]) is False

    @patch("mac_cleanup.external.subprocess.run")
    def test_missing_binary_swallowed(self, mock_run):
        mock_run.side_effect = FileNotFoundError("no such file")
        assert run_command(["definitely-not-installed"]) is False
