"""Tests for cleanup targets."""

import tempfile
from unittest.mock import patch

from mac_cleanup.config import Settings
from mac_cleanup.models import CleanupTarget, TargetMode
from mac_cleanup.targets import TARGETS, get_all_targets, get_target, is_active


class TestTargets:
    def test_targets_not_empty(self):
        assert len(TARGETS) > 30

    def test_ids_unique(self):
        ids = [t.id for t in TARGETS]
        assert len(ids) == len(set(ids))

    def test_all_targets_have_required_fields(self):
        for target in TARGETS:
            assert target.message, target.id
            if target.mode == TargetMode.DELETE:
                assert target.patterns, f"{target.id} deletes but has no patterns"
            else:
                assert target.commands, f"{target.id} is external but has no commands"

    def test_get_target_exists(self):
        target = get_target("npm_cache")
        assert target is not None
        assert target.mode == TargetMode.EXTERNAL

    def test_get_target_not_exists(self):
        assert get_target("nonexistent_target") is None

    def test_get_all_targets_keeps_order(self):
        assert [t.id for t in get_all_targets()] == [t.id for t in TARGETS]

    def test_trash_runs_first(self):
        assert TARGETS[0].id == "trash"

    def test_homebrew_updates_only_on_request(self):
        target = get_target("homebrew")
        assert ["brew", "update"] in target.update_commands
        assert ["brew", "update"] not in target.commands

    def test_external_cache_estimates_are_hardcoded(self):
        assert get_target("yarn_cache").estimate_patterns == ["~/Library/Caches/yarn"]
        assert "~/go/pkg/mod" in get_target("go_module_cache").estimate_patterns

    def test_system_locations_are_privileged(self):
        assert get_target("system_caches").privileged
        assert get_target("system_logs").privileged


class TestIsActive:
    def test_unconditional_target(self):
        target = CleanupTarget(id="t", message="m", patterns=["/tmp/x"])
        assert is_active(target, Settings.from_env({}))

    def test_missing_path(self):
        target = CleanupTarget(id="t", message="m", requires_path="/nonexistent/app/dir")
        assert not is_active(target, Settings.from_env({}))

    def test_existing_path(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            target = CleanupTarget(id="t", message="m", requires_path=tmpdir)
            assert is_active(target, Settings.from_env({}))

    @patch("mac_cleanup.targets.has_command", return_value=False)
    def test_missing_command(self, _mock_has):
        target = CleanupTarget(id="t", message="m", requires_command="brew")
        assert not is_active(target, Settings.from_env({}))

    @patch("mac_cleanup.targets.has_command", return_value=True)
    def test_present_command(self, mock_has):
        target = CleanupTarget(id="t", message="m", requires_command="brew")
        assert is_active(target, Settings.from_env({}))
        mock_has.assert_called_once_with("brew")

    def test_env_required(self):
        target = get_target("pyenv_virtualenv_cache")
        assert not is_active(target, Settings.from_env({}))
        assert not is_active(target, Settings.from_env({"PYENV_VIRTUALENV_CACHE_PATH": ""}))
        assert is_active(target, Settings.from_env({"PYENV_VIRTUALENV_CACHE_PATH": "/tmp/pyenv"}))

    @patch("mac_cleanup.targets.has_command", return_value=True)
    def test_all_conditions_must_hold(self, _mock_has):
        target = CleanupTarget(
            id="t",
            message="m",
            requires_command="brew",
            requires_path="/nonexistent/app/dir",
        )
        assert not is_active(target, Settings.from_env({}))

    def test_requires_path_uses_settings_environment(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            target = CleanupTarget(id="t", message="m", requires_path="$APP_ROOT")
            assert is_active(target, Settings.from_env({"APP_ROOT": tmpdir}))
            assert not is_active(target, Settings.from_env({}))
