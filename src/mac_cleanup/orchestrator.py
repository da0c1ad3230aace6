"""Run cleanup targets in order and fold their results."""

import logging
from typing import Callable, Optional, Sequence

from mac_cleanup import cleaner
from mac_cleanup.collector import collect
from mac_cleanup.config import Settings
from mac_cleanup.external import run_command
from mac_cleanup.models import (
    CleanupTarget,
    DeletionReport,
    RunMode,
    RunSummary,
    TargetMode,
    TargetOutcome,
    TargetState,
)
from mac_cleanup.scanner import get_disk_usage
from mac_cleanup.targets import get_all_targets, is_active

log = logging.getLogger(__name__)


class CleanupOrchestrator:
    """Holds the ordered target list and runs it once per call to run().

    Targets run strictly one after another. A failing target never stops
    the ones after it, and nothing is retried.
    """

    def __init__(
        self,
        targets: Optional[Sequence[CleanupTarget]] = None,
        settings: Optional[Settings] = None,
        mount_point: str = "/",
    ) -> None:
        self.targets = list(targets) if targets is not None else get_all_targets()
        self.settings = settings or Settings.from_env()
        self.mount_point = mount_point

    def run(
        self,
        mode: RunMode,
        on_message: Optional[Callable[[str], None]] = None,
    ) -> RunSummary:
        """
        Run every target.

        Args:
            mode: Run mode for this execution
            on_message: Called with each running target's progress message.
                Not called in dry-run unless verbose.

        Returns:
            RunSummary with per-target outcomes. Live runs carry the
            before/after free space; dry runs carry the summed estimate.
        """
        summary = RunSummary(dry_run=mode.dry_run)

        if not mode.dry_run:
            summary.free_before = get_disk_usage(self.mount_point).free_bytes

        for target in self.targets:
            outcome = self.run_target(target, mode, on_message)
            summary.outcomes.append(outcome)

        if not mode.dry_run:
            summary.free_after = get_disk_usage(self.mount_point).free_bytes

        return summary

    def run_target(
        self,
        target: CleanupTarget,
        mode: RunMode,
        on_message: Optional[Callable[[str], None]] = None,
    ) -> TargetOutcome:
        """Run a single target and return its outcome."""
        outcome = TargetOutcome(target_id=target.id)

        if not is_active(target, self.settings):
            log.debug("Skipping %s: not active", target.id)
            outcome.state = TargetState.SKIPPED
            return outcome

        outcome.state = TargetState.RUNNING
        if on_message and (not mode.dry_run or mode.verbose):
            on_message(target.message)

        try:
            if mode.dry_run:
                outcome.report = self._estimate(target, mode)
            else:
                self._run_commands(target, mode, outcome)
                if target.mode != TargetMode.EXTERNAL:
                    paths = collect(target.patterns, self.settings.environ)
                    outcome.report = cleaner.execute(paths, mode, privileged=target.privileged)
        except OSError as e:
            log.warning("Target %s failed: %s", target.id, e)
            outcome.error = str(e)

        failed = (
            outcome.error is not None or (outcome.report is not None and not outcome.report.success)
        )
        outcome.state = TargetState.PARTIALLY_FAILED if failed else TargetState.COMPLETED
        return outcome

    def _estimate(self, target: CleanupTarget, mode: RunMode) -> DeletionReport:
        """Size what a target would free, without running anything."""
        if target.mode == TargetMode.EXTERNAL:
            patterns = target.estimate_patterns
        else:
            patterns = [*target.patterns, *target.estimate_patterns]

        paths = collect(patterns, self.settings.environ)
        for path in paths:
            log.debug("Would remove %s", path)
        return cleaner.execute(paths, mode, privileged=target.privileged)

    def _run_commands(self, target: CleanupTarget, mode: RunMode, outcome: TargetOutcome) -> None:
        commands = [*target.update_commands, *target.commands] if mode.update else target.commands
        for command in commands:
            outcome.commands_run += 1
            if not run_command(command, sudo=target.sudo_commands):
                outcome.commands_failed += 1
