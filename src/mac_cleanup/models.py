"""Data models for mac-cleanup."""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class TargetMode(str, Enum):
    """How a cleanup target does its work."""

    DELETE = "delete"  # Collect patterns and remove them
    EXTERNAL = "external"  # Run the tool's own cleaner
    EXTERNAL_THEN_COLLECT = "external_then_collect"  # Run the cleaner, then remove leftovers


class TargetState(str, Enum):
    """Lifecycle state of a target within one run."""

    PENDING = "pending"
    SKIPPED = "skipped"
    RUNNING = "running"
    COMPLETED = "completed"
    PARTIALLY_FAILED = "partially_failed"


class RunMode(BaseModel):
    """Options fixed for the duration of one run."""

    model_config = ConfigDict(frozen=True)

    dry_run: bool = Field(False, description="Estimate sizes without deleting anything")
    update: bool = Field(False, description="Refresh package manager metadata before cleaning")
    verbose: bool = Field(False, description="Show progress messages and per-path details")


class CleanupTarget(BaseModel):
    """A named unit of cleanup work."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(..., description="Unique identifier for the target")
    message: str = Field(..., description="Progress message shown when the target runs")
    mode: TargetMode = Field(TargetMode.DELETE, description="Execution mode")

    # Activation predicate - every field that is set must hold
    requires_path: Optional[str] = Field(
        None, description="Only run if this path exists (supports ~ expansion)"
    )
    requires_command: Optional[str] = Field(
        None, description="Only run if this executable is on PATH"
    )
    requires_env: Optional[str] = Field(
        None, description="Only run if this environment variable is set and non-empty"
    )

    patterns: list[str] = Field(
        default_factory=list,
        description="Glob patterns to collect for deletion (supports ~ and $VAR)",
    )
    estimate_patterns: list[str] = Field(
        default_factory=list,
        description="Paths sized in dry-run in place of running the external cleaner",
    )
    commands: list[list[str]] = Field(
        default_factory=list,
        description="External commands run in live mode, in order",
    )
    update_commands: list[list[str]] = Field(
        default_factory=list,
        description="External commands run in live mode only when updating",
    )
    sudo_commands: bool = Field(False, description="Run commands through sudo")
    privileged: bool = Field(False, description="Deleting these paths needs root")


class PathFailure(BaseModel):
    """A path that could not be removed."""

    path: str = Field(..., description="Path that failed")
    reason: str = Field(..., description="Why removal failed")


class DeletionReport(BaseModel):
    """Result of executing one collected path set."""

    dry_run: bool = Field(False, description="Whether this was a dry run")
    removed: int = Field(0, description="Number of paths removed")
    failures: list[PathFailure] = Field(default_factory=list)
    estimated_bytes: Optional[int] = Field(
        None, description="Estimated size in bytes (dry run only)"
    )

    @property
    def failure_count(self) -> int:
        """Number of paths that could not be removed."""
        return len(self.failures)

    @property
    def success(self) -> bool:
        """True when no path failed."""
        return not self.failures


class TargetOutcome(BaseModel):
    """What happened to one target during a run."""

    target_id: str
    state: TargetState = TargetState.PENDING
    report: Optional[DeletionReport] = None
    commands_run: int = 0
    commands_failed: int = 0
    error: Optional[str] = None

    @property
    def estimated_bytes(self) -> int:
        """This target's contribution to the dry-run estimate."""
        if self.report is None or self.report.estimated_bytes is None:
            return 0
        return self.report.estimated_bytes


class DiskUsage(BaseModel):
    """Overall disk usage information."""

    total_bytes: int = Field(..., description="Total disk size in bytes")
    used_bytes: int = Field(..., description="Used space in bytes")
    free_bytes: int = Field(..., description="Free space in bytes")
    mount_point: str = Field("/", description="Mount point")


class RunSummary(BaseModel):
    """Folded result of a whole run."""

    dry_run: bool = False
    outcomes: list[TargetOutcome] = Field(default_factory=list)
    free_before: Optional[int] = Field(None, description="Free bytes before the first target")
    free_after: Optional[int] = Field(None, description="Free bytes after the last target")

    @property
    def estimated_bytes(self) -> int:
        """Sum of per-target estimates. Overlapping targets are counted twice."""
        return sum(o.estimated_bytes for o in self.outcomes)

    @property
    def freed_bytes(self) -> int:
        """Free-space delta across the run. May be negative."""
        if self.free_before is None or self.free_after is None:
            return 0
        return self.free_after - self.free_before

    @property
    def ran(self) -> list[TargetOutcome]:
        """Outcomes of targets that were not skipped."""
        return [o for o in self.outcomes if o.state != TargetState.SKIPPED]

    @property
    def removed_count(self) -> int:
        """Total paths removed across targets."""
        return sum(o.report.removed for o in self.outcomes if o.report)

    @property
    def failures(self) -> list[PathFailure]:
        """All per-path failures across targets."""
        return [f for o in self.outcomes if o.report for f in o.report.failures]
