"""Deletion of collected paths for mac-cleanup."""

import logging
import os
import shutil
import subprocess
from pathlib import Path
from typing import Optional

from mac_cleanup.models import DeletionReport, PathFailure, RunMode
from mac_cleanup.privileges import is_root
from mac_cleanup.scanner import estimate_bytes

log = logging.getLogger(__name__)

# Upper bound for a single privileged rm
_SUDO_RM_TIMEOUT = 300


def delete_path(path: Path, privileged: bool = False) -> Optional[str]:
    """
    Remove a path (file, symlink or directory tree).

    Args:
        path: Path to delete
        privileged: Remove through sudo when not already root

    Returns:
        None on success, otherwise the reason it failed
    """
    if not os.path.lexists(path):
        return "Path no longer exists"

    if privileged and not is_root():
        return _sudo_remove(path)

    try:
        if path.is_dir() and not path.is_symlink():
            shutil.rmtree(path)
        else:
            path.unlink()
    except FileNotFoundError:
        return "Path no longer exists"
    except PermissionError as e:
        return f"Permission denied: {e}"
    except OSError as e:
        return f"OS error: {e}"

    return None


def _sudo_remove(path: Path) -> Optional[str]:
    try:
        result = subprocess.run(
            ["sudo", "-n", "rm", "-rf", "--", str(path)],
            capture_output=True,
            text=True,
            timeout=_SUDO_RM_TIMEOUT,
        )
    except subprocess.TimeoutExpired:
        return "sudo rm timed out"
    except OSError as e:
        return f"Could not run sudo: {e}"

    if result.returncode != 0:
        return result.stderr.strip() or f"sudo rm exited with {result.returncode}"
    return None


def execute(paths: list[Path], mode: RunMode, privileged: bool = False) -> DeletionReport:
    """
    Estimate or remove a collected path set.

    In dry-run the filesystem is never touched; privileged paths are sized
    through sudo. In live mode every path is
    removed independently and failures are collected, not raised.

    Args:
        paths: Paths returned by the collector
        mode: Current run mode
        privileged: Paths need root to remove

    Returns:
        DeletionReport for the batch
    """
    if mode.dry_run:
        return DeletionReport(dry_run=True, estimated_bytes=estimate_bytes(paths, privileged=privileged))

    removed = 0
    failures: list[PathFailure] = []

    for path in paths:
        error = delete_path(path, privileged=privileged)
        if error:
            log.debug("Failed to remove %s: %s", path, error)
            failures.append(PathFailure(path=str(path), reason=error))
        else:
            log.debug("Removed %s", path)
            removed += 1

    return DeletionReport(dry_run=False, removed=removed, failures=failures)
