"""Size estimation and free-space measurement for mac-cleanup."""

import logging
import os
import shutil
import subprocess
from pathlib import Path
from string import Template
from typing import Iterable, Mapping, Optional

from mac_cleanup.models import DiskUsage
from mac_cleanup.privileges import is_root

log = logging.getLogger(__name__)

# Upper bound for sizing one protected path through sudo
_SUDO_DU_TIMEOUT = 300


def expand_path(path: str, environ: Optional[Mapping[str, str]] = None) -> Path:
    """Expand ~ and environment variables in path.

    Unknown variables are left in place, so the result simply won't exist.
    """
    env = os.environ if environ is None else environ
    return Path(os.path.expanduser(Template(path).safe_substitute(env)))


def get_directory_size(path: Path) -> tuple[int, int, int]:
    """
    Calculate total size of a directory with os.scandir.

    Symlinks are not followed. Unreadable entries and subtrees count as 0.

    Returns:
        Tuple of (total_bytes, file_count, dir_count)
    """
    total_size = 0
    file_count = 0
    dir_count = 0

    def _scan(p: str):
        nonlocal total_size, file_count, dir_count
        try:
            with os.scandir(p) as entries:
                for entry in entries:
                    try:
                        if entry.is_file(follow_symlinks=False):
                            total_size += entry.stat(follow_symlinks=False).st_size
                            file_count += 1
                        elif entry.is_dir(follow_symlinks=False):
                            dir_count += 1
                            _scan(entry.path)
                        elif entry.is_symlink():
                            total_size += entry.stat(follow_symlinks=False).st_size
                            file_count += 1
                    except OSError:
                        continue
        except OSError as e:
            log.debug("Skipping unreadable directory %s: %s", p, e)

    _scan(str(path))
    return total_size, file_count, dir_count


def path_size(path: Path) -> int:
    """
    On-disk size of a single path.

    Directories contribute the sum of their descendants. Paths that have
    vanished or cannot be read contribute 0.
    """
    try:
        st = path.lstat()
    except OSError as e:
        log.debug("Cannot stat %s: %s", path, e)
        return 0

    if path.is_dir() and not path.is_symlink():
        size, _, _ = get_directory_size(path)
        return size
    return st.st_size


def sudo_path_size(path: Path) -> Optional[int]:
    """
    Size a protected path with `sudo -n du -sk`.

    du reports allocated kilobytes, so the result is a multiple of 1024.

    Returns:
        Size in bytes, or None if sudo or du could not produce one
    """
    try:
        result = subprocess.run(
            ["sudo", "-n", "du", "-sk", "--", str(path)],
            capture_output=True,
            text=True,
            timeout=_SUDO_DU_TIMEOUT,
        )
    except subprocess.TimeoutExpired:
        log.debug("sudo du timed out: %s", path)
        return None
    except OSError as e:
        log.debug("Could not run sudo du on %s: %s", path, e)
        return None

    # du still prints a total when some entries were unreadable
    fields = result.stdout.split()
    if not fields or not fields[0].isdigit():
        log.debug("sudo du gave no size for %s (exit %d): %s", path, result.returncode, result.stderr.strip())
        return None
    return int(fields[0]) * 1024


def estimate_bytes(paths: Iterable[Path], privileged: bool = False) -> int:
    """
    Total size of a collected path set, in bytes.

    Privileged paths are sized through sudo when not running as root, and
    fall back to the unprivileged walk if sudo fails.
    """
    use_sudo = privileged and not is_root()
    total = 0
    for p in paths:
        size = sudo_path_size(p) if use_sudo else None
        total += path_size(p) if size is None else size
    return total


def get_disk_usage(mount_point: str = "/") -> DiskUsage:
    """
    Get overall disk usage for a mount point.

    Args:
        mount_point: Mount point to check (default: /)

    Returns:
        DiskUsage with total, used, and free bytes
    """
    usage = shutil.disk_usage(mount_point)
    return DiskUsage(
        total_bytes=usage.total,
        used_bytes=usage.used,
        free_bytes=usage.free,
        mount_point=mount_point,
    )
