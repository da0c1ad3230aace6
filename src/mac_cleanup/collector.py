"""Expand cleanup patterns into concrete path sets."""

import glob
import logging
import os
from pathlib import Path
from typing import Iterable, Mapping, Optional

from mac_cleanup.scanner import expand_path

log = logging.getLogger(__name__)


def expand_pattern(pattern: str, environ: Optional[Mapping[str, str]] = None) -> list[Path]:
    """
    Expand a single glob pattern against the live filesystem.

    Only entries that exist right now are returned. Symlinks count as
    existing entries in their own right and are never resolved.

    Args:
        pattern: Shell-style glob (supports ~ and $VAR)
        environ: Environment used for variable expansion

    Returns:
        Matching paths, sorted
    """
    expanded = str(expand_path(pattern, environ))
    matches = sorted(glob.glob(expanded)) if glob.has_magic(expanded) else [expanded]
    return [Path(m) for m in matches if os.path.lexists(m)]


def collect(
    patterns: Iterable[str],
    environ: Optional[Mapping[str, str]] = None,
) -> list[Path]:
    """
    Collect the paths matched by ``patterns``.

    Duplicates across patterns collapse to their first occurrence, compared
    by exact path string.

    Args:
        patterns: Glob patterns, in the order they should be collected
        environ: Environment used for variable expansion

    Returns:
        Ordered list of unique, existing paths
    """
    seen: set[str] = set()
    paths: list[Path] = []

    for pattern in patterns:
        matches = expand_pattern(pattern, environ)
        if not matches:
            log.debug("No matches for %s", pattern)
        for path in matches:
            key = str(path)
            if key in seen:
                continue
            seen.add(key)
            paths.append(path)

    return paths
