"""Privilege elevation via sudo for mac-cleanup."""

import logging
import os
import subprocess
import threading
from contextlib import contextmanager
from typing import Iterator

from mac_cleanup.errors import PrivilegeError

log = logging.getLogger(__name__)

# How often the cached sudo credentials are refreshed (seconds)
KEEPALIVE_INTERVAL = 60


def is_root() -> bool:
    """Check if the current process is running as root."""
    return os.geteuid() == 0


def acquire_sudo() -> None:
    """
    Ask for the administrator password upfront.

    Raises:
        PrivilegeError: If sudo is missing or authentication is refused.
    """
    try:
        proc = subprocess.run(["sudo", "-v"])
    except OSError as e:
        raise PrivilegeError(f"Could not run sudo: {e}")

    if proc.returncode != 0:
        raise PrivilegeError("Administrator privileges are required")


class SudoKeepAlive:
    """Background thread that keeps cached sudo credentials fresh."""

    def __init__(self, interval: float = KEEPALIVE_INTERVAL) -> None:
        self.interval = interval
        self._stop = threading.Event()
        self._thread = threading.Thread(
            target=self._run, name="sudo-keepalive", daemon=True
        )

    @property
    def running(self) -> bool:
        return self._thread.is_alive()

    def start(self) -> None:
        self._thread.start()

    def stop(self) -> None:
        self._stop.set()
        if self._thread.is_alive():
            self._thread.join()

    def _run(self) -> None:
        while not self._stop.wait(self.interval):
            try:
                subprocess.run(["sudo", "-n", "true"], capture_output=True)
            except OSError as e:
                log.debug("sudo keep-alive failed: %s", e)


@contextmanager
def sudo_session(interval: float = KEEPALIVE_INTERVAL) -> Iterator[None]:
    """
    Hold elevated privileges for the duration of the block.

    The keep-alive thread is stopped on every exit path, including
    exceptions and KeyboardInterrupt. Running as root needs no session.
    """
    if is_root():
        yield
        return

    acquire_sudo()
    keepalive = SudoKeepAlive(interval)
    keepalive.start()
    log.debug("sudo keep-alive started")
    try:
        yield
    finally:
        keepalive.stop()
        log.debug("sudo keep-alive stopped")
