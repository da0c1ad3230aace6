"""Invocation of third-party cleaners for mac-cleanup."""

import logging
import shutil
import subprocess

log = logging.getLogger(__name__)

# Some cleaners (brew cleanup, docker prune) are slow on large caches
COMMAND_TIMEOUT = 600


def has_command(name: str) -> bool:
    """Check if a command exists on the system."""
    return shutil.which(name) is not None


def run_command(command: list[str], sudo: bool = False) -> bool:
    """
    Run an external cleaner, discarding its output.

    Failures never raise: a missing binary, a timeout or a non-zero exit
    all return False.

    Args:
        command: Command and arguments
        sudo: Run through non-interactive sudo

    Returns:
        True if the command exited with status 0
    """
    argv = ["sudo", "-n", *command] if sudo else list(command)

    try:
        result = subprocess.run(
            argv,
            capture_output=True,
            text=True,
            timeout=COMMAND_TIMEOUT,
        )
    except subprocess.TimeoutExpired:
        log.debug("Command timed out: %s", " ".join(argv))
        return False
    except OSError as e:
        log.debug("Could not run %s: %s", " ".join(argv), e)
        return False

    if result.returncode != 0:
        log.debug(
            "Command exited with %d: %s %s",
            result.returncode,
            " ".join(argv),
            result.stderr.strip(),
        )
        return False

    log.debug("Command succeeded: %s", " ".join(argv))
    return True
