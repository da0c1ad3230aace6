"""Exceptions for mac-cleanup."""


class MacCleanupError(Exception):
    """Base class for fatal mac-cleanup errors."""


class PrivilegeError(MacCleanupError):
    """Raised when elevated privileges cannot be obtained."""
