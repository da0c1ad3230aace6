"""mac-cleanup - reclaim disk space from macOS caches, logs and temp files."""

__version__ = "0.1.0"
