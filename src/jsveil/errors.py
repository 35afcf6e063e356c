# src/jsveil/errors.py
from pathlib import Path


class JsveilError(Exception):
    """Base class for all jsveil errors."""


class FatalArgumentError(JsveilError):
    """Missing directory argument or a directory that does not exist."""

    def __init__(self, message: str, show_usage: bool = False):
        self.show_usage = show_usage
        super().__init__(message)


class DiscoveryAccessError(JsveilError):
    def __init__(self, path: Path, cause: OSError):
        self.path = path
        self.cause = cause
        super().__init__(f"Cannot access {path}: {cause.strerror or cause}")


class NoScriptBlockError(JsveilError):
    def __init__(self, path: Path):
        self.path = path
        super().__init__(f"No <script> block found in {path}")


class TransformError(JsveilError):
    """The obfuscation engine failed on a piece of source."""
