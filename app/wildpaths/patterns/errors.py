"""Exceptions raised while compiling patterns and walking directory trees."""


class WildpathsError(Exception):
    """Base exception for wildpaths errors."""


class PatternSyntaxError(WildpathsError):
    """Raised when a pattern cannot be compiled.

    Attributes:
        pattern: The raw pattern text that failed to compile.
    """

    def __init__(self, pattern: str, reason: str) -> None:
        self.pattern = pattern
        super().__init__(f"Invalid pattern {pattern!r}: {reason}")


class DirectoryReadError(WildpathsError):
    """Raised when a directory cannot be listed and read errors are fatal.

    Attributes:
        directory: Directory path relative to the scan root ("" for the root).
    """

    def __init__(self, directory: str, cause: OSError) -> None:
        self.directory = directory
        shown = directory or "."
        super().__init__(f"Cannot read directory {shown!r}: {cause}")


class ScanCancelledError(WildpathsError):
    """Raised when a scan is cancelled through its cancellation event."""
