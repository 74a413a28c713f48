"""
Bundle Error Hierarchy

Defines all custom exceptions used by docbundle.
Each failure condition gets its own error type so callers can react
precisely, while BundleError still allows broad exception handling.

Error Categories:
- Argument Errors: empty delimiter, malformed selection policy
- Range Errors: selection index outside the bundle's variants
- Input Errors: bundle file missing, unreadable, or not UTF-8
- Output Errors: destination exists or cannot be written

None of these are transient. Nothing is retried; every error is
surfaced to the caller as soon as it is detected.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Optional


class BundleError(Exception):
    """Base exception for all docbundle errors."""
    pass


class InvalidArgumentError(BundleError, ValueError):
    """An argument cannot be used for the requested operation.

    Raised when:
    - The delimiter is empty or not a string
    - A selection policy string cannot be parsed
    - A variant sequence handed to the selector is empty
    - A variant to be packed already contains the delimiter

    Attributes:
        argument: Name of the offending argument
        value: The rejected value
    """

    def __init__(
        self,
        message: str,
        argument: Optional[str] = None,
        value: Optional[Any] = None,
    ):
        super().__init__(message)
        self.argument = argument
        self.value = value


class OutOfRangeError(BundleError, IndexError):
    """A selection ordinal is not valid for the bundle.

    Raised by index(n) policies when n is outside [0, count - 1].
    No fallback variant is ever substituted.

    Attributes:
        index: The requested ordinal
        count: Number of variants available
    """

    def __init__(self, message: str, index: int = 0, count: int = 0):
        super().__init__(message)
        self.index = index
        self.count = count


class BundleReadError(BundleError):
    """Error reading a bundle source file.

    Attributes:
        path: Path (or glob pattern) that could not be read
        original_error: The underlying I/O or decode error
    """

    def __init__(
        self,
        message: str,
        path: Optional[str] = None,
        original_error: Optional[Exception] = None,
    ):
        super().__init__(message)
        self.path = path
        self.original_error = original_error


class OutputWriteError(BundleError):
    """Error writing a selected variant or a packed bundle.

    Attributes:
        output_path: Path where write was attempted
        original_error: The underlying file system error
    """

    def __init__(
        self,
        message: str,
        output_path: Optional[str] = None,
        original_error: Optional[Exception] = None,
    ):
        super().__init__(message)
        self.output_path = output_path
        self.original_error = original_error


@dataclass
class BundleErrorInfo:
    """Structured error information for user-friendly error reporting.

    Attributes:
        error_type: Type of error (e.g., "OutOfRangeError")
        message: Human-readable error message
        details: Additional context (path, index, count, etc.)
        suggestion: Suggested action for the user
    """
    error_type: str
    message: str
    details: Dict[str, Any] = field(default_factory=dict)
    suggestion: str = ""

    @classmethod
    def from_exception(cls, error: Exception) -> "BundleErrorInfo":
        """Create BundleErrorInfo from an exception."""
        details: Dict[str, Any] = {}
        suggestion = ""

        if isinstance(error, InvalidArgumentError):
            if error.argument:
                details["argument"] = error.argument
            if error.argument == "delimiter":
                suggestion = "Pass --delimiter or set DOCBUNDLE_DELIMITER to the bundle's separator token."
            elif error.argument == "policy":
                suggestion = "Use one of: first, last, index(N)."
            else:
                suggestion = "Check the arguments passed to the command."

        elif isinstance(error, OutOfRangeError):
            details["index"] = error.index
            details["count"] = error.count
            if error.count:
                suggestion = f"Choose an index between 0 and {error.count - 1}, or use 'first'/'last'."
            else:
                suggestion = "Choose an index within the bundle, or use 'first'/'last'."

        elif isinstance(error, BundleReadError):
            if error.path:
                details["path"] = error.path
            suggestion = "Check that the file exists and is UTF-8 encoded text."

        elif isinstance(error, OutputWriteError):
            if error.output_path:
                details["output_path"] = error.output_path
            suggestion = "Use --force to overwrite, or check file permissions."

        return cls(
            error_type=type(error).__name__,
            message=str(error),
            details=details,
            suggestion=suggestion,
        )

    def format_human(self) -> str:
        """Format for console output."""
        lines = [f"Error: {self.message}"]
        if self.suggestion:
            lines.append(f"  → {self.suggestion}")
        return "\n".join(lines)
