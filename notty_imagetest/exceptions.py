"""Custom exceptions for notty-imagetest."""

import logging
from pathlib import Path
from typing import Any

logger = logging.getLogger(__name__)


class ImageTestError(Exception):
    """Base exception class for all notty-imagetest errors.

    Construction leaves a DEBUG record carrying the cause's traceback. The
    CLI reports the error to the user itself, then exits with ``exit_code``.
    """

    exit_code: int = 1

    def __init__(
        self,
        message: str = "An error occurred in notty-imagetest",
        details: dict[str, Any] | None = None,
        cause: Exception | None = None,
    ) -> None:
        """Initialize the exception with optional details and cause.

        Args:
            message: Human-readable error description
            details: Context such as the file path or fixture name
            cause: The original exception that caused this one
        """
        self.message = message
        self.details = details or {}
        self.cause = cause

        super().__init__(self.describe())
        self._log_error()

    @property
    def context(self) -> str:
        """The details as ``key=value`` pairs, e.g. ``path=test.png``."""
        return ", ".join(f"{k}={v}" for k, v in self.details.items())

    def describe(self) -> str:
        """One line: message, context, then the underlying error."""
        parts = [self.message]
        if self.details:
            parts.append(f"Details: {self.context}")
        if self.cause is not None:
            parts.append(f"Caused by: {type(self.cause).__name__}: {self.cause}")
        return " | ".join(parts)

    def _log_error(self) -> None:
        suffix = f" ({self.context})" if self.details else ""
        logger.debug(
            "%s: %s%s",
            type(self).__name__,
            self.message,
            suffix,
            exc_info=self.cause,
        )


class ImageReadError(ImageTestError):
    """Raised when the image file cannot be opened or read."""

    def __init__(
        self,
        message: str = "Failed to read image file",
        path: Path | str | None = None,
        **kwargs: Any,
    ) -> None:
        """Initialize with file-specific context.

        Args:
            message: Error description
            path: The file that could not be read
            **kwargs: Additional details to include
        """
        details = kwargs.pop("details", {})
        if path is not None:
            details["path"] = str(path)
        self.path = path
        super().__init__(message, details=details, **kwargs)


class SequenceFormatError(ImageTestError):
    """Raised when a captured escape sequence cannot be decoded."""

    def __init__(
        self,
        message: str = "Malformed escape sequence",
        protocol: str | None = None,
        reason: str | None = None,
        **kwargs: Any,
    ) -> None:
        """Initialize with decoding context.

        Args:
            message: Error description
            protocol: The dialect being decoded ("natty" or "notty")
            reason: What was wrong with the input
            **kwargs: Additional details to include
        """
        details = kwargs.pop("details", {})
        if protocol:
            details["protocol"] = protocol
        if reason:
            details["reason"] = reason
        super().__init__(message, details=details, **kwargs)


class UnknownFixtureError(ImageTestError):
    """Raised when attempting to use a fixture that is not registered."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Unknown fixture: {name}")
