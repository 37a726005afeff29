"""Exception hierarchy for the R2 indicator.

All package-specific exceptions inherit from R2Error so callers can catch
every indicator failure with a single except clause:

- ConfigurationError: invalid weight vectors, strategies or normalization bounds
- InsufficientDataError: a front too small for the requested operation
- FrontFileError: a front file that cannot be read or parsed
- ArgumentError: command-line usage errors

Example:
    >>> try:
    ...     indicator = R2.from_file("missing.txt", n_obj=3)
    ... except R2Error as e:
    ...     print(e.message)
"""

from typing import Any


class R2Error(Exception):
    """Base exception for all R2 indicator errors.

    Attributes:
        message: Human-readable error description.
        suggestion: Optional hint for fixing the error.
        details: Additional context (file names, indices, shapes).
    """

    def __init__(
        self,
        message: str,
        suggestion: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        self.message = message
        self.suggestion = suggestion
        self.details = details or {}
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        msg = self.message
        if self.suggestion:
            msg += f"\n\nSuggestion: {self.suggestion}"
        return msg


class ConfigurationError(R2Error):
    """Raised when weight vectors or normalization bounds are unusable."""


class InsufficientDataError(R2Error):
    """Raised when a front has too few points for the requested operation."""


class FrontFileError(R2Error):
    """Raised when a front file cannot be read or has the wrong layout."""


class ArgumentError(R2Error):
    """Raised when the command line is invoked with invalid arguments."""


__all__ = [
    "R2Error",
    "ConfigurationError",
    "InsufficientDataError",
    "FrontFileError",
    "ArgumentError",
]
