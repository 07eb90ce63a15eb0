"""Exception classes for sumcheck operations."""


class SumcheckError(Exception):
    """Base exception for sumcheck operations."""

    error_prefix: str = "Operation failed"

    def __init__(self, message: str, target: str | None = None) -> None:
        """Initialize error with message and optional target.

        Args:
            message: Error message describing the failure.
            target: Optional name of the target that failed.

        """
        super().__init__(message)
        self.message = message
        self.target = target

    def __str__(self) -> str:
        """Return formatted error message."""
        if self.target:
            return f"{self.error_prefix} for '{self.target}': {self.message}"
        return f"{self.error_prefix}: {self.message}"


class DigestError(SumcheckError):
    """Raised when a file cannot be read while computing its digest."""

    error_prefix = "Digest failed"


class UnsupportedAlgorithmError(SumcheckError):
    """Raised when no digest backend exists for an algorithm name."""

    error_prefix = "Unsupported algorithm"


class SettingsError(SumcheckError):
    """Raised when the settings file holds an invalid value."""

    error_prefix = "Invalid settings"
