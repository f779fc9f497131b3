"""Exception classes for frieza-action operations."""


class FriezaActionError(Exception):
    """Base exception for frieza-action operations."""

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


class ResolutionError(FriezaActionError):
    """Raised when a release cannot be looked up or parsed."""

    error_prefix = "Release resolution failed"


class AssetNotFoundError(FriezaActionError):
    """Raised when no release asset matches the host platform."""

    error_prefix = "Asset lookup failed"


class FetchError(FriezaActionError):
    """Raised when downloading or extracting an archive fails."""

    error_prefix = "Fetch failed"


class NormalizationError(FriezaActionError):
    """Raised when the extracted binary cannot be renamed."""

    error_prefix = "Binary normalization failed"


class ExecutionError(FriezaActionError):
    """Raised when the tool exits non-zero, fails to start or times out."""

    error_prefix = "Command failed"


class InputError(FriezaActionError):
    """Raised when a required action input is missing."""

    error_prefix = "Invalid input"
