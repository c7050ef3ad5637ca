"""Custom exceptions for Worklog CLI."""

from worklog_cli.utils import exit_codes


class WorklogError(Exception):
    """Base exception for all Worklog errors."""

    exit_code: int = exit_codes.ERROR_GENERAL

    def __init__(self, message: str, exit_code: int | None = None):
        super().__init__(message)
        if exit_code is not None:
            self.exit_code = exit_code


class InvalidDateError(WorklogError, ValueError):
    """Raised when a day/month/year combination does not exist."""

    exit_code = exit_codes.ERROR_INVALID_ARGS


class InvalidDurationError(WorklogError, ValueError):
    """Raised when duration text cannot be parsed."""

    exit_code = exit_codes.ERROR_INVALID_ARGS


class InvalidWeekdayError(WorklogError, ValueError):
    """Raised when a weekday name is not recognised."""

    exit_code = exit_codes.ERROR_INVALID_ARGS


class InvalidTimeError(WorklogError, ValueError):
    """Raised when a time of day cannot be parsed."""

    exit_code = exit_codes.ERROR_INVALID_ARGS


class AmbiguousSpecificationError(WorklogError, ValueError):
    """Raised when mutually exclusive date options are combined."""

    exit_code = exit_codes.ERROR_INVALID_ARGS


class NotFoundError(WorklogError, LookupError):
    """Raised when a project, task or schedule does not exist."""

    exit_code = exit_codes.ERROR_NOT_FOUND


class ConflictError(WorklogError):
    """Raised when creating a resource that already exists."""

    exit_code = exit_codes.ERROR_CONFLICT


class CancelledError(WorklogError):
    """Raised when the user declines an interactive confirmation."""

    exit_code = exit_codes.ERROR_CANCELLED


class ConfigError(WorklogError):
    """Raised when the configuration cannot be read, written or updated."""

    exit_code = exit_codes.ERROR_CONFIG


class StorageError(WorklogError):
    """Raised when the database cannot be opened or migrated."""

    exit_code = exit_codes.ERROR_STORAGE
