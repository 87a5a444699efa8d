"""Exception types raised by taskpad.

Every error carries the exit code the CLI reports when it escapes a
command.
"""

from taskpad.utils.exit_codes import ERROR_GENERAL, ERROR_INVALID_ARGS, ERROR_NOT_FOUND


class AppError(Exception):
    """Custom application error with exit code."""

    exit_code = ERROR_GENERAL

    def __init__(self, message: str, exit_code: int | None = None):
        super().__init__(message)
        if exit_code is not None:
            self.exit_code = exit_code


class ValidationError(AppError):
    """Input rejected before any state was changed (e.g. empty description)."""

    exit_code = ERROR_INVALID_ARGS


class DecodeError(AppError):
    """Imported text could not be decoded into tasks."""

    exit_code = ERROR_INVALID_ARGS


class UnsupportedFormatError(AppError):
    """File format is neither JSON nor CSV."""

    exit_code = ERROR_INVALID_ARGS


class TaskNotFoundError(AppError):
    """No task (or file) matches the given reference."""

    exit_code = ERROR_NOT_FOUND
