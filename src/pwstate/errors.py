"""Exceptions raised by the pwstate pipeline."""


class PasswordStateError(Exception):
    """Base class for every error that aborts a run."""


class ConfigValidationError(PasswordStateError):
    """Raised when the configuration fails validation."""


class FetchError(PasswordStateError):
    """Raised when the password list cannot be retrieved or decoded."""


class EmptyResultError(PasswordStateError):
    """Raised when no secrets were produced and the run must not continue."""


class WriteError(PasswordStateError):
    """Raised when the output file cannot be written."""
