"""Exceptions raised by the selection core."""


class ArtselectError(Exception):
    """Base class for all errors raised by :mod:`artselect`."""


class BulkCountError(ArtselectError, ValueError):
    """Raised when a bulk selection count is not a positive integer."""

    message = "Please enter a valid number"

    def __init__(self, value: object = None) -> None:
        self.value = value
        super().__init__(self.message)


class RecordSourceError(ArtselectError):
    """Raised when the record source answers with an unusable payload."""


class SessionBusyError(ArtselectError, RuntimeError):
    """Raised when a fetch is requested while another one is in flight."""
