"""
Exception types raised by the record services and the strict number parser.

Neither type crosses into the rendering layer: the dashboard controller turns
DataFetchError into an error message and the normalizer turns
MalformedFieldError into zero.
"""


class ConsignTrackerError(Exception):
    """Base class for dashboard errors."""


class DataFetchError(ConsignTrackerError):
    """
    The raw record source could not be read.

    Attributes:
        status_code: HTTP status returned by the source, when there was one.
    """

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class MalformedFieldError(ConsignTrackerError, ValueError):
    """A numeric field held text with no parseable number in it."""

    def __init__(self, value: object) -> None:
        super().__init__(f"Not a number: {value!r}")
        self.value = value
