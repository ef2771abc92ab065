"""
Exceptions
==========

Errors raised by the co-authorship network builder.

Skipped records and malformed affiliation blocks are not errors; they are
logged and counted by the builder. Only conditions that leave the caller
without a usable graph are raised.
"""

from typing import Optional


class CoauthorNetworkError(Exception):
    """Base class for all co-authorship network errors."""


class EmptyResultError(CoauthorNetworkError):
    """No record survived filtering, so no graph can be produced."""

    def __init__(self, records_seen: int) -> None:
        self.records_seen = records_seen
        super().__init__(
            f"No data remaining after filtering missing records "
            f"({records_seen} record(s) read)"
        )


class InputSizeExceeded(CoauthorNetworkError):
    """Input is larger than the configured bound."""

    def __init__(self, what: str, limit: int, actual: int, eid: Optional[str] = None) -> None:
        self.what = what
        self.limit = limit
        self.actual = actual
        self.eid = eid
        message = f"Too many {what}: limit is {limit:,}, got at least {actual:,}"
        if eid is not None:
            message += f" (publication {eid})"
        super().__init__(message)


class InputFormatError(CoauthorNetworkError):
    """The export file could not be read as bibliographic records."""
