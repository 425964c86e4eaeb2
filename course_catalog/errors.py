"""Exceptions raised while loading and querying a catalog."""

from __future__ import annotations


class CatalogError(Exception):
    """Base class for every catalog failure."""


class SourceUnavailableError(CatalogError):
    """The raw course lines could not be obtained."""


class CatalogValidationError(CatalogError, ValueError):
    """A batch of lines was rejected; nothing from it was loaded."""

    kind = "malformed"

    def __init__(self, reason: str, record_number: int | None = None):
        self.reason = reason
        self.record_number = record_number
        if record_number is not None:
            message = f"record {record_number}: {reason}"
        else:
            message = reason
        super().__init__(message)


class MalformedRecordError(CatalogValidationError):
    kind = "malformed"


class DanglingPrerequisiteError(CatalogValidationError):
    kind = "dangling"

    def __init__(self, course_id: str, prerequisite: str, record_number: int | None = None):
        self.course_id = course_id
        self.prerequisite = prerequisite
        super().__init__(
            f"course '{course_id}' lists prerequisite '{prerequisite}' which is not defined",
            record_number,
        )


class CatalogInvariantError(CatalogError, AssertionError):
    """Internal bookkeeping went wrong; indicates a bug, not bad input."""


class CatalogNotLoadedError(CatalogError):
    """A query was made before any catalog was loaded."""
