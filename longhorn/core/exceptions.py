"""
Error types raised by the Longhorn Network package.

Only structural problems are errors. An unmatched student or an empty
referral path is a normal result and never raises.
"""

from typing import Iterable, List


class LonghornError(Exception):
    """Base class for all package errors."""


class StudentRecordError(LonghornError, ValueError):
    """A student record is missing required fields or has invalid values."""

    def __init__(self, message: str, fields: Iterable[str] = ()):
        super().__init__(message)
        self.fields: List[str] = list(fields)


class DuplicateStudentError(LonghornError, ValueError):
    """Two students in one population share the same name."""

    def __init__(self, name: str):
        super().__init__(f"Duplicate student name: '{name}'")
        self.name = name


class ExportError(LonghornError, OSError):
    """Writing an export file failed."""
