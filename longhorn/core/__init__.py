"""
Core module - configuration, logging setup and error types.
"""
from longhorn.core.config import Settings, get_settings
from longhorn.core.exceptions import (
    LonghornError,
    StudentRecordError,
    DuplicateStudentError,
    ExportError,
)

__all__ = [
    "Settings",
    "get_settings",
    "LonghornError",
    "StudentRecordError",
    "DuplicateStudentError",
    "ExportError",
]
