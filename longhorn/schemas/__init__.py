"""
Schemas module - validation of incoming records and shape of exports.

Difference from models:
- Models: Internal data structures (Student, Cohort)
- Schemas: Contract with the outside world (records in, JSON out)
"""
from longhorn.schemas.schemas import (
    StudentRecord,
    NodeOut,
    LinkOut,
    NetworkExport,
    build_student,
)

__all__ = ["StudentRecord", "NodeOut", "LinkOut", "NetworkExport", "build_student"]
