"""
Models module - in-memory entities shared by every service.

- Student: immutable profile plus one mutable roommate slot
- Cohort: the population arena, students indexed by name
"""
from longhorn.models.student import Student, Cohort

__all__ = ["Student", "Cohort"]
