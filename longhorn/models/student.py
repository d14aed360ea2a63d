"""
Student entity and the Cohort that owns a population of students.

Students reference each other only by name. The roommate link is a name
key resolved through the Cohort, never an object reference.
"""

from typing import Dict, Iterable, Iterator, List, Optional, Tuple, Union

from pydantic import BaseModel, Field

from longhorn.core.exceptions import DuplicateStudentError


class Student(BaseModel):
    """
    A university student.

    Profile fields are frozen after construction. `roommate` holds the
    name of the assigned partner and is written only by the matching engine.
    """

    name: str = Field(..., min_length=1, frozen=True)
    age: int = Field(..., frozen=True)
    gender: str = Field(..., frozen=True)
    year: int = Field(..., frozen=True)
    major: str = Field(..., frozen=True)
    gpa: float = Field(..., frozen=True)
    roommate_preferences: Tuple[str, ...] = Field(default=(), frozen=True)
    previous_internships: Tuple[str, ...] = Field(default=(), frozen=True)
    roommate: Optional[str] = None

    def has_interned_at(self, company: str) -> bool:
        return company in self.previous_internships

    def __str__(self) -> str:
        return (
            f"{self.name} ({self.age}, {self.gender}, year {self.year}, {self.major}, GPA {self.gpa}) "
            f"prefers [{', '.join(self.roommate_preferences)}] "
            f"interned at [{', '.join(self.previous_internships)}]"
        )


StudentRef = Union[str, Student]


def student_name(ref: StudentRef) -> str:
    """Accept either a Student or its name."""
    return ref.name if isinstance(ref, Student) else ref


class Cohort:
    """
    Ordered population of students with a name index.

    Names must be unique; the roommate relation is kept reciprocal by
    only ever writing it in pairs.
    """

    def __init__(self, students: Iterable[Student] = ()):
        self._students: List[Student] = []
        self._by_name: Dict[str, Student] = {}
        for student in students:
            if student.name in self._by_name:
                raise DuplicateStudentError(student.name)
            self._students.append(student)
            self._by_name[student.name] = student

    # --------------------------------------------------------
    # Lookup
    # --------------------------------------------------------

    def get(self, ref: StudentRef) -> Optional[Student]:
        return self._by_name.get(student_name(ref))

    def __getitem__(self, ref: StudentRef) -> Student:
        return self._by_name[student_name(ref)]

    def __contains__(self, ref: object) -> bool:
        if isinstance(ref, (str, Student)):
            return student_name(ref) in self._by_name
        return False

    def __iter__(self) -> Iterator[Student]:
        return iter(self._students)

    def __len__(self) -> int:
        return len(self._students)

    def names(self) -> List[str]:
        return [s.name for s in self._students]

    # --------------------------------------------------------
    # Roommate relation
    # --------------------------------------------------------

    def roommate_of(self, ref: StudentRef) -> Optional[Student]:
        partner = self[ref].roommate
        return self._by_name.get(partner) if partner is not None else None

    def assign_roommates(self, a: StudentRef, b: StudentRef) -> None:
        """Pair two students, releasing any previous partners first."""
        first, second = self[a], self[b]
        if first.name == second.name:
            raise ValueError(f"Student '{first.name}' cannot room with themselves")
        self.release(first)
        self.release(second)
        first.roommate = second.name
        second.roommate = first.name

    def release(self, ref: StudentRef) -> None:
        """Clear a student's roommate slot and the partner's back-link."""
        student = self[ref]
        partner = self.roommate_of(student)
        student.roommate = None
        if partner is not None and partner.roommate == student.name:
            partner.roommate = None

    def clear_roommates(self) -> None:
        for student in self._students:
            student.roommate = None

    def roommate_pairs(self) -> List[Tuple[str, str]]:
        """Each assigned pair once, names in lexicographic order."""
        pairs = []
        for student in self._students:
            partner = student.roommate
            if partner is not None and student.name < partner:
                pairs.append((student.name, partner))
        return pairs
