"""
Pydantic Schemas - Record validation and export shapes

All record and export schemas in one file for simplicity.
"""

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from longhorn.core.exceptions import StudentRecordError
from longhorn.models.student import Student


# Error types that mean "the field was not really provided"
_MISSING_ERROR_TYPES = {"missing", "string_too_short"}

REQUIRED_FIELDS = ("name", "age", "gender", "year", "major", "gpa")


def split_list(value: Any) -> List[str]:
    """Split a comma separated cell into trimmed, non-empty items."""
    if value is None:
        return []
    if isinstance(value, str):
        items = value.split(",")
    else:
        items = list(value)
    return [str(item).strip() for item in items if str(item).strip()]


# ============================================================
# STUDENT RECORD (input)
# ============================================================

class StudentRecord(BaseModel):
    model_config = ConfigDict(str_strip_whitespace=True, extra="ignore")

    name: str = Field(..., min_length=1)
    age: int
    gender: str = Field(..., min_length=1)
    year: int
    major: str = Field(..., min_length=1)
    gpa: float
    roommate_preferences: List[str] = []
    previous_internships: List[str] = []

    @field_validator("roommate_preferences", "previous_internships", mode="before")
    @classmethod
    def parse_list_cell(cls, value: Any) -> List[str]:
        return split_list(value)

    def to_student(self) -> Student:
        return Student(
            name=self.name,
            age=self.age,
            gender=self.gender,
            year=self.year,
            major=self.major,
            gpa=self.gpa,
            roommate_preferences=tuple(self.roommate_preferences),
            previous_internships=tuple(self.previous_internships),
        )


def describe_record_errors(exc: ValidationError) -> StudentRecordError:
    """Turn a pydantic ValidationError into one StudentRecordError."""
    missing: List[str] = []
    invalid: List[str] = []
    details: List[str] = []

    for error in exc.errors():
        field = str(error["loc"][0]) if error["loc"] else "record"
        if error["type"] in _MISSING_ERROR_TYPES:
            if field not in missing:
                missing.append(field)
        elif field not in invalid:
            invalid.append(field)
            details.append(f"Invalid {field}: '{error.get('input')}'")

    # Report missing fields in declaration order
    missing.sort(key=lambda f: REQUIRED_FIELDS.index(f) if f in REQUIRED_FIELDS else len(REQUIRED_FIELDS))

    parts = []
    if missing:
        parts.append("Missing required student fields: " + ", ".join(missing))
    parts.extend(details)
    return StudentRecordError("; ".join(parts), fields=missing + invalid)


def build_student(data: Dict[str, Any]) -> Student:
    """
    Validate a raw record and build the Student.

    Raises:
        StudentRecordError naming every missing or invalid field
    """
    # Blank cells count as missing, as in the flat-file format
    data = {k: v for k, v in data.items() if not (isinstance(v, str) and not v.strip())}
    try:
        record = StudentRecord.model_validate(data)
    except ValidationError as e:
        raise describe_record_errors(e) from e
    return record.to_student()


# ============================================================
# EXPORT SCHEMAS (dashboard data.json)
# ============================================================

class NodeOut(BaseModel):
    id: str
    group: str
    roommate: str = "None"
    internships: List[str] = []


class LinkOut(BaseModel):
    source: str
    target: str
    value: int


class NetworkExport(BaseModel):
    nodes: List[NodeOut] = []
    links: List[LinkOut] = []
    logs: List[str] = []
    referral_path: Optional[List[str]] = None
    pods: Optional[List[List[str]]] = None
