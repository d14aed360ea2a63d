"""
Data Parser - read student records from a line-oriented text file.

Format: one block per student, blocks separated by blank lines, each line
`Key: value`. Keys are case-insensitive and spaces are ignored, so
"Roommate Preferences" and "roommatepreferences" are the same key.

    Name: Alice
    Age: 20
    Gender: Female
    Year: 2
    Major: Computer Science
    GPA: 3.5
    RoommatePreferences: Bob, Charlie
    PreviousInternships: Google

Any invalid block fails the whole file; callers never get a partial list.
"""

from pathlib import Path
from typing import Dict, List, Tuple, Union

from longhorn.core.exceptions import StudentRecordError
from longhorn.models.student import Student
from longhorn.schemas.schemas import build_student

# Normalised file key -> record field
FIELD_KEYS = {
    "name": "name",
    "age": "age",
    "gender": "gender",
    "year": "year",
    "major": "major",
    "gpa": "gpa",
    "roommatepreferences": "roommate_preferences",
    "previousinternships": "previous_internships",
}


def normalize_key(key: str) -> str:
    return "".join(key.split()).replace("_", "").lower()


def split_blocks(text: str) -> List[Tuple[int, List[str]]]:
    """Split text into (first line number, lines) blocks on blank lines."""
    blocks = []
    current: List[str] = []
    start = 0
    for number, line in enumerate(text.splitlines(), 1):
        if not line.strip():
            if current:
                blocks.append((start, current))
                current = []
            continue
        if not current:
            start = number
        current.append(line)
    if current:
        blocks.append((start, current))
    return blocks


def parse_block(lines: List[str]) -> Dict[str, str]:
    """Map the `Key: value` lines of one block to record fields."""
    record: Dict[str, str] = {}
    for raw in lines:
        line = raw.strip()
        idx = line.find(":")
        if idx <= 0:
            continue
        key = normalize_key(line[:idx])
        field = FIELD_KEYS.get(key, key)
        record[field] = line[idx + 1:].strip()
    return record


def parse_student_text(text: str) -> List[Student]:
    """
    Parse every student block in `text`.

    Raises:
        StudentRecordError with the block's starting line on the first bad block
    """
    students = []
    for start, lines in split_blocks(text):
        try:
            students.append(build_student(parse_block(lines)))
        except StudentRecordError as e:
            raise StudentRecordError(f"Student block at line {start}: {e}", fields=e.fields) from e
    return students


def parse_students(filename: Union[str, Path]) -> List[Student]:
    """Read and parse a student data file. OSError propagates to the caller."""
    content = Path(filename).read_text(encoding="utf-8")
    return parse_student_text(content)
