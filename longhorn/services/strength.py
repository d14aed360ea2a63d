"""
Connection Strength - additive compatibility score between two students.

SCORING (each term independent):
- +4 if the two are each other's current roommate
- +3 per shared internship occurrence
- +2 for the same major (exact match)
- +1 for the same age

The score is symmetric and has no upper bound. A score of 0 means the
pair gets no edge in the compatibility graph.
"""

from collections import Counter

from longhorn.models.student import Student

ROOMMATE_POINTS = 4
SHARED_INTERNSHIP_POINTS = 3
SAME_MAJOR_POINTS = 2
SAME_AGE_POINTS = 1


def are_roommates(a: Student, b: Student) -> bool:
    return a.roommate == b.name and b.roommate == a.name


def shared_internship_count(a: Student, b: Student) -> int:
    """
    Count shared internship occurrences.

    Duplicate entries are not collapsed: a company listed twice by one
    student and once by the other counts 2 * 1 times.
    """
    counts_a = Counter(a.previous_internships)
    counts_b = Counter(b.previous_internships)
    return sum(n * counts_b[company] for company, n in counts_a.items())


def connection_strength(a: Student, b: Student) -> int:
    """Score how strongly two distinct students are connected."""
    if a.name == b.name:
        return 0

    strength = 0
    if are_roommates(a, b):
        strength += ROOMMATE_POINTS
    strength += SHARED_INTERNSHIP_POINTS * shared_internship_count(a, b)
    if a.major == b.major:
        strength += SAME_MAJOR_POINTS
    if a.age == b.age:
        strength += SAME_AGE_POINTS
    return strength
