"""
Roommate Matching Service - deferred acceptance (Gale-Shapley variant).

Every student is both proposer and receiver:
1. Students with a non-empty preference list start free and queued
2. A free proposer proposes to the next name on its list (cursor advances)
3. A free receiver accepts; a matched receiver keeps whichever candidate
   ranks higher on its OWN list and the loser goes back to the queue
4. The queue drains after at most sum(len(preferences)) proposals

Names that do not resolve to a student (or point at the proposer itself)
are skipped. Students left unmatched are a valid result, not an error.
"""

import logging
import math
from collections import deque
from typing import Deque, Dict, Iterable, List, Optional

from longhorn.models.student import Cohort, Student

logger = logging.getLogger(__name__)

UNRANKED = math.inf


def build_rank_map(student: Student) -> Dict[str, int]:
    """Inverse of a preference list: name -> index of its first occurrence."""
    ranks: Dict[str, int] = {}
    for index, name in enumerate(student.roommate_preferences):
        ranks.setdefault(name, index)
    return ranks


class GaleShapley:
    """
    Assigns roommates within one cohort.

    Usage:
        matcher = GaleShapley(cohort)
        matches = matcher.run()
    """

    def __init__(self, students: Iterable[Student]):
        self.cohort = students if isinstance(students, Cohort) else Cohort(students)
        self._next_index: Dict[str, int] = {}
        self._rank_maps: Dict[str, Dict[str, int]] = {}
        self._free: Deque[str] = deque()
        self.proposals = 0

    def _reset(self) -> None:
        """Clear assignments and cursors left over from any earlier run."""
        self.cohort.clear_roommates()
        self._next_index = {s.name: 0 for s in self.cohort}
        self._rank_maps = {s.name: build_rank_map(s) for s in self.cohort}
        self._free = deque(s.name for s in self.cohort if s.roommate_preferences)
        self.proposals = 0

    def _has_candidates(self, student: Student) -> bool:
        return self._next_index[student.name] < len(student.roommate_preferences)

    def _requeue(self, student: Student) -> None:
        if self._has_candidates(student):
            self._free.append(student.name)

    def prefers(self, receiver: Student, candidate: Student, current: Student) -> bool:
        """True if `receiver` ranks `candidate` strictly above `current`."""
        ranks = self._rank_maps.get(receiver.name, {})
        return ranks.get(candidate.name, UNRANKED) < ranks.get(current.name, UNRANKED)

    def run(self) -> Dict[str, Optional[str]]:
        """
        Run the matching to completion.

        Returns:
            Dict of student name -> roommate name (None when unmatched).
            The same assignment is written to each Student.roommate.
        """
        self._reset()

        while self._free:
            proposer = self.cohort[self._free.popleft()]

            # Matched while still queued elsewhere
            if proposer.roommate is not None:
                continue

            if not self._has_candidates(proposer):
                continue

            index = self._next_index[proposer.name]
            candidate_name = proposer.roommate_preferences[index]
            self._next_index[proposer.name] = index + 1
            self.proposals += 1

            receiver = self.cohort.get(candidate_name)
            if receiver is None or receiver.name == proposer.name:
                logger.debug("%s: skipping unknown preference '%s'", proposer.name, candidate_name)
                self._requeue(proposer)
                continue

            current = self.cohort.roommate_of(receiver)
            if current is None:
                self.cohort.assign_roommates(proposer, receiver)
            elif self.prefers(receiver, proposer, current):
                # Receiver trades up; the displaced partner becomes free
                self.cohort.assign_roommates(proposer, receiver)
                self._requeue(current)
            else:
                self._requeue(proposer)

        for a, b in self.cohort.roommate_pairs():
            logger.info("%s <-> %s", a, b)

        return self.matches()

    def matches(self) -> Dict[str, Optional[str]]:
        return {s.name: s.roommate for s in self.cohort}

    def unmatched(self) -> List[str]:
        return [s.name for s in self.cohort if s.roommate is None]


# ============================================================
# CONVENIENCE FUNCTIONS
# ============================================================

def assign_roommates(students: Iterable[Student]) -> Dict[str, Optional[str]]:
    """Run a fresh matching over `students` and return name -> roommate."""
    return GaleShapley(students).run()
