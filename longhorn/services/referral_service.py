"""
Referral Path Service - cheapest chain of connections to a target company.

Runs Dijkstra over the compatibility graph from a start student and stops
at the first settled student who has interned at the company.

EDGE COST:
cost = 1 / (weight + 1), so stronger connections are cheaper to traverse.
Non-positive weights are never traversed.

An empty path means "no referral exists" and is a normal result.
"""

import heapq
import itertools
import logging
import math
from typing import Dict, Iterable, List, Optional, Sequence

from longhorn.models.student import Cohort, Student, StudentRef, student_name
from longhorn.services.graph_service import StudentGraph

logger = logging.getLogger(__name__)


def edge_cost(weight: int) -> float:
    return 1.0 / (weight + 1)


class ReferralPathFinder:
    """
    Finds referral paths inside one graph.

    Args:
        graph: StudentGraph to search
        students: the students the graph was built from (for internship lookups)
    """

    def __init__(self, graph: StudentGraph, students: Iterable[Student]):
        self.graph = graph
        self.cohort = students if isinstance(students, Cohort) else Cohort(students)

    def _has_interned(self, name: str, company: str) -> bool:
        student = self.cohort.get(name)
        return student is not None and student.has_interned_at(company)

    def find_referral_path(self, start: StudentRef, target_company: str) -> List[str]:
        """
        Cheapest path from `start` to any student who interned at `target_company`.

        Returns:
            Names from start to the referral contact (inclusive), or [] if none

        Raises:
            KeyError if `start` is not in the graph
        """
        start_name = student_name(start)
        if start_name not in self.graph:
            raise KeyError(start_name)

        if self._has_interned(start_name, target_company):
            return [start_name]

        distances: Dict[str, float] = {start_name: 0.0}
        previous: Dict[str, Optional[str]] = {start_name: None}
        visited = set()

        # Counter keeps heap entries comparable when distances tie
        counter = itertools.count()
        queue = [(0.0, next(counter), start_name)]

        while queue:
            distance, _, current = heapq.heappop(queue)
            if current in visited:
                continue
            visited.add(current)

            if self._has_interned(current, target_company):
                path = self._reconstruct(previous, current)
                logger.info(
                    "Referral path to %s: %s (cost %.4f)",
                    target_company, " -> ".join(path), distance
                )
                return path

            for edge in self.graph.neighbors(current):
                if edge.weight <= 0 or edge.neighbor in visited:
                    continue
                candidate = distance + edge_cost(edge.weight)
                if candidate < distances.get(edge.neighbor, math.inf):
                    distances[edge.neighbor] = candidate
                    previous[edge.neighbor] = current
                    heapq.heappush(queue, (candidate, next(counter), edge.neighbor))

        logger.info("No referral path from %s to %s", start_name, target_company)
        return []

    @staticmethod
    def _reconstruct(previous: Dict[str, Optional[str]], end: str) -> List[str]:
        path = []
        node: Optional[str] = end
        while node is not None:
            path.append(node)
            node = previous[node]
        path.reverse()
        return path

    def path_cost(self, path: Sequence[str]) -> float:
        """
        Total traversal cost of a path.

        Raises:
            ValueError if two consecutive students are not connected
        """
        total = 0.0
        for a, b in zip(path, path[1:]):
            weight = self.graph.weight(a, b)
            if weight <= 0:
                raise ValueError(f"No edge between '{a}' and '{b}'")
            total += edge_cost(weight)
        return total
