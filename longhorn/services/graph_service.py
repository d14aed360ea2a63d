"""
Compatibility Graph - undirected weighted graph over a cohort.

HOW IT WORKS:
1. Register every student as a node (isolated nodes included)
2. Score every unordered pair with connection_strength (O(n^2), on purpose:
   a cohort is small and no pair is ever skipped)
3. Store each positive score as two half-edges with the same weight

The graph keeps names and weights only. Student data stays in the Cohort.
Any change to a student (e.g. a new roommate) requires a rebuild.
"""

import logging
from typing import Dict, Iterable, List, NamedTuple, Optional, Sequence, Set, Tuple

import numpy as np

from longhorn.models.student import Cohort, Student, StudentRef, student_name
from longhorn.services.strength import connection_strength

logger = logging.getLogger(__name__)


class Edge(NamedTuple):
    """Half-edge to a neighbouring student."""
    neighbor: str
    weight: int

    def __str__(self) -> str:
        return f"({self.neighbor}, {self.weight})"


class StudentGraph:
    """
    Weighted, undirected student graph.

    Usage:
        graph = StudentGraph(students)
        for edge in graph.neighbors("Alice"):
            print(edge.neighbor, edge.weight)
    """

    def __init__(self, students: Iterable[Student] = ()):
        cohort = students if isinstance(students, Cohort) else Cohort(students)
        self._adjacency: Dict[str, List[Edge]] = {}

        members = list(cohort)
        for student in members:
            self._adjacency[student.name] = []

        # No edge between two students means their strength is zero
        for i, first in enumerate(members):
            for second in members[i + 1:]:
                weight = connection_strength(first, second)
                if weight > 0:
                    self._add_edge(first.name, second.name, weight)

        logger.debug(
            "Built graph with %d nodes and %d edges",
            len(self._adjacency), len(self.edge_set())
        )

    def _add_edge(self, a: str, b: str, weight: int) -> None:
        self._adjacency[a].append(Edge(b, weight))
        self._adjacency[b].append(Edge(a, weight))

    # --------------------------------------------------------
    # Queries
    # --------------------------------------------------------

    def neighbors(self, student: StudentRef) -> List[Edge]:
        """
        Edges leaving a student.

        Raises:
            KeyError if the student is not in the graph (check membership first)
        """
        return list(self._adjacency[student_name(student)])

    def all_nodes(self) -> Set[str]:
        return set(self._adjacency)

    def nodes(self) -> List[str]:
        """Nodes in insertion order."""
        return list(self._adjacency)

    def weight(self, a: StudentRef, b: StudentRef) -> int:
        """Weight of the edge a-b, 0 if there is none."""
        target = student_name(b)
        for edge in self._adjacency.get(student_name(a), []):
            if edge.neighbor == target:
                return edge.weight
        return 0

    def edge_set(self) -> Set[Tuple[str, str, int]]:
        """Each undirected edge once as (source, target, weight), source < target."""
        edges = set()
        for name, half_edges in self._adjacency.items():
            for edge in half_edges:
                if name < edge.neighbor:
                    edges.add((name, edge.neighbor, edge.weight))
        return edges

    def adjacency_matrix(self, order: Optional[Sequence[str]] = None) -> np.ndarray:
        """Dense symmetric weight matrix; rows follow `order` (default: node order)."""
        order = list(order) if order is not None else self.nodes()
        index = {name: i for i, name in enumerate(order)}
        matrix = np.zeros((len(order), len(order)), dtype=np.int64)
        for name in order:
            for edge in self._adjacency[name]:
                if edge.neighbor in index:
                    matrix[index[name], index[edge.neighbor]] = edge.weight
        return matrix

    def display_graph(self) -> None:
        """Log every node with its edge list."""
        for name, edges in self._adjacency.items():
            logger.info("%s -> [%s]", name, ", ".join(str(e) for e in edges))

    def __contains__(self, student: object) -> bool:
        if isinstance(student, (str, Student)):
            return student_name(student) in self._adjacency
        return False

    def __len__(self) -> int:
        return len(self._adjacency)
