"""
Pod Formation Service - group students into study pods.

Greedy strategy over the graph's weight matrix:
1. Seed a pod with the remaining student who has the most total
   connection strength to the other remaining students
2. Keep adding the remaining student with the largest summed weight to
   the current pod members until the pod is full
3. Repeat until everyone is placed (the last pod may be smaller)

Ties go to the student who comes first in graph node order.
"""

import logging
from typing import List, Sequence

import numpy as np

from longhorn.services.graph_service import StudentGraph

logger = logging.getLogger(__name__)


class PodFormation:
    """Forms pods from a StudentGraph."""

    def __init__(self, graph: StudentGraph):
        self.graph = graph

    def form_pods(self, pod_size: int) -> List[List[str]]:
        """
        Divide all students into pods of `pod_size`.

        Raises:
            ValueError if pod_size < 1
        """
        if pod_size < 1:
            raise ValueError(f"pod_size must be at least 1, got {pod_size}")

        order = self.graph.nodes()
        weights = self.graph.adjacency_matrix(order)
        remaining = list(range(len(order)))
        pods: List[List[str]] = []

        while remaining:
            sub = weights[np.ix_(remaining, remaining)]
            seed = remaining[int(np.argmax(sub.sum(axis=1)))]
            pod = [seed]
            remaining.remove(seed)

            while len(pod) < pod_size and remaining:
                affinity = weights[np.ix_(remaining, pod)].sum(axis=1)
                pick = remaining[int(np.argmax(affinity))]
                pod.append(pick)
                remaining.remove(pick)

            pods.append([order[i] for i in pod])

        for number, pod in enumerate(pods, 1):
            logger.info("Pod %d: %s (strength %d)", number, ", ".join(pod), self.pod_strength(pod))
        return pods

    def pod_strength(self, pod: Sequence[str]) -> int:
        """Sum of edge weights between every pair in the pod."""
        total = 0
        for i, a in enumerate(pod):
            for b in pod[i + 1:]:
                total += self.graph.weight(a, b)
        return total
