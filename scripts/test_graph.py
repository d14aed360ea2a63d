#!/usr/bin/env python3
"""
Compatibility Graph Test Script

Tests:
1. Edge reciprocity for the demo cohorts and a random cohort
2. Isolated nodes are registered
3. Missing nodes raise KeyError
4. Rebuilding an unchanged cohort gives the same edge set
5. Duplicate names are rejected
6. Weight matrix

Run: python scripts/test_graph.py
"""
import sys
sys.path.insert(0, '.')

import random

import numpy as np

from longhorn.core.exceptions import DuplicateStudentError
from longhorn.main import demo_referral_chain, demo_two_groups, demo_unpaired
from longhorn.models.student import Cohort, Student
from longhorn.services.graph_service import StudentGraph
from longhorn.services.matching_service import assign_roommates


MAJORS = ["Computer Science", "Mathematics", "Biology", "History"]
COMPANIES = ["Google", "Meta", "Pfizer", "Acme", "Globex"]


def random_cohort(size: int, seed: int):
    rng = random.Random(seed)
    names = [f"Student{i}" for i in range(size)]
    students = []
    for name in names:
        others = [n for n in names if n != name]
        students.append(Student(
            name=name,
            age=rng.randint(18, 22),
            gender=rng.choice(["Female", "Male"]),
            year=rng.randint(1, 4),
            major=rng.choice(MAJORS),
            gpa=round(rng.uniform(2.0, 4.0), 2),
            roommate_preferences=rng.sample(others, k=min(3, len(others))),
            previous_internships=rng.sample(COMPANIES, k=rng.randint(0, 2)),
        ))
    return students


def assert_reciprocal(graph: StudentGraph):
    for name in graph.all_nodes():
        for edge in graph.neighbors(name):
            reverse = graph.neighbors(edge.neighbor)
            assert any(e.neighbor == name and e.weight == edge.weight for e in reverse), \
                f"Edge {name} -> {edge.neighbor} is not reciprocal"


def test_reciprocity_demo_cohorts():
    print("\n[1] Testing reciprocity on demo cohorts...")
    for students in (demo_two_groups(), demo_referral_chain(), demo_unpaired()):
        graph = StudentGraph(students)
        assert_reciprocal(graph)
    print("    ✅ All demo edges reciprocal")


def test_reciprocity_random_cohorts_after_matching():
    for seed in range(5):
        students = random_cohort(9, seed)
        assert_reciprocal(StudentGraph(students))
        assign_roommates(students)
        assert_reciprocal(StudentGraph(students))


def test_weights_are_positive():
    graph = StudentGraph(random_cohort(12, 42))
    for name in graph.all_nodes():
        for edge in graph.neighbors(name):
            assert edge.weight > 0
            assert edge.neighbor != name


def test_expected_edges():
    print("\n[2] Testing expected weights...")
    graph = StudentGraph(demo_referral_chain())
    # Greg/Helen: same major + same age; Ivy is a year older
    assert graph.weight("Greg", "Helen") == 3
    assert graph.weight("Greg", "Ivy") == 2
    assert graph.weight("Helen", "Ivy") == 2
    assert len(graph.neighbors("Greg")) == 2
    print("    ✅ Weights match the scoring rules")


def test_isolated_nodes_are_registered():
    print("\n[3] Testing isolated nodes...")
    loner = Student(name="Solo", age=40, gender="Male", year=4, major="Art", gpa=2.0)
    students = demo_referral_chain() + [loner]
    graph = StudentGraph(students)
    assert "Solo" in graph.all_nodes()
    assert graph.neighbors("Solo") == []
    assert graph.neighbors(loner) == []
    assert len(graph) == 4
    print("    ✅ Isolated student present with no edges")


def test_missing_node_raises():
    graph = StudentGraph(demo_unpaired())
    assert "Nobody" not in graph
    try:
        graph.neighbors("Nobody")
    except KeyError:
        pass
    else:
        raise AssertionError("Expected KeyError for a student outside the graph")


def test_neighbors_returns_copy():
    graph = StudentGraph(demo_unpaired())
    edges = graph.neighbors("Jack")
    edges.clear()
    assert graph.neighbors("Jack")


def test_rebuild_is_identical():
    print("\n[4] Testing idempotent rebuild...")
    students = random_cohort(10, 7)
    first = StudentGraph(students).edge_set()
    second = StudentGraph(students).edge_set()
    assert first == second
    print(f"    ✅ {len(first)} edges identical across rebuilds")


def test_duplicate_names_rejected():
    print("\n[5] Testing duplicate names...")
    students = demo_unpaired() + demo_unpaired()[:1]
    try:
        StudentGraph(students)
    except DuplicateStudentError as e:
        assert e.name == "Jack"
        print("    ✅ DuplicateStudentError raised")
    else:
        raise AssertionError("Expected DuplicateStudentError")


def test_empty_graph():
    graph = StudentGraph([])
    assert graph.all_nodes() == set()
    assert graph.adjacency_matrix().shape == (0, 0)


def test_adjacency_matrix():
    print("\n[6] Testing weight matrix...")
    cohort = Cohort(demo_referral_chain())
    graph = StudentGraph(cohort)
    matrix = graph.adjacency_matrix()
    assert matrix.shape == (3, 3)
    assert np.array_equal(matrix, matrix.T)
    assert matrix[0, 1] == 3
    assert np.all(np.diag(matrix) == 0)
    print("    ✅ Matrix is symmetric with an empty diagonal")


def main():
    print("=" * 60)
    print("COMPATIBILITY GRAPH TEST")
    print("=" * 60)
    test_reciprocity_demo_cohorts()
    test_reciprocity_random_cohorts_after_matching()
    test_weights_are_positive()
    test_expected_edges()
    test_isolated_nodes_are_registered()
    test_missing_node_raises()
    test_neighbors_returns_copy()
    test_rebuild_is_identical()
    test_duplicate_names_rejected()
    test_empty_graph()
    test_adjacency_matrix()
    print("\n" + "=" * 60)
    print("✅ ALL GRAPH TESTS PASSED!")
    print("=" * 60)


if __name__ == "__main__":
    main()
