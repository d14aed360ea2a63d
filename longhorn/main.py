"""
Longhorn Network - Command-line runner

For each cohort:
- Build the compatibility graph and verify every edge is reciprocal
- Assign roommates with deferred acceptance
- Run the chat / friend-request messaging demo
- Search a referral path from the first student
- Form study pods
- Optionally export the dashboard JSON

Run: longhorn --data students.txt --company Google
     longhorn               (uses the built-in demo cohorts)
"""

import argparse
import logging
import sys
from typing import Dict, List, Optional

from longhorn.core.config import get_settings
from longhorn.core.exceptions import LonghornError
from longhorn.core.logging_config import configure_logging
from longhorn.models.student import Cohort, Student
from longhorn.services.export_service import build_export, export_test_cases, export_to_json
from longhorn.services.graph_service import StudentGraph
from longhorn.services.matching_service import GaleShapley
from longhorn.services.messaging_service import ExecutionLog, run_messaging_demo
from longhorn.services.pod_service import PodFormation
from longhorn.services.referral_service import ReferralPathFinder
from longhorn.utils.data_parser import parse_students

logger = logging.getLogger(__name__)


# ============================================================
# BUILT-IN DEMO COHORTS
# ============================================================

def _student(name, age, gender, year, major, gpa, prefs, internships) -> Student:
    return Student(
        name=name, age=age, gender=gender, year=year, major=major, gpa=gpa,
        roommate_preferences=prefs, previous_internships=internships,
    )


def demo_two_groups() -> List[Student]:
    """Four students with full mutual preferences plus one pair."""
    return [
        _student("Alice", 20, "Female", 2, "Computer Science", 3.5, ["Bob", "Charlie", "Frank"], ["Google"]),
        _student("Bob", 21, "Male", 3, "Computer Science", 3.7, ["Alice", "Charlie", "Frank"], ["Google", "Microsoft"]),
        _student("Charlie", 20, "Male", 2, "Mathematics", 3.2, ["Alice", "Bob", "Frank"], ["None"]),
        _student("Frank", 23, "Male", 3, "Chemistry", 3.1, ["Alice", "Bob", "Charlie"], []),
        _student("Dana", 22, "Female", 4, "Biology", 3.8, ["Evan"], ["Pfizer"]),
        _student("Evan", 22, "Male", 4, "Biology", 3.6, ["Dana"], ["Moderna", "Pfizer"]),
    ]


def demo_referral_chain() -> List[Student]:
    """Three economics students; only Ivy interned at DummyCompany."""
    return [
        _student("Greg", 24, "Male", 4, "Economics", 3.4, ["Helen", "Ivy"], ["InternshipA"]),
        _student("Helen", 24, "Female", 4, "Economics", 3.5, ["Greg", "Ivy"], ["InternshipB"]),
        _student("Ivy", 25, "Female", 4, "Economics", 3.8, ["Helen", "Greg"], ["DummyCompany"]),
    ]


def demo_unpaired() -> List[Student]:
    """Leo has no preferences and stays unpaired."""
    return [
        _student("Jack", 19, "Male", 1, "History", 3.0, ["Kim"], ["MuseumIntern"]),
        _student("Kim", 19, "Female", 1, "History", 3.2, ["Jack"], ["MuseumIntern"]),
        _student("Leo", 20, "Male", 1, "History", 3.5, [], ["None"]),
    ]


# ============================================================
# PIPELINE
# ============================================================

def check_reciprocity(graph: StudentGraph) -> None:
    """Raise if any edge lacks a reverse edge with the same weight."""
    for name in graph.all_nodes():
        for edge in graph.neighbors(name):
            reverse = graph.neighbors(edge.neighbor)
            if not any(e.neighbor == name and e.weight == edge.weight for e in reverse):
                raise LonghornError(f"Graph edge from {name} to {edge.neighbor} is not reciprocal.")


def run_cohort(students: List[Student], company: str, pod_size: int) -> Dict:
    """Run every stage over one cohort and return a summary."""
    cohort = Cohort(students)
    log = ExecutionLog()

    graph = StudentGraph(cohort)
    check_reciprocity(graph)
    graph.display_graph()
    print(f"    ✅ Graph: {len(graph)} students, {len(graph.edge_set())} connections")

    matcher = GaleShapley(cohort)
    matcher.run()
    for a, b in cohort.roommate_pairs():
        print(f"    🏠 {a} <-> {b}")
    unmatched = matcher.unmatched()
    if unmatched:
        print(f"    ⚠️  Unmatched: {', '.join(unmatched)}")

    sent = run_messaging_demo(list(cohort), log)
    print(f"    ✅ Messaging: {sent} messages logged")

    # Rebuild so roommate pairs count towards edge weights
    graph = StudentGraph(cohort)
    path: List[str] = []
    if len(cohort):
        finder = ReferralPathFinder(graph, cohort)
        path = finder.find_referral_path(next(iter(cohort)), company)
    print(f"    🔗 Referral path to {company}: {path if path else 'none'}")

    pods = PodFormation(graph).form_pods(pod_size)
    for number, pod in enumerate(pods, 1):
        print(f"    👥 Pod {number}: {', '.join(pod)}")

    return {
        "cohort": cohort,
        "graph": graph,
        "log": log,
        "referral_path": path,
        "pods": pods,
        "unmatched": unmatched,
    }


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Longhorn Network runner")
    parser.add_argument("--data", help="Student data file (default: built-in demo cohorts)")
    parser.add_argument("--company", help="Target company for the referral search")
    parser.add_argument("--pod-size", type=int, help="Students per pod")
    parser.add_argument(
        "--export", nargs="?", const="", default=None,
        help="Write dashboard JSON (default path from settings when no value is given)"
    )
    parser.add_argument("--log-level", help="DEBUG, INFO, WARNING, ...")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    settings = get_settings()
    configure_logging(args.log_level)

    company = args.company or settings.referral_company
    pod_size = args.pod_size or settings.pod_size
    data_file = args.data or settings.data_file

    try:
        if data_file:
            cases = [parse_students(data_file)]
        else:
            cases = [demo_two_groups(), demo_referral_chain(), demo_unpaired()]

        exports = []
        for number, students in enumerate(cases, 1):
            print("\n" + "=" * 50)
            print(f"COHORT {number}")
            print("=" * 50)
            for student in students:
                print(f"    {student}")
            result = run_cohort(students, company, pod_size)
            exports.append(build_export(
                result["cohort"], result["graph"], result["log"],
                referral_path=result["referral_path"], pods=result["pods"],
            ))

        if args.export is not None:
            export_path = args.export or settings.export_path
            if len(exports) == 1:
                export_to_json(exports[0], export_path)
            else:
                export_test_cases(exports, export_path)
            print(f"\n📁 Exported {len(exports)} cohort(s) to {export_path}")
    except (LonghornError, OSError) as e:
        logger.error("%s", e)
        print(f"\n❌ {e}")
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
