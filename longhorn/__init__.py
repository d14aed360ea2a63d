"""
Longhorn Network
A student social graph with roommate matching and referral search.

Architecture:
- Cohort: in-memory population of students (keyed by name)
- StudentGraph: weighted compatibility graph built once per run
- GaleShapley: deferred-acceptance roommate matching
- ReferralPathFinder: cheapest connection chain to a target company
"""

__version__ = "1.0.0"
__author__ = "Student"
