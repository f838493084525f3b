"""Core models and helpers exposed at the package level."""
from .assertions import AssertionFailure, assert_equals, structurally_equal
from .models import Failure, TestBody, TestCase, TestSuite, cases_from_pairs
from .outcomes import Failed, Outcome, Passed, Unexpected, classify
from .results import CaseResult, RunSummary
from .runner import TestRunner, run_cases

__all__ = [
    "AssertionFailure",
    "CaseResult",
    "Failed",
    "Failure",
    "Outcome",
    "Passed",
    "RunSummary",
    "TestBody",
    "TestCase",
    "TestRunner",
    "TestSuite",
    "Unexpected",
    "assert_equals",
    "cases_from_pairs",
    "classify",
    "run_cases",
    "structurally_equal",
]
