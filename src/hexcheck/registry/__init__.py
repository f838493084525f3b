"""Suite registry exports."""
from .registry import (
    SuiteRegistry,
    collect_cases,
    load_builtins,
    register_suite,
    registry,
    resolve_suite,
)

__all__ = [
    "SuiteRegistry",
    "collect_cases",
    "load_builtins",
    "register_suite",
    "registry",
    "resolve_suite",
]
