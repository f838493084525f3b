"""Suite registry implementation."""
from __future__ import annotations

import importlib
from typing import Callable, Dict, Iterable, Iterator, Sequence, Tuple

from hexcheck.core import TestCase, TestSuite


class SuiteRegistry:
    """Stores named ``tests()`` factories and exposes lookup utilities."""

    def __init__(self) -> None:
        self._suites: Dict[str, TestSuite] = {}

    def register(self, name: str, factory: TestSuite) -> TestSuite:
        if name in self._suites:
            raise ValueError(f"Suite '{name}' already registered")
        self._suites[name] = factory
        return factory

    def update_or_register(self, name: str, factory: TestSuite) -> TestSuite:
        self._suites[name] = factory
        return factory

    def get(self, name: str) -> TestSuite:
        try:
            return self._suites[name]
        except KeyError as exc:
            raise KeyError(f"Suite '{name}' is not registered") from exc

    def __contains__(self, name: str) -> bool:
        return name in self._suites

    def __iter__(self) -> Iterator[Tuple[str, TestSuite]]:
        return iter(self._suites.items())

    def names(self) -> Iterable[str]:
        return tuple(self._suites.keys())


registry = SuiteRegistry()


def register_suite(name: str) -> Callable[[TestSuite], TestSuite]:
    """Decorator registering the decorated ``tests()`` factory under ``name``."""

    def decorator(factory: TestSuite) -> TestSuite:
        registry.register(name, factory)
        return factory

    return decorator


def load_builtins() -> None:
    from . import builtins  # noqa: WPS433

    for name, factory in builtins.BUILTIN_SUITES.items():
        registry.update_or_register(name, factory)


def resolve_suite(ref: str) -> TestSuite:
    """Return the factory for a registered suite name or a ``module:attr`` path."""

    if ref in registry:
        return registry.get(ref)
    module_name, sep, attr = ref.partition(":")
    if not sep:
        module_name, sep, attr = ref.rpartition(".")
    if not module_name or not attr:
        raise KeyError(f"Suite '{ref}' is not registered")
    module = importlib.import_module(module_name)
    factory = getattr(module, attr, None)
    if factory is None:
        raise AttributeError(f"Module '{module_name}' has no suite '{attr}'")
    if not callable(factory):
        raise TypeError(f"Suite '{ref}' is not callable")
    return factory


def collect_cases(refs: Sequence[str]) -> tuple[TestCase, ...]:
    """Materialize the cases of each suite in order, validating their shape."""

    cases: list[TestCase] = []
    for ref in refs:
        for item in resolve_suite(ref)():
            if isinstance(item, TestCase):
                cases.append(item)
            elif isinstance(item, tuple) and len(item) == 2 and callable(item[1]):
                cases.append(TestCase(name=str(item[0]), body=item[1]))
            else:
                raise TypeError(f"Suite '{ref}' produced an invalid case: {item!r}")
    return tuple(cases)
