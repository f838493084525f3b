"""Tagged outcome variants for a single case execution."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Union


@dataclass(frozen=True)
class Passed:
    pass


@dataclass(frozen=True)
class Failed:
    """The body raised a recognized assertion failure."""

    message: str


@dataclass(frozen=True)
class Unexpected:
    """The body raised an error the harness does not report; it must propagate."""

    cause: BaseException


Outcome = Union[Passed, Failed, Unexpected]


def classify(exc: Optional[BaseException]) -> Outcome:
    """Map the exception raised by a case body (or ``None``) to an outcome."""

    if exc is None:
        return Passed()
    if isinstance(exc, AssertionError):
        return Failed(message=str(exc))
    return Unexpected(cause=exc)
