import pytest

from hexcheck import bootstrap


@pytest.fixture(scope="session", autouse=True)
def setup_hexcheck_registry() -> None:
    """Register built-in suites once for the entire test session."""

    bootstrap()
