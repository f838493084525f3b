from hexcheck.registry import registry

import checks


def register() -> None:
    registry.register("h3-extra", checks.suite)
