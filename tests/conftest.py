"""Global test configuration and shared fixtures.

Every test builds into its own graph arena and runs with a default engine
config, so nothing leaks between tests through the module-level state.
"""

from pathlib import Path

import pytest
from hypothesis import HealthCheck, settings

from scalar_autodiff import EngineConfig, Graph, set_config, use_graph


@pytest.fixture(autouse=True)
def fresh_graph():
    """Swap in an empty active graph for the duration of each test."""
    with use_graph(Graph()) as graph:
        yield graph


@pytest.fixture(autouse=True)
def default_config():
    prev = set_config(EngineConfig())
    yield
    set_config(prev)


def pytest_collection_modifyitems(session: pytest.Session, config: pytest.Config, items: list) -> None:
    """Auto-mark tests under tests/property with the 'property' marker."""
    for item in items:
        if "property" in Path(str(item.fspath)).parts:
            item.add_marker(pytest.mark.property)


# Hypothesis examples share the function-scoped autouse fixtures; property
# tests open their own graph per example.
settings.register_profile(
    "scalar_autodiff",
    suppress_health_check=[HealthCheck.function_scoped_fixture],
    deadline=None,
)
settings.load_profile("scalar_autodiff")
