"""Shared pytest configuration for the combicalc tests.

Hypothesis profiles:
    dev      500 examples, random seed (default on a workstation)
    ci       50 examples, derandomized so failures reproduce across runs
    verbose  100 examples with per-example output

The profile comes from HYPOTHESIS_PROFILE when set to one of the names
above, otherwise from CI=true, otherwise "dev".

Tests marked ``fuzz`` run only when selected: ``pytest -m fuzz``.
"""

import os

import pytest
from hypothesis import HealthCheck, Phase, Verbosity, settings

_PHASES = [Phase.explicit, Phase.reuse, Phase.generate, Phase.shrink]

# Deeply parenthesised expressions are slow to generate; that is expected.
_SLOW_OK = [HealthCheck.too_slow]

settings.register_profile(
    "dev",
    max_examples=500,
    phases=_PHASES,
    suppress_health_check=_SLOW_OK,
)
settings.register_profile(
    "ci",
    max_examples=50,
    phases=_PHASES,
    derandomize=True,
    print_blob=True,
    suppress_health_check=_SLOW_OK,
)
settings.register_profile(
    "verbose",
    max_examples=100,
    phases=_PHASES,
    verbosity=Verbosity.verbose,
    suppress_health_check=_SLOW_OK,
)


def _profile_name() -> str:
    requested = os.environ.get("HYPOTHESIS_PROFILE")
    if requested in {"dev", "ci", "verbose"}:
        return requested
    return "ci" if os.environ.get("CI") == "true" else "dev"


settings.load_profile(_profile_name())


def pytest_configure(config: pytest.Config) -> None:
    """Register the ``fuzz`` marker (required under --strict-markers)."""
    config.addinivalue_line(
        "markers", "fuzz: long-running Hypothesis fuzzing, run with -m fuzz"
    )


def pytest_collection_modifyitems(config: pytest.Config, items: list[pytest.Item]) -> None:
    """Skip ``fuzz`` tests unless the marker expression selects them."""
    if "fuzz" in str(config.getoption("-m", default="")):
        return
    skip = pytest.mark.skip(reason="fuzz test; run with: pytest -m fuzz")
    for item in items:
        if "fuzz" in item.keywords:
            item.add_marker(skip)
