"""Pytest configuration for the urnkit test suite.

Single Source of Truth for Hypothesis max_examples:
- dev: Local development with 500 examples (thorough property testing)
- ci: CI runs with 50 examples (fast feedback, derandomized)
- verbose: Debug mode with progress output (100 examples)

Profile auto-detection:
- HYPOTHESIS_PROFILE env var -> explicit override
- CI=true environment variable -> "ci" profile
- Otherwise -> "dev" profile (local development)

Override manually: HYPOTHESIS_PROFILE=verbose pytest tests/

Fuzzing Test Separation:
Tests marked with @pytest.mark.fuzz are excluded from normal test runs.
Run them via: pytest -m fuzz
"""

import os
from collections.abc import Iterator

import pytest
from hypothesis import Phase, Verbosity, settings

from urnkit.i18n import clear_catalog_cache

# =============================================================================
# HYPOTHESIS PROFILES - SINGLE SOURCE OF TRUTH
# =============================================================================

_PHASES = [Phase.explicit, Phase.reuse, Phase.generate, Phase.shrink]

settings.register_profile("dev", max_examples=500, phases=_PHASES, derandomize=False)

settings.register_profile(
    "ci",
    max_examples=50,
    phases=_PHASES,
    derandomize=True,
    print_blob=True,
)

settings.register_profile(
    "verbose",
    max_examples=100,
    phases=_PHASES,
    derandomize=False,
    verbosity=Verbosity.verbose,
)


def _detect_profile() -> str:
    """Pick the Hypothesis profile: HYPOTHESIS_PROFILE, then CI=true, then dev."""
    explicit = os.environ.get("HYPOTHESIS_PROFILE")
    if explicit in ("dev", "ci", "verbose"):
        return explicit
    if os.environ.get("CI") == "true":
        return "ci"
    return "dev"


settings.load_profile(_detect_profile())


# =============================================================================
# SHARED FIXTURES
# =============================================================================


@pytest.fixture
def fresh_catalogs() -> Iterator[None]:
    """Drop memoized catalogs and locale chains around a test."""
    clear_catalog_cache()
    yield
    clear_catalog_cache()


# =============================================================================
# FUZZING TEST SEPARATION
# =============================================================================


def pytest_configure(config: pytest.Config) -> None:
    """Register the 'fuzz' marker for intensive property tests."""
    config.addinivalue_line(
        "markers",
        "fuzz: Intensive property tests for fuzzing (excluded from normal test runs)",
    )


def pytest_collection_modifyitems(
    config: pytest.Config, items: list[pytest.Item]
) -> None:
    """Skip fuzz-marked tests unless explicitly requested with -m fuzz."""
    marker_expr = config.getoption("-m", default="")
    if "fuzz" in str(marker_expr):
        return

    skip_fuzz = pytest.mark.skip(reason="Fuzzing test - run with: pytest -m fuzz")
    for item in items:
        if "fuzz" in item.keywords:
            item.add_marker(skip_fuzz)
