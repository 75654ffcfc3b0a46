"""Shared pytest configuration for the arblexengine test suite.

Hypothesis profiles (max_examples is only ever set here):
    dev      500 examples, random seed (local default)
    ci       50 examples, derandomized, failure blobs printed
    verbose  100 examples with per-example output

The profile comes from HYPOTHESIS_PROFILE when it names one of the above,
else "ci" when CI=true, else "dev":

    HYPOTHESIS_PROFILE=verbose pytest tests/test_syntax_walk.py

Tests marked ``@pytest.mark.fuzz`` run only when selected with ``-m fuzz``.
"""

from __future__ import annotations

import json
import os
from collections.abc import Callable
from pathlib import Path

import pytest
from hypothesis import Phase, Verbosity, settings

# =============================================================================
# HYPOTHESIS PROFILES
# =============================================================================

_ALL_PHASES = [Phase.explicit, Phase.reuse, Phase.generate, Phase.shrink]

_PROFILES: dict[str, dict[str, object]] = {
    "dev": {"max_examples": 500, "derandomize": False},
    "ci": {"max_examples": 50, "derandomize": True, "print_blob": True},
    "verbose": {"max_examples": 100, "derandomize": False, "verbosity": Verbosity.verbose},
}

for _name, _options in _PROFILES.items():
    settings.register_profile(_name, phases=_ALL_PHASES, **_options)  # type: ignore[arg-type]


def _select_profile() -> str:
    requested = os.environ.get("HYPOTHESIS_PROFILE")
    if requested in _PROFILES:
        return requested
    return "ci" if os.environ.get("CI") == "true" else "dev"


settings.load_profile(_select_profile())


# =============================================================================
# FUZZ MARKER
# =============================================================================


def pytest_configure(config: pytest.Config) -> None:
    config.addinivalue_line(
        "markers",
        "fuzz: long-running property tests, only run with -m fuzz",
    )


def pytest_collection_modifyitems(config: pytest.Config, items: list[pytest.Item]) -> None:
    """Skip fuzz tests unless the marker expression asks for them."""
    if "fuzz" in str(config.getoption("-m", default="")):
        return
    skip = pytest.mark.skip(reason="fuzz test; run with: pytest -m fuzz")
    for item in items:
        if item.get_closest_marker("fuzz") is not None:
            item.add_marker(skip)


# =============================================================================
# ARB FILES
# =============================================================================

type ArbWriter = Callable[[str, dict[str, object]], Path]


@pytest.fixture
def write_arb(tmp_path: Path) -> ArbWriter:
    """Write a JSON object as an ARB file inside a fresh temporary directory.

    Usage:
        path = write_arb("app_en.arb", {"hello": "Hello"})
        path.parent  # the ARB directory
    """

    def _write(filename: str, contents: dict[str, object]) -> Path:
        path = tmp_path / filename
        path.write_text(json.dumps(contents, ensure_ascii=False), encoding="utf-8")
        return path

    return _write
