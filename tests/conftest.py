"""Pytest configuration and fixtures.

Provides environment isolation and a couple of shared Result builders. All
fixtures here are autouse unless noted.
"""

from __future__ import annotations

import os

import pytest

from fallible import Result, make_failure, make_success

# =============================================================================
# Environment Isolation (Autouse)
# =============================================================================


@pytest.fixture(autouse=True)
def isolate_fallible_env(request, monkeypatch):
    """Clear FALLIBLE_* env vars so dev flags start from their defaults.

    Opt-out: @pytest.mark.allow_env_pollution
    """
    if request.node.get_closest_marker("allow_env_pollution"):
        return
    for key in list(os.environ.keys()):
        if key.startswith("FALLIBLE_"):
            monkeypatch.delenv(key, raising=False)


def pytest_configure(config):
    config.addinivalue_line(
        "markers", "allow_env_pollution: keep FALLIBLE_* environment variables"
    )


# =============================================================================
# Builders (opt-in)
# =============================================================================


@pytest.fixture
def ok_foo() -> Result[str, str]:
    return make_success("foo")


@pytest.fixture
def err_foo() -> Result[str, str]:
    return make_failure("foo")
