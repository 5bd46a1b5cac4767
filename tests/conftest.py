"""Pytest configuration for the visual test suite."""

from __future__ import annotations

from collections.abc import Iterator

import pytest

from visual import clear_cache
from visual.fallback import _cell


def pytest_configure(config: pytest.Config) -> None:
    config.addinivalue_line(
        "markers",
        "quality: static checks that shell out to linters",
    )


@pytest.fixture(autouse=True)
def fresh_fallback() -> Iterator[None]:
    """Start every test with an unset fallback, as in a new process."""

    _cell.reset()
    yield
    _cell.reset()


@pytest.fixture(autouse=True)
def fresh_resolver_cache() -> Iterator[None]:
    """Keep classes defined inside one test from leaking into the next."""

    clear_cache()
    yield
    clear_cache()
