"""Shared test fixtures."""

from collections.abc import Generator

import pytest
import structlog


@pytest.fixture(autouse=True)
def reset_structlog() -> Generator[None, None, None]:
    """Reset structlog so loggers configured by the CLI do not leak."""
    yield
    structlog.reset_defaults()
