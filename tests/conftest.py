"""
Shared test fixtures and configuration.

This module provides pytest fixtures for:
- Building scheme records and registries
- The bundled IANA registry sample
"""

from collections.abc import Callable

import pytest

from src.adapters.registry import CsvSchemeSource
from src.config.settings import DEFAULT_REGISTRY_PATH
from src.domain.ports import SchemeRecord, SchemeStatus
from src.domain.registry import SchemeRegistry


def make_records(*names: str, status: SchemeStatus = SchemeStatus.PERMANENT) -> list[SchemeRecord]:
    """Build one record per name with the given status."""
    return [SchemeRecord(name=name, status=status) for name in names]


@pytest.fixture
def records() -> Callable[..., list[SchemeRecord]]:
    """Factory for scheme records."""
    return make_records


@pytest.fixture
def http_registry() -> SchemeRegistry:
    """The four HTTP[S] schemes as they appear in the IANA registry."""
    return SchemeRegistry(
        [
            *make_records("http", "https"),
            *make_records("hxxp", "hxxps", status=SchemeStatus.PROVISIONAL),
        ]
    )


@pytest.fixture(scope="session")
def bundled_registry() -> SchemeRegistry:
    """Registry loaded from the bundled CSV sample."""
    return SchemeRegistry(CsvSchemeSource(DEFAULT_REGISTRY_PATH).load())
