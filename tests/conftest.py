"""
Pytest Configuration and Fixtures.

This file configures pytest and provides shared fixtures for all tests.
"""
import pytest
import sys
from datetime import datetime, timedelta
from pathlib import Path

# Add project root to path
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))


def pytest_configure(config):
    """Configure pytest markers."""
    config.addinivalue_line("markers", "unit: Unit tests")
    config.addinivalue_line("markers", "smoke: Smoke tests for CLI commands")


def pytest_collection_modifyitems(config, items):
    """Automatically mark tests based on their location."""
    for item in items:
        if "unit" in str(item.fspath):
            item.add_marker(pytest.mark.unit)
        elif "smoke" in str(item.fspath):
            item.add_marker(pytest.mark.smoke)


class TickingClock:
    """Clock that advances one second per call, so event filenames never collide."""

    def __init__(self, start: datetime | None = None):
        self.current = start or datetime(2026, 10, 18, 9, 30, 0)

    def __call__(self) -> datetime:
        moment = self.current
        self.current += timedelta(seconds=1)
        return moment


@pytest.fixture(scope="session")
def project_root():
    """Return the project root directory."""
    return PROJECT_ROOT


@pytest.fixture
def clock():
    """Provide a deterministic, ticking clock."""
    return TickingClock()


@pytest.fixture
def layout(tmp_path):
    """Provide a dojo layout rooted in a temporary directory."""
    from src.dojo.layout import DojoLayout

    return DojoLayout(root=tmp_path)


@pytest.fixture
def service(layout, clock):
    """Provide a file-backed service for an empty dojo root."""
    from src.dojo.service import DojoService

    return DojoService.from_layout(layout, clock=clock)


@pytest.fixture
def initialized_service(service):
    """Provide a service for a dojo already initialized for 'Ada'."""
    service.initialize("Ada")
    return service
