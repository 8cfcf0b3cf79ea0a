"""
Injaz test configuration - pytest fixtures shared by the whole suite.

RUNNING TESTS:
    pytest -v
    pytest -m workflow -v
"""
import pytest

from performance.store import RecordStore


@pytest.fixture
def store(db):
    """Record store bound to an isolated key."""
    return RecordStore(key="hr_performance_system_pytest")


@pytest.fixture
def default_store(db):
    """The store the views and commands use (settings.APPRAISAL_STORAGE_KEY)."""
    from performance.store import record_store
    return record_store
