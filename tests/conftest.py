"""
Configuration for pytest to set up the import path and shared fixtures.
"""

import sys
from pathlib import Path
import pytest

# Add the project root to Python path so lazymatch imports without installing
parent_dir = Path(__file__).parent.parent
sys.path.insert(0, str(parent_dir))

from lazymatch.utils import clear_performance_metrics


class CountingSource:
    """Iterable that records how many items have been pulled from it"""

    def __init__(self, items):
        self._items = list(items)
        self.pulled = 0

    def __iter__(self):
        for item in self._items:
            self.pulled += 1
            yield item


@pytest.fixture
def counting_source():
    """Factory fixture producing CountingSource instances"""
    return CountingSource


@pytest.fixture
def call_log():
    """Shared list that tracking predicates/actions append to"""
    return []


@pytest.fixture
def tracked(call_log):
    """Wrap a callable so every call is appended to call_log as (label, args)"""

    def _wrap(label, fn):
        def wrapper(*args):
            call_log.append((label, args))
            return fn(*args)
        return wrapper

    return _wrap


@pytest.fixture(autouse=True)
def reset_performance_metrics():
    """Keep the global performance registry isolated per test"""
    clear_performance_metrics()
    yield
    clear_performance_metrics()
