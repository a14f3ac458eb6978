"""Pytest configuration and fixtures for schema tests."""
import sys
from pathlib import Path

import pytest

package_root = Path(__file__).parent.parent
if str(package_root) not in sys.path:
    sys.path.insert(0, str(package_root))


@pytest.fixture
def minimal_state():
    """Smallest state with one remote release."""
    return {
        "repositories": [{"name": "stable", "url": "https://charts.example.com"}],
        "releases": [{"name": "proxy", "chart": "stable/envoy"}],
    }
