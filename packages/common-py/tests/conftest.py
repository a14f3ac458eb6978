"""Pytest configuration and fixtures for common-py tests."""
import logging
import sys
from pathlib import Path

import pytest

package_root = Path(__file__).parent.parent
if str(package_root) not in sys.path:
    sys.path.insert(0, str(package_root))


@pytest.fixture
def clean_env(monkeypatch):
    """Remove CHARTLOCK_* variables and reset the cached settings."""
    import os
    from chartlock_common.config import get_settings

    for key in list(os.environ):
        if key.startswith("CHARTLOCK_"):
            monkeypatch.delenv(key)
    get_settings.cache_clear()
    yield monkeypatch
    get_settings.cache_clear()


@pytest.fixture
def reset_chartlock_logger():
    """Restore the chartlock root logger after a test configures it."""
    root = logging.getLogger("chartlock")
    handlers, level, propagate = list(root.handlers), root.level, root.propagate
    yield root
    root.handlers = handlers
    root.setLevel(level)
    root.propagate = propagate
