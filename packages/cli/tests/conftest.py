"""Pytest configuration and fixtures for CLI tests."""
import logging
import sys
from pathlib import Path

import pytest
import yaml
from typer.testing import CliRunner

package_root = Path(__file__).parent.parent
if str(package_root) not in sys.path:
    sys.path.insert(0, str(package_root))


STATE = """
repositories:
  - name: myrepo
    url: https://example.com/charts
releases:
  - name: proxy
    chart: myrepo/envoy
  - name: web
    chart: myrepo/nginx
    version: ">=1.0"
  - name: app
    chart: ./local/app
"""


@pytest.fixture
def runner():
    """Create CLI test runner."""
    return CliRunner()


@pytest.fixture(autouse=True)
def reset_logging():
    """CLI commands reconfigure the chartlock logger; restore it afterwards."""
    root = logging.getLogger("chartlock")
    handlers, level, propagate = list(root.handlers), root.level, root.propagate
    yield
    root.handlers = handlers
    root.setLevel(level)
    root.propagate = propagate


@pytest.fixture
def state_file(tmp_path):
    """State file with two remote charts and a local one."""
    path = tmp_path / "helmfile.yaml"
    path.write_text(STATE.strip())
    return path


@pytest.fixture
def lock_content():
    """Lock pinning envoy and nginx."""
    return yaml.safe_dump(
        {
            "dependencies": [
                {"name": "envoy", "repository": "https://example.com/charts", "version": "1.2.3"},
                {"name": "nginx", "repository": "https://example.com/charts", "version": "1.4.0"},
            ]
        }
    )


@pytest.fixture
def fake_helm(lock_content):
    """Stand-in for HelmDependencyUpdater writing lock_content into the chart dir."""

    class FakeHelm:
        instances = []

        def __init__(self, helm_binary="helm", timeout=None, extra_args=None):
            self.helm_binary = helm_binary
            self.timeout = timeout
            FakeHelm.instances.append(self)

        def update_deps(self, chart_dir):
            (Path(chart_dir) / "requirements.lock").write_text(lock_content)

    return FakeHelm


@pytest.fixture
def settings_env(monkeypatch):
    """Set CHARTLOCK_* variables with the cached settings reset around the test."""
    from chartlock_common import get_settings

    get_settings.cache_clear()
    yield monkeypatch
    get_settings.cache_clear()
