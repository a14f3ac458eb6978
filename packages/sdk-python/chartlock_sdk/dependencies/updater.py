"""
External Dependency Updater
===========================

The boundary between chartlock and the tool that actually talks to chart
repositories. An updater reads the chart staged in a directory
(Chart.yaml, requirements.yaml, optional requirements.lock) and writes a
fresh requirements.lock into the same directory.
"""

import subprocess
from pathlib import Path
from typing import List, Optional, Protocol, Sequence

from chartlock_common.constants import DEFAULT_HELM_BINARY
from chartlock_common.errors import ExternalToolError
from chartlock_common.logger import get_logger

logger = get_logger(__name__)


class DependencyUpdater(Protocol):
    """Updates the dependencies of the chart in ``chart_dir``."""

    def update_deps(self, chart_dir: Path) -> None: ...


class HelmDependencyUpdater:
    """
    Runs ``helm dependency update <chart_dir>``.

    Args:
        helm_binary: Helm executable name or path
        timeout: Seconds to wait before giving up (None waits forever)
        extra_args: Additional arguments appended to the helm command
    """

    def __init__(
        self,
        helm_binary: str = DEFAULT_HELM_BINARY,
        timeout: Optional[float] = None,
        extra_args: Optional[Sequence[str]] = None,
    ):
        self.helm_binary = helm_binary
        self.timeout = timeout
        self.extra_args = list(extra_args or [])

    def command(self, chart_dir: Path) -> List[str]:
        return [self.helm_binary, "dependency", "update", str(chart_dir), *self.extra_args]

    def update_deps(self, chart_dir: Path) -> None:
        cmd = self.command(chart_dir)
        logger.info("Running helm", command=" ".join(cmd))
        try:
            result = subprocess.run(
                cmd,
                check=True,
                stdout=subprocess.PIPE,
                stderr=subprocess.PIPE,
                text=True,
                timeout=self.timeout,
            )
        except FileNotFoundError as e:
            raise ExternalToolError(
                f"helm executable not found: {self.helm_binary}. "
                f"Install helm or set CHARTLOCK_HELM_BINARY."
            ) from e
        except subprocess.TimeoutExpired as e:
            raise ExternalToolError(
                f"helm dependency update timed out after {self.timeout}s"
            ) from e
        except subprocess.CalledProcessError as e:
            stderr = (e.stderr or "").strip()
            raise ExternalToolError(
                f"helm dependency update failed with exit code {e.returncode}: {stderr}",
                stderr=stderr,
            ) from e

        if result.stdout:
            logger.debug(f"helm output:\n{result.stdout}")
