"""
Chart Reference Classification
==============================

Splits a release's ``chart`` field into one of three kinds:

- local:     ``./charts/app``, ``../app``, ``/abs/path/app``
- remote:    ``<repository alias>/<chart name>``
- malformed: anything else (``a/b/c``, ``envoy``, ``repo/``)

Classification is a pure function; deciding whether a malformed reference is
fatal is up to the caller.
"""

import os
import re
from dataclasses import dataclass
from enum import Enum
from typing import Optional

_LOCAL_PREFIX = re.compile(r"^\.?\./")


class ReferenceKind(str, Enum):
    """Kind of chart reference."""

    LOCAL = "local"
    REMOTE = "remote"
    MALFORMED = "malformed"


@dataclass(frozen=True)
class ChartReference:
    """Result of classifying a chart reference."""

    raw: str
    kind: ReferenceKind
    repository: Optional[str] = None
    chart: Optional[str] = None

    @property
    def is_remote(self) -> bool:
        return self.kind == ReferenceKind.REMOTE


def is_local_chart(chart: str) -> bool:
    """Return True for filesystem-style chart paths."""
    return (
        chart in (".", "..")
        or bool(_LOCAL_PREFIX.match(chart))
        or os.path.isabs(chart)
    )


def classify_chart_reference(chart: str) -> ChartReference:
    """
    Classify a chart reference.

    Args:
        chart: The release's chart field

    Returns:
        ChartReference tagged LOCAL, REMOTE (with repository and chart set)
        or MALFORMED

    Examples:
        >>> classify_chart_reference("stable/envoy").chart
        'envoy'
        >>> classify_chart_reference("./charts/app").kind
        <ReferenceKind.LOCAL: 'local'>
    """
    if is_local_chart(chart):
        return ChartReference(raw=chart, kind=ReferenceKind.LOCAL)

    parts = chart.split("/")
    if len(parts) != 2 or not all(parts):
        return ChartReference(raw=chart, kind=ReferenceKind.MALFORMED)

    repository, name = parts
    return ChartReference(
        raw=chart,
        kind=ReferenceKind.REMOTE,
        repository=repository,
        chart=name,
    )
