"""
chartlock State Schema v1

Pydantic models for the parts of a deployment-state document chartlock reads:
the chart repositories and the releases referencing charts.

Design Principles:
- Pure validation: receives dicts, validates structure, returns typed objects
- No file I/O: reading the document is the SDK loader's responsibility
- Extensible: unknown keys are accepted and preserved

Usage:
    from chartlock_schema import HelmState

    data = yaml.safe_load(content)
    state = HelmState.model_validate(data)
    state.repository_urls()  # {"stable": "https://..."}
"""

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from chartlock_common import ValidationError

from .lockfile_v1 import _coerce_version


class RepositorySpec(BaseModel):
    """A chart repository alias and the URL it points to."""

    name: str
    url: str

    model_config = ConfigDict(extra="allow")

    @field_validator("name")
    @classmethod
    def validate_name_not_empty(cls, v: str) -> str:
        if not v or not v.strip():
            raise ValidationError("Repository name cannot be empty")
        return v


class ReleaseSpec(BaseModel):
    """
    A deployable unit referencing a chart.

    ``chart`` is either a local path (``./charts/app``) or a remote reference
    of the form ``<repository alias>/<chart name>``. ``version`` holds the
    declared version constraint; empty means any version.
    """

    name: Optional[str] = None
    chart: str
    version: str = ""

    model_config = ConfigDict(extra="allow")

    @field_validator("version", mode="before")
    @classmethod
    def coerce_version(cls, v: Any) -> Any:
        return _coerce_version(v)


class HelmState(BaseModel):
    """
    Root model for a deployment-state document.

    ``file_path`` is not part of the document; the loader records where the
    document came from so the lock identity can be derived from it.
    """

    file_path: str = Field(default="", exclude=True)
    repositories: List[RepositorySpec] = []
    releases: List[ReleaseSpec] = []

    model_config = ConfigDict(extra="allow")

    @field_validator("repositories", "releases", mode="before")
    @classmethod
    def none_as_empty(cls, v: Any) -> Any:
        return [] if v is None else v

    def repository_urls(self) -> Dict[str, str]:
        """Map each repository alias to its URL."""
        return {repo.name: repo.url for repo in self.repositories}
