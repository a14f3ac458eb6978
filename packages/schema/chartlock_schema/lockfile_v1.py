"""
chartlock Dependency Records and Lock Documents

Models for the records chartlock exchanges with the external dependency
updater. Field names on the wire follow the helm requirements format:

    dependencies:
    - name: envoy
      repository: https://example.com/charts
      version: ">=1.0"

In a requirements document ``version`` is a constraint; in a lock document it
is always a concrete version.
"""

from typing import Any, List

from pydantic import BaseModel, ConfigDict, Field, field_validator

from chartlock_common import ValidationError


def _coerce_version(v: Any) -> Any:
    # YAML reads `version: 1.0` as a float
    if v is None:
        return ""
    if isinstance(v, (int, float)) and not isinstance(v, bool):
        return str(v)
    return v


class DependencySpec(BaseModel):
    """A declared chart dependency: name, source repository and constraint.

    The constraint is stored exactly as declared (possibly empty).
    """

    name: str
    repository_url: str = Field(alias="repository")
    constraint: str = Field(default="", alias="version")

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    @field_validator("constraint", mode="before")
    @classmethod
    def coerce_constraint(cls, v: Any) -> Any:
        return _coerce_version(v)


class ResolvedDependency(BaseModel):
    """A chart pinned to a concrete version."""

    name: str
    repository_url: str = Field(alias="repository")
    version: str

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    @field_validator("version", mode="before")
    @classmethod
    def coerce_version(cls, v: Any) -> Any:
        return _coerce_version(v)

    @field_validator("version")
    @classmethod
    def validate_version_not_empty(cls, v: str) -> str:
        if not v.strip():
            raise ValidationError("Resolved dependency version cannot be empty")
        return v


class ChartMetadata(BaseModel):
    """Descriptor of the synthetic chart staged in the ephemeral workspace."""

    name: str

    model_config = ConfigDict(extra="allow")


class ChartRequirements(BaseModel):
    """Requirements document handed to the external updater."""

    dependencies: List[DependencySpec] = []

    @field_validator("dependencies", mode="before")
    @classmethod
    def none_as_empty(cls, v: Any) -> Any:
        return [] if v is None else v


class LockedRequirements(BaseModel):
    """Lock document. Extra keys written by helm (digest, generated) are kept."""

    dependencies: List[ResolvedDependency] = []

    model_config = ConfigDict(extra="allow")

    @field_validator("dependencies", mode="before")
    @classmethod
    def none_as_empty(cls, v: Any) -> Any:
        return [] if v is None else v
