"""
Dependency Sets
===============

UnresolvedDependencySet collects the constraints declared by releases;
ResolvedDependencySet holds the versions pinned by a lock document.

Both own their backing mapping. Mutation only happens through ``add`` (and
``_add`` for the resolved set, used while parsing a lock) so the uniqueness
checks can never be bypassed.
"""

from typing import Dict, Iterable, Iterator, List, Optional

from chartlock_common.constants import ANY_VERSION
from chartlock_common.errors import ConflictError, NotFoundError
from chartlock_schema import (
    ChartRequirements,
    DependencySpec,
    LockedRequirements,
    ResolvedDependency,
)


def _describe(dep: DependencySpec) -> str:
    return f"{{name={dep.name} repository={dep.repository_url} version={dep.constraint!r}}}"


class UnresolvedDependencySet:
    """
    Chart constraints declared by a state document, keyed by chart name.

    Two charts with the same name from different repositories, or the same
    chart with two different constraints, cannot coexist. Rename one of the
    releases' charts to work around it.
    """

    def __init__(self) -> None:
        self._deps: Dict[str, DependencySpec] = {}

    def add(self, name: str, url: str, constraint: str = "") -> None:
        """
        Declare a dependency.

        Raises:
            ConflictError: If ``name`` is already declared with a different
                repository URL or constraint. The set is left unchanged.
        """
        dep = DependencySpec(name=name, repository_url=url, constraint=constraint)
        existing = self._deps.get(name)
        if existing is None:
            self._deps[name] = dep
            return
        if existing == dep:
            return
        raise ConflictError(
            f'duplicate chart dependency "{name}". you can\'t have two or more charts '
            f"with the same name but with different urls or versions: "
            f"existing={_describe(existing)}, new={_describe(dep)}"
        )

    def get(self, name: str) -> Optional[DependencySpec]:
        return self._deps.get(name)

    def is_empty(self) -> bool:
        return not self._deps

    def to_requirements(self) -> List[DependencySpec]:
        """Specs in declaration order, with empty constraints written as ``*``."""
        return [
            dep if dep.constraint else dep.model_copy(update={"constraint": ANY_VERSION})
            for dep in self._deps.values()
        ]

    def to_chart_requirements(self) -> ChartRequirements:
        return ChartRequirements(dependencies=self.to_requirements())

    def __contains__(self, name: object) -> bool:
        return name in self._deps

    def __len__(self) -> int:
        return len(self._deps)

    def __iter__(self) -> Iterator[DependencySpec]:
        return iter(list(self._deps.values()))

    def __repr__(self) -> str:
        return f"UnresolvedDependencySet({sorted(self._deps)})"


class ResolvedDependencySet:
    """Concrete chart versions read from a lock document, keyed by chart name."""

    def __init__(self) -> None:
        self._deps: Dict[str, ResolvedDependency] = {}

    @classmethod
    def from_dependencies(cls, deps: Iterable[ResolvedDependency]) -> "ResolvedDependencySet":
        """
        Build a set from lock records.

        Raises:
            ConflictError: If a chart name appears more than once
        """
        resolved = cls()
        for dep in deps:
            resolved._add(dep)
        return resolved

    def _add(self, dep: ResolvedDependency) -> None:
        if dep.name in self._deps:
            raise ConflictError(f'duplicate chart dependency "{dep.name}"')
        self._deps[dep.name] = dep

    def get(self, name: str) -> str:
        """
        Return the locked version of a chart.

        Raises:
            NotFoundError: If the chart has no entry in the lock
        """
        dep = self._deps.get(name)
        if dep is None:
            raise NotFoundError(f'no resolved dependency found for "{name}"')
        return dep.version

    def to_locked_requirements(self) -> LockedRequirements:
        return LockedRequirements(dependencies=list(self._deps.values()))

    def __contains__(self, name: object) -> bool:
        return name in self._deps

    def __len__(self) -> int:
        return len(self._deps)

    def __iter__(self) -> Iterator[ResolvedDependency]:
        return iter(list(self._deps.values()))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ResolvedDependencySet):
            return NotImplemented
        return self._deps == other._deps

    def __repr__(self) -> str:
        pins = ", ".join(f"{d.name}@{d.version}" for d in self._deps.values())
        return f"ResolvedDependencySet({pins})"
