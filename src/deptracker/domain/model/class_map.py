"""Parsed class map: the core's only input from the parsing layer."""

from __future__ import annotations

import logging
import warnings
from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path
from types import MappingProxyType
from typing import TYPE_CHECKING

from deptracker.domain.exceptions import CyclicInheritanceWarning, UnresolvedReferenceError
from deptracker.domain.model.enums import DependencyKind, InheritKind
from deptracker.domain.model.inherit_path import InheritPath, InheritStep

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class DependencyReference:
    """Class-name reference found inside a class body or signature.

    Attributes:
        class_name: Referenced class (qualified name)
        line: Line where the reference occurs (must be > 0)
        kind: Parameter type, instantiation, static call, ...
    """

    class_name: str
    line: int
    kind: DependencyKind = DependencyKind.OTHER

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.class_name:
            raise ValueError("class_name must not be empty")
        if self.line <= 0:
            raise ValueError(f"line must be > 0, got {self.line}")


@dataclass(frozen=True, slots=True)
class InheritRelation:
    """Direct extends/implements relation of a class.

    Attributes:
        class_name: Direct ancestor (qualified name)
        line: Line of the extends/implements clause (must be > 0)
        kind: EXTENDS/IMPLEMENTS/USES
    """

    class_name: str
    line: int
    kind: InheritKind = InheritKind.EXTENDS

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.class_name:
            raise ValueError("class_name must not be empty")
        if self.line <= 0:
            raise ValueError(f"line must be > 0, got {self.line}")

    def to_step(self) -> InheritStep:
        """Convert to a path hop."""
        return InheritStep(class_name=self.class_name, line=self.line, kind=self.kind)


@dataclass(frozen=True, slots=True)
class ClassReference:
    """Class declared in the analyzed codebase.

    Attributes:
        name: Fully qualified class name
        file: Declaring file (None when the parser did not record one)
        line: Declaration line (must be > 0)
        dependencies: Class-name references inside the class
        inherits: Direct inheritance relations
    """

    name: str
    file: Path | None
    line: int
    dependencies: tuple[DependencyReference, ...] = ()
    inherits: tuple[InheritRelation, ...] = ()

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.name:
            raise ValueError("class name must not be empty")
        if self.line <= 0:
            raise ValueError(f"line must be > 0, got {self.line}")


@dataclass(frozen=True, slots=True)
class ClassMap:
    """Immutable map of all analyzed classes.

    Read-only once built. Ancestor traversal tolerates classes
    outside the map (external ancestors end the chain) and
    cycles, including a class naming itself as its parent
    (warned once per cycle, chain cut at the repeat).

    Attributes:
        classes: Class name → ClassReference
    """

    classes: Mapping[str, ClassReference] = field(default_factory=lambda: MappingProxyType({}))
    _reported_cycles: set[frozenset[str]] = field(
        default_factory=set, init=False, repr=False, compare=False
    )

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        for name, reference in self.classes.items():
            if name != reference.name:
                raise ValueError(f"key '{name}' does not match class name '{reference.name}'")

    def get_class_reference(self, class_name: str) -> ClassReference:
        """Get class by name. O(1).

        Raises:
            UnresolvedReferenceError: If class is not in the map
        """
        reference = self.classes.get(class_name)
        if reference is None:
            raise UnresolvedReferenceError(class_name)
        return reference

    def has_class(self, class_name: str) -> bool:
        """Check if class is in the map. O(1)."""
        return class_name in self.classes

    def __iter__(self) -> Iterator[ClassReference]:
        return iter(self.classes.values())

    def __len__(self) -> int:
        return len(self.classes)

    def get_class_inherits(self, class_name: str) -> tuple[InheritPath, ...]:
        """Get every ancestor of a class with the chain that reaches it.

        Depth-first over direct relations. A diamond yields one path per
        route. Ancestors missing from the map end their chain.

        Args:
            class_name: Class to start from

        Returns:
            Ancestor paths in discovery order (empty for unknown classes)
        """
        if class_name not in self.classes:
            return ()
        return tuple(self._walk(class_name, None, (class_name,)))

    def _walk(
        self,
        class_name: str,
        path: InheritPath | None,
        chain: tuple[str, ...],
    ) -> Iterator[InheritPath]:
        reference = self.classes.get(class_name)
        if reference is None:
            return

        for relation in reference.inherits:
            if relation.class_name in chain:
                self._report_cycle(chain, relation.class_name)
                continue

            step = relation.to_step()
            next_path = InheritPath(steps=(step,)) if path is None else path.extend(step)
            yield next_path
            yield from self._walk(relation.class_name, next_path, (*chain, relation.class_name))

    def _report_cycle(self, chain: tuple[str, ...], repeated: str) -> None:
        members = frozenset(chain[chain.index(repeated) :])
        if members in self._reported_cycles:
            return
        self._reported_cycles.add(members)

        cycle = " -> ".join((*chain, repeated))
        logger.warning("Cyclic inheritance detected: %s", cycle)
        warnings.warn(
            f"Cyclic inheritance detected: {cycle}",
            CyclicInheritanceWarning,
            stacklevel=3,
        )

    @classmethod
    def from_references(cls, references: Iterable[ClassReference]) -> ClassMap:
        """Build map from class references.

        Raises:
            ValueError: If a class name is declared twice
        """
        classes: dict[str, ClassReference] = {}
        for reference in references:
            if reference.name in classes:
                raise ValueError(f"class '{reference.name}' declared twice")
            classes[reference.name] = reference
        return cls(classes=MappingProxyType(classes))

    @classmethod
    def empty(cls) -> ClassMap:
        """Create empty class map."""
        return cls(classes=MappingProxyType({}))
