"""Finding types and the DiffReport that collects them.

This module provides the result type returned by every comparison.  Findings
are frozen dataclasses; the report keeps them in insertion order and exposes
read-only views partitioned by kind.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import asdict, dataclass
from enum import StrEnum, auto
from typing import Any, ClassVar

__all__ = [
    "AttributeMismatch",
    "DiffFinding",
    "DiffReport",
    "FindingKind",
    "Mismatch",
    "MissingAttribute",
    "MissingElement",
]


class FindingKind(StrEnum):
    """The four kinds of discrepancy a comparison can record."""

    MISMATCH = auto()
    MISSING_ELEMENT = auto()
    MISSING_ATTRIBUTE = auto()
    ATTRIBUTE_MISMATCH = auto()


@dataclass(frozen=True, slots=True)
class Mismatch:
    """Leaf values differ at the same path."""

    kind: ClassVar[FindingKind] = FindingKind.MISMATCH

    path: str
    label_a: str
    value_a: str
    label_b: str
    value_b: str


@dataclass(frozen=True, slots=True)
class MissingElement:
    """``path`` exists in one document but not in the one named ``label``.

    For a repeated element whose counts differ, ``path`` carries an
    ``[index=i]`` suffix naming the unmatched occurrence after alignment.
    """

    kind: ClassVar[FindingKind] = FindingKind.MISSING_ELEMENT

    label: str
    path: str


@dataclass(frozen=True, slots=True)
class MissingAttribute:
    """Attribute ``attribute`` at ``path`` is absent from document ``label``."""

    kind: ClassVar[FindingKind] = FindingKind.MISSING_ATTRIBUTE

    label: str
    path: str
    attribute: str


@dataclass(frozen=True, slots=True)
class AttributeMismatch:
    """Attribute ``attribute`` at ``path`` has different values."""

    kind: ClassVar[FindingKind] = FindingKind.ATTRIBUTE_MISMATCH

    path: str
    attribute: str
    label_a: str
    value_a: str
    label_b: str
    value_b: str


DiffFinding = Mismatch | MissingElement | MissingAttribute | AttributeMismatch


class DiffReport:
    """Ordered collection of findings produced by one comparison run.

    Only the diff engine adds findings; callers receive the report and use the
    read-only accessors.  An empty report means the two documents are
    equivalent under the options used.

    Attributes:
        label_a: Human-readable name of the first document.
        label_b: Human-readable name of the second document.
        computation_time_ms: Wall-clock duration of the comparison that
            produced this report (0.0 until the comparator sets it).
    """

    def __init__(self, label_a: str = "A", label_b: str = "B") -> None:
        self.label_a = label_a
        self.label_b = label_b
        self.computation_time_ms = 0.0
        self._findings: list[DiffFinding] = []

    # ------------------------------------------------------------------
    # Accumulation
    # ------------------------------------------------------------------

    def add_mismatch(
        self, path: str, label_a: str, value_a: str, label_b: str, value_b: str
    ) -> None:
        self._findings.append(Mismatch(path, label_a, value_a, label_b, value_b))

    def add_missing_element(self, label: str, path: str) -> None:
        self._findings.append(MissingElement(label, path))

    def add_missing_attribute(self, label: str, path: str, attribute: str) -> None:
        self._findings.append(MissingAttribute(label, path, attribute))

    def add_attribute_mismatch(
        self,
        path: str,
        attribute: str,
        label_a: str,
        value_a: str,
        label_b: str,
        value_b: str,
    ) -> None:
        self._findings.append(
            AttributeMismatch(path, attribute, label_a, value_a, label_b, value_b)
        )

    # ------------------------------------------------------------------
    # Read-only access
    # ------------------------------------------------------------------

    @property
    def labels(self) -> tuple[str, str]:
        """The two document labels as ``(label_a, label_b)``."""
        return (self.label_a, self.label_b)

    def has_differences(self) -> bool:
        return bool(self._findings)

    def findings(self) -> tuple[DiffFinding, ...]:
        """All findings in the order they were recorded."""
        return tuple(self._findings)

    def mismatches(self) -> tuple[Mismatch, ...]:
        return tuple(f for f in self._findings if isinstance(f, Mismatch))

    def missing_elements(self) -> tuple[MissingElement, ...]:
        return tuple(f for f in self._findings if isinstance(f, MissingElement))

    def missing_attributes(self) -> tuple[MissingAttribute, ...]:
        return tuple(f for f in self._findings if isinstance(f, MissingAttribute))

    def attribute_mismatches(self) -> tuple[AttributeMismatch, ...]:
        return tuple(f for f in self._findings if isinstance(f, AttributeMismatch))

    def to_dict(self) -> dict[str, Any]:
        """JSON-serialisable view of the report."""
        return {
            "label_a": self.label_a,
            "label_b": self.label_b,
            "has_differences": self.has_differences(),
            "computation_time_ms": self.computation_time_ms,
            "findings": [{"kind": str(f.kind), **asdict(f)} for f in self._findings],
        }

    def __len__(self) -> int:
        return len(self._findings)

    def __iter__(self) -> Iterator[DiffFinding]:
        return iter(tuple(self._findings))

    def __repr__(self) -> str:
        return (
            f"DiffReport(label_a={self.label_a!r}, label_b={self.label_b!r}, "
            f"findings={len(self._findings)})"
        )
