"""RepetitionGrouper: rebuilds repeated siblings from the linearization arena.

Each arena record becomes an ``Occurrence``.  Children of one parent
occurrence that share a name are collected into one ``OccurrenceGroup`` in
document order; nothing is ever overwritten, so three ``<item>`` siblings give
a group of three.  Ordering is left to the aligner.

Each occurrence also carries the ``fields`` map its record was given: the
*immediate* children only (child name -> child text), read before ignore
pruning.  These fields are the sort keys the aligner uses; scanning only one
level keeps group membership bounded to one tree level.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from structural_diff.algorithm.linearizer import Linearization, NodeRecord

__all__ = ["GroupedDocument", "Occurrence", "OccurrenceGroup", "RepetitionGrouper"]


@dataclass(slots=True)
class Occurrence:
    """One node occurrence plus its per-name child groups.

    Attributes:
        record:   The arena record this occurrence wraps.
        fields:   Immediate child name -> trimmed text, copied from
                  ``NodeRecord.fields``.
        children: Child name -> group of child occurrences, in first-seen order.
    """

    record: NodeRecord
    fields: dict[str, str] = field(default_factory=dict)
    children: dict[str, OccurrenceGroup] = field(default_factory=dict)

    @property
    def path(self) -> str:
        return self.record.path

    @property
    def value(self) -> str | None:
        return self.record.value

    @property
    def attributes(self) -> dict[str, str]:
        return self.record.attributes


@dataclass(slots=True)
class OccurrenceGroup:
    """All occurrences of one path under one parent occurrence, in document order."""

    path: str
    occurrences: list[Occurrence] = field(default_factory=list)

    @property
    def is_repeating(self) -> bool:
        return len(self.occurrences) > 1

    def __len__(self) -> int:
        return len(self.occurrences)


@dataclass(slots=True)
class GroupedDocument:
    """Grouped view of one linearized document.

    Repetition lives in the per-parent ``Occurrence.children`` groups, each an
    ordered list keyed by child path, never path -> single value.

    Attributes:
        root: Root occurrence, or ``None`` when the root was ignored.
    """

    root: Occurrence | None = None


class RepetitionGrouper:
    """Turns a ``Linearization`` into a ``GroupedDocument``.  Stateless."""

    def group(self, linearization: Linearization) -> GroupedDocument:
        document = GroupedDocument()
        arena: list[Occurrence] = []

        # Records are in pre-order, so a parent is always wrapped before its children.
        for record in linearization.records:
            occurrence = Occurrence(record=record, fields=dict(record.fields))
            arena.append(occurrence)

            if record.parent is None:
                document.root = occurrence
                continue

            parent = arena[record.parent]
            group = parent.children.get(record.name)
            if group is None:
                group = parent.children[record.name] = OccurrenceGroup(record.path)
            group.occurrences.append(occurrence)

        return document
