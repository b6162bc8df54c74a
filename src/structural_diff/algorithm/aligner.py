"""Aligner: pairs the occurrences of a repeated element across two documents.

Both sides are sorted by (primary field, secondary field) and then paired by
resulting index.  This turns an order-independent comparison into an ordered
one.  Policy:

- A missing sort field has key "", which sorts first.
- Ties keep document order (``np.lexsort`` is a stable sort).
- When the sides differ in length, the longer side's tail is paired with
  ``None``; the engine reports those as missing elements.
- No content-similarity matching is attempted.  Pairing after a deterministic
  sort is the whole strategy, so occurrences that share sort keys pair in
  document order.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from itertools import zip_longest

import numpy as np

from structural_diff.algorithm.grouper import Occurrence

__all__ = ["AlignedPair", "Aligner"]


@dataclass(frozen=True, slots=True)
class AlignedPair:
    """One aligned position; one side is ``None`` in a length-mismatch tail."""

    index: int
    left: Occurrence | None
    right: Occurrence | None


class Aligner:
    """Sort-then-pair alignment of occurrence lists.

    Args:
        primary_field:   Field that orders occurrences.  When empty, document
                         order is kept.
        secondary_field: Tie-break field applied after ``primary_field``.
    """

    def __init__(self, primary_field: str = "", secondary_field: str = "") -> None:
        self._primary = primary_field
        self._secondary = secondary_field

    @staticmethod
    def sort_key(occurrence: Occurrence, field_name: str) -> str:
        """Value of ``field_name`` on an occurrence, "" when absent.

        Immediate child fields take precedence; an XML attribute of the same
        name is used when no such child exists.
        """
        if not field_name:
            return ""
        if field_name in occurrence.fields:
            return occurrence.fields[field_name]
        return occurrence.attributes.get(field_name, "")

    def order(self, occurrences: Sequence[Occurrence]) -> list[Occurrence]:
        """Return ``occurrences`` sorted by (primary, secondary) key, stably."""
        if not self._primary or len(occurrences) < 2:
            return list(occurrences)

        primary = np.array(
            [self.sort_key(o, self._primary) for o in occurrences], dtype=str
        )
        secondary = np.array(
            [self.sort_key(o, self._secondary) for o in occurrences], dtype=str
        )
        # lexsort sorts by the LAST key first
        indices = np.lexsort((secondary, primary))
        return [occurrences[i] for i in indices.tolist()]

    def align(
        self,
        left: Sequence[Occurrence],
        right: Sequence[Occurrence],
    ) -> list[AlignedPair]:
        """Sort both sides and pair them by index.

        Returns:
            ``max(len(left), len(right))`` pairs in sorted index order.
        """
        return [
            AlignedPair(index, a, b)
            for index, (a, b) in enumerate(
                zip_longest(self.order(left), self.order(right))
            )
        ]
