"""DiffEngine: walks two grouped documents in lock-step and records findings.

Algorithm, starting from the pair of root occurrences:

1. Compare the pair's leaf values (exact string equality; values were trimmed
   at build time).  A value present on only one side is a missing element.
2. Union the pair's attribute names; report missing and differing attributes.
3. Union the pair's child names, in sorted order so that where repeated
   siblings sit in either document never changes the order of findings.
   For every name:
   - absent on one side: one ``MissingElement`` for that path, and the
     subtree below it is not walked;
   - one occurrence on each side: descend into the pair;
   - repeated on either side: align both occurrence lists, descend into each
     aligned pair, and report the unmatched tail as ``path[index=i]``.

The walk runs on an explicit stack, so document depth is not bounded by the
interpreter's recursion limit.

Nothing is logged per finding; findings reach the caller only via the report.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

from structural_diff.algorithm.aligner import Aligner
from structural_diff.algorithm.config import CompareOptions
from structural_diff.algorithm.grouper import Occurrence, OccurrenceGroup
from structural_diff.report import DiffReport

__all__ = ["DiffEngine"]

logger = logging.getLogger(__name__)

_GroupTask = tuple[str, Sequence[Occurrence], Sequence[Occurrence]]


class DiffEngine:
    """Compares two grouped documents and fills a ``DiffReport``.

    One engine instance serves one comparison run: it only reads its inputs and
    writes to the report it is handed.
    """

    def __init__(self, options: CompareOptions | None = None) -> None:
        options = options if options is not None else CompareOptions()
        self._aligner = Aligner(
            options.primary_sort_field, options.secondary_sort_field
        )

    def run(
        self,
        root_a: Occurrence | None,
        root_b: Occurrence | None,
        report: DiffReport,
    ) -> DiffReport:
        """Compare two root occurrences, appending findings to ``report``.

        A ``None`` root means the root itself was ignored on that side.
        """
        if root_a is None and root_b is None:
            return report
        path = (root_a or root_b).path  # type: ignore[union-attr]
        # Stack entries: (path, occurrences in A, occurrences in B).  Tasks are
        # pushed in reverse so findings come out in depth-first order.
        stack: list[_GroupTask] = [
            (
                path,
                [root_a] if root_a is not None else [],
                [root_b] if root_b is not None else [],
            )
        ]
        while stack:
            path, left, right = stack.pop()
            if not left:
                report.add_missing_element(report.label_a, path)
            elif not right:
                report.add_missing_element(report.label_b, path)
            elif len(left) == 1 and len(right) == 1:
                children = self._compare_pair(path, left[0], right[0], report)
                stack.extend(reversed(children))
            else:
                stack.extend(reversed(self._align_group(path, left, right)))
        return report

    # ------------------------------------------------------------------
    # Groups
    # ------------------------------------------------------------------

    def _align_group(
        self,
        path: str,
        left: Sequence[Occurrence],
        right: Sequence[Occurrence],
    ) -> list[_GroupTask]:
        """Split a repeated group into one task per aligned position.

        An unmatched tail position becomes a task with one empty side, which
        is reported as a missing ``path[index=i]``.
        """
        logger.debug("Aligning %s: %d vs %d occurrences", path, len(left), len(right))
        tasks: list[_GroupTask] = []
        for pair in self._aligner.align(left, right):
            side_a = [pair.left] if pair.left is not None else []
            side_b = [pair.right] if pair.right is not None else []
            if side_a and side_b:
                tasks.append((path, side_a, side_b))
            else:
                tasks.append((f"{path}[index={pair.index}]", side_a, side_b))
        return tasks

    # ------------------------------------------------------------------
    # Occurrence pairs
    # ------------------------------------------------------------------

    def _compare_pair(
        self,
        path: str,
        a: Occurrence,
        b: Occurrence,
        report: DiffReport,
    ) -> list[_GroupTask]:
        """Compare one pair's value and attributes; return its child groups."""
        self._compare_values(path, a.value, b.value, report)
        self._compare_attributes(path, a.attributes, b.attributes, report)

        # Sorted so that moving repeated siblings around never reorders findings.
        empty = OccurrenceGroup(path="")
        tasks: list[_GroupTask] = []
        for name in sorted(a.children.keys() | b.children.keys()):
            group_a = a.children.get(name, empty)
            group_b = b.children.get(name, empty)
            tasks.append(
                (group_a.path or group_b.path, group_a.occurrences, group_b.occurrences)
            )
        return tasks

    @staticmethod
    def _compare_values(
        path: str,
        value_a: str | None,
        value_b: str | None,
        report: DiffReport,
    ) -> None:
        if value_a is None and value_b is None:
            return
        if value_a is None:
            report.add_missing_element(report.label_a, path)
        elif value_b is None:
            report.add_missing_element(report.label_b, path)
        elif value_a != value_b:
            report.add_mismatch(path, report.label_a, value_a, report.label_b, value_b)

    @staticmethod
    def _compare_attributes(
        path: str,
        attrs_a: dict[str, str],
        attrs_b: dict[str, str],
        report: DiffReport,
    ) -> None:
        names = list(attrs_a)
        names.extend(name for name in attrs_b if name not in attrs_a)
        for name in names:
            if name not in attrs_a:
                report.add_missing_attribute(report.label_a, path, name)
            elif name not in attrs_b:
                report.add_missing_attribute(report.label_b, path, name)
            elif attrs_a[name] != attrs_b[name]:
                report.add_attribute_mismatch(
                    path,
                    name,
                    report.label_a,
                    attrs_a[name],
                    report.label_b,
                    attrs_b[name],
                )
