"""DocumentComparator: orchestrator that wires loader, linearizer, grouper and engine.

This is the central wiring layer between the pipeline stages and the public
API.  It turns two sources (or two already-built trees) into a ``DiffReport``.

Architecture:
- compare() loads both sources with ``DocumentLoader``; a ``ParseError`` on
  either side aborts the run before any comparison happens.
- compare_trees() checks the root names first and raises
  ``RootMismatchError`` when they differ, so no per-path findings are produced
  for documents that are not comparable at all.
- Each document is linearized and grouped independently, then the two root
  occurrences are handed to ``DiffEngine``.
- All intermediate records live only for the duration of one call; nothing is
  cached across calls.
"""

from __future__ import annotations

import logging
import time

from structural_diff.algorithm.config import CompareOptions
from structural_diff.algorithm.engine import DiffEngine
from structural_diff.algorithm.grouper import GroupedDocument, RepetitionGrouper
from structural_diff.algorithm.linearizer import PathLinearizer
from structural_diff.errors import RootMismatchError
from structural_diff.report import DiffReport
from structural_diff.tree.loader import DocumentLoader, DocumentSource
from structural_diff.tree.nodes import DocumentKind, DocumentNode

__all__ = ["DocumentComparator"]

logger = logging.getLogger(__name__)

DEFAULT_LABEL_A = "Baseline"
DEFAULT_LABEL_B = "Modified"


class DocumentComparator:
    """Orchestrator for structural document comparison.

    A comparator holds only immutable configuration, so a single instance may
    be reused for any number of comparisons, concurrently if needed.

    Example::

        from structural_diff.comparator import DocumentComparator

        cmp = DocumentComparator(CompareOptions(primary_sort_field="id"))
        report = cmp.compare("xml", "old.xml", "Baseline", "xml", "new.xml", "Modified")
        for finding in report.findings():
            print(finding)
    """

    def __init__(
        self,
        options: CompareOptions | None = None,
        loader: DocumentLoader | None = None,
    ) -> None:
        """Initialise the comparator.

        Args:
            options: Ignore list and alignment fields.  Defaults to
                ``CompareOptions()``.
            loader:  Document loader.  Defaults to ``DocumentLoader()``.
        """
        self._options = options if options is not None else CompareOptions()
        self._loader = loader if loader is not None else DocumentLoader()
        self._linearizer = PathLinearizer(self._options)
        self._grouper = RepetitionGrouper()

    @property
    def options(self) -> CompareOptions:
        return self._options

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def compare(
        self,
        kind_a: DocumentKind | str,
        source_a: DocumentSource,
        label_a: str,
        kind_b: DocumentKind | str,
        source_b: DocumentSource,
        label_b: str,
    ) -> DiffReport:
        """Load two document sources and compare them.

        Raises:
            ParseError: If either document cannot be loaded.
            RootMismatchError: If the root names differ.
        """
        t0 = time.perf_counter()
        tree_a = self._loader.load(source_a, kind_a)
        tree_b = self._loader.load(source_b, kind_b)
        report = self.compare_trees(tree_a, tree_b, label_a, label_b)
        report.computation_time_ms = (time.perf_counter() - t0) * 1000.0
        return report

    def compare_trees(
        self,
        tree_a: DocumentNode,
        tree_b: DocumentNode,
        label_a: str = DEFAULT_LABEL_A,
        label_b: str = DEFAULT_LABEL_B,
    ) -> DiffReport:
        """Compare two already-built document trees.

        Raises:
            RootMismatchError: If ``tree_a.name != tree_b.name``.
        """
        t0 = time.perf_counter()
        if tree_a.name != tree_b.name:
            raise RootMismatchError(tree_a.name, tree_b.name)

        grouped_a = self._group(tree_a)
        grouped_b = self._group(tree_b)

        report = DiffReport(label_a, label_b)
        DiffEngine(self._options).run(grouped_a.root, grouped_b.root, report)

        report.computation_time_ms = (time.perf_counter() - t0) * 1000.0
        logger.debug(
            "Compared %r with %r: %d finding(s) in %.2f ms",
            label_a,
            label_b,
            len(report),
            report.computation_time_ms,
        )
        return report

    # ------------------------------------------------------------------
    # Pipeline stages
    # ------------------------------------------------------------------

    def _group(self, tree: DocumentNode) -> GroupedDocument:
        linearization = self._linearizer.linearize(tree)
        logger.debug(
            "Linearized %r: %d node(s), %d leaf record(s), %d attribute record(s)",
            tree.name,
            len(linearization.records),
            len(linearization.leaves()),
            len(linearization.attribute_records()),
        )
        return self._grouper.group(linearization)
